#!/usr/bin/env python3
"""
License Generator - issue a signed LICENSE.key file.

Usage:
    python generate_license.py admin@example.com mail.example.com 2099-12-31
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from license_issuer.cli import main

if __name__ == '__main__':
    main()
