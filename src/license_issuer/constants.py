"""
Configuration constants for the License Issuer.

This module centralizes the input patterns, default file locations,
serialization settings and exit codes used across the package.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class ValidationConstants:
    """Patterns for the three license inputs."""

    # local-part@domain.tld, no whitespace and a single '@' per part
    EMAIL_PATTERN: str = r'[^\s@]+@[^\s@]+\.[^\s@]+'

    # Dot-separated DNS labels, 1-63 chars, no leading/trailing hyphen
    DOMAIN_PATTERN: str = (
        r'[a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?'
        r'(\.[a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*'
    )

    DATE_PATTERN: str = r'[0-9]{4}-[0-9]{2}-[0-9]{2}'
    DATE_FORMAT: str = "%Y-%m-%d"

    REQUIRED_ARGUMENTS: int = 3


@dataclass
class LicenseFileConstants:
    """Constants for the license document and its on-disk location."""

    DEFAULT_PRIVATE_KEY_PATH: str = "./private_key.pem"
    DEFAULT_OUTPUT_PATH: str = "./LICENSE.key"

    # Signed fields, in signing order
    SIGNED_FIELDS: Tuple[str, ...] = ("licensed_to", "domain", "expires")
    SIGNATURE_FIELD: str = "signature"

    # Compact separators for the signing input, indent for the written file
    CANONICAL_SEPARATORS: Tuple[str, str] = (",", ":")
    OUTPUT_INDENT: int = 2

    # Post-install hints printed after a successful run
    INSTALL_SCRIPT: str = "./install.sh"
    PRODUCT_PORT: int = 3000


@dataclass
class ExitCodes:
    """Process exit codes, one per failure class."""

    SUCCESS: int = 0
    UNEXPECTED: int = 1
    BAD_INPUT: int = 2
    KEY_ERROR: int = 3
    WRITE_ERROR: int = 4
    CONFIG_ERROR: int = 5


# Create singleton instances
VALIDATION = ValidationConstants()
LICENSE_FILE = LicenseFileConstants()
EXIT_CODES = ExitCodes()

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
