"""
License Issuer

Issues signed license records for product activation: validates the
licensee email, bound domain and expiry date, signs their canonical JSON
serialization with an RSA or EC private key, and writes the signed record.
"""

__version__ = "1.0.0"
__author__ = "License Issuer Team"

from .config import Config
from .issuer import LicenseIssuer
from .models import (
    LicenseRecord,
    SignedLicense,
    ValidationFailure,
    ValidationResult,
    IssueResult,
)
from .signing import LicenseSigner
from .writer import LicenseWriter
from .validation import InputValidator, validate_license_arguments
from .exceptions import (
    LicenseIssuerError,
    UsageError,
    ValidationError,
    KeyLoadError,
    SignError,
    WriteError,
    ConfigurationError,
)

__all__ = [
    # Core
    "LicenseIssuer",
    "LicenseSigner",
    "LicenseWriter",
    "InputValidator",
    "validate_license_arguments",
    "Config",
    # Models
    "LicenseRecord",
    "SignedLicense",
    "ValidationFailure",
    "ValidationResult",
    "IssueResult",
    # Exceptions
    "LicenseIssuerError",
    "UsageError",
    "ValidationError",
    "KeyLoadError",
    "SignError",
    "WriteError",
    "ConfigurationError",
]
