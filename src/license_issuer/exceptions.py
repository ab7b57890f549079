"""
Custom exceptions for the License Issuer.

Provides specific exception types for each way a license generation run
can fail, with detailed error information and a process exit code so the
CLI can report the failure class to calling scripts.
"""

from typing import Optional, Dict, Any
from loguru import logger

from .constants import EXIT_CODES


class LicenseIssuerError(Exception):
    """Base exception for all License Issuer errors."""

    exit_code: int = EXIT_CODES.UNEXPECTED

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause
        logger.error(f"{self.__class__.__name__}: {message}")
        if details:
            logger.debug(f"Error details: {details}")
        if cause:
            logger.debug(f"Caused by: {cause}")


class UsageError(LicenseIssuerError):
    """Raised when the command line does not carry exactly three arguments."""

    exit_code = EXIT_CODES.BAD_INPUT

    def __init__(self, message: str, argument_count: Optional[int] = None, **kwargs):
        details = kwargs.pop("details", {})
        if argument_count is not None:
            details["argument_count"] = argument_count
        cause = kwargs.pop("cause", None)
        super().__init__(message, details=details, cause=cause)


class ValidationError(LicenseIssuerError):
    """Raised when an email, domain or expiry date is malformed or expired."""

    exit_code = EXIT_CODES.BAD_INPUT

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[str] = None,
        kind: Optional[Any] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        if kind is not None:
            details["kind"] = getattr(kind, "value", kind)
        self.field = field
        self.value = value
        self.kind = kind
        cause = kwargs.pop("cause", None)
        super().__init__(message, details=details, cause=cause)


class KeyLoadError(LicenseIssuerError):
    """Raised when the private key file is missing or unreadable."""

    exit_code = EXIT_CODES.KEY_ERROR

    def __init__(self, message: str, key_path: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if key_path:
            details["key_path"] = key_path
        cause = kwargs.pop("cause", None)
        super().__init__(message, details=details, cause=cause)


class SignError(LicenseIssuerError):
    """Raised when the key is malformed or the signing operation fails."""

    exit_code = EXIT_CODES.KEY_ERROR

    def __init__(
        self,
        message: str,
        key_path: Optional[str] = None,
        algorithm: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if key_path:
            details["key_path"] = key_path
        if algorithm:
            details["algorithm"] = algorithm
        cause = kwargs.pop("cause", None)
        super().__init__(message, details=details, cause=cause)


class WriteError(LicenseIssuerError):
    """Raised when the license file cannot be written."""

    exit_code = EXIT_CODES.WRITE_ERROR

    def __init__(self, message: str, output_path: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if output_path:
            details["output_path"] = output_path
        cause = kwargs.pop("cause", None)
        super().__init__(message, details=details, cause=cause)


class ConfigurationError(LicenseIssuerError):
    """Raised when there are configuration issues."""

    exit_code = EXIT_CODES.CONFIG_ERROR

    def __init__(self, message: str, invalid_vars: Optional[list] = None, **kwargs):
        details = kwargs.pop("details", {})
        if invalid_vars:
            details["invalid_environment_variables"] = invalid_vars
        cause = kwargs.pop("cause", None)
        super().__init__(message, details=details, cause=cause)
