"""
Input validation for license generation.

Every value that ends up inside a signed license comes straight from the
command line, so each one is checked before anything is signed:
- Argument count
- Email format
- DNS hostname format
- Expiry date format, calendar validity and that it lies in the future

Checks run in that order and the first failure wins.
"""

import re
from datetime import datetime, timezone
from typing import Optional, Sequence
from loguru import logger

from .constants import VALIDATION
from .exceptions import UsageError, ValidationError
from .models import LicenseRecord, ValidationFailure, ValidationResult


class InputValidator:
    """Centralized validation of the license inputs."""

    # Patterns
    EMAIL_PATTERN = re.compile(VALIDATION.EMAIL_PATTERN)
    DOMAIN_PATTERN = re.compile(VALIDATION.DOMAIN_PATTERN)
    DATE_PATTERN = re.compile(VALIDATION.DATE_PATTERN)

    @staticmethod
    def validate_arguments(args: Sequence[str]) -> tuple[str, str, str]:
        """
        Check that exactly three non-empty arguments were given.

        Args:
            args: Positional arguments (email, domain, expires)

        Returns:
            The three arguments as a tuple

        Raises:
            UsageError: If the count is wrong or an argument is empty
        """
        if len(args) != VALIDATION.REQUIRED_ARGUMENTS:
            raise UsageError(
                f"Expected {VALIDATION.REQUIRED_ARGUMENTS} arguments "
                f"(email, domain, expires), got {len(args)}",
                argument_count=len(args)
            )

        if not all(isinstance(arg, str) and arg for arg in args):
            raise UsageError(
                "Missing required parameters",
                argument_count=len(args)
            )

        email, domain, expires = args
        return email, domain, expires

    @staticmethod
    def validate_encoding(value: str, field: str, kind: ValidationFailure) -> str:
        """
        Check that a value can be encoded as UTF-8.

        Undecodable command line bytes arrive as lone surrogates, which
        would otherwise only fail once the record is serialized for signing.

        Raises:
            ValidationError: If the value contains unencodable characters
        """
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValidationError(
                f"Invalid {field}: not valid UTF-8 text: {value!r}",
                field=field,
                value=ascii(value),
                kind=kind,
                cause=e
            )
        return value

    @staticmethod
    def validate_email(email: str) -> str:
        """
        Validate the licensee email.

        Args:
            email: Address in the form local@domain.tld

        Returns:
            Validated email

        Raises:
            ValidationError: If the email is malformed
        """
        InputValidator.validate_encoding(email, "licensed_to", ValidationFailure.EMAIL)
        if not InputValidator.EMAIL_PATTERN.fullmatch(email):
            raise ValidationError(
                f"Invalid email format: {email}",
                field="licensed_to",
                value=email,
                kind=ValidationFailure.EMAIL
            )
        return email

    @staticmethod
    def validate_domain(domain: str) -> str:
        """
        Validate the bound domain as a DNS hostname.

        Args:
            domain: Hostname such as mail.example.com

        Returns:
            Validated domain

        Raises:
            ValidationError: If any label is empty, longer than 63 characters,
                contains invalid characters or starts/ends with a hyphen
        """
        InputValidator.validate_encoding(domain, "domain", ValidationFailure.DOMAIN)
        if not InputValidator.DOMAIN_PATTERN.fullmatch(domain):
            raise ValidationError(
                f"Invalid domain format: {domain}",
                field="domain",
                value=domain,
                kind=ValidationFailure.DOMAIN
            )
        return domain

    @staticmethod
    def validate_expiry(expires: str, now: Optional[datetime] = None) -> str:
        """
        Validate the expiry date.

        The date is read as midnight UTC and must be strictly later than
        ``now`` (the current UTC time when not given).

        Args:
            expires: Date in YYYY-MM-DD form
            now: Reference time, naive values are taken as UTC

        Returns:
            Validated expiry date string

        Raises:
            ValidationError: If the date is malformed, not a real calendar
                date, or not in the future
        """
        InputValidator.validate_encoding(expires, "expires", ValidationFailure.DATE_FORMAT)
        if not InputValidator.DATE_PATTERN.fullmatch(expires):
            raise ValidationError(
                f"Invalid date format. Use YYYY-MM-DD: {expires}",
                field="expires",
                value=expires,
                kind=ValidationFailure.DATE_FORMAT
            )

        try:
            expiry = datetime.strptime(expires, VALIDATION.DATE_FORMAT).replace(tzinfo=timezone.utc)
        except ValueError as e:
            raise ValidationError(
                f"Invalid calendar date: {expires}",
                field="expires",
                value=expires,
                kind=ValidationFailure.DATE_INVALID,
                cause=e
            )

        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        if expiry <= now:
            raise ValidationError(
                f"Expiry date must be in the future: {expires}",
                field="expires",
                value=expires,
                kind=ValidationFailure.DATE_PAST
            )

        return expires


def validate_license_arguments(
    args: Sequence[str],
    now: Optional[datetime] = None
) -> ValidationResult:
    """
    Validate raw license arguments without raising.

    Args:
        args: Positional arguments (email, domain, expires)
        now: Reference time for the expiry check

    Returns:
        ValidationResult carrying the built LicenseRecord on success, or the
        failure kind and error on the first failing check
    """
    try:
        email, domain, expires = InputValidator.validate_arguments(args)
    except UsageError as e:
        return ValidationResult.failed(ValidationFailure.ARITY, e)

    try:
        InputValidator.validate_email(email)
        InputValidator.validate_domain(domain)
        InputValidator.validate_expiry(expires, now=now)
    except ValidationError as e:
        return ValidationResult.failed(e.kind, e)

    logger.debug(f"License arguments validated for {email} on {domain}")
    return ValidationResult.success(
        LicenseRecord(licensed_to=email, domain=domain, expires=expires)
    )


# Convenience functions
def validate_email(email: str) -> str:
    """Validate licensee email."""
    return InputValidator.validate_email(email)


def validate_domain(domain: str) -> str:
    """Validate bound domain."""
    return InputValidator.validate_domain(domain)


def validate_expiry(expires: str, now: Optional[datetime] = None) -> str:
    """Validate expiry date."""
    return InputValidator.validate_expiry(expires, now=now)
