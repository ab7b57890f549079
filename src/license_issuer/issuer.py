"""
License issuing pipeline.

Runs validation, signing and writing in order and reports the outcome as
an IssueResult, leaving process exit decisions to the caller.
"""

from datetime import datetime
from typing import Optional, Sequence
from loguru import logger

from .config import Config
from .constants import EXIT_CODES
from .exceptions import LicenseIssuerError
from .models import IssueResult, LicenseRecord, SignedLicense
from .signing import LicenseSigner
from .validation import validate_license_arguments
from .writer import LicenseWriter


class LicenseIssuer:
    """Validates, signs and writes a single license."""

    def __init__(self, config: Config):
        """
        Initialize the issuer.

        Args:
            config: Configuration instance
        """
        self.config = config
        self.signer = LicenseSigner(config.private_key_path, password=config.key_password)
        self.writer = LicenseWriter(config.output_path)

    def issue(
        self,
        email: str,
        domain: str,
        expires: str,
        now: Optional[datetime] = None
    ) -> IssueResult:
        """Issue a license for one licensee. See ``issue_from_args``."""
        return self.issue_from_args([email, domain, expires], now=now)

    def issue_from_args(
        self,
        args: Sequence[str],
        now: Optional[datetime] = None
    ) -> IssueResult:
        """
        Issue a license from raw positional arguments.

        Nothing is written unless validation and signing both succeed.

        Args:
            args: Positional arguments (email, domain, expires)
            now: Reference time for the expiry check

        Returns:
            IssueResult describing the signed license or the failure
        """
        validation = validate_license_arguments(args, now=now)
        if not validation.ok:
            return self._failure(validation.error)

        return self.issue_record(validation.record)

    def issue_record(self, record: LicenseRecord) -> IssueResult:
        """
        Sign and write an already validated record.

        Args:
            record: Record built by ``validate_license_arguments``

        Returns:
            IssueResult describing the signed license or the failure
        """
        try:
            signed = self.sign(record)
            output_path = self.writer.write(signed)
        except LicenseIssuerError as e:
            return self._failure(e)

        return IssueResult(ok=True, license=signed, output_path=output_path)

    def sign(self, record: LicenseRecord) -> SignedLicense:
        """Sign an already validated record."""
        logger.info(f"Generating license for {record.licensed_to} ({record.domain}, expires {record.expires})")
        return self.signer.sign(record)

    @staticmethod
    def _failure(error: Exception) -> IssueResult:
        exit_code = getattr(error, "exit_code", EXIT_CODES.UNEXPECTED)
        return IssueResult(ok=False, error=error, exit_code=exit_code)
