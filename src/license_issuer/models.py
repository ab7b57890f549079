"""
Data models for the License Issuer.

Defines the license record, its signed form, and the result objects the
validator and issuer hand back to callers instead of exiting the process.
"""

import json
from dataclasses import dataclass
from typing import Dict, Any, Optional
from pathlib import Path
from enum import Enum

from .constants import LICENSE_FILE, EXIT_CODES


class ValidationFailure(Enum):
    """Reason a set of license arguments was rejected."""
    ARITY = "arity"
    EMAIL = "email"
    DOMAIN = "domain"
    DATE_FORMAT = "date_format"
    DATE_INVALID = "date_invalid"
    DATE_PAST = "date_past"


@dataclass(frozen=True)
class LicenseRecord:
    """The three signed fields of a license, in signing order."""
    licensed_to: str
    domain: str
    expires: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to an insertion-ordered dictionary."""
        return {
            "licensed_to": self.licensed_to,
            "domain": self.domain,
            "expires": self.expires,
        }

    def canonical_bytes(self) -> bytes:
        """
        Return the byte sequence that gets signed.

        The encoding is compact JSON with keys in the fixed order
        ``licensed_to``, ``domain``, ``expires``, no whitespace between
        tokens, non-ASCII characters left unescaped, UTF-8 encoded and with
        no trailing newline. A verifier must rebuild exactly these bytes.
        """
        return json.dumps(
            self.to_dict(),
            separators=LICENSE_FILE.CANONICAL_SEPARATORS,
            ensure_ascii=False,
        ).encode("utf-8")


@dataclass(frozen=True)
class SignedLicense:
    """A license record together with its base64 signature."""
    record: LicenseRecord
    signature: str
    algorithm: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        """Convert to the document written to disk."""
        data = self.record.to_dict()
        data[LICENSE_FILE.SIGNATURE_FIELD] = self.signature
        return data

    def to_json(self) -> str:
        """Pretty-printed JSON in the same key order as the signing input."""
        return json.dumps(
            self.to_dict(),
            indent=LICENSE_FILE.OUTPUT_INDENT,
            ensure_ascii=False,
        )


@dataclass
class ValidationResult:
    """Outcome of validating the raw license arguments."""
    ok: bool
    record: Optional[LicenseRecord] = None
    failure: Optional[ValidationFailure] = None
    error: Optional[Exception] = None

    @property
    def message(self) -> Optional[str]:
        return str(self.error) if self.error else None

    @classmethod
    def success(cls, record: LicenseRecord) -> "ValidationResult":
        return cls(ok=True, record=record)

    @classmethod
    def failed(cls, failure: ValidationFailure, error: Exception) -> "ValidationResult":
        return cls(ok=False, failure=failure, error=error)


@dataclass
class IssueResult:
    """Outcome of a full validate, sign and write run."""
    ok: bool
    license: Optional[SignedLicense] = None
    output_path: Optional[Path] = None
    error: Optional[Exception] = None
    exit_code: int = EXIT_CODES.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "ok": self.ok,
            "license": self.license.to_dict() if self.license else None,
            "output_path": str(self.output_path) if self.output_path else None,
            "error": str(self.error) if self.error else None,
            "exit_code": self.exit_code,
        }
