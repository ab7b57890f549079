"""
License signing with an asymmetric private key.

Loads a PEM private key from disk and signs the canonical bytes of a
license record with SHA-256. RSA keys use PKCS#1 v1.5 padding and EC keys
use ECDSA; the signature is returned base64-encoded.
"""

import base64
from pathlib import Path
from typing import Optional, Union
from loguru import logger

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa

from .exceptions import KeyLoadError, SignError
from .models import LicenseRecord, SignedLicense


SigningKey = Union[rsa.RSAPrivateKey, ec.EllipticCurvePrivateKey]


class LicenseSigner:
    """Signs license records with a PEM private key."""

    def __init__(self, private_key_path: Union[str, Path], password: Optional[str] = None):
        """
        Initialize the signer.

        Args:
            private_key_path: Path to the PEM-encoded private key
            password: Passphrase for an encrypted key, if any
        """
        self.private_key_path = Path(private_key_path)
        self._password = password.encode("utf-8") if password else None
        self._private_key: Optional[SigningKey] = None

    def load_private_key(self) -> SigningKey:
        """
        Read and parse the private key, caching it for later calls.

        Returns:
            The loaded RSA or EC private key

        Raises:
            KeyLoadError: If the key file is missing or unreadable
            SignError: If the file content is not a usable private key
        """
        if self._private_key is not None:
            return self._private_key

        try:
            pem_data = self.private_key_path.read_bytes()
        except OSError as e:
            raise KeyLoadError(
                f"Error loading private key: {e}. "
                f"Make sure {self.private_key_path.name} exists and is readable",
                key_path=str(self.private_key_path),
                cause=e
            )

        try:
            key = serialization.load_pem_private_key(pem_data, password=self._password)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise SignError(
                f"Malformed private key in {self.private_key_path}: {e}",
                key_path=str(self.private_key_path),
                cause=e
            )

        if not isinstance(key, (rsa.RSAPrivateKey, ec.EllipticCurvePrivateKey)):
            raise SignError(
                f"Unsupported key type {type(key).__name__}; expected an RSA or EC private key",
                key_path=str(self.private_key_path),
                algorithm=type(key).__name__
            )

        logger.debug(f"Loaded {self._algorithm_name(key)} private key from {self.private_key_path}")
        self._private_key = key
        return key

    def sign(self, record: LicenseRecord) -> SignedLicense:
        """
        Sign a license record.

        Args:
            record: Validated license record

        Returns:
            SignedLicense carrying the base64 signature

        Raises:
            KeyLoadError: If the key file is missing or unreadable
            SignError: If the key is malformed or signing fails
        """
        key = self.load_private_key()
        algorithm = self._algorithm_name(key)
        payload = record.canonical_bytes()

        try:
            if isinstance(key, rsa.RSAPrivateKey):
                raw_signature = key.sign(payload, padding.PKCS1v15(), hashes.SHA256())
            else:
                raw_signature = key.sign(payload, ec.ECDSA(hashes.SHA256()))
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise SignError(
                f"Signing failed: {e}",
                key_path=str(self.private_key_path),
                algorithm=algorithm,
                cause=e
            )

        signature = base64.b64encode(raw_signature).decode("ascii")
        logger.info(f"License for {record.licensed_to} signed with {algorithm}")
        return SignedLicense(record=record, signature=signature, algorithm=algorithm)

    def public_key_pem(self) -> str:
        """Return the matching public key as a SubjectPublicKeyInfo PEM string."""
        key = self.load_private_key()
        return key.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        ).decode("ascii")

    @staticmethod
    def _algorithm_name(key: SigningKey) -> str:
        if isinstance(key, rsa.RSAPrivateKey):
            return "RSA-SHA256"
        return "ECDSA-SHA256"
