"""
Configuration management for the License Issuer.

Handles environment variables, .env loading and defaults for the signing
key location, the license output location and the log level.
"""

import os
from typing import Optional, Dict, Any, Union
from pathlib import Path
from dotenv import load_dotenv
from loguru import logger

from .constants import LICENSE_FILE, LOG_LEVELS
from .exceptions import ConfigurationError


class Config:
    """Configuration manager for the License Issuer."""

    def __init__(
        self,
        env_file: Optional[str] = None,
        private_key_path: Optional[Union[str, Path]] = None,
        output_path: Optional[Union[str, Path]] = None,
        key_password: Optional[str] = None,
        log_level: Optional[str] = None,
    ):
        """
        Initialize configuration from the environment.

        Explicit keyword arguments take precedence over environment values.

        Args:
            env_file: Optional path to .env file
            private_key_path: Path to the PEM signing key
            output_path: Path the license file is written to
            key_password: Passphrase for an encrypted signing key
            log_level: Loguru level name
        """
        # Load environment variables
        if env_file and Path(env_file).exists():
            load_dotenv(env_file)
        else:
            load_dotenv()  # Load from default locations

        self._overrides = {
            "LICENSE_PRIVATE_KEY_PATH": private_key_path,
            "LICENSE_OUTPUT_PATH": output_path,
            "LICENSE_KEY_PASSWORD": key_password,
            "LOG_LEVEL": log_level,
        }

        # Optional environment variables with defaults
        self._optional_vars = {
            "LICENSE_PRIVATE_KEY_PATH": LICENSE_FILE.DEFAULT_PRIVATE_KEY_PATH,
            "LICENSE_OUTPUT_PATH": LICENSE_FILE.DEFAULT_OUTPUT_PATH,
            "LICENSE_KEY_PASSWORD": None,
            "LOG_LEVEL": "INFO",
        }

        self._validate_and_load()

    def _get(self, name: str) -> Optional[str]:
        override = self._overrides.get(name)
        if override is not None:
            return str(override)
        return os.getenv(name, self._optional_vars[name])

    def _validate_and_load(self) -> None:
        """Load all configuration values and validate them."""
        self.private_key_path = Path(self._get("LICENSE_PRIVATE_KEY_PATH"))
        self.output_path = Path(self._get("LICENSE_OUTPUT_PATH"))
        self.key_password = self._get("LICENSE_KEY_PASSWORD") or None
        self.log_level = self._get("LOG_LEVEL").upper()

        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid LOG_LEVEL: {self.log_level}",
                invalid_vars=["LOG_LEVEL"],
                details={"allowed_levels": list(LOG_LEVELS)}
            )

        logger.debug(f"Configuration loaded: {self!r}")

    def get_status(self) -> Dict[str, Any]:
        """
        Get configuration status.

        Returns:
            Dictionary with configuration values (password redacted)
        """
        return {
            "private_key_path": str(self.private_key_path),
            "private_key_exists": self.private_key_path.exists(),
            "output_path": str(self.output_path),
            "key_password_set": self.key_password is not None,
            "log_level": self.log_level,
        }

    def __repr__(self) -> str:
        """String representation of configuration (without sensitive data)."""
        return (
            f"Config("
            f"private_key_path={self.private_key_path}, "
            f"output_path={self.output_path}, "
            f"log_level={self.log_level}"
            f")"
        )
