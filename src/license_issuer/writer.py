"""
License file output.

Writes the signed license as pretty-printed JSON to the configured path
and echoes the same content to standard output for the operator.
"""

import sys
from pathlib import Path
from typing import Optional, TextIO, Union
from loguru import logger

from .exceptions import WriteError
from .models import SignedLicense


class LicenseWriter:
    """Writes signed licenses to disk."""

    def __init__(self, output_path: Union[str, Path]):
        self.output_path = Path(output_path)

    def render(self, signed: SignedLicense) -> str:
        """Return the exact text written to the license file."""
        return signed.to_json() + "\n"

    def write(self, signed: SignedLicense) -> Path:
        """
        Write the license, replacing any existing file at the output path.

        The content goes to a temporary sibling file first and is then moved
        over the target, so an existing license is never left half-written.
        The parent directory is not created.

        Args:
            signed: Signed license to write

        Returns:
            Path the license was written to

        Raises:
            WriteError: On any filesystem failure
        """
        content = self.render(signed)
        temp_file = self.output_path.with_name(self.output_path.name + ".tmp")

        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                f.write(content)
            temp_file.replace(self.output_path)
        except OSError as e:
            try:
                temp_file.unlink(missing_ok=True)
            except OSError as cleanup_error:
                logger.warning(f"Could not remove temporary file {temp_file}: {cleanup_error}")
            raise WriteError(
                f"Error saving license: {e}",
                output_path=str(self.output_path),
                cause=e
            )

        logger.info(f"License saved to: {self.output_path}")
        return self.output_path

    def echo(self, signed: SignedLicense, stream: Optional[TextIO] = None) -> None:
        """Print the license content to ``stream`` (stdout by default)."""
        stream = stream or sys.stdout
        stream.write(self.render(signed))
        stream.flush()
