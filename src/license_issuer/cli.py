"""
Command line entry point for the License Issuer.

Usage:
    generate-license <email> <domain> <expires>

Environment Variables (optional):
    LICENSE_PRIVATE_KEY_PATH - PEM signing key (default: ./private_key.pem)
    LICENSE_OUTPUT_PATH - License output file (default: ./LICENSE.key)
    LICENSE_KEY_PASSWORD - Passphrase for an encrypted signing key
    LOG_LEVEL - Logging level (DEBUG, INFO, WARNING, ERROR)

Exit codes:
    0 - License written
    2 - Wrong arguments or invalid email, domain or date
    3 - Private key missing, unreadable or unusable
    4 - License file could not be written
    5 - Invalid configuration
"""

import argparse
import sys
from typing import List, Optional
from loguru import logger

from .config import Config
from .constants import EXIT_CODES, LICENSE_FILE
from .exceptions import ConfigurationError, UsageError
from .issuer import LicenseIssuer
from .models import IssueResult, ValidationFailure
from .validation import validate_license_arguments


PROGRAM = "generate-license"


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports problems as UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def setup_logging(log_level: str = "INFO") -> None:
    """Setup Loguru-based logging."""
    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        colorize=True,
    )


def parse_arguments(argv: Optional[List[str]] = None) -> List[str]:
    """Collect the positional arguments; the count is checked by the validator."""
    parser = _ArgumentParser(prog=PROGRAM, add_help=False)
    parser.add_argument("values", nargs="*")
    return parser.parse_args(argv).values


def print_banner() -> None:
    print("🔐 License Generator")
    print("========================")
    print("")


def print_usage() -> None:
    """Print usage help and examples."""
    print_banner()
    print(f"Usage: {PROGRAM} <email> <domain> <expires>")
    print("")
    print("Parameters:")
    print("  email   - Customer email address")
    print("  domain  - Domain for license (e.g., mail.example.com)")
    print("  expires - Expiry date (YYYY-MM-DD)")
    print("")
    print("Examples:")
    print(f"  {PROGRAM} admin@example.com mail.example.com 2099-12-31")
    print(f"  {PROGRAM} john@mydomain.com mydomain.com 2099-01-15")
    print("")
    print(f"Output: {LICENSE_FILE.DEFAULT_OUTPUT_PATH} unless LICENSE_OUTPUT_PATH is set")


def print_details(email: str, domain: str, expires: str) -> None:
    print("📋 License Details:")
    print(f"   Email: {email}")
    print(f"   Domain: {domain}")
    print(f"   Expires: {expires}")
    print("")


def print_success(result: IssueResult, issuer: LicenseIssuer) -> None:
    """Print the written license and the follow-up steps."""
    print(f"✅ License saved to: {result.output_path}")
    print("")
    print("📄 License Content:")
    issuer.writer.echo(result.license)
    print("")
    print("✅ License generation complete!")
    print("")
    print("Next steps:")
    print(f"1. Copy {result.output_path.name} to your installation")
    print(f"2. Run {LICENSE_FILE.INSTALL_SCRIPT} to deploy")
    print(f"3. Access the application at http://{result.license.record.domain}:{LICENSE_FILE.PRODUCT_PORT}")


def run(argv: Optional[List[str]] = None, config: Optional[Config] = None) -> int:
    """
    Run the license generator and return the process exit code.

    Args:
        argv: Command line arguments, without the program name
        config: Configuration to use instead of loading it from the environment
    """
    setup_logging()

    try:
        if config is None:
            config = Config()
    except ConfigurationError as e:
        return e.exit_code
    setup_logging(config.log_level)
    logger.debug(f"Configuration status: {config.get_status()}")

    try:
        args = parse_arguments(argv)
    except UsageError:
        print_usage()
        return EXIT_CODES.BAD_INPUT

    validation = validate_license_arguments(args)
    if not validation.ok:
        if validation.failure is ValidationFailure.ARITY:
            print_usage()
        else:
            logger.error(f"❌ {validation.message}")
        return validation.error.exit_code

    record = validation.record
    issuer = LicenseIssuer(config)
    print_banner()
    print_details(record.licensed_to, record.domain, record.expires)

    print("🔑 Generating license...")
    result = issuer.issue_record(record)
    logger.debug(f"Issue result: {result.to_dict()}")
    if not result.ok:
        logger.error(f"❌ License generation failed: {result.error}")
        return result.exit_code

    print_success(result, issuer)
    logger.debug(f"Public key for verification:\n{issuer.signer.public_key_pem()}")
    return EXIT_CODES.SUCCESS


def main() -> None:
    """Main entry point for the license generator."""
    try:
        sys.exit(run(sys.argv[1:]))
    except KeyboardInterrupt:
        logger.info("🛑 Cancelled by user")
        sys.exit(EXIT_CODES.UNEXPECTED)
    except Exception as e:
        logger.error(f"❌ Fatal error: {e}")
        sys.exit(EXIT_CODES.UNEXPECTED)


if __name__ == "__main__":
    main()
