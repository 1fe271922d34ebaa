"""Command-line interface for pwnedcheck.

Checks one password, read from a hidden prompt or stdin.
"""

import argparse
import getpass
import logging
import sys

import structlog
from pydantic import ValidationError

from pwnedcheck import __version__
from pwnedcheck.checker import check_sync
from pwnedcheck.clients.pwned_passwords import PwnedPasswordsConfig
from pwnedcheck.config import Settings, get_settings
from pwnedcheck.exceptions import ConfigurationError, PwnedCheckError

EXIT_NOT_FOUND = 0
EXIT_COMPROMISED = 1
EXIT_ERROR = 2


def configure_logging(level: str) -> None:
    """Configure structlog for simple console output on stderr."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[level.upper()]
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    """Get a structured logger."""
    return structlog.get_logger(name)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pwnedcheck",
        description="Check a password against Pwned Passwords using k-anonymity",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Range API base URL (default: PWNEDCHECK_API_BASE_URL or public API)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: 30)",
    )
    parser.add_argument(
        "--no-padding",
        action="store_true",
        help="Don't request padded responses",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read the password from the first line of stdin instead of prompting",
    )
    return parser


def build_config(args: argparse.Namespace, settings: Settings) -> PwnedPasswordsConfig:
    """Merge command-line overrides into the configured client settings.

    Raises:
        ConfigurationError: If the merged configuration is invalid
    """
    values = PwnedPasswordsConfig.from_settings(settings).model_dump()
    if args.base_url is not None:
        values["base_url"] = args.base_url
    if args.timeout is not None:
        values["timeout"] = args.timeout
    if args.no_padding:
        values["add_padding"] = False

    try:
        return PwnedPasswordsConfig(**values)
    except ValidationError as e:
        raise ConfigurationError("Invalid client configuration", detail=str(e)) from e


def load_settings() -> Settings:
    """Load settings from the environment.

    Raises:
        ConfigurationError: If an environment value is invalid
    """
    try:
        return get_settings()
    except ValidationError as e:
        raise ConfigurationError("Invalid settings", detail=str(e)) from e


def read_password(from_stdin: bool) -> str:
    """Read the password to check."""
    if from_stdin:
        return sys.stdin.readline().rstrip("\r\n")
    return getpass.getpass("Password: ")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging("WARNING")
    log = get_logger("check")

    try:
        settings = load_settings()
        configure_logging(settings.log_level)
        config = build_config(args, settings)
        result = check_sync(read_password(args.stdin), config=config)
    except PwnedCheckError as e:
        log.error("Password check failed", error=str(e))
        return EXIT_ERROR

    if result.compromised:
        print(f"Password found {result.count} times in breach corpus")
        return EXIT_COMPROMISED

    print("Password not found in breach corpus")
    return EXIT_NOT_FOUND


if __name__ == "__main__":
    sys.exit(main())
