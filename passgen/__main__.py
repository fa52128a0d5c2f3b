"""
CLI interface for passgen.
"""

import logging
import sys

import click

from .exceptions import ConfigurationError
from .utils.log import (
    DEFAULT_LOG_LEVEL,
    ROOT_LOGGER,
    configure_logging,
    parse_log_level,
)
from .utils.password_generator import (
    DEFAULT_LENGTH,
    DEFAULT_MAX_ATTEMPTS,
    PasswordGenerator,
)
from .utils.validation import validate_alphabet, validate_config

ENVVAR_PREFIX = "PASSGEN"

logger = logging.getLogger(f"{ROOT_LOGGER}.cli")


def fail(message: str) -> None:
    """Report a fatal configuration error and exit."""
    logger.error(message)
    sys.exit(1)


@click.command()
@click.option("--length", "-L", default=DEFAULT_LENGTH, type=int, show_default=True,
              help="Password length")
@click.option("--digits/--no-digits", "-d", default=True, show_default=True,
              help="Use digits")
@click.option("--letters/--no-letters", "-l", default=True, show_default=True,
              help="Use letters")
@click.option("--specials/--no-specials", "-s", default=True, show_default=True,
              help="Use special characters")
@click.option("--count", "-c", default=1, type=int, show_default=True,
              help="Number of passwords")
@click.option("--exclude", "-e", default="", help="Characters to exclude")
@click.option("--log-level", default=DEFAULT_LOG_LEVEL, show_default=True,
              help="Log level (trace, debug, info, warn, error)")
@click.option("--max-attempts", default=DEFAULT_MAX_ATTEMPTS, type=int, show_default=True,
              help="Regeneration attempts allowed per password")
def cli(length: int, digits: bool, letters: bool, specials: bool, count: int,
        exclude: str, log_level: str, max_attempts: int) -> None:
    """passgen - generate random passwords.

    Every password contains at least one character of each enabled type
    that survives --exclude.
    """
    try:
        level = parse_log_level(log_level)
    except ConfigurationError as e:
        configure_logging(logging.ERROR)
        fail(str(e))

    configure_logging(level)
    logger.info("Starting password generator")
    logger.debug(f"Log level: {logging.getLevelName(level)}")

    try:
        validate_config(length, count, digits, letters, specials, max_attempts)
        generator = PasswordGenerator(
            length=length,
            use_digits=digits,
            use_letters=letters,
            use_specials=specials,
            exclude=exclude,
            max_attempts=max_attempts,
        )
        validate_alphabet(generator.alphabet, length)
    except ConfigurationError as e:
        fail(str(e))

    logger.debug(f"Character set: {generator.get_charset_info()}")

    for password in generator.generate_many(count):
        click.echo(password)

    logger.info("Generation finished")


def main() -> None:
    """Main entry point for the CLI application."""
    cli(auto_envvar_prefix=ENVVAR_PREFIX)


if __name__ == "__main__":
    main()
