"""
Configuration validation utilities for passgen.
"""

from typing import Optional

from ..exceptions import ConfigurationError
from .charset import live_classes


def validate_length(length: int) -> bool:
    """Password length must be a positive integer."""
    return isinstance(length, int) and length > 0


def validate_count(count: int) -> bool:
    """Password count must be a positive integer."""
    return isinstance(count, int) and count > 0


def get_config_error_message(length: int,
                             count: int,
                             use_digits: bool,
                             use_letters: bool,
                             use_specials: bool,
                             max_attempts: Optional[int] = None) -> Optional[str]:
    """
    Get a descriptive error message for an invalid configuration.

    Args:
        length: Password length
        count: Number of passwords
        use_digits: Digits enabled
        use_letters: Letters enabled
        use_specials: Specials enabled
        max_attempts: Retry cap, None when unlimited

    Returns:
        Error message, or None if the configuration is valid
    """
    if not validate_length(length):
        return "Password length must be a positive number"

    if not validate_count(count):
        return "Password count must be a positive number"

    if max_attempts is not None and max_attempts <= 0:
        return "Max attempts must be a positive number"

    if not (use_digits or use_letters or use_specials):
        return "At least one character type must be enabled"

    return None


def validate_config(length: int,
                    count: int,
                    use_digits: bool,
                    use_letters: bool,
                    use_specials: bool,
                    max_attempts: Optional[int] = None) -> None:
    """
    Validate generator options before any alphabet is built.

    Raises:
        ConfigurationError: If any option is invalid
    """
    message = get_config_error_message(
        length, count, use_digits, use_letters, use_specials, max_attempts
    )
    if message:
        raise ConfigurationError(message)


def validate_alphabet(alphabet: str, length: int) -> None:
    """
    Check that an alphabet can produce passwords of the given length.

    Args:
        alphabet: Alphabet after exclusions
        length: Password length

    Raises:
        ConfigurationError: If the alphabet is empty or the length is
            shorter than the number of live classes
    """
    if not alphabet:
        raise ConfigurationError("Character set is empty after exclusions")

    required = live_classes(alphabet)
    if length < len(required):
        raise ConfigurationError(
            f"Password length {length} is too short to include one character "
            f"of each type ({', '.join(c.label for c in required)})"
        )
