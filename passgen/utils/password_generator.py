"""
Password generation utilities.
"""

import logging
import secrets
from typing import List, Optional

from ..exceptions import (
    EmptyAlphabetError,
    GenerationError,
    ImpossibleConstraintError,
)
from .charset import CharacterClass, build_alphabet, classify, live_classes
from .log import TRACE

logger = logging.getLogger(__name__)

DEFAULT_LENGTH = 18
DEFAULT_MAX_ATTEMPTS = 100_000

_sysrand = secrets.SystemRandom()


def is_password_valid(password: str, alphabet: str) -> bool:
    """
    Check that a password covers every class the alphabet offers.

    A class only constrains the password when the alphabet still holds
    at least one of its characters.

    Args:
        password: Candidate password
        alphabet: Alphabet the password was drawn from

    Returns:
        True if every live class is represented in the password
    """
    represented = {classify(c) for c in password}

    return all(c in represented for c in live_classes(alphabet))


def generate_password(length: int,
                      alphabet: str,
                      max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS,
                      rng=None) -> str:
    """
    Generate a password drawn uniformly from an alphabet.

    Candidates failing class coverage are discarded and drawn again.

    Args:
        length: Password length
        alphabet: Characters to sample from
        max_attempts: Rejected candidates allowed before giving up,
            None to retry without limit
        rng: random.Random compatible source, defaults to a shared SystemRandom

    Returns:
        Generated password string

    Raises:
        EmptyAlphabetError: If the alphabet is empty
        ImpossibleConstraintError: If the length is shorter than the number
            of live classes or the attempts ran out
    """
    if not alphabet:
        raise EmptyAlphabetError()

    if length <= 0:
        raise ValueError("Password length must be a positive number")

    required = live_classes(alphabet)
    if length < len(required):
        raise ImpossibleConstraintError(
            f"Length {length} is too short to include "
            f"{', '.join(c.label for c in required)}"
        )

    rng = rng or _sysrand
    logger.debug(f"Generating password of {length} characters")

    attempts = 0
    while True:
        password = "".join(rng.choice(alphabet) for _ in range(length))
        if is_password_valid(password, alphabet):
            return password

        attempts += 1
        logger.log(TRACE, "Password does not cover all character classes, regenerating")
        if max_attempts is not None and attempts >= max_attempts:
            raise ImpossibleConstraintError(
                f"No valid password after {attempts} attempts"
            )


class PasswordGenerator:
    """Generate passwords from a set of enabled character classes."""

    def __init__(self,
                 length: int = DEFAULT_LENGTH,
                 use_digits: bool = True,
                 use_letters: bool = True,
                 use_specials: bool = True,
                 exclude: str = "",
                 max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS,
                 rng=None):
        """
        Initialize password generator with options.

        Args:
            length: Password length
            use_digits: Include digits
            use_letters: Include letters
            use_specials: Include special characters
            exclude: Characters never to use
            max_attempts: Retry cap per password, None for unlimited
            rng: Random source, defaults to a shared SystemRandom
        """
        self.length = length
        self.use_digits = use_digits
        self.use_letters = use_letters
        self.use_specials = use_specials
        self.exclude = exclude
        self.max_attempts = max_attempts
        self.rng = rng

        # Built once, read by every generate() call
        self.alphabet = build_alphabet(use_digits, use_letters, use_specials, exclude)

    @property
    def live_classes(self) -> List[CharacterClass]:
        return live_classes(self.alphabet)

    def generate(self) -> str:
        """
        Generate a single password.

        Returns:
            Generated password string
        """
        return generate_password(
            self.length,
            self.alphabet,
            max_attempts=self.max_attempts,
            rng=self.rng,
        )

    def generate_many(self, count: int) -> List[str]:
        """
        Generate several passwords, skipping slots that fail.

        Args:
            count: Number of passwords requested

        Returns:
            Generated passwords, fewer than count if some failed
        """
        passwords = []

        for _ in range(count):
            try:
                passwords.append(self.generate())
            except GenerationError as e:
                logger.error(f"Generation error: {e}")

        return passwords

    def get_charset_info(self) -> str:
        """
        Get human-readable description of the alphabet.

        Returns:
            Description of live classes, alphabet size and exclusions
        """
        parts = [c.label for c in self.live_classes]
        info = ", ".join(parts) if parts else "no characters"
        info += f" ({len(self.alphabet)} characters)"

        if self.exclude:
            info += f" excluding {self.exclude!r}"

        return info
