"""
Character classes and alphabet construction.
"""

import enum
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

# Character sets
DIGITS = "0123456789"
LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
SPECIALS = "~%^&*_-@!+#$"


class CharacterClass(enum.Enum):
    """A named group of characters a password may draw from."""

    DIGIT = DIGITS
    LETTER = LETTERS
    SPECIAL = SPECIALS

    @property
    def chars(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return {
            CharacterClass.DIGIT: "digits",
            CharacterClass.LETTER: "letters",
            CharacterClass.SPECIAL: "specials",
        }[self]


def classify(char: str) -> Optional[CharacterClass]:
    """Return the class a single character belongs to, or None."""
    for char_class in CharacterClass:
        if char in char_class.chars:
            return char_class
    return None


def live_classes(alphabet: str) -> List[CharacterClass]:
    """
    Get the classes that still have characters in an alphabet.

    Args:
        alphabet: Characters available for sampling

    Returns:
        Classes with at least one character in the alphabet, in the
        order digits, letters, specials
    """
    present = set(alphabet)
    return [c for c in CharacterClass if present & set(c.chars)]


def build_alphabet(use_digits: bool,
                   use_letters: bool,
                   use_specials: bool,
                   exclude: str = "") -> str:
    """
    Build the alphabet from enabled character classes minus exclusions.

    Classes are concatenated in a fixed order (digits, letters, specials)
    so the same options always give the same alphabet.

    Args:
        use_digits: Include digits
        use_letters: Include lower and upper case letters
        use_specials: Include special characters
        exclude: Characters to remove from the alphabet

    Returns:
        The alphabet, empty when nothing is enabled or everything was excluded
    """
    parts = []

    if use_digits:
        parts.append(DIGITS)
        logger.debug("Added digits")

    if use_letters:
        parts.append(LETTERS)
        logger.debug("Added letters")

    if use_specials:
        parts.append(SPECIALS)
        logger.debug("Added specials")

    alphabet = "".join(parts)
    if not alphabet:
        return ""

    if exclude:
        excluded = set(exclude)
        filtered = "".join(c for c in alphabet if c not in excluded)

        if not filtered:
            logger.warning("All characters excluded")
        elif len(filtered) < len(alphabet):
            logger.debug(f"Excluded characters: {len(alphabet) - len(filtered)}")

        alphabet = filtered

    return alphabet
