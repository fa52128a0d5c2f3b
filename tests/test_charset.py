"""
Tests for character classes and alphabet construction.
"""

import itertools
import logging

import pytest

from passgen.utils.charset import (
    DIGITS,
    LETTERS,
    SPECIALS,
    CharacterClass,
    build_alphabet,
    classify,
    live_classes,
)


class TestBuildAlphabet:
    """Test alphabet construction from class flags and exclusions."""

    def test_all_classes(self):
        assert build_alphabet(True, True, True) == DIGITS + LETTERS + SPECIALS

    def test_fixed_order(self):
        """Digits come before letters, letters before specials."""
        assert build_alphabet(True, False, True) == DIGITS + SPECIALS
        assert build_alphabet(False, True, True) == LETTERS + SPECIALS

    def test_digits_minus_exclusions(self):
        assert build_alphabet(True, False, False, "13") == "02456789"

    def test_no_classes(self):
        assert build_alphabet(False, False, False) == ""
        assert build_alphabet(False, False, False, "abc") == ""

    def test_everything_excluded(self):
        assert build_alphabet(True, False, False, DIGITS) == ""

    def test_exclusion_is_by_character(self):
        """Excluding 'a' keeps 'A' and the rest of the letters."""
        alphabet = build_alphabet(False, True, False, "a")
        assert "a" not in alphabet
        assert "A" in alphabet
        assert len(alphabet) == len(LETTERS) - 1

    def test_exclusion_of_unknown_characters(self):
        assert build_alphabet(True, False, False, "xyz ?") == DIGITS

    @pytest.mark.parametrize(
        "flags", [f for f in itertools.product([True, False], repeat=3) if any(f)]
    )
    def test_exclusion_correctness(self, flags):
        exclude = "05aZ~$"
        alphabet = build_alphabet(*flags, exclude)

        enabled = "".join(
            chars for use, chars in zip(flags, (DIGITS, LETTERS, SPECIALS)) if use
        )
        assert not set(alphabet) & set(exclude)
        assert set(alphabet) == set(enabled) - set(exclude)

    def test_deterministic(self):
        first = build_alphabet(True, True, True, "!aB9")
        second = build_alphabet(True, True, True, "9Ba!")
        assert first == second

    def test_logging(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="passgen"):
            build_alphabet(True, False, True, "12")

        messages = [r.getMessage() for r in caplog.records]
        assert "Added digits" in messages
        assert "Added specials" in messages
        assert "Added letters" not in messages
        assert "Excluded characters: 2" in messages

    def test_warns_when_everything_excluded(self, caplog):
        with caplog.at_level(logging.WARNING, logger="passgen"):
            build_alphabet(True, False, False, DIGITS)

        assert any(r.levelno == logging.WARNING for r in caplog.records)


class TestCharacterClasses:
    """Test class lookup helpers."""

    def test_classify(self):
        assert classify("7") is CharacterClass.DIGIT
        assert classify("q") is CharacterClass.LETTER
        assert classify("Q") is CharacterClass.LETTER
        assert classify("#") is CharacterClass.SPECIAL
        assert classify("?") is None

    def test_live_classes(self):
        assert live_classes("") == []
        assert live_classes("123") == [CharacterClass.DIGIT]
        assert live_classes("$a1") == [
            CharacterClass.DIGIT,
            CharacterClass.LETTER,
            CharacterClass.SPECIAL,
        ]

    def test_live_classes_after_exclusion(self):
        alphabet = build_alphabet(True, True, True, exclude=SPECIALS)
        assert CharacterClass.SPECIAL not in live_classes(alphabet)

    def test_labels(self):
        assert [c.label for c in CharacterClass] == ["digits", "letters", "specials"]
