"""
Custom exceptions for passgen.
"""


class PassgenException(Exception):
    """Base exception for passgen."""

    pass


class ConfigurationError(PassgenException):
    """Invalid generator configuration."""

    pass


class GenerationError(PassgenException):
    """Generating a single password failed."""

    pass


class EmptyAlphabetError(GenerationError):
    """No characters available for password generation."""

    def __init__(self, message: str = "empty character set"):
        super().__init__(message)


class ImpossibleConstraintError(GenerationError):
    """Class coverage cannot be satisfied for the requested length."""

    pass
