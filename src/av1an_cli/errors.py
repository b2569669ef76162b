"""Argument resolution error types."""

from typing import Any, Optional


class ArgsError(Exception):
    """Base class for argument resolution errors."""

    def __init__(self, message: str, option: Optional[str] = None,
                 value: Any = None, details: Optional[str] = None):
        """Initialize error.

        Args:
            message: Error message
            option: Option name or flag the error refers to
            value: Offending value, if any
            details: Optional technical details
        """
        self.message = message
        self.option = option
        self.value = value
        self.details = details
        super().__init__(message)


class UnknownOption(ArgsError):
    """Token does not match any declared option."""
    pass


class InvalidValue(ArgsError):
    """Value cannot be converted or is outside its allowed set."""
    pass


class MissingRequiredValue(ArgsError):
    """Required option absent, or option given without its value."""
    pass


class ConflictingValues(InvalidValue):
    """Individually valid values that contradict each other."""
    pass
