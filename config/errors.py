"""Exceptions raised by the string matching system."""

from typing import Any


class MatcherError(Exception):
    """Base class for all matcher errors."""


class ConfigurationError(MatcherError, ValueError):
    """Raised when a matcher or distance engine is configured with invalid values."""


class UnsupportedInputKind(MatcherError, TypeError):
    """
    Returned by ``Matcher.match`` when an input cannot be rendered as a string.

    Attributes:
        side: Which input was rejected ('reference' or 'candidate')
        value: The rejected value
    """

    def __init__(self, side: str, value: Any):
        self.side = side
        self.value = value
        super().__init__(
            f"{side} ({value!r}) of type {type(value).__name__} "
            f"has no string representation"
        )
