"""Exceptions raised by uriforge.

Each one also subclasses the builtin a caller would naturally catch for the same
mistake, so ``except ValueError`` still sees a malformed string.
"""


class UriError(Exception):
    """Base class for everything uriforge raises."""


class FormatError(UriError, ValueError):
    """A string doesn't match the grammar of the component it was given to."""

    def __init__(self, component: str, value: str, message: str | None = None) -> None:
        self.component: str = component
        self.value: str = value
        super().__init__(message or f"invalid {component}: {value!r}")


class ArgumentError(UriError, TypeError, ValueError):
    """A value has the wrong type or is out of range."""


class BoundsError(UriError, IndexError, KeyError):
    """An index or key doesn't exist."""
