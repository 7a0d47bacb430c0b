"""Errors raised by the ``Dict`` container.

Each error also derives from the built-in exception it refines, so callers
can catch either the container-specific class or the usual ``KeyError``,
``ValueError`` and ``TypeError``.
"""

from typing import Any

__all__ = [
    "DictError",
    "InvalidKeyError",
    "MissingKeyError",
    "InvalidArgumentError",
]


class DictError(Exception):
    """Base class for all container errors."""


class InvalidKeyError(DictError, ValueError):
    """Raised when a falsy key is written to a container."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Dictionary keys cannot be falsy, got {key!r}.")


class MissingKeyError(DictError, KeyError):
    """Raised when a required key is not present."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        # KeyError.__str__ would repr the whole argument tuple
        return f"Required key '{self.key}' does not exist."


class InvalidArgumentError(DictError, TypeError):
    """Raised when an argument has the wrong type, e.g. a non-callable callback."""
