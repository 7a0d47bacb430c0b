"""Key namespacing for the ``Dict`` container.

External keys are never stored as given. Every key is prefixed with
``KEY_PREFIX`` so that no caller-supplied name can collide with a name the
storage layer or the container itself already uses.
"""

from typing import Any

from stringdict.config import settings

__all__ = ["KEY_PREFIX", "MISSING", "make_key", "revoke_key"]

# Fixed for the lifetime of the process.
KEY_PREFIX: str = settings.KEY_PREFIX


class _Missing:
    """Type of the ``MISSING`` sentinel."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()


def make_key(key: Any) -> str:
    """Return the storage key for an external key.

    Args:
        key: External key. Non-string keys are converted with ``str``.

    Returns:
        ``KEY_PREFIX`` followed by the string form of ``key``.
    """
    return KEY_PREFIX + str(key)


def revoke_key(storage_key: str) -> str:
    """Recover the external key from a storage key produced by ``make_key``.

    Args:
        storage_key: A key previously returned by ``make_key``.

    Returns:
        ``storage_key`` with exactly one leading ``KEY_PREFIX`` removed.

    Raises:
        ValueError: If ``storage_key`` does not start with ``KEY_PREFIX``.
    """
    if not storage_key.startswith(KEY_PREFIX):
        raise ValueError(
            f"'{storage_key}' is not a storage key (missing prefix '{KEY_PREFIX}')."
        )
    return storage_key[len(KEY_PREFIX) :]
