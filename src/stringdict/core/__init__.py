"""Core container, key namespacing and error types."""

from stringdict.core.container import Dict
from stringdict.core.errors import (
    DictError,
    InvalidArgumentError,
    InvalidKeyError,
    MissingKeyError,
)
from stringdict.core.keys import KEY_PREFIX, MISSING, make_key, revoke_key

__all__ = [
    "Dict",
    "DictError",
    "InvalidArgumentError",
    "InvalidKeyError",
    "MissingKeyError",
    "KEY_PREFIX",
    "MISSING",
    "make_key",
    "revoke_key",
]
