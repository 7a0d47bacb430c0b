"""A dictionary that avoids reserved-key pitfalls and offers a fluent functional API."""

from stringdict.core import (
    KEY_PREFIX,
    MISSING,
    Dict,
    DictError,
    InvalidArgumentError,
    InvalidKeyError,
    MissingKeyError,
    make_key,
    revoke_key,
)

__version__ = "0.1.0"

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
