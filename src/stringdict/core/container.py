"""The ``Dict`` container.

``Dict`` is an insertion-ordered associative container keyed by strings (or
values with a string form). Keys are namespaced before they reach storage,
so names such as ``"items"``, ``"__class__"`` or ``"constructor"`` are
ordinary keys. Falsy keys are rejected.

Every traversal operator is built on ``for_each`` and the core mutators, and
every mutator returns the container so calls can be chained:

    >>> Dict().set("x", 1).map(lambda v, k, d: v * 10).get("x")
    10
"""

from collections.abc import Mapping
from typing import Any, Iterator, List, Optional, Tuple

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from stringdict.core.errors import (
    InvalidArgumentError,
    InvalidKeyError,
    MissingKeyError,
)
from stringdict.core.keys import MISSING, make_key, revoke_key
from stringdict.core.types import Acc, Mapper, Predicate, Reducer, Visitor
from stringdict.logger.logger import logger

__all__ = ["Dict"]


def _ensure_callable(fn: Any) -> None:
    if not callable(fn):
        logger.debug(f"Rejected non-callable callback of type {type(fn).__name__}")
        raise InvalidArgumentError(
            f"Argument 1 is expected to be callable, got {type(fn).__name__}."
        )


class Dict:
    """Associative container with namespaced keys and a fluent functional API.

    Attributes:
        count: Number of entries, maintained by ``set``, ``remove`` and
            ``clear``. Read it through ``length()`` or ``len()``.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, content: Optional[Any] = None):
        """Create an empty container, optionally seeded from ``content``.

        Args:
            content: A ``Mapping`` whose own items are copied, or another
                ``Dict`` whose entries are copied.

        Raises:
            InvalidArgumentError: If ``content`` is neither.
            InvalidKeyError: If ``content`` holds a falsy key.
        """
        self._items: dict = {}
        self.count = 0

        if content is not None:
            logger.debug(f"Seeding Dict from {type(content).__name__}")
            self._merge(content)

    # --- Core mutators and accessors ---

    def clear(self) -> "Dict":
        """Remove every entry."""
        self._items = {}
        self.count = 0
        logger.debug("Dict cleared")
        return self

    def length(self) -> int:
        return self.count

    def set(self, k: Any, value: Any) -> "Dict":
        """Store ``value`` under ``k``, replacing any previous entry.

        A replaced entry is removed first and re-inserted, so it moves to the
        end of the iteration order and ``count`` is unchanged.

        Raises:
            InvalidKeyError: If ``k`` is falsy. Nothing is modified.
        """
        if not k:
            logger.debug(f"Rejected falsy key {k!r}")
            raise InvalidKeyError(k)

        if self.has(k):
            self.remove(k)

        self._items[make_key(k)] = value
        self.count += 1

        return self

    def get(self, k: Any, default: Any = MISSING) -> Any:
        """Return the value stored under ``k``, or ``default`` when absent.

        Presence is decided by membership, so a stored ``None`` (or any other
        falsy value) is returned as is.
        """
        key = make_key(k)

        if key not in self._items:
            return default

        return self._items[key]

    def require(self, k: Any) -> Any:
        """Same as ``get`` but raises when the key does not exist.

        Useful when a container serves as a registry.

        Raises:
            MissingKeyError: If ``k`` is not present.
        """
        if not self.has(k):
            logger.debug(f"Required key {k!r} does not exist")
            raise MissingKeyError(k)

        return self.get(k)

    def remove(self, k: Any) -> "Dict":
        """Delete the entry for ``k``. Absent keys are ignored."""
        if self.has(k):
            del self._items[make_key(k)]
            self.count -= 1

        return self

    def has(self, k: Any) -> bool:
        return make_key(k) in self._items

    # --- Iteration ---

    def for_each(self, fn: Visitor) -> "Dict":
        """Call ``fn(value, key, container)`` once per entry.

        Entries are visited in insertion order. The callback may mutate the
        container: entries it removes are skipped if not yet visited, and
        entries it adds are not visited.

        Raises:
            InvalidArgumentError: If ``fn`` is not callable.
        """
        _ensure_callable(fn)

        for key in list(self._items):
            if key not in self._items:
                continue
            fn(self._items[key], revoke_key(key), self)

        return self

    def some(self, fn: Predicate) -> bool:
        """Return True as soon as ``fn`` holds for an entry."""
        _ensure_callable(fn)

        for key in list(self._items):
            if key not in self._items:
                continue
            if fn(self._items[key], revoke_key(key), self):
                return True

        return False

    def every(self, fn: Predicate) -> bool:
        """Return True unless ``fn`` fails for some entry.

        Folds over every entry. Once an entry fails, ``fn`` is no longer
        called for the remaining ones. True for an empty container.
        """
        _ensure_callable(fn)

        return bool(
            self.reduce(
                lambda last, item, key, all_: last and fn(item, key, all_), True
            )
        )

    def find(self, fn: Predicate, default: Any = MISSING) -> Any:
        """Return the first value for which ``fn`` holds, or ``default``."""
        _ensure_callable(fn)

        found = []

        def _match(item, key, all_):
            if fn(item, key, all_):
                found.append(item)
                return True
            return False

        if self.some(_match):
            return found[0]

        return default

    def filter(self, fn: Predicate) -> "Dict":
        """Return a new container with the entries for which ``fn`` holds."""
        _ensure_callable(fn)

        matches = Dict()

        def _keep(item, key, all_):
            if fn(item, key, all_):
                matches.set(key, item)

        self.for_each(_keep)

        return matches

    def map(self, fn: Mapper) -> "Dict":
        """Return a new container with the same keys and ``fn`` applied to values."""
        _ensure_callable(fn)

        mapped = Dict()
        self.for_each(lambda item, key, all_: mapped.set(key, fn(item, key, all_)))

        return mapped

    def reduce(self, fn: Reducer, initial: Optional[Acc] = None) -> Acc:
        """Fold ``fn(accumulator, value, key, container)`` over all entries.

        Args:
            fn: Reducer returning the next accumulator.
            initial: Seed accumulator.

        Returns:
            The final accumulator, or ``initial`` for an empty container.
        """
        _ensure_callable(fn)

        result = initial

        def _step(item, key, all_):
            nonlocal result
            result = fn(result, item, key, all_)

        self.for_each(_step)

        return result

    # --- Snapshots ---

    def keys(self) -> List[str]:
        """Return the external keys as a new list."""
        keys: List[str] = []
        self.for_each(lambda item, key, all_: keys.append(key))
        return keys

    def values(self) -> List[Any]:
        """Return the values as a new list."""
        values: List[Any] = []
        self.for_each(lambda item, key, all_: values.append(item))
        return values

    def items(self) -> List[Tuple[str, Any]]:
        """Return ``(key, value)`` pairs as a new list."""
        pairs: List[Tuple[str, Any]] = []
        self.for_each(lambda item, key, all_: pairs.append((key, item)))
        return pairs

    def to_dict(self) -> dict:
        """Return a plain ``dict`` with the container's contents."""
        plain: dict = {}

        def _copy(item, key, all_):
            plain[key] = item

        self.for_each(_copy)
        return plain

    def clone(self) -> "Dict":
        """Return a new container with the same entries (values are not copied)."""
        clone = Dict()
        self.for_each(lambda item, key, all_: clone.set(key, item))
        return clone

    # --- Merging ---

    def add_map(self, other: Any) -> "Dict":
        """Add every entry of ``other`` to this container.

        Keys from ``other`` replace equal keys already present.

        Args:
            other: A ``Dict`` or any ``Mapping``.

        Raises:
            InvalidArgumentError: If ``other`` is neither.
            InvalidKeyError: If ``other`` is a ``Mapping`` with a falsy key.
                Nothing is added in that case.
        """
        logger.debug(f"Adding entries from {type(other).__name__}")
        self._merge(other)
        return self

    def join(self, other: Any) -> "Dict":
        """Return a new container holding this one's entries updated by ``other``.

        Neither container is modified; ``other`` wins on conflicting keys.
        """
        return self.clone().add_map(other)

    def _merge(self, other: Any) -> None:
        if isinstance(other, Dict):
            other.for_each(lambda item, key, all_: self.set(key, item))
        elif isinstance(other, Mapping):
            # all keys are checked before any is written
            for key in other:
                if not key:
                    logger.debug(
                        f"Rejected falsy key {key!r} in {type(other).__name__}"
                    )
                    raise InvalidKeyError(key)
            for key, item in other.items():
                self.set(key, item)
        else:
            logger.debug(f"Cannot merge entries from {type(other).__name__}")
            raise InvalidArgumentError(
                f"Expected a Dict or a Mapping, got {type(other).__name__}."
            )

    # --- Python protocols ---

    def __len__(self) -> int:
        return self.count

    def __contains__(self, k: Any) -> bool:
        return self.has(k)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __getitem__(self, k: Any) -> Any:
        return self.require(k)

    def __setitem__(self, k: Any, value: Any) -> None:
        self.set(k, value)

    def __delitem__(self, k: Any) -> None:
        if not self.has(k):
            raise MissingKeyError(k)
        self.remove(k)

    def __eq__(self, other: Any) -> bool:
        """Compare entries, order-insensitive. Mapping keys are compared by ``str``."""
        if isinstance(other, Dict):
            return self.to_dict() == other.to_dict()
        if isinstance(other, Mapping):
            return self.to_dict() == {str(k): v for k, v in other.items()}
        return NotImplemented

    def __repr__(self) -> str:
        return f"Dict({self.to_dict()!r})"

    # --- Pydantic integration ---

    @classmethod
    def _validate(cls, value: Any) -> "Dict":
        if isinstance(value, Dict):
            return value
        if isinstance(value, Mapping):
            return cls(value)
        raise ValueError(f"Expected a Dict or a mapping, got {type(value).__name__}.")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_dict()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        # documented as the plain mapping it validates from and dumps to
        return handler(core_schema.dict_schema(keys_schema=core_schema.str_schema()))
