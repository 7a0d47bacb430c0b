"""Callback type aliases shared by the ``Dict`` operators.

Type Aliases:
    Visitor: ``(value, key, container) -> Any``, used by ``for_each``.
    Predicate: ``(value, key, container) -> bool``, used by ``filter``,
        ``some``, ``every`` and ``find``.
    Mapper: ``(value, key, container) -> Any``, used by ``map``.
    Reducer: ``(accumulator, value, key, container) -> accumulator``, used by
        ``reduce``.

The container is typed as ``Any`` to avoid a circular import with
``stringdict.core.container``.
"""

from typing import Any, Callable, TypeVar

__all__ = ["Visitor", "Predicate", "Mapper", "Reducer", "Acc"]

Acc = TypeVar("Acc")

Visitor = Callable[[Any, str, Any], Any]
Predicate = Callable[[Any, str, Any], Any]
Mapper = Callable[[Any, str, Any], Any]
Reducer = Callable[[Acc, Any, str, Any], Acc]
