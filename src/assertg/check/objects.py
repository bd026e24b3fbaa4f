from __future__ import annotations

from typing import Any, Callable

Comparator = Callable[[Any, Any], bool]
Predicate = Callable[[Any], bool]


def objects_are_equal(a: Any, b: Any, comparator: Comparator | None = None) -> bool:
    """Element equality used by every sequence check.

    Native ``==`` is structural for lists, tuples, dicts, dataclasses and
    pydantic models. Types without a meaningful ``__eq__`` need an explicit
    comparator.
    """
    if comparator is not None:
        return bool(comparator(a, b))
    if a is b:
        return True
    return bool(a == b)
