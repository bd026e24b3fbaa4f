from __future__ import annotations

from typing import Any, Sequence

from .objects import Comparator, Predicate, objects_are_equal


def _items(seq: Sequence[Any] | None) -> Sequence[Any]:
    # None behaves like an empty sequence for size and membership checks.
    return () if seq is None else seq


def sequence_has_size(seq: Sequence[Any] | None, size: int) -> bool:
    return len(_items(seq)) == size


def sequence_has_size_greater_than(seq: Sequence[Any] | None, size: int) -> bool:
    return len(_items(seq)) > size


def sequence_has_size_less_than(seq: Sequence[Any] | None, size: int) -> bool:
    return len(_items(seq)) < size


def sequence_is_equal(
    a: Sequence[Any] | None,
    b: Sequence[Any] | None,
    comparator: Comparator | None = None,
) -> bool:
    left = _items(a)
    right = _items(b)
    if len(left) != len(right):
        return False
    for index in range(len(left)):
        if not objects_are_equal(left[index], right[index], comparator):
            return False
    return True


def sequence_contains_entry(
    seq: Sequence[Any] | None, entry: Any, comparator: Comparator | None = None
) -> bool:
    return any(objects_are_equal(item, entry, comparator) for item in _items(seq))


def sequence_contains_entry_count(
    seq: Sequence[Any] | None, entry: Any, comparator: Comparator | None = None
) -> int:
    return sum(1 for item in _items(seq) if objects_are_equal(item, entry, comparator))


def sequence_contains_sequence(
    haystack: Sequence[Any] | None,
    needle: Sequence[Any] | None,
    comparator: Comparator | None = None,
) -> bool:
    items = _items(haystack)
    window = len(_items(needle))
    if window > len(items):
        return False
    for start in range(len(items) - window + 1):
        if sequence_is_equal(items[start : start + window], needle, comparator):
            return True
    return False


def sequence_starts_with(
    seq: Sequence[Any] | None,
    prefix: Sequence[Any] | None,
    comparator: Comparator | None = None,
) -> bool:
    items = _items(seq)
    size = len(_items(prefix))
    if size > len(items):
        return False
    return sequence_is_equal(items[:size], prefix, comparator)


def sequence_ends_with(
    seq: Sequence[Any] | None,
    suffix: Sequence[Any] | None,
    comparator: Comparator | None = None,
) -> bool:
    items = _items(seq)
    size = len(_items(suffix))
    if size > len(items):
        return False
    return sequence_is_equal(items[len(items) - size :], suffix, comparator)


def sequence_has_duplicates(seq: Sequence[Any] | None, comparator: Comparator | None = None) -> bool:
    items = _items(seq)
    for index, item in enumerate(items):
        for other in items[index + 1 :]:
            if objects_are_equal(item, other, comparator):
                return True
    return False


def sequence_contains_exactly_in_any_order(
    seq: Sequence[Any] | None,
    elements: Sequence[Any] | None,
    comparator: Comparator | None = None,
) -> bool:
    items = _items(seq)
    expected = _items(elements)
    if len(items) != len(expected):
        return False
    for element in expected:
        if sequence_contains_entry_count(expected, element, comparator) != sequence_contains_entry_count(
            items, element, comparator
        ):
            return False
    return True


def sequence_match_predicate_count(seq: Sequence[Any] | None, predicate: Predicate) -> int:
    matches = 0
    for item in _items(seq):
        if predicate(item):
            matches += 1
    return matches


def sequence_has_predicate_matches(seq: Sequence[Any] | None, predicate: Predicate, times: int) -> bool:
    return sequence_match_predicate_count(seq, predicate) == times
