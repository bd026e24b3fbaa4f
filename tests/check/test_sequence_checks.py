from __future__ import annotations

from dataclasses import dataclass

import pytest

from assertg.check.sequences import (
    sequence_contains_entry,
    sequence_contains_entry_count,
    sequence_contains_exactly_in_any_order,
    sequence_contains_sequence,
    sequence_ends_with,
    sequence_has_duplicates,
    sequence_has_predicate_matches,
    sequence_has_size,
    sequence_is_equal,
    sequence_match_predicate_count,
    sequence_starts_with,
)

RINGS = ["vilya", "nenya", "narya", "vilya"]


@dataclass
class Character:
    name: str
    age: int


@pytest.mark.parametrize(
    "left, right",
    [
        ([], []),
        (["a", "b"], ["a", "b"]),
        (["a", "b"], ["b", "a"]),
        (["a"], ["a", "a"]),
        ([[1, 2], {"k": 1}], [[1, 2], {"k": 1}]),
    ],
)
def test_sequence_is_equal_is_reflexive_and_symmetric(left: list, right: list) -> None:
    assert sequence_is_equal(left, left)
    assert sequence_is_equal(right, right)
    assert sequence_is_equal(left, right) == sequence_is_equal(right, left)


def test_sequence_is_equal_uses_structural_equality() -> None:
    assert sequence_is_equal([Character("Frodo", 33)], [Character("Frodo", 33)])
    assert not sequence_is_equal([Character("Frodo", 33)], [Character("Frodo", 50)])


def test_sequence_is_equal_with_comparator() -> None:
    same_name = lambda a, b: a.name == b.name  # noqa: E731
    assert sequence_is_equal([Character("Sam", 38)], [Character("Sam", 99)], same_name)


def test_none_and_empty_sequences_compare_equal() -> None:
    assert sequence_is_equal(None, None)
    assert sequence_is_equal(None, [])
    assert sequence_has_size(None, 0)


@pytest.mark.parametrize("entry", ["vilya", "nenya", "narya", "one"])
def test_contains_entry_agrees_with_count(entry: str) -> None:
    assert sequence_contains_entry(RINGS, entry) == (sequence_contains_entry_count(RINGS, entry) > 0)


def test_contains_entry_count_counts_duplicates() -> None:
    assert sequence_contains_entry_count(RINGS, "vilya") == 2
    assert sequence_contains_entry_count(RINGS, "one") == 0
    assert sequence_contains_entry_count(None, "one") == 0


@pytest.mark.parametrize(
    "needle, expected",
    [
        (["b", "c"], True),
        (["a", "c"], False),
        (["a", "b", "c"], True),
        (["c", "d"], False),
        (["a", "b", "c", "d"], False),
    ],
)
def test_contains_sequence_requires_contiguous_run(needle: list[str], expected: bool) -> None:
    assert sequence_contains_sequence(["a", "b", "c"], needle) is expected


@pytest.mark.parametrize("haystack", [[], ["a"], ["a", "b", "c"], None])
def test_contains_sequence_empty_needle_is_vacuous(haystack: list[str] | None) -> None:
    assert sequence_contains_sequence(haystack, [])


def test_contains_sequence_implies_first_entry_is_contained() -> None:
    needle = ["nenya", "narya"]
    assert sequence_contains_sequence(RINGS, needle)
    assert sequence_contains_entry(RINGS, needle[0])


def test_starts_and_ends_with() -> None:
    assert sequence_starts_with(RINGS, ["vilya", "nenya"])
    assert not sequence_starts_with(RINGS, ["nenya"])
    assert sequence_ends_with(RINGS, ["narya", "vilya"])
    assert not sequence_ends_with(["a"], ["a", "a"])
    assert sequence_starts_with([], [])
    assert sequence_ends_with(["a"], [])


def test_has_duplicates() -> None:
    assert sequence_has_duplicates(RINGS)
    assert not sequence_has_duplicates(["vilya", "nenya"])
    assert not sequence_has_duplicates(None)


def test_contains_exactly_in_any_order_is_a_multiset_match() -> None:
    assert sequence_contains_exactly_in_any_order(RINGS, ["vilya", "vilya", "nenya", "narya"])
    assert not sequence_contains_exactly_in_any_order(RINGS, ["vilya", "nenya", "narya"])
    assert not sequence_contains_exactly_in_any_order(RINGS, ["vilya", "nenya", "narya", "narya"])


def test_predicate_match_count_is_bounded() -> None:
    is_long = lambda value: len(value) > 4  # noqa: E731
    count = sequence_match_predicate_count(RINGS, is_long)
    assert 0 <= count <= len(RINGS)
    assert count == 4
    assert sequence_match_predicate_count(RINGS, lambda value: value == "nenya") == 1
    assert sequence_match_predicate_count(None, is_long) == 0


def test_predicate_is_evaluated_once_per_element_in_order() -> None:
    seen: list[int] = []

    def record(value: int) -> bool:
        seen.append(value)
        return value % 2 == 1

    assert sequence_has_predicate_matches([1, 2, 3], record, 2)
    assert seen == [1, 2, 3]
