from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from assertg import check
from assertg.check.objects import Comparator, Predicate

from .base import BaseAssert


class SequenceAssert(BaseAssert[Optional[Sequence[Any]]]):
    """Checks on ordered sequences.

    ``None`` is kept distinct from an empty sequence for :meth:`is_none` and
    :meth:`is_not_none`; every other check treats it as empty.
    """

    comparator: Comparator | None = None

    def using_element_comparator(self, comparator: Comparator) -> SequenceAssert:
        self.comparator = comparator
        return self

    def _contains(self, element: Any) -> bool:
        return check.sequence_contains_entry(self.actual, element, self.comparator)

    def _count(self, sequence: Sequence[Any] | None, element: Any) -> int:
        return check.sequence_contains_entry_count(sequence, element, self.comparator)

    def is_none(self) -> SequenceAssert:
        __tracebackhide__ = True
        if self.actual is not None:
            self.fail_with_message("expected sequence to be None, but got %s", self.actual)
        return self

    def is_not_none(self) -> SequenceAssert:
        __tracebackhide__ = True
        if self.actual is None:
            self.fail_with_message("expected sequence to not be None, but got %s", self.actual)
        return self

    def is_empty(self) -> SequenceAssert:
        __tracebackhide__ = True
        if not check.sequence_has_size(self.actual, 0):
            self.fail_with_message("expected sequence to be empty, but got %s", self.actual)
        return self

    def is_not_empty(self) -> SequenceAssert:
        __tracebackhide__ = True
        if check.sequence_has_size(self.actual, 0):
            self.fail_with_message("expected sequence to not be empty, but got %s", self.actual)
        return self

    def has_size(self, size: int) -> SequenceAssert:
        __tracebackhide__ = True
        if not check.sequence_has_size(self.actual, size):
            self.fail_with_message("expected sequence to have a size of %s, but got %s", size, self.actual)
        return self

    def has_size_greater_than(self, size: int) -> SequenceAssert:
        __tracebackhide__ = True
        if not check.sequence_has_size_greater_than(self.actual, size):
            self.fail_with_message(
                "expected sequence to have a size greater than %s, but got %s", size, self.actual
            )
        return self

    def has_size_less_than(self, size: int) -> SequenceAssert:
        __tracebackhide__ = True
        if not check.sequence_has_size_less_than(self.actual, size):
            self.fail_with_message("expected sequence to have a size less than %s, but got %s", size, self.actual)
        return self

    def has_same_size_as(self, other: Sequence[Any] | None) -> SequenceAssert:
        __tracebackhide__ = True
        if not check.sequence_has_size(self.actual, len(other or ())):
            self.fail_with_message("expected sequence to have the same size as %s, but got %s", other, self.actual)
        return self

    def contains(self, *elements: Any) -> SequenceAssert:
        """Verify the sequence contains all given elements, in any order."""
        __tracebackhide__ = True
        if not all(self._contains(element) for element in elements):
            self.fail_with_message("expected sequence to contain %s, but got %s", list(elements), self.actual)
        return self

    def contains_only(self, *elements: Any) -> SequenceAssert:
        """Verify the sequence holds the given elements and nothing else, ignoring order and duplicates."""
        __tracebackhide__ = True
        missed = not all(self._contains(element) for element in elements)
        extraneous = not missed and not all(
            check.sequence_contains_entry(elements, item, self.comparator) for item in self.actual or ()
        )
        if missed or extraneous:
            self.fail_with_message("expected sequence to contain only %s, but got %s", list(elements), self.actual)
        return self

    def contains_only_once(self, *elements: Any) -> SequenceAssert:
        __tracebackhide__ = True
        if any(self._count(self.actual, element) != 1 for element in elements):
            self.fail_with_message(
                "expected sequence to contain %s only once, but got %s", list(elements), self.actual
            )
        return self

    def contains_exactly(self, *elements: Any) -> SequenceAssert:
        """Verify the sequence holds exactly the given elements, in order."""
        __tracebackhide__ = True
        if not check.sequence_is_equal(elements, self.actual, self.comparator):
            self.fail_with_message(
                "expected sequence to contain exactly %s, but got %s", list(elements), self.actual
            )
        return self

    def contains_exactly_in_any_order(self, *elements: Any) -> SequenceAssert:
        __tracebackhide__ = True
        if not check.sequence_contains_exactly_in_any_order(self.actual, elements, self.comparator):
            self.fail_with_message(
                "expected sequence to contain exactly %s in any order, but got %s", list(elements), self.actual
            )
        return self

    def contains_sequence(self, *sequence: Any) -> SequenceAssert:
        """Verify the given values appear contiguously, without extra values between them."""
        __tracebackhide__ = True
        if not check.sequence_contains_sequence(self.actual, sequence, self.comparator):
            self.fail_with_message(
                "expected sequence to contain the sequence %s, but got %s", list(sequence), self.actual
            )
        return self

    def does_not_contain_sequence(self, *sequence: Any) -> SequenceAssert:
        __tracebackhide__ = True
        if check.sequence_contains_sequence(self.actual, sequence, self.comparator):
            self.fail_with_message(
                "expected sequence not to contain the sequence %s, but got %s", list(sequence), self.actual
            )
        return self

    def does_not_contain(self, *elements: Any) -> SequenceAssert:
        __tracebackhide__ = True
        if any(self._contains(element) for element in elements):
            self.fail_with_message("expected sequence not to contain %s, but got %s", list(elements), self.actual)
        return self

    def does_not_have_duplicates(self) -> SequenceAssert:
        __tracebackhide__ = True
        if check.sequence_has_duplicates(self.actual, self.comparator):
            self.fail_with_message("expected sequence not to have duplicates, but got %s", self.actual)
        return self

    def starts_with(self, *sequence: Any) -> SequenceAssert:
        __tracebackhide__ = True
        if not check.sequence_starts_with(self.actual, sequence, self.comparator):
            self.fail_with_message("expected sequence to start with %s, but got %s", list(sequence), self.actual)
        return self

    def ends_with(self, *sequence: Any) -> SequenceAssert:
        __tracebackhide__ = True
        if not check.sequence_ends_with(self.actual, sequence, self.comparator):
            self.fail_with_message("expected sequence to end with %s, but got %s", list(sequence), self.actual)
        return self

    def contains_any_of(self, *elements: Any) -> SequenceAssert:
        __tracebackhide__ = True
        if not any(self._contains(element) for element in elements):
            self.fail_with_message("expected sequence to contain any of %s, but got %s", list(elements), self.actual)
        return self

    def has_all(self, predicate: Predicate) -> SequenceAssert:
        __tracebackhide__ = True
        size = len(self.actual or ())
        if not check.sequence_has_predicate_matches(self.actual, predicate, size):
            self.fail_with_message(
                "expected sequence to have all entries match the predicate, but got %s", self.actual
            )
        return self

    def has_none(self, predicate: Predicate) -> SequenceAssert:
        __tracebackhide__ = True
        if not check.sequence_has_predicate_matches(self.actual, predicate, 0):
            self.fail_with_message(
                "expected sequence to have no entry match the predicate, but got %s", self.actual
            )
        return self

    def has_any(self, predicate: Predicate) -> SequenceAssert:
        __tracebackhide__ = True
        if check.sequence_match_predicate_count(self.actual, predicate) == 0:
            self.fail_with_message(
                "expected sequence to have any entry match the predicate, but got %s", self.actual
            )
        return self

    def has_at_least(self, n: int, predicate: Predicate) -> SequenceAssert:
        __tracebackhide__ = True
        if check.sequence_match_predicate_count(self.actual, predicate) < n:
            self.fail_with_message(
                "expected sequence to have at least %s entries match the predicate, but got %s", n, self.actual
            )
        return self

    def has_at_most(self, n: int, predicate: Predicate) -> SequenceAssert:
        __tracebackhide__ = True
        if check.sequence_match_predicate_count(self.actual, predicate) > n:
            self.fail_with_message(
                "expected sequence to have at most %s entries match the predicate, but got %s", n, self.actual
            )
        return self

    def has_exactly(self, n: int, predicate: Predicate) -> SequenceAssert:
        __tracebackhide__ = True
        if not check.sequence_has_predicate_matches(self.actual, predicate, n):
            self.fail_with_message(
                "expected sequence to have exactly %s entries match the predicate, but got %s", n, self.actual
            )
        return self

    def extracting(self, extractor: Callable[[Any], Any]) -> SequenceAssert:
        """Start a new chain on the values extracted from each element.

        A ``None`` sequence extracts to ``None``.
        """
        extracted = None if self.actual is None else [extractor(item) for item in self.actual]
        return SequenceAssert(self.sink, extracted, config=self.config)
