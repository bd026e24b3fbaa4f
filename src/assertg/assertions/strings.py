from __future__ import annotations

import re
from typing import Iterable, Union

from assertg import check

from .base import BaseAssert

Pattern = Union[str, re.Pattern[str]]


class StringAssert(BaseAssert[str]):
    def _compile(self, pattern: Pattern) -> re.Pattern[str] | None:
        __tracebackhide__ = True
        if isinstance(pattern, re.Pattern):
            return pattern
        try:
            return re.compile(pattern)
        except re.error as exc:
            if self.config.invalid_pattern == "raise":
                raise
            self.fail_with_message("expected a valid regular expression, but %s is invalid: %s", pattern, exc)
            return None

    def is_empty(self) -> StringAssert:
        __tracebackhide__ = True
        if self.actual != "":
            self.fail_with_message("expected string to be empty, but got %s", self.actual)
        return self

    def is_not_empty(self) -> StringAssert:
        __tracebackhide__ = True
        if self.actual == "":
            self.fail_with_message("expected string to not be empty, but got %s", self.actual)
        return self

    def is_blank(self) -> StringAssert:
        __tracebackhide__ = True
        if not check.string_is_blank(self.actual):
            self.fail_with_message("expected string to be blank, but got %s", self.actual)
        return self

    def is_not_blank(self) -> StringAssert:
        __tracebackhide__ = True
        if check.string_is_blank(self.actual):
            self.fail_with_message("expected string to not be blank, but got %s", self.actual)
        return self

    def contains_whitespace(self) -> StringAssert:
        __tracebackhide__ = True
        if not check.string_contains_whitespace(self.actual):
            self.fail_with_message("expected string to contain whitespace characters, but got %s", self.actual)
        return self

    def does_not_contain_whitespace(self) -> StringAssert:
        __tracebackhide__ = True
        if check.string_contains_whitespace(self.actual):
            self.fail_with_message(
                "expected string to not contain whitespace characters, but got %s", self.actual
            )
        return self

    def has_length(self, length: int) -> StringAssert:
        __tracebackhide__ = True
        if len(self.actual) != length:
            self.fail_with_message("expected string to have length of %s, but got %s", length, self.actual)
        return self

    def has_length_less_than(self, length: int) -> StringAssert:
        __tracebackhide__ = True
        if not len(self.actual) < length:
            self.fail_with_message("expected string to have length less than %s, but got %s", length, self.actual)
        return self

    def has_length_greater_than(self, length: int) -> StringAssert:
        __tracebackhide__ = True
        if not len(self.actual) > length:
            self.fail_with_message(
                "expected string to have length greater than %s, but got %s", length, self.actual
            )
        return self

    def has_line_count(self, expected_line_count: int) -> StringAssert:
        __tracebackhide__ = True
        if check.string_line_count(self.actual) != expected_line_count:
            self.fail_with_message("expected string to have %s lines, but got %s", expected_line_count, self.actual)
        return self

    def has_same_length_as(self, other: str) -> StringAssert:
        __tracebackhide__ = True
        if len(self.actual) != len(other):
            self.fail_with_message(
                "expected string to have the same length as %s (%s), but got %s (%s)",
                other,
                len(other),
                self.actual,
                len(self.actual),
            )
        return self

    def is_equal_to(self, expected: str) -> StringAssert:
        __tracebackhide__ = True
        if not check.string_is_equal(self.actual, expected):
            self.fail_with_message("expected string to equal %s, but got %s", expected, self.actual)
        return self

    def is_not_equal_to(self, expected: str) -> StringAssert:
        __tracebackhide__ = True
        if check.string_is_equal(self.actual, expected):
            self.fail_with_message("expected string to not equal %s, but got %s", expected, self.actual)
        return self

    def is_equal_to_ignoring_case(self, expected: str) -> StringAssert:
        __tracebackhide__ = True
        if self.actual.casefold() != expected.casefold():
            self.fail_with_message("expected string to equal %s ignoring case, but got %s", expected, self.actual)
        return self

    def is_not_equal_to_ignoring_case(self, expected: str) -> StringAssert:
        __tracebackhide__ = True
        if self.actual.casefold() == expected.casefold():
            self.fail_with_message(
                "expected string to not equal %s ignoring case, but got %s", expected, self.actual
            )
        return self

    def is_equal_to_ignoring_whitespace(self, expected: str) -> StringAssert:
        __tracebackhide__ = True
        if not check.string_equals_ignoring_whitespace(self.actual, expected):
            self.fail_with_message(
                "expected string to equal %s ignoring whitespace, but got %s", expected, self.actual
            )
        return self

    def contains_only_digits(self) -> StringAssert:
        __tracebackhide__ = True
        if not check.string_contains_only_digits(self.actual):
            self.fail_with_message("expected string to only contain digits, but got %s", self.actual)
        return self

    def contains_only_once(self, substring: str) -> StringAssert:
        __tracebackhide__ = True
        first_index = self.actual.find(substring)
        if first_index == -1 or first_index != self.actual.rfind(substring):
            self.fail_with_message("expected string to contain %s only once, but got %s", substring, self.actual)
        return self

    def contains(self, substring: str) -> StringAssert:
        __tracebackhide__ = True
        if not check.string_contains(self.actual, [substring]):
            self.fail_with_message("expected string to contain %s, but got %s", substring, self.actual)
        return self

    def contains_ignoring_case(self, substring: str) -> StringAssert:
        __tracebackhide__ = True
        if not check.string_contains_ignoring_case(self.actual, [substring]):
            self.fail_with_message(
                "expected string to contain %s ignoring case, but got %s", substring, self.actual
            )
        return self

    def contains_ignoring_whitespace(self, substring: str) -> StringAssert:
        __tracebackhide__ = True
        if not check.string_contains_ignoring_whitespace(self.actual, [substring]):
            self.fail_with_message(
                "expected string to contain %s ignoring whitespace, but got %s", substring, self.actual
            )
        return self

    def contains_all_of(self, *values: str) -> StringAssert:
        __tracebackhide__ = True
        if not check.string_contains(self.actual, values):
            self.fail_with_message("expected string to contain all of %s, but got %s", list(values), self.actual)
        return self

    def contains_any_of(self, *values: str) -> StringAssert:
        __tracebackhide__ = True
        if not check.string_contains_any(self.actual, values):
            self.fail_with_message("expected string to contain any of %s, but got %s", list(values), self.actual)
        return self

    def does_not_contain(self, substring: str) -> StringAssert:
        __tracebackhide__ = True
        if check.string_contains(self.actual, [substring]):
            self.fail_with_message("expected string to not contain %s, but got %s", substring, self.actual)
        return self

    def does_not_contain_ignoring_case(self, substring: str) -> StringAssert:
        __tracebackhide__ = True
        if check.string_contains_ignoring_case(self.actual, [substring]):
            self.fail_with_message(
                "expected string to not contain %s ignoring case, but got %s", substring, self.actual
            )
        return self

    def does_not_contain_ignoring_whitespace(self, substring: str) -> StringAssert:
        __tracebackhide__ = True
        if check.string_contains_ignoring_whitespace(self.actual, [substring]):
            self.fail_with_message(
                "expected string to not contain %s ignoring whitespace, but got %s", substring, self.actual
            )
        return self

    def starts_with(self, prefix: str) -> StringAssert:
        __tracebackhide__ = True
        if not check.string_starts_with(self.actual, prefix):
            self.fail_with_message("expected string to start with %s, but got %s", prefix, self.actual)
        return self

    def does_not_start_with(self, prefix: str) -> StringAssert:
        __tracebackhide__ = True
        if check.string_starts_with(self.actual, prefix):
            self.fail_with_message("expected string to not start with %s, but got %s", prefix, self.actual)
        return self

    def starts_with_ignoring_case(self, prefix: str) -> StringAssert:
        __tracebackhide__ = True
        if not check.string_starts_with_ignoring_case(self.actual, prefix):
            self.fail_with_message(
                "expected string to start with %s ignoring case, but got %s", prefix, self.actual
            )
        return self

    def does_not_start_with_ignoring_case(self, prefix: str) -> StringAssert:
        __tracebackhide__ = True
        if check.string_starts_with_ignoring_case(self.actual, prefix):
            self.fail_with_message(
                "expected string to not start with %s ignoring case, but got %s", prefix, self.actual
            )
        return self

    def ends_with(self, suffix: str) -> StringAssert:
        __tracebackhide__ = True
        if not check.string_ends_with(self.actual, suffix):
            self.fail_with_message("expected string to end with %s, but got %s", suffix, self.actual)
        return self

    def does_not_end_with(self, suffix: str) -> StringAssert:
        __tracebackhide__ = True
        if check.string_ends_with(self.actual, suffix):
            self.fail_with_message("expected string not to end with %s, but got %s", suffix, self.actual)
        return self

    def ends_with_ignoring_case(self, suffix: str) -> StringAssert:
        __tracebackhide__ = True
        if not check.string_ends_with_ignoring_case(self.actual, suffix):
            self.fail_with_message("expected string to end with %s ignoring case, but got %s", suffix, self.actual)
        return self

    def does_not_end_with_ignoring_case(self, suffix: str) -> StringAssert:
        __tracebackhide__ = True
        if check.string_ends_with_ignoring_case(self.actual, suffix):
            self.fail_with_message(
                "expected string not to end with %s ignoring case, but got %s", suffix, self.actual
            )
        return self

    def matches(self, pattern: Pattern) -> StringAssert:
        __tracebackhide__ = True
        regex = self._compile(pattern)
        if regex is not None and not check.string_matches_regexp(self.actual, regex):
            self.fail_with_message("expected string to match %s, but got %s", regex.pattern, self.actual)
        return self

    def does_not_match(self, pattern: Pattern) -> StringAssert:
        __tracebackhide__ = True
        regex = self._compile(pattern)
        if regex is not None and check.string_matches_regexp(self.actual, regex):
            self.fail_with_message("expected string not to match %s, but got %s", regex.pattern, self.actual)
        return self

    def is_substring_of(self, value: str) -> StringAssert:
        __tracebackhide__ = True
        if self.actual not in value:
            self.fail_with_message("expected string to be a substring of %s, but got %s", value, self.actual)
        return self

    def is_in(self, values: Iterable[str]) -> StringAssert:
        __tracebackhide__ = True
        candidates = list(values)
        if self.actual not in candidates:
            self.fail_with_message("expected string to be present in %s, but got %s", candidates, self.actual)
        return self

    def is_not_in(self, values: Iterable[str]) -> StringAssert:
        __tracebackhide__ = True
        candidates = list(values)
        if self.actual in candidates:
            self.fail_with_message("expected string not to be present in %s, but got %s", candidates, self.actual)
        return self
