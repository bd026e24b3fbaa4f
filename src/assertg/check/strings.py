from __future__ import annotations

import re
from typing import Iterable


def _remove_whitespace(value: str) -> str:
    return "".join(char for char in value if not char.isspace())


def string_is_blank(value: str) -> bool:
    return not value.strip()


def string_contains_whitespace(value: str) -> bool:
    return any(char.isspace() for char in value)


def string_line_count(value: str) -> int:
    return value.count("\n") + 1


def string_contains_digit(value: str) -> bool:
    return any(char.isdecimal() for char in value)


def string_contains_only_digits(value: str) -> bool:
    return all(char.isdecimal() for char in value)


def string_contains(value: str, substrings: Iterable[str]) -> bool:
    return all(substring in value for substring in substrings)


def string_contains_any(value: str, substrings: Iterable[str]) -> bool:
    return any(substring in value for substring in substrings)


def string_contains_ignoring_case(value: str, substrings: Iterable[str]) -> bool:
    folded = value.casefold()
    return all(substring.casefold() in folded for substring in substrings)


def string_contains_any_ignoring_case(value: str, substrings: Iterable[str]) -> bool:
    folded = value.casefold()
    return any(substring.casefold() in folded for substring in substrings)


def string_equals_ignoring_whitespace(value: str, other: str) -> bool:
    return _remove_whitespace(value) == _remove_whitespace(other)


def string_contains_ignoring_whitespace(value: str, substrings: Iterable[str]) -> bool:
    stripped = _remove_whitespace(value)
    return all(_remove_whitespace(substring) in stripped for substring in substrings)


def string_contains_any_ignoring_whitespace(value: str, substrings: Iterable[str]) -> bool:
    stripped = _remove_whitespace(value)
    return any(_remove_whitespace(substring) in stripped for substring in substrings)


def string_starts_with(value: str, prefix: str) -> bool:
    return value.startswith(prefix)


def string_starts_with_ignoring_case(value: str, prefix: str) -> bool:
    return value.casefold().startswith(prefix.casefold())


def string_ends_with(value: str, suffix: str) -> bool:
    return value.endswith(suffix)


def string_ends_with_ignoring_case(value: str, suffix: str) -> bool:
    return value.casefold().endswith(suffix.casefold())


def string_matches_regexp(value: str, pattern: re.Pattern[str]) -> bool:
    # Unanchored search, like Go's MatchString.
    return pattern.search(value) is not None


def string_is_equal(a: str, b: str) -> bool:
    return a == b
