from .numbers import (
    integer_is_even,
    integer_is_odd,
    number_is_between,
    number_is_close_to,
    number_is_greater_than,
    number_is_greater_than_or_equal_to,
    number_is_less_than,
    number_is_less_than_or_equal_to,
    numbers_are_equal,
)
from .objects import Comparator, Predicate, objects_are_equal
from .sequences import (
    sequence_contains_entry,
    sequence_contains_entry_count,
    sequence_contains_exactly_in_any_order,
    sequence_contains_sequence,
    sequence_ends_with,
    sequence_has_duplicates,
    sequence_has_predicate_matches,
    sequence_has_size,
    sequence_has_size_greater_than,
    sequence_has_size_less_than,
    sequence_is_equal,
    sequence_match_predicate_count,
    sequence_starts_with,
)
from .strings import (
    string_contains,
    string_contains_any,
    string_contains_any_ignoring_case,
    string_contains_any_ignoring_whitespace,
    string_contains_digit,
    string_contains_ignoring_case,
    string_contains_ignoring_whitespace,
    string_contains_only_digits,
    string_contains_whitespace,
    string_ends_with,
    string_ends_with_ignoring_case,
    string_equals_ignoring_whitespace,
    string_is_blank,
    string_is_equal,
    string_line_count,
    string_matches_regexp,
    string_starts_with,
    string_starts_with_ignoring_case,
)

__all__ = [
    "Comparator",
    "Predicate",
    "integer_is_even",
    "integer_is_odd",
    "number_is_between",
    "number_is_close_to",
    "number_is_greater_than",
    "number_is_greater_than_or_equal_to",
    "number_is_less_than",
    "number_is_less_than_or_equal_to",
    "numbers_are_equal",
    "objects_are_equal",
    "sequence_contains_entry",
    "sequence_contains_entry_count",
    "sequence_contains_exactly_in_any_order",
    "sequence_contains_sequence",
    "sequence_ends_with",
    "sequence_has_duplicates",
    "sequence_has_predicate_matches",
    "sequence_has_size",
    "sequence_has_size_greater_than",
    "sequence_has_size_less_than",
    "sequence_is_equal",
    "sequence_match_predicate_count",
    "sequence_starts_with",
    "string_contains",
    "string_contains_any",
    "string_contains_any_ignoring_case",
    "string_contains_any_ignoring_whitespace",
    "string_contains_digit",
    "string_contains_ignoring_case",
    "string_contains_ignoring_whitespace",
    "string_contains_only_digits",
    "string_contains_whitespace",
    "string_ends_with",
    "string_ends_with_ignoring_case",
    "string_equals_ignoring_whitespace",
    "string_is_blank",
    "string_is_equal",
    "string_line_count",
    "string_matches_regexp",
    "string_starts_with",
    "string_starts_with_ignoring_case",
]
