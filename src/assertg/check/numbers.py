from __future__ import annotations

from typing import Union

Number = Union[int, float]


def numbers_are_equal(a: Number, b: Number) -> bool:
    return a == b


def number_is_greater_than(a: Number, b: Number) -> bool:
    return a > b


def number_is_greater_than_or_equal_to(a: Number, b: Number) -> bool:
    return a >= b


def number_is_less_than(a: Number, b: Number) -> bool:
    return a < b


def number_is_less_than_or_equal_to(a: Number, b: Number) -> bool:
    return a <= b


def number_is_between(value: Number, start: Number, end: Number) -> bool:
    return start <= value <= end


def number_is_close_to(value: Number, expected: Number, tolerance: Number) -> bool:
    return abs(value - expected) <= tolerance


def integer_is_even(value: int) -> bool:
    return value & 1 == 0


def integer_is_odd(value: int) -> bool:
    return value & 1 != 0
