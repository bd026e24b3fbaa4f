from __future__ import annotations

from typing import TypeVar, Union

from assertg import check

from .base import BaseAssert

Number = Union[int, float]
N = TypeVar("N", bound="NumberAssert")


class NumberAssert(BaseAssert[Number]):
    """Checks shared by integers and floats."""

    def is_equal_to(self: N, value: Number) -> N:
        __tracebackhide__ = True
        if not check.numbers_are_equal(self.actual, value):
            self.fail_with_message("expected value to equal %s, but got %s", value, self.actual)
        return self

    def is_not_equal_to(self: N, value: Number) -> N:
        __tracebackhide__ = True
        if check.numbers_are_equal(self.actual, value):
            self.fail_with_message("expected value not to equal %s, but got %s", value, self.actual)
        return self

    def is_zero(self: N) -> N:
        __tracebackhide__ = True
        if self.actual != 0:
            self.fail_with_message("expected value to be zero, but got %s", self.actual)
        return self

    def is_non_zero(self: N) -> N:
        __tracebackhide__ = True
        if self.actual == 0:
            self.fail_with_message("expected value not to be zero, but got %s", self.actual)
        return self

    def is_positive(self: N) -> N:
        __tracebackhide__ = True
        if not self.actual > 0:
            self.fail_with_message("expected value to be positive, but got %s", self.actual)
        return self

    def is_negative(self: N) -> N:
        __tracebackhide__ = True
        if not self.actual < 0:
            self.fail_with_message("expected value to be negative, but got %s", self.actual)
        return self

    def is_non_positive(self: N) -> N:
        __tracebackhide__ = True
        if self.actual > 0:
            self.fail_with_message("expected value not to be positive, but got %s", self.actual)
        return self

    def is_non_negative(self: N) -> N:
        __tracebackhide__ = True
        if self.actual < 0:
            self.fail_with_message("expected value not to be negative, but got %s", self.actual)
        return self

    def is_less_than(self: N, value: Number) -> N:
        __tracebackhide__ = True
        if not check.number_is_less_than(self.actual, value):
            self.fail_with_message("expected value to be less than %s, but got %s", value, self.actual)
        return self

    def is_less_than_or_equal_to(self: N, value: Number) -> N:
        __tracebackhide__ = True
        if not check.number_is_less_than_or_equal_to(self.actual, value):
            self.fail_with_message(
                "expected value to be less than or equal to %s, but got %s", value, self.actual
            )
        return self

    def is_greater_than(self: N, value: Number) -> N:
        __tracebackhide__ = True
        if not check.number_is_greater_than(self.actual, value):
            self.fail_with_message("expected value to be greater than %s, but got %s", value, self.actual)
        return self

    def is_greater_than_or_equal_to(self: N, value: Number) -> N:
        __tracebackhide__ = True
        if not check.number_is_greater_than_or_equal_to(self.actual, value):
            self.fail_with_message(
                "expected value to be greater than or equal to %s, but got %s", value, self.actual
            )
        return self

    def is_between(self: N, start_inclusive: Number, end_inclusive: Number) -> N:
        __tracebackhide__ = True
        if not check.number_is_between(self.actual, start_inclusive, end_inclusive):
            self.fail_with_message(
                "expected value to be between %s and %s, but got %s",
                start_inclusive,
                end_inclusive,
                self.actual,
            )
        return self


class IntegerAssert(NumberAssert):
    def is_even(self) -> IntegerAssert:
        __tracebackhide__ = True
        if not check.integer_is_even(self.actual):
            self.fail_with_message("expected value to be even, but got %s", self.actual)
        return self

    def is_odd(self) -> IntegerAssert:
        __tracebackhide__ = True
        if not check.integer_is_odd(self.actual):
            self.fail_with_message("expected value to be odd, but got %s", self.actual)
        return self


class FloatAssert(NumberAssert):
    def is_close_to(self, value: float, tolerance: float) -> FloatAssert:
        __tracebackhide__ = True
        if not check.number_is_close_to(self.actual, value, tolerance):
            self.fail_with_message(
                "expected value to be close to %s within %s, but got %s", value, tolerance, self.actual
            )
        return self
