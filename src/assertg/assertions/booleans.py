from __future__ import annotations

from .base import BaseAssert


class BoolAssert(BaseAssert[bool]):
    def is_true(self) -> BoolAssert:
        __tracebackhide__ = True
        if self.actual is not True:
            self.fail_with_message("expected value to be true, but got %s", self.actual)
        return self

    def is_false(self) -> BoolAssert:
        __tracebackhide__ = True
        if self.actual is not False:
            self.fail_with_message("expected value to be false, but got %s", self.actual)
        return self

    def is_equal_to(self, expected: bool) -> BoolAssert:
        __tracebackhide__ = True
        if self.actual != expected:
            self.fail_with_message("expected value to be %s, but got %s", expected, self.actual)
        return self

    def is_not_equal_to(self, expected: bool) -> BoolAssert:
        __tracebackhide__ = True
        if self.actual == expected:
            self.fail_with_message("expected value not to be %s, but got %s", expected, self.actual)
        return self
