from __future__ import annotations

from typing import Iterator, Optional

from assertg import check

from .base import BaseAssert


def _error_chain(error: BaseException | None) -> Iterator[BaseException]:
    seen: set[int] = set()
    while error is not None and id(error) not in seen:
        seen.add(id(error))
        yield error
        if error.__cause__ is not None:
            error = error.__cause__
        elif error.__suppress_context__:
            error = None
        else:
            error = error.__context__


def _matches(error: BaseException, target: BaseException | type[BaseException]) -> bool:
    if isinstance(target, type):
        return isinstance(error, target)
    return error is target or error == target


class ErrorAssert(BaseAssert[Optional[BaseException]]):
    """Checks on exceptions.

    Chain checks follow ``__cause__`` first and fall back to ``__context__``,
    so both ``raise ... from ...`` and implicit chaining are covered;
    ``raise ... from None`` ends the chain. A target
    may be an exception instance or an exception class.
    """

    def _message_or_fail(self, expectation: str, *args: object) -> str | None:
        __tracebackhide__ = True
        if self.actual is None:
            self.fail_with_message(f"expected error {expectation}, but error was %s", *args, None)
            return None
        return str(self.actual)

    def is_none(self) -> ErrorAssert:
        __tracebackhide__ = True
        if self.actual is not None:
            self.fail_with_message("expected error to be None, but got %s", self.actual)
        return self

    def is_not_none(self) -> ErrorAssert:
        __tracebackhide__ = True
        if self.actual is None:
            self.fail_with_message("expected error not to be None, but got %s", self.actual)
        return self

    def is_in_chain(self, target: BaseException | type[BaseException]) -> ErrorAssert:
        __tracebackhide__ = True
        if not any(_matches(error, target) for error in _error_chain(self.actual)):
            self.fail_with_message("expected error to have %s in its error chain, but got %s", target, self.actual)
        return self

    def is_not_in_chain(self, target: BaseException | type[BaseException]) -> ErrorAssert:
        __tracebackhide__ = True
        if any(_matches(error, target) for error in _error_chain(self.actual)):
            self.fail_with_message(
                "expected error not to have %s in its error chain, but got %s", target, self.actual
            )
        return self

    def is_instance_of(self, error_type: type[BaseException]) -> ErrorAssert:
        __tracebackhide__ = True
        if not isinstance(self.actual, error_type):
            self.fail_with_message(
                "expected error to be an instance of %s, but got %s", error_type.__name__, type(self.actual).__name__
            )
        return self

    def has_message(self, message: str) -> ErrorAssert:
        __tracebackhide__ = True
        actual = self._message_or_fail("to have message %s", message)
        if actual is not None and not check.string_is_equal(actual, message):
            self.fail_with_message("expected error to have message %s, but got %s", message, actual)
        return self

    def does_not_have_message(self, message: str) -> ErrorAssert:
        __tracebackhide__ = True
        actual = self._message_or_fail("not to have message %s", message)
        if actual is not None and check.string_is_equal(actual, message):
            self.fail_with_message("expected error not to have message %s, but got %s", message, actual)
        return self

    def has_message_containing(self, *values: str) -> ErrorAssert:
        __tracebackhide__ = True
        actual = self._message_or_fail("to have message containing %s", list(values))
        if actual is not None and not check.string_contains(actual, values):
            self.fail_with_message("expected error to have message containing %s, but got %s", list(values), actual)
        return self

    def has_message_containing_any_of(self, *values: str) -> ErrorAssert:
        __tracebackhide__ = True
        actual = self._message_or_fail("to have message containing any of %s", list(values))
        if actual is not None and not check.string_contains_any(actual, values):
            self.fail_with_message(
                "expected error to have message containing any of %s, but got %s", list(values), actual
            )
        return self

    def has_message_not_containing(self, content: str) -> ErrorAssert:
        __tracebackhide__ = True
        actual = self._message_or_fail("not to have message containing %s", content)
        if actual is not None and check.string_contains(actual, [content]):
            self.fail_with_message("expected error not to have message containing %s, but got %s", content, actual)
        return self

    def has_message_starting_with(self, prefix: str) -> ErrorAssert:
        __tracebackhide__ = True
        actual = self._message_or_fail("to have message starting with %s", prefix)
        if actual is not None and not check.string_starts_with(actual, prefix):
            self.fail_with_message("expected error to have message starting with %s, but got %s", prefix, actual)
        return self

    def has_message_ending_with(self, suffix: str) -> ErrorAssert:
        __tracebackhide__ = True
        actual = self._message_or_fail("to have message ending with %s", suffix)
        if actual is not None and not check.string_ends_with(actual, suffix):
            self.fail_with_message("expected error to have message ending with %s, but got %s", suffix, actual)
        return self
