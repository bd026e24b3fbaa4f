from __future__ import annotations

from typing import Callable

import pytest

from assertg import ErrorAssert, RecordingSink, that_error

CAUSE = ValueError("cause")


def _wrapped() -> RuntimeError:
    try:
        try:
            raise CAUSE
        except ValueError as exc:
            raise RuntimeError("failed because of: cause") from exc
    except RuntimeError as exc:
        return exc


def _implicitly_chained() -> KeyError:
    try:
        try:
            raise CAUSE
        except ValueError:
            raise KeyError("missing")
    except KeyError as exc:
        return exc


@pytest.mark.parametrize(
    "check, actual, fails, message",
    [
        (lambda a: a.is_none(), None, False, ""),
        (lambda a: a.is_none(), ValueError("message"), True, "expected error to be None, but got <message>"),
        (lambda a: a.is_not_none(), None, True, "expected error not to be None, but got <None>"),
        (lambda a: a.is_in_chain(CAUSE), CAUSE, False, ""),
        (lambda a: a.is_in_chain(CAUSE), _wrapped(), False, ""),
        (lambda a: a.is_in_chain(CAUSE), _implicitly_chained(), False, ""),
        (lambda a: a.is_in_chain(ValueError), _wrapped(), False, ""),
        (lambda a: a.is_in_chain(CAUSE), ValueError("another"), True, "expected error to have <cause> in its error chain, but got <another>"),
        (lambda a: a.is_not_in_chain(CAUSE), ValueError("another"), False, ""),
        (lambda a: a.is_not_in_chain(CAUSE), _wrapped(), True, "expected error not to have <cause> in its error chain"),
        (lambda a: a.is_instance_of(LookupError), KeyError("k"), False, ""),
        (lambda a: a.is_instance_of(KeyError), ValueError("v"), True, "expected error to be an instance of <KeyError>, but got <ValueError>"),
        (lambda a: a.has_message("no such file"), OSError("no such file"), False, ""),
        (lambda a: a.has_message("file"), OSError("no such file"), True, "expected error to have message <file>, but got <no such file>"),
        (lambda a: a.has_message("file"), None, True, "expected error to have message <file>, but error was <None>"),
        (lambda a: a.does_not_have_message("no such file"), OSError("no such file"), True, "expected error not to have message <no such file>"),
        (lambda a: a.has_message_containing("frodo", "merry"), ValueError("invalid users frodo, merry, pippin"), False, ""),
        (lambda a: a.has_message_containing("frodo", "sam"), ValueError("invalid users frodo, merry, pippin"), True, "expected error to have message containing <['frodo', 'sam']>"),
        (lambda a: a.has_message_containing_any_of("frodo", "sam"), ValueError("invalid users frodo"), False, ""),
        (lambda a: a.has_message_containing_any_of("sam"), ValueError("invalid users frodo"), True, "expected error to have message containing any of <['sam']>"),
        (lambda a: a.has_message_not_containing("234"), ValueError("wrong amount 123"), False, ""),
        (lambda a: a.has_message_not_containing("123"), ValueError("wrong amount 123"), True, "expected error not to have message containing <123>, but got <wrong amount 123>"),
        (lambda a: a.has_message_starting_with("wrong amount"), ValueError("wrong amount 123"), False, ""),
        (lambda a: a.has_message_starting_with("right"), ValueError("wrong amount 123"), True, "expected error to have message starting with <right>"),
        (lambda a: a.has_message_ending_with("123"), ValueError("wrong amount 123"), False, ""),
        (lambda a: a.has_message_ending_with("wrong amount"), ValueError("wrong amount 123"), True, "expected error to have message ending with <wrong amount>"),
    ],
)
def test_error_checks(
    check: Callable[[ErrorAssert], ErrorAssert], actual: BaseException | None, fails: bool, message: str
) -> None:
    sink = RecordingSink()
    check(that_error(sink, actual))
    assert sink.failed is fails
    if fails:
        assert f"Error: {message}" in sink.last_message


def test_message_checks_on_none_report_once() -> None:
    sink = RecordingSink()
    that_error(sink, None).has_message_starting_with("x")
    assert len(sink.messages) == 1


def test_raise_from_none_ends_the_chain() -> None:
    try:
        try:
            raise CAUSE
        except ValueError:
            raise KeyError("missing") from None
    except KeyError as exc:
        suppressed = exc

    sink = RecordingSink()
    that_error(sink, suppressed).is_not_in_chain(CAUSE).is_not_in_chain(ValueError)

    assert not sink.failed
    that_error(sink, suppressed).is_in_chain(CAUSE)
    assert len(sink.messages) == 1
