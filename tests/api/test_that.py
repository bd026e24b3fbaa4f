from __future__ import annotations

from typing import Any

import pytest

from assertg import (
    BoolAssert,
    ErrorAssert,
    FloatAssert,
    IntegerAssert,
    RecordingSink,
    SequenceAssert,
    StringAssert,
    that,
)


@pytest.mark.parametrize(
    "actual, builder",
    [
        (True, BoolAssert),
        (42, IntegerAssert),
        (4.2, FloatAssert),
        ("Frodo", StringAssert),
        (ValueError("boom"), ErrorAssert),
        (["a"], SequenceAssert),
        (("a",), SequenceAssert),
        ({"a"}, SequenceAssert),
    ],
)
def test_that_dispatches_on_type(actual: Any, builder: type) -> None:
    assert type(that(RecordingSink(), actual)) is builder


@pytest.mark.parametrize("actual", [None, {"k": "v"}, b"bytes", {"vilya", "nenya"}, frozenset({1}), object()])
def test_that_rejects_unsupported_types(actual: Any) -> None:
    with pytest.raises(TypeError):
        that(RecordingSink(), actual)


def test_that_marks_the_sink_as_helper() -> None:
    class HelperSink(RecordingSink):
        helper_calls = 0

        def helper(self) -> None:
            self.helper_calls += 1

    sink = HelperSink()
    that(sink, 1).is_zero()

    assert sink.helper_calls == 2
    assert len(sink.messages) == 1
