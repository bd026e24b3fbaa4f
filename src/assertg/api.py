from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from assertg.assertions import (
    BaseAssert,
    BoolAssert,
    ErrorAssert,
    FloatAssert,
    IntegerAssert,
    SequenceAssert,
    StringAssert,
)
from assertg.config.models import AssertgConfig
from assertg.reporting.sink import TestingT


def that_bool(sink: TestingT, actual: bool, *, config: AssertgConfig | None = None) -> BoolAssert:
    return BoolAssert(sink, actual, config=config)


def that_int(sink: TestingT, actual: int, *, config: AssertgConfig | None = None) -> IntegerAssert:
    return IntegerAssert(sink, actual, config=config)


def that_float(sink: TestingT, actual: float, *, config: AssertgConfig | None = None) -> FloatAssert:
    return FloatAssert(sink, actual, config=config)


def that_string(sink: TestingT, actual: str, *, config: AssertgConfig | None = None) -> StringAssert:
    return StringAssert(sink, actual, config=config)


def that_sequence(
    sink: TestingT, actual: Iterable[Any] | None, *, config: AssertgConfig | None = None
) -> SequenceAssert:
    # Lists and tuples are checked as-is; other iterables are materialized once.
    if actual is not None and not isinstance(actual, (list, tuple)):
        actual = list(actual)
    return SequenceAssert(sink, actual, config=config)


def that_error(
    sink: TestingT, actual: BaseException | None, *, config: AssertgConfig | None = None
) -> ErrorAssert:
    return ErrorAssert(sink, actual, config=config)


def that(sink: TestingT, actual: Any, *, config: AssertgConfig | None = None) -> BaseAssert[Any]:
    """Pick the assertion builder matching the type of ``actual``."""
    if isinstance(actual, bool):
        return that_bool(sink, actual, config=config)
    if isinstance(actual, int):
        return that_int(sink, actual, config=config)
    if isinstance(actual, float):
        return that_float(sink, actual, config=config)
    if isinstance(actual, str):
        return that_string(sink, actual, config=config)
    if isinstance(actual, BaseException):
        return that_error(sink, actual, config=config)
    # Sets have no stable order; pass sorted(actual) for order-sensitive checks.
    if isinstance(actual, Sequence) and not isinstance(actual, (bytes, bytearray)):
        return that_sequence(sink, actual, config=config)
    raise TypeError(f"No assertions available for values of type {type(actual).__name__}")
