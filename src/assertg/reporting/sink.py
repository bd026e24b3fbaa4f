from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TestingT(Protocol):
    """The host test framework's failure callback."""

    def error(self, message_format: str, *args: object) -> None:
        ...


@runtime_checkable
class SupportsHelper(Protocol):
    def helper(self) -> None:
        ...


@runtime_checkable
class SupportsName(Protocol):
    def name(self) -> str:
        ...


def mark_helper(sink: object) -> None:
    # runtime_checkable only checks that the attribute exists.
    if isinstance(sink, SupportsHelper) and callable(sink.helper):
        sink.helper()


def sink_test_name(sink: object) -> str:
    if isinstance(sink, SupportsName) and callable(sink.name):
        return sink.name() or ""
    return ""


class RecordingSink:
    """Keeps every reported failure in memory instead of failing a test."""

    __test__ = False

    def __init__(self, test_name: str = "") -> None:
        self.test_name = test_name
        self.messages: list[str] = []

    def error(self, message_format: str, *args: object) -> None:
        self.messages.append(message_format % args if args else message_format)

    def name(self) -> str:
        return self.test_name

    @property
    def failed(self) -> bool:
        return bool(self.messages)

    @property
    def last_message(self) -> str:
        return self.messages[-1] if self.messages else ""

    def clear(self) -> None:
        self.messages.clear()
