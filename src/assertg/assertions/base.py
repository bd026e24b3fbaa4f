from __future__ import annotations

from typing import Any, Generic, TypeVar

from assertg.config.loader import get_config
from assertg.config.models import AssertgConfig
from assertg.reporting.info import AssertionInfo, Supplier
from assertg.reporting.report import fail
from assertg.reporting.representation import Representation
from assertg.reporting.sink import TestingT, mark_helper

A = TypeVar("A", bound="BaseAssert[Any]")
T = TypeVar("T")


class BaseAssert(Generic[T]):
    """Shared configuration and failure reporting for every assertion builder.

    Configuration calls only affect the checks that follow them. Each failing
    check reports once through the sink and the chain keeps going.
    """

    def __init__(
        self,
        sink: TestingT,
        actual: T,
        *,
        config: AssertgConfig | None = None,
    ) -> None:
        mark_helper(sink)
        self.sink = sink
        self.actual = actual
        self.config = config or get_config()
        self.info = AssertionInfo.from_config(self.config)

    def described_as(self: A, description: str, *args: object) -> A:
        self.info.with_description(description, *args)
        return self

    as_ = described_as

    def with_fail_message(self: A, message: str, *args: object) -> A:
        self.info.with_overriding_message(message, *args)
        return self

    def with_fail_message_supplier(self: A, supplier: Supplier) -> A:
        """Build the overriding message lazily, only if a check fails."""
        self.info.with_overriding_message_supplier(supplier)
        return self

    def with_representation(self: A, representation: Representation) -> A:
        self.info.using_representation(representation)
        return self

    def in_hexadecimal(self: A) -> A:
        self.info.using_hexadecimal_representation()
        return self

    def in_binary(self: A) -> A:
        self.info.using_binary_representation()
        return self

    def fail_with_message(self, template: str, *args: Any) -> None:
        __tracebackhide__ = True
        fail(self.sink, self.info, template, *args, config=self.config)
