from __future__ import annotations

from typing import Callable

from assertg.config.models import AssertgConfig

from .representation import (
    Representation,
    binary_representation,
    default_representation,
    hexadecimal_representation,
    representation_for,
)

Supplier = Callable[[], str]


def _format(text: str, args: tuple[object, ...]) -> str:
    if args:
        return text % args
    return text


class AssertionInfo:
    """Context of one assertion chain, consulted only when a check fails."""

    def __init__(self, representation: Representation = default_representation) -> None:
        self.description = ""
        self.overriding_message = ""
        self.overriding_message_supplier: Supplier | None = None
        self.representation = representation

    @classmethod
    def from_config(cls, config: AssertgConfig) -> "AssertionInfo":
        return cls(representation=representation_for(config.representation))

    def with_description(self, description: str, *args: object) -> None:
        self.description = _format(description, args)

    def has_description(self) -> bool:
        return self.description != ""

    def with_overriding_message(self, message: str, *args: object) -> None:
        self.overriding_message = _format(message, args)

    def with_overriding_message_supplier(self, supplier: Supplier) -> None:
        self.overriding_message_supplier = supplier

    def resolve_overriding_message(self) -> str:
        # The supplier is lazy and wins over the static message.
        if self.overriding_message_supplier is not None:
            return self.overriding_message_supplier()
        return self.overriding_message

    def using_representation(self, representation: Representation) -> None:
        self.representation = representation

    def using_hexadecimal_representation(self) -> None:
        self.representation = hexadecimal_representation

    def using_binary_representation(self) -> None:
        self.representation = binary_representation
