from __future__ import annotations

from typing import Any, Callable

from assertg.config.models import DescriptionStyle

from .representation import Representation

DescriptionFormatter = Callable[[str], str]


def default_description_formatter(description: str) -> str:
    if description:
        return f"[{description}] "
    return ""


class MessageFormatter:
    """Substitutes every argument of a ``%s`` template through a representation."""

    def __init__(
        self,
        style: DescriptionStyle = "labeled",
        description_formatter: DescriptionFormatter = default_description_formatter,
    ) -> None:
        self.style = style
        self.description_formatter = description_formatter

    def format(self, description: str, representation: Representation, template: str, *args: Any) -> str:
        message = template % self.format_args(representation, *args) if args else template
        if self.style == "inline":
            return f"{self.description_formatter(description)}{message}"
        return message

    def format_args(self, representation: Representation, *args: Any) -> tuple[str, ...]:
        return tuple(representation(arg) for arg in args)
