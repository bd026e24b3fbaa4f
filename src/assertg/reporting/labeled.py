from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LabeledContent:
    label: str
    content: str


def _indent_continuation(content: str, indent: int) -> str:
    lines = content.split("\n")
    if len(lines) == 1:
        return content
    padding = " " * indent
    return "\n".join([lines[0], *(f"{padding}{line}" if line else line for line in lines[1:])])


def labeled_output(*contents: LabeledContent) -> str:
    """Render ``label: content`` lines with the labels right-aligned.

    The label column is as wide as the longest label, so the colons line up::

              Error: expected value to be zero, but got <42>
        Description: hobbit
    """
    if not contents:
        return ""
    width = max(len(item.label) for item in contents)
    rendered = []
    for item in contents:
        content = _indent_continuation(item.content, width + 2)
        rendered.append(f"{item.label:>{width}}: {content}\n")
    return "".join(rendered)
