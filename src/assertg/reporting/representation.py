from __future__ import annotations

from typing import Any, Callable

from assertg.config.models import RepresentationPreset

Representation = Callable[[Any], str]


def default_representation(value: Any) -> str:
    return f"<{value}>"


def _digits(value: Any, base_format: str) -> str:
    # bool is an int subclass but reads better as True/False.
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return format(value, base_format)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_digits(item, base_format) for item in value) + "]"
    if base_format == "X":
        if isinstance(value, str):
            return value.encode("utf-8").hex().upper()
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).hex().upper()
    return str(value)


def hexadecimal_representation(value: Any) -> str:
    """Render integers as uppercase hex digits, e.g. ``42`` as ``<2A>``."""
    return f"<{_digits(value, 'X')}>"


def binary_representation(value: Any) -> str:
    """Render integers as base-2 digits, e.g. ``42`` as ``<101010>``."""
    return f"<{_digits(value, 'b')}>"


_PRESETS: dict[str, Representation] = {
    "default": default_representation,
    "hexadecimal": hexadecimal_representation,
    "binary": binary_representation,
}


def representation_for(preset: RepresentationPreset | str) -> Representation:
    try:
        return _PRESETS[preset]
    except KeyError:
        raise ValueError(
            f"Unknown representation preset: {preset!r} (expected one of {', '.join(sorted(_PRESETS))})"
        ) from None
