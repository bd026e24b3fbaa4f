from __future__ import annotations

import pytest

from assertg.reporting.representation import (
    binary_representation,
    default_representation,
    hexadecimal_representation,
    representation_for,
)


def test_default_representation_wraps_str() -> None:
    assert default_representation(42) == "<42>"
    assert default_representation("Frodo") == "<Frodo>"
    assert default_representation(None) == "<None>"


@pytest.mark.parametrize("value, expected", [(42, "<2A>"), (255, "<FF>"), (-42, "<-2A>"), ([42, 255], "<[2A FF]>")])
def test_hexadecimal_representation(value: object, expected: str) -> None:
    assert hexadecimal_representation(value) == expected


def test_hexadecimal_representation_of_text_uses_utf8_bytes() -> None:
    assert hexadecimal_representation("hi") == "<6869>"
    assert hexadecimal_representation(b"\x01\xff") == "<01FF>"


def test_binary_representation() -> None:
    assert binary_representation(42) == "<101010>"
    assert binary_representation(True) == "<True>"
    assert binary_representation(1.5) == "<1.5>"


def test_representation_for_presets() -> None:
    assert representation_for("default") is default_representation
    assert representation_for("hexadecimal") is hexadecimal_representation
    assert representation_for("binary") is binary_representation
    with pytest.raises(ValueError):
        representation_for("octal")
