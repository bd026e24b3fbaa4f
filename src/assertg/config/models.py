from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

RepresentationPreset = Literal["default", "hexadecimal", "binary"]
DescriptionStyle = Literal["labeled", "inline"]


class AssertgConfig(BaseModel):
    representation: RepresentationPreset = "default"
    description_style: DescriptionStyle = "labeled"
    include_test_name: bool = True
    invalid_pattern: Literal["raise", "report"] = "raise"
    fail_fast: bool = False

    model_config = ConfigDict(extra="forbid", frozen=True)
