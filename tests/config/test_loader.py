from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from assertg.config.loader import get_config, load_config, reset_config, set_config
from assertg.config.models import AssertgConfig


def _write_yaml(path: Path, data: dict) -> None:
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


def test_load_config_from_dir(tmp_path: Path) -> None:
    _write_yaml(tmp_path / "assertg.yaml", {"representation": "hexadecimal", "description_style": "inline"})

    config = load_config(tmp_path)

    assert config.representation == "hexadecimal"
    assert config.description_style == "inline"
    assert config.include_test_name is True


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "custom.yaml"
    config_path.write_text("", encoding="utf-8")

    assert load_config(config_path) == AssertgConfig()


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_invalid_yaml_raises_value_error(tmp_path: Path) -> None:
    config_path = tmp_path / "assertg.yaml"
    config_path.write_text("representation: [unclosed", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(config_path)


def test_non_mapping_raises_value_error(tmp_path: Path) -> None:
    config_path = tmp_path / "assertg.yaml"
    config_path.write_text("- default\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Expected a YAML mapping"):
        load_config(config_path)


@pytest.mark.parametrize("data", [{"representation": "octal"}, {"unknown_key": True}])
def test_invalid_settings_are_rejected(tmp_path: Path, data: dict) -> None:
    _write_yaml(tmp_path / "assertg.yaml", data)

    with pytest.raises(ValueError, match="Invalid assertg config"):
        load_config(tmp_path)


def test_active_config_can_be_replaced_and_reset() -> None:
    assert get_config() == AssertgConfig()

    set_config(AssertgConfig(fail_fast=True))
    assert get_config().fail_fast is True

    reset_config()
    assert get_config().fail_fast is False
