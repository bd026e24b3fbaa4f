from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import AssertgConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "assertg.yaml"

_active_config: AssertgConfig | None = None


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}") from exc
    except OSError as exc:
        raise FileNotFoundError(f"Unable to read {path}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping in {path}")
    return data


def load_config(path: Path) -> AssertgConfig:
    config_path = path
    if config_path.is_dir():
        config_path = config_path / CONFIG_FILENAME
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    data = _load_yaml(config_path)
    try:
        config = AssertgConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid assertg config in {config_path}: {exc}") from exc
    logger.debug("Loaded assertg config from %s: %s", config_path, config.model_dump())
    return config


def get_config() -> AssertgConfig:
    global _active_config
    if _active_config is None:
        _active_config = AssertgConfig()
    return _active_config


def set_config(config: AssertgConfig) -> None:
    global _active_config
    _active_config = config


def reset_config() -> None:
    global _active_config
    _active_config = None
