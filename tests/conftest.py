from __future__ import annotations

from typing import Iterator

import pytest

from assertg.config.loader import reset_config

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def _reset_assertg_config() -> Iterator[None]:
    yield
    reset_config()
