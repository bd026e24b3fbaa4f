"""pytest integration: soft assertions collected per test.

Failed checks are recorded while the test keeps running; the test fails once
it returns, with every report attached.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Generator

import pytest

from assertg.api import that
from assertg.assertions import BaseAssert
from assertg.config.loader import get_config, load_config, reset_config, set_config

logger = logging.getLogger(__name__)


class PytestSink:
    def __init__(self, node_id: str, *, fail_fast: bool = False) -> None:
        self.node_id = node_id
        self.fail_fast = fail_fast
        self.reports: list[str] = []

    def error(self, message_format: str, *args: object) -> None:
        __tracebackhide__ = True
        message = message_format % args if args else message_format
        if self.fail_fast:
            pytest.fail(message, pytrace=False)
        self.reports.append(message)

    def name(self) -> str:
        return self.node_id

    def summary(self) -> str:
        count = len(self.reports)
        header = f"{count} soft assertion{'s' if count != 1 else ''} failed"
        return header + "".join(self.reports)


_SINK_KEY = pytest.StashKey[PytestSink]()


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini("assertg_config", help="Path to an assertg.yaml config file", default="")


def pytest_configure(config: pytest.Config) -> None:
    config_path = config.getini("assertg_config")
    if config_path:
        path = Path(config_path)
        if not path.is_absolute():
            path = Path(config.rootpath) / path
        set_config(load_config(path))
        logger.debug("assertg config loaded from %s", path)


def pytest_unconfigure(config: pytest.Config) -> None:
    if config.getini("assertg_config"):
        reset_config()


@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item: pytest.Item) -> Generator[None, object, object]:
    result = yield
    sink = item.stash.get(_SINK_KEY, None)
    if sink is not None and sink.reports:
        pytest.fail(sink.summary(), pytrace=False)
    return result


@pytest.fixture
def assertg_sink(request: pytest.FixtureRequest) -> PytestSink:
    sink = PytestSink(request.node.nodeid, fail_fast=get_config().fail_fast)
    request.node.stash[_SINK_KEY] = sink
    return sink


@pytest.fixture
def assert_that(assertg_sink: PytestSink) -> Callable[[Any], BaseAssert[Any]]:
    def _assert_that(actual: Any) -> BaseAssert[Any]:
        __tracebackhide__ = True
        return that(assertg_sink, actual)

    return _assert_that
