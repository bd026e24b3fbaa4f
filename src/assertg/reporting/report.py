from __future__ import annotations

import logging
from typing import Any

from assertg.config.loader import get_config
from assertg.config.models import AssertgConfig

from .formatter import MessageFormatter
from .info import AssertionInfo
from .labeled import LabeledContent, labeled_output
from .sink import TestingT, mark_helper, sink_test_name

logger = logging.getLogger(__name__)


def build_report(
    info: AssertionInfo,
    template: str,
    *args: Any,
    test_name: str = "",
    config: AssertgConfig | None = None,
) -> str:
    config = config or get_config()
    formatter = MessageFormatter(style=config.description_style)

    overriding_message = info.resolve_overriding_message()
    if overriding_message:
        message = formatter.format(info.description, info.representation, overriding_message)
    else:
        message = formatter.format(info.description, info.representation, template, *args)

    contents = [LabeledContent("Error", message)]
    if test_name and config.include_test_name:
        contents.append(LabeledContent("Test", test_name))
    if info.has_description() and config.description_style == "labeled":
        contents.append(LabeledContent("Description", info.description))
    return labeled_output(*contents)


def fail(
    sink: TestingT,
    info: AssertionInfo,
    template: str,
    *args: Any,
    config: AssertgConfig | None = None,
) -> None:
    """Render one labeled failure report and hand it to the sink."""
    mark_helper(sink)
    report = build_report(info, template, *args, test_name=sink_test_name(sink), config=config)
    logger.debug("Reporting assertion failure: %s", report.rstrip())
    sink.error("\n%s", report)
