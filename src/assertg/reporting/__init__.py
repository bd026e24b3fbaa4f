from .formatter import DescriptionFormatter, MessageFormatter, default_description_formatter
from .info import AssertionInfo, Supplier
from .labeled import LabeledContent, labeled_output
from .report import build_report, fail
from .representation import (
    Representation,
    binary_representation,
    default_representation,
    hexadecimal_representation,
    representation_for,
)
from .sink import RecordingSink, SupportsHelper, SupportsName, TestingT, mark_helper, sink_test_name

__all__ = [
    "AssertionInfo",
    "DescriptionFormatter",
    "LabeledContent",
    "MessageFormatter",
    "RecordingSink",
    "Representation",
    "Supplier",
    "SupportsHelper",
    "SupportsName",
    "TestingT",
    "binary_representation",
    "build_report",
    "default_description_formatter",
    "default_representation",
    "fail",
    "hexadecimal_representation",
    "labeled_output",
    "mark_helper",
    "representation_for",
    "sink_test_name",
]
