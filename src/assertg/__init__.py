"""Fluent assertions that report failures to a test framework callback."""

from .api import that, that_bool, that_error, that_float, that_int, that_sequence, that_string
from .assertions import (
    BaseAssert,
    BoolAssert,
    ErrorAssert,
    FloatAssert,
    IntegerAssert,
    SequenceAssert,
    StringAssert,
)
from .config import AssertgConfig, get_config, load_config, reset_config, set_config
from .reporting import (
    AssertionInfo,
    RecordingSink,
    Representation,
    binary_representation,
    default_representation,
    hexadecimal_representation,
)

__all__ = [
    "AssertgConfig",
    "AssertionInfo",
    "BaseAssert",
    "BoolAssert",
    "ErrorAssert",
    "FloatAssert",
    "IntegerAssert",
    "RecordingSink",
    "Representation",
    "SequenceAssert",
    "StringAssert",
    "binary_representation",
    "default_representation",
    "get_config",
    "hexadecimal_representation",
    "load_config",
    "reset_config",
    "set_config",
    "that",
    "that_bool",
    "that_error",
    "that_float",
    "that_int",
    "that_sequence",
    "that_string",
]
