from .base import BaseAssert
from .booleans import BoolAssert
from .errors import ErrorAssert
from .numbers import FloatAssert, IntegerAssert, NumberAssert
from .sequences import SequenceAssert
from .strings import StringAssert

__all__ = [
    "BaseAssert",
    "BoolAssert",
    "ErrorAssert",
    "FloatAssert",
    "IntegerAssert",
    "NumberAssert",
    "SequenceAssert",
    "StringAssert",
]
