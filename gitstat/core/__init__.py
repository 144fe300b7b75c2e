"""Core types shared across gitstat."""

from .errors import ErrorCode
from .result import Err, Ok, Result
from .symbols import Symbols

__all__ = [
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    # symbols
    "Symbols",
]
