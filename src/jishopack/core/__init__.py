"""
Core exports for jishopack.
"""

from .contracts import DictionaryRecord, LookupRequest, Tag
from .errors import (
    InvalidArgument,
    JishoPackError,
    RemoteRequestFailed,
    UnexpectedShape,
    UnsupportedOperation,
)
from .interfaces import DictionaryLookup, JLPTInput, Transport

__all__ = [
    "Tag",
    "LookupRequest",
    "DictionaryRecord",
    "JishoPackError",
    "InvalidArgument",
    "RemoteRequestFailed",
    "UnexpectedShape",
    "UnsupportedOperation",
    "DictionaryLookup",
    "JLPTInput",
    "Transport",
]
