"""
jishopack: a small client for the Jisho.org word search API.

Typical usage:
    from jishopack import JishoPack
    records = JishoPack().lookup("道具", common=True)
"""

from .client import JishoPack
from .core import (
    DictionaryRecord,
    InvalidArgument,
    JishoPackError,
    LookupRequest,
    RemoteRequestFailed,
    Tag,
    UnexpectedShape,
    UnsupportedOperation,
)
from .parse import normalize
from .query import build_query, normalize_jlpt

__version__ = "0.1.0"

__all__ = [
    "JishoPack",
    "DictionaryRecord",
    "LookupRequest",
    "Tag",
    "JishoPackError",
    "InvalidArgument",
    "RemoteRequestFailed",
    "UnexpectedShape",
    "UnsupportedOperation",
    "build_query",
    "normalize",
    "normalize_jlpt",
]
