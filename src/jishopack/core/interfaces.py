from __future__ import annotations

from typing import Any, List, Mapping, Optional, Protocol, Union

from .contracts import DictionaryRecord

JLPTInput = Union[int, str]


class Response(Protocol):
    status_code: int
    text: str

    def json(self) -> Any: ...


class Transport(Protocol):
    """
    Anything that can issue a GET the way requests.Session does.
    """

    def get(
        self,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> Response: ...


class DictionaryLookup(Protocol):
    """
    Unified lookup surface. Implementations must provide these methods.
    """

    def lookup(
        self, term: str, common: bool = False
    ) -> List[DictionaryRecord]: ...

    def lookup_common(self, term: str) -> List[DictionaryRecord]: ...

    def lookup_prefix(
        self, term: str, common: bool = False
    ) -> List[DictionaryRecord]: ...

    def lookup_suffix(
        self, term: str, common: bool = False
    ) -> List[DictionaryRecord]: ...

    def lookup_by_jlpt(
        self, term: str, level: JLPTInput
    ) -> List[DictionaryRecord]: ...

    def lookup_wasei(
        self, term: str, common: bool = False
    ) -> List[DictionaryRecord]: ...
