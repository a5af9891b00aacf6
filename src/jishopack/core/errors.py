from __future__ import annotations

from typing import Any


class JishoPackError(Exception):
    """Base class for every error raised by jishopack."""


class InvalidArgument(JishoPackError, ValueError):
    """A lookup input failed validation before any request was sent."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class RemoteRequestFailed(JishoPackError, RuntimeError):
    """The Jisho API answered with something other than HTTP 200."""

    def __init__(self, status: int, query: str) -> None:
        super().__init__(
            f"HTTP {status}: Couldn't get results for query '{query}'."
            " Check if API server is available and the query correct."
        )
        self.status = status
        self.query = query


class UnexpectedShape(JishoPackError, ValueError):
    """The response body does not carry the fields a record needs."""


class UnsupportedOperation(JishoPackError, NotImplementedError):
    """The lookup exists on jisho.org but not on its JSON API."""
