from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import (
    DEFAULT_TIMEOUT_S,
    JISHO_API_URL,
    RETRY_ALLOWED_METHODS,
    RETRY_BACKOFF_FACTOR,
    RETRY_STATUS_FORCELIST,
    RETRY_TOTAL,
    USER_AGENT,
)
from .core.errors import RemoteRequestFailed, UnexpectedShape
from .core.interfaces import Transport
from .query import build_url, query_string


def default_headers(user_agent: Optional[str] = None) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "User-Agent": user_agent or USER_AGENT,
    }


@dataclass(frozen=True)
class RequestTemplate:
    """
    Per-request settings handed to the HTTP step. Build once, reuse freely.
    """

    base_url: str = JISHO_API_URL
    headers: Mapping[str, str] = field(default_factory=default_headers)
    timeout: float = DEFAULT_TIMEOUT_S


def make_session(
    user_agent: Optional[str] = None, retries: Optional[int] = None
) -> requests.Session:
    s = requests.Session()
    retry = Retry(
        total=RETRY_TOTAL if retries is None else retries,
        backoff_factor=RETRY_BACKOFF_FACTOR,
        status_forcelist=RETRY_STATUS_FORCELIST,
        allowed_methods=RETRY_ALLOWED_METHODS,
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers.update(default_headers(user_agent))
    return s


def fetch_json(
    session: Transport,
    blocks: Sequence[str],
    *,
    template: Optional[RequestTemplate] = None,
    debug: bool = False,
) -> Any:
    """
    Issue exactly one GET for `blocks` and return the decoded JSON body.
    Raises RemoteRequestFailed on any status other than 200.
    """
    template = template or RequestTemplate()
    query = query_string(blocks)
    url = build_url(blocks, base_url=template.base_url)
    if debug:
        print(f"[jisho GET] url={url}", file=sys.stderr)

    r = session.get(url, headers=dict(template.headers), timeout=template.timeout)

    if debug:
        print(f"[jisho GET] query='{query}' status={r.status_code}", file=sys.stderr)
    # Jisho answers 200 for almost anything, empty result sets included.
    if r.status_code != 200:
        if debug:
            print(f"[jisho GET] body={(r.text or '')[:400]}", file=sys.stderr)
        raise RemoteRequestFailed(r.status_code, query)
    try:
        return r.json()
    except ValueError as e:
        raise UnexpectedShape(
            f"Response for query '{query}' is not JSON: {(r.text or '')[:200]}"
        ) from e
