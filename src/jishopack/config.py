"""
Global configuration for jishopack.
Only infrastructure knobs live here (URL, headers, timeout, retries, debug).
No query- or record-specific hardcoding.
"""

from __future__ import annotations

import os
from typing import Final, List, Optional

from dotenv import load_dotenv

load_dotenv()


def _truthy(s: Optional[str]) -> bool:
    return str(s).strip().lower() in {"1", "true", "yes", "on"}


# -----------------------------------------------------------------------------
# Endpoint / request template
# -----------------------------------------------------------------------------
# The keyword is appended verbatim, so the URL ends with "keyword=".
JISHO_API_URL: Final[str] = os.getenv(
    "JISHOPACK_API_URL", "https://jisho.org/api/v1/search/words?keyword="
)
USER_AGENT: Final[str] = os.getenv(
    "JISHOPACK_USER_AGENT", "jishopack (python-requests)"
)

# -----------------------------------------------------------------------------
# HTTP / retry
# -----------------------------------------------------------------------------
DEFAULT_TIMEOUT_S: Final[int] = int(os.getenv("JISHOPACK_TIMEOUT_S", "30"))

# A failed lookup fails once; raise this only if you know you want retries.
RETRY_TOTAL: Final[int] = int(os.getenv("JISHOPACK_RETRY_TOTAL", "0"))
RETRY_STATUS_FORCELIST: Final[List[int]] = [429, 500, 502, 503, 504]
RETRY_BACKOFF_FACTOR: Final[float] = float(
    os.getenv("JISHOPACK_RETRY_BACKOFF", "1.0")
)
RETRY_ALLOWED_METHODS: Final[List[str]] = ["GET"]

# -----------------------------------------------------------------------------
# Diagnostics
# -----------------------------------------------------------------------------
DEBUG: Final[bool] = _truthy(os.getenv("JISHOPACK_DEBUG"))


def get_env(
    name: str, *, required: bool = False, default: Optional[str] = None
) -> Optional[str]:
    """Small helper to fetch env vars with an optional 'required' flag."""
    val = os.getenv(name, default)
    if required and not val:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return val


# -----------------------------------------------------------------------------
# Public exports
# -----------------------------------------------------------------------------
__all__ = [
    # endpoint
    "JISHO_API_URL",
    "USER_AGENT",
    # http/retry
    "DEFAULT_TIMEOUT_S",
    "RETRY_TOTAL",
    "RETRY_STATUS_FORCELIST",
    "RETRY_BACKOFF_FACTOR",
    "RETRY_ALLOWED_METHODS",
    # diagnostics
    "DEBUG",
    # env helpers
    "get_env",
]
