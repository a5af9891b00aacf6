import json
import os
from typing import Any, Dict, List, Optional

import pytest

# Load .env if present, but don't fail if it's missing.
try:
    from dotenv import load_dotenv

    load_dotenv()
except Exception:
    pass

# ---- mode & env flags -------------------------------------------------------


def _truthy(s: str | None) -> bool:
    return str(s).strip().lower() in {"1", "true", "yes", "on"}


LIVE = _truthy(os.getenv("JISHOPACK_LIVE_TESTS"))


# =============================================================================
# MOCK HELPERS (used when JISHOPACK_LIVE_TESTS is NOT set)
# =============================================================================


class FakeResponse:
    def __init__(self, status: int = 200, json_obj: Any = None, text: Optional[str] = None):
        self.status_code = status
        self._json = json_obj
        if text is None:
            text = "" if isinstance(json_obj, Exception) else json.dumps(json_obj, ensure_ascii=False)
        self.text = text

    def json(self) -> Any:
        if isinstance(self._json, Exception):
            raise self._json
        return self._json


class FakeSession:
    """
    Stands in for requests.Session. Records every GET and replays `response`.
    """

    def __init__(self, response: FakeResponse):
        self.response = response
        self.calls: List[Dict[str, Any]] = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        return self.response


def dougu_entry() -> Dict[str, Any]:
    return {
        "slug": "道具",
        "is_common": True,
        "tags": ["wanikani8"],
        "jlpt": ["jlpt-n4"],
        "japanese": [{"word": "道具", "reading": "どうぐ"}],
        "senses": [
            {
                "english_definitions": ["tool", "implement"],
                "parts_of_speech": ["Noun"],
            }
        ],
    }


@pytest.fixture
def dougu() -> Dict[str, Any]:
    return dougu_entry()


@pytest.fixture
def fake_session():
    def _make(status: int = 200, body: Any = None, text: Optional[str] = None) -> FakeSession:
        if body is None and status == 200:
            body = {"meta": {"status": 200}, "data": [dougu_entry()]}
        return FakeSession(FakeResponse(status=status, json_obj=body, text=text))

    return _make


@pytest.fixture(scope="session")
def live_client():
    """
    Real client against jisho.org; only created in LIVE mode.
    """
    if not LIVE:
        pytest.skip("live_client skipped (offline mode)")
    from jishopack.client import JishoPack

    return JishoPack()


# =============================================================================
# PYTEST MARKER HANDLING
# =============================================================================


def pytest_runtest_setup(item: pytest.Item) -> None:
    # If a test is marked live but we're not in LIVE mode, skip it proactively.
    if "live" in item.keywords and not LIVE:
        pytest.skip("live test skipped (JISHOPACK_LIVE_TESTS not enabled)")
