import pytest

from jishopack.config import JISHO_API_URL
from jishopack.core.errors import RemoteRequestFailed, UnexpectedShape
from jishopack.http import RequestTemplate, default_headers, fetch_json, make_session


def test_make_session_headers_and_adapter():
    s = make_session(user_agent="ua-test-123")
    assert s.headers.get("User-Agent") == "ua-test-123"
    assert s.headers.get("Accept") == "application/json"
    assert s.headers.get("Content-Type") == "application/json"
    assert "https://" in s.adapters


def test_make_session_does_not_retry_by_default():
    s = make_session()
    retry = s.get_adapter("https://jisho.org").max_retries
    assert retry.total == 0


def test_request_template_defaults():
    t = RequestTemplate()
    assert t.base_url == JISHO_API_URL
    assert t.headers == default_headers()
    assert t.timeout > 0


def test_fetch_json_single_get(fake_session):
    sess = fake_session()
    body = fetch_json(sess, ["#common", "道具"])
    assert body["data"][0]["slug"] == "道具"
    assert len(sess.calls) == 1
    call = sess.calls[0]
    assert call["url"] == JISHO_API_URL + "%23common %E9%81%93%E5%85%B7"
    assert call["headers"]["Accept"] == "application/json"


def test_fetch_json_uses_template(fake_session):
    sess = fake_session()
    t = RequestTemplate(
        base_url="https://example.test/?keyword=",
        headers={"User-Agent": "x"},
        timeout=5,
    )
    fetch_json(sess, ["犬"], template=t)
    call = sess.calls[0]
    assert call["url"] == "https://example.test/?keyword=%E7%8A%AC"
    assert call["headers"] == {"User-Agent": "x"}
    assert call["timeout"] == 5


def test_fetch_json_http_error_carries_status_and_query(fake_session):
    sess = fake_session(status=500, body={"meta": {"status": 500}})
    with pytest.raises(RemoteRequestFailed) as ei:
        fetch_json(sess, ["#common", "道具"])
    err = ei.value
    assert err.status == 500
    assert err.query == "#common 道具"
    assert "500" in str(err)
    assert "'#common 道具'" in str(err)
    assert len(sess.calls) == 1


def test_fetch_json_rejects_non_json_body(fake_session):
    sess = fake_session(body=ValueError("boom"), text="<html>")
    with pytest.raises(UnexpectedShape):
        fetch_json(sess, ["犬"])


def test_fetch_json_debug_writes_to_stderr(fake_session, capsys):
    sess = fake_session(status=404, body={}, text="not here")
    with pytest.raises(RemoteRequestFailed):
        fetch_json(sess, ["犬"], debug=True)
    err = capsys.readouterr().err
    assert "[jisho GET] url=" in err
    assert "status=404" in err
    assert "not here" in err
