import asyncio
import json
import time

import pytest
import requests

from llm_settings.exceptions import HttpError, NetworkError, RequestTimeoutError
from llm_settings.utils import http_client
from llm_settings.utils.http_client import HttpClient


def _response(status=200, body=b"", content_type="application/json", reason="OK"):
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    resp._content = body
    resp.encoding = "utf-8"
    if content_type:
        resp.headers["Content-Type"] = content_type
    return resp


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    def install(response=None, error=None, delay=0.0):
        def fake_request(method, url, headers=None, data=None, timeout=None):
            recorded.append({"method": method, "url": url, "headers": headers, "data": data, "timeout": timeout})
            if delay:
                time.sleep(delay)
            if error is not None:
                raise error
            return response

        monkeypatch.setattr(http_client.requests, "request", fake_request)
        return recorded

    return install


@pytest.mark.parametrize(
    "base, path, expected",
    [
        ("http://h:1", "/api/tags", "http://h:1/api/tags"),
        ("http://h:1/", "api/tags", "http://h:1/api/tags"),
        ("http://h:1", "api/tags", "http://h:1/api/tags"),
        ("http://h:1", "https://other/x", "https://other/x"),
        (None, "/api/tags", "/api/tags"),
    ],
)
def test_build_url(base, path, expected):
    assert HttpClient(base_url=base).build_url(path) == expected


def test_get_decodes_json(calls):
    recorded = calls(_response(body=b'{"models": []}', content_type="application/json; charset=utf-8"))
    resp = asyncio.run(HttpClient(base_url="http://h:1", timeout=3.0).get("/api/tags"))
    assert resp.status == 200
    assert resp.data == {"models": []}
    assert recorded[0]["method"] == "GET"
    assert recorded[0]["url"] == "http://h:1/api/tags"
    assert recorded[0]["timeout"] == 3.0
    assert recorded[0]["data"] is None


def test_bad_json_falls_back_to_text(calls):
    calls(_response(body=b"not json"))
    assert asyncio.run(HttpClient().get("http://h/x")).data == "not json"


def test_text_and_binary_bodies(calls):
    calls(_response(body=b"hello", content_type="text/plain"))
    assert asyncio.run(HttpClient().get("http://h/x")).data == "hello"
    calls(_response(body=b"\x00\x01", content_type="application/octet-stream"))
    assert asyncio.run(HttpClient().get("http://h/x")).data == b"\x00\x01"


def test_post_serializes_json(calls):
    recorded = calls(_response(body=b"{}"))
    asyncio.run(HttpClient(headers={"X-Trace": "1"}).post("http://h/x", {"a": 1}))
    assert json.loads(recorded[0]["data"]) == {"a": 1}
    assert recorded[0]["headers"] == {"X-Trace": "1", "Content-Type": "application/json"}


def test_non_json_content_type_passes_body_through(calls):
    recorded = calls(_response(body=b"{}"))
    client = HttpClient()
    asyncio.run(client.request("PUT", "http://h/x", headers={"Content-Type": "text/plain"}, body="raw"))
    assert recorded[0]["data"] == "raw"


def test_non_2xx_raises_http_error(calls):
    calls(_response(status=404, body=b'{"error": "nope"}', reason="Not Found"))
    with pytest.raises(HttpError) as exc_info:
        asyncio.run(HttpClient().get("http://h/x"))
    assert exc_info.value.status == 404
    assert exc_info.value.data == {"error": "nope"}
    assert isinstance(exc_info.value, NetworkError)


def test_connection_error_becomes_network_error(calls):
    calls(error=requests.exceptions.ConnectionError("refused"))
    with pytest.raises(NetworkError):
        asyncio.run(HttpClient().get("http://h/x"))


def test_requests_timeout_becomes_timeout_error(calls):
    calls(error=requests.exceptions.ReadTimeout("slow"))
    with pytest.raises(RequestTimeoutError):
        asyncio.run(HttpClient(timeout=3.0).get("http://h/x"))


def test_deadline_enforced_while_call_hangs(calls):
    calls(_response(body=b"{}"), delay=0.5)
    started = time.monotonic()
    with pytest.raises(RequestTimeoutError) as exc_info:
        asyncio.run(HttpClient(timeout=0.05).get("http://h/x"))
    assert "timed out after 50ms" in str(exc_info.value)
    assert exc_info.value.url == "http://h/x"
    assert time.monotonic() - started < 5


def test_url_rejected_by_urllib3_becomes_network_error(calls):
    calls(error=ValueError("Failed to parse: label empty or too long"))
    with pytest.raises(NetworkError):
        asyncio.run(HttpClient().get("http://h/x"))
