from __future__ import annotations

"""Small async HTTP client on top of ``requests``.

Calls run in a worker thread so the event loop stays free while a backend
is slow to answer. Every request is bounded by ``timeout``: the blocking
call gets it as its socket timeout and the awaiting side races it with
``asyncio.wait_for``, so a hung backend can never stall the caller past
the deadline.
"""

import asyncio
import json
import re
from dataclasses import dataclass
from typing import Any, Dict

import requests

from llm_settings.exceptions import HttpError, NetworkError, RequestTimeoutError

_ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)


@dataclass(frozen=True)
class HttpResponse:
    status: int
    data: Any


class HttpClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 15.0,
        headers: Dict[str, str] | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.headers = dict(headers or {})

    async def get(self, url: str, body: Any = None) -> HttpResponse:
        return await self.request("GET", url, body=body)

    async def post(self, url: str, body: Any = None) -> HttpResponse:
        return await self.request("POST", url, body=body)

    async def request(
        self,
        method: str,
        url: str,
        headers: Dict[str, str] | None = None,
        body: Any = None,
    ) -> HttpResponse:
        full_url = self.build_url(url)
        merged_headers = {**self.headers, **(headers or {})}
        data = serialize_body(body, merged_headers)
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self._send, method, full_url, merged_headers, data),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as exc:
            raise RequestTimeoutError(full_url, self.timeout) from exc

    def _send(self, method: str, url: str, headers: Dict[str, str], data: Any) -> HttpResponse:
        try:
            resp = requests.request(method, url, headers=headers, data=data, timeout=self.timeout)
        except requests.exceptions.Timeout as exc:
            raise RequestTimeoutError(url, self.timeout) from exc
        except requests.exceptions.RequestException as exc:
            raise NetworkError(f"{method} {url} failed: {exc}", url=url) from exc
        except ValueError as exc:
            # urllib3 rejects some hosts (e.g. overlong labels) with a bare ValueError
            raise NetworkError(f"{method} {url} failed: {exc}", url=url) from exc

        payload = read_response_body(resp)
        if not resp.ok:
            raise HttpError(
                f"{method} {url} returned {resp.status_code} {resp.reason or ''}".strip(),
                status=resp.status_code,
                url=url,
                data=payload,
            )
        return HttpResponse(status=resp.status_code, data=payload)

    def build_url(self, url: str) -> str:
        if not self.base_url or _ABSOLUTE_URL.match(url):
            return url
        slash = "" if self.base_url.endswith("/") or url.startswith("/") else "/"
        return self.base_url + slash + url


def serialize_body(body: Any, headers: Dict[str, str]) -> Any:
    """Encode ``body`` for the wire according to the request content type.

    JSON is the default: with no ``Content-Type`` header (or a JSON one)
    non-string bodies are dumped and the header is filled in. Any other
    content type passes the body through untouched.
    """
    if body is None:
        return None
    content_type = _header(headers, "Content-Type").lower()
    if not content_type or "application/json" in content_type:
        if not content_type:
            headers["Content-Type"] = "application/json"
        if isinstance(body, str):
            return body
        return json.dumps(body)
    return body


def read_response_body(resp: requests.Response) -> Any:
    content_type = (resp.headers.get("Content-Type") or "").lower()
    if "application/json" in content_type:
        try:
            return json.loads(resp.text)
        except ValueError:
            return resp.text
    if "text/" in content_type:
        return resp.text
    return resp.content


def _header(headers: Dict[str, str], name: str) -> str:
    for key, value in headers.items():
        if key.lower() == name.lower():
            return value
    return ""
