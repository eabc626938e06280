"""HTTP transport, pagination options and errors for Kong's Admin API."""

from __future__ import annotations

import dataclasses
import json
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

T = TypeVar("T")

DEFAULT_BASE_URL = "http://localhost:8001"
PAGE_SIZE = 1000

Sender = Callable[[str, str, Mapping[str, str], "bytes | None"], "tuple[int, bytes]"]


class APIError(Exception):
    """An error response returned by Kong."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message

    @property
    def not_found(self) -> bool:
        """True if Kong answered 404."""
        return self.code == 404

    def __str__(self) -> str:
        return f"HTTP status {self.code} (message: {self.message!r})"


@dataclass
class ListOpt:
    """Pagination and tag filtering for list requests."""

    size: int = 0
    offset: str = ""
    tags: list[str] = field(default_factory=list)
    match_all_tags: bool = False

    def to_params(self) -> dict[str, str]:
        """Return the query parameters these options stand for."""
        params: dict[str, str] = {}
        if self.size > 0:
            params["size"] = str(self.size)
        if self.offset:
            params["offset"] = self.offset
        if self.tags:
            separator = "/" if self.match_all_tags else ","
            params["tags"] = separator.join(self.tags)
        return params


class Transport:
    """Sends JSON requests to a Kong Admin API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        headers: Mapping[str, str] | None = None,
        send: Sender | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.headers = dict(headers or {})
        self.timeout = timeout
        self._send = send if send is not None else self._urllib_send

    def _urllib_send(
        self, method: str, url: str, headers: Mapping[str, str], body: bytes | None
    ) -> tuple[int, bytes]:
        req = urllib.request.Request(url, data=body, headers=dict(headers), method=method)
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                return resp.status, resp.read()
        except urllib.error.HTTPError as err:
            return err.code, err.read()

    def _url(self, path: str, params: Mapping[str, str] | None) -> str:
        url = self.base_url + path
        if params:
            url += ("&" if "?" in path else "?") + urllib.parse.urlencode(params)
        return url

    def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> Any:
        """Send a request and return the decoded JSON reply, or None if empty."""
        headers = {"Accept": "application/json", **self.headers}
        payload = None
        if body is not None:
            headers["Content-Type"] = "application/json"
            payload = json.dumps(body).encode("utf-8")
        status, content = self._send(method, self._url(path, params), headers, payload)
        if status >= 400:
            raise APIError(status, _error_message(content))
        if not content.strip():
            return None
        return json.loads(content)

    def list(
        self, path: str, opt: ListOpt | None = None
    ) -> tuple[list[dict[str, Any]], ListOpt | None]:
        """Fetch one page of a collection and the options for the next page."""
        params = opt.to_params() if opt is not None else None
        response = self.request("GET", path, params) or {}
        data = list(response.get("data") or [])
        offset = response.get("offset")
        if response.get("next") and offset:
            next_opt = dataclasses.replace(opt or ListOpt(), offset=str(offset))
            if opt is not None:
                next_opt.tags = list(opt.tags)
            return data, next_opt
        return data, None


def _error_message(content: bytes) -> str:
    text = content.decode("utf-8", errors="replace")
    try:
        decoded = json.loads(text)
    except ValueError:
        return text
    if isinstance(decoded, dict) and "message" in decoded:
        return str(decoded["message"])
    return text


def list_all(
    list_page: Callable[[ListOpt], tuple[list[T], ListOpt | None]],
) -> list[T]:
    """Follow pages from ``list_page`` until none is left; return every item."""
    items: list[T] = []
    opt: ListOpt | None = ListOpt(size=PAGE_SIZE)
    while opt is not None:
        page, opt = list_page(opt)
        items.extend(page)
    return items