import json
import urllib.parse
from dataclasses import dataclass

import pytest

from kongclient.api import PAGE_SIZE, APIError, ListOpt, Transport, list_all


@dataclass
class Call:
    method: str
    url: str
    headers: dict
    body: bytes | None

    @property
    def path(self):
        return urllib.parse.urlsplit(self.url).path

    @property
    def query(self):
        return urllib.parse.parse_qs(urllib.parse.urlsplit(self.url).query)


class Recorder:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def __call__(self, method, url, headers, body):
        self.calls.append(Call(method, url, dict(headers), body))
        status, payload = self.responses.pop(0)
        if not isinstance(payload, bytes):
            payload = json.dumps(payload).encode()
        return status, payload


def test_request_sends_json_body_and_decodes_reply():
    rec = Recorder((201, {"id": "x", "username": "foo"}))
    transport = Transport(send=rec)
    result = transport.request("POST", "/consumers", body={"username": "foo"})
    assert result == {"id": "x", "username": "foo"}
    call = rec.calls[0]
    assert call.method == "POST"
    assert call.path == "/consumers"
    assert json.loads(call.body) == {"username": "foo"}
    assert call.headers["Content-Type"] == "application/json"


def test_request_without_body_sends_nothing():
    rec = Recorder((200, {"id": "x"}))
    Transport(send=rec).request("GET", "/consumers/x")
    assert rec.calls[0].body is None
    assert "Content-Type" not in rec.calls[0].headers


def test_params_appended_to_existing_query():
    rec = Recorder((200, {}))
    Transport(send=rec).request(
        "GET", "/admins/bob?generate_register_url=true", {"size": "2"}
    )
    query = rec.calls[0].query
    assert query["generate_register_url"] == ["true"]
    assert query["size"] == ["2"]


def test_base_url_trailing_slash_is_stripped():
    rec = Recorder((200, {}))
    Transport("http://kong.example.com:8001/", send=rec).request("GET", "/x")
    assert rec.calls[0].url == "http://kong.example.com:8001/x"


def test_extra_headers_are_sent():
    rec = Recorder((200, {}))
    Transport(headers={"Kong-Admin-Token": "token"}, send=rec).request("GET", "/")
    assert rec.calls[0].headers["Kong-Admin-Token"] == "token"


def test_error_status_raises_api_error_with_message():
    rec = Recorder((404, {"message": "Not found"}))
    with pytest.raises(APIError) as info:
        Transport(send=rec).request("GET", "/consumers/nobody")
    assert info.value.code == 404
    assert info.value.message == "Not found"
    assert info.value.not_found
    assert "Not found" in str(info.value)


def test_error_without_json_keeps_raw_text():
    rec = Recorder((500, b"boom"))
    with pytest.raises(APIError) as info:
        Transport(send=rec).request("GET", "/")
    assert info.value.message == "boom"
    assert not info.value.not_found


def test_empty_reply_returns_none():
    rec = Recorder((204, b""))
    assert Transport(send=rec).request("DELETE", "/consumers/x") is None


def test_list_returns_next_options():
    rec = Recorder(
        (200, {"data": [{"id": "a"}], "offset": "abc", "next": "/consumers?offset=abc"})
    )
    opt = ListOpt(size=1, tags=["tag1"])
    items, next_opt = Transport(send=rec).list("/consumers", opt)
    assert items == [{"id": "a"}]
    assert next_opt is not None
    assert next_opt.offset == "abc"
    assert next_opt.size == 1
    assert next_opt.tags == ["tag1"]
    assert rec.calls[0].query["size"] == ["1"]


def test_list_last_page_has_no_next():
    rec = Recorder((200, {"data": [{"id": "a"}, {"id": "b"}], "next": None}))
    items, next_opt = Transport(send=rec).list("/consumers", ListOpt(size=2))
    assert len(items) == 2
    assert next_opt is None


def test_list_without_options_sends_no_query():
    rec = Recorder((200, {"data": []}))
    items, next_opt = Transport(send=rec).list("/consumers", None)
    assert items == []
    assert next_opt is None
    assert rec.calls[0].query == {}


@pytest.mark.parametrize(
    "match_all, expected", [(False, "tag1,tag2"), (True, "tag1/tag2")]
)
def test_tags_are_joined(match_all, expected):
    opt = ListOpt(tags=["tag1", "tag2"], match_all_tags=match_all)
    assert opt.to_params() == {"tags": expected}


def test_offset_and_size_in_params():
    params = ListOpt(size=3, offset="next-page").to_params()
    assert params == {"size": "3", "offset": "next-page"}


def test_list_all_follows_pages():
    seen = []

    def list_page(opt):
        seen.append(opt)
        if not opt.offset:
            return [1, 2], ListOpt(size=opt.size, offset="second")
        return [3], None

    assert list_all(list_page) == [1, 2, 3]
    assert seen[0].size == PAGE_SIZE
    assert seen[1].offset == "second"


def test_list_all_propagates_errors():
    def list_page(opt):
        raise APIError(500, "down")

    with pytest.raises(APIError):
        list_all(list_page)