# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
from urllib.parse import parse_qs

import httpx
import pytest

from restwrap import new
from restwrap.config import ClientSettings
from restwrap.errors import BodyEncodingError, FormEncodingError
from restwrap.http.client import RestClient, create_client

HOST = "https://api.example/"


def _recording_client(status=200, content=b"", *, debug=False, settings=None, headers=None):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        request.read()
        seen.append(request)
        return httpx.Response(status, content=content, headers=headers)

    client = RestClient(
        HOST,
        debug,
        settings=settings or ClientSettings(),
        transport=httpx.MockTransport(handler),
    )
    return client, seen


def _form(request: httpx.Request) -> dict[str, list[str]]:
    return parse_qs(request.content.decode("ascii"), keep_blank_values=True)


VERB_CALLS = [
    ("GET", "application/json", lambda c: c.get("/r")),
    ("HEAD", "application/json", lambda c: c.head("/r")),
    ("DELETE", "application/json", lambda c: c.delete("/r")),
    ("POST", "application/x-www-form-urlencoded", lambda c: c.post("/r", None, {"a": "b"})),
    ("PUT", "application/x-www-form-urlencoded", lambda c: c.put("/r", None, {"a": "b"})),
    ("POST", "application/json", lambda c: c.post("/r")),
    ("POST", "application/json", lambda c: c.post_raw("/r", None, {"a": "b"})),
    ("PATCH", "application/json", lambda c: c.patch_raw("/r", None, {"a": "b"})),
    ("DELETE", "application/json", lambda c: c.delete_raw("/r", None, {"a": "b"})),
]


def test_get_returns_no_content_response_without_error():
    client, seen = _recording_client(status=204)
    resp = client.get("/ping", None)
    assert resp.status_code == 204
    assert resp.content == b""
    assert str(seen[0].url) == "https://api.example/ping"


@pytest.mark.parametrize("method,content_type,call", VERB_CALLS)
def test_every_verb_sends_default_headers(method, content_type, call):
    client, seen = _recording_client()
    call(client)
    assert seen[0].method == method
    assert seen[0].headers.get_list("Content-Type") == [content_type]
    assert seen[0].headers["Accept"] == "application/json"


def test_caller_headers_override_defaults():
    client, seen = _recording_client()
    client.get("/r", {"Accept": "text/csv", "content-type": "text/plain", "X-Trace": "abc"})
    headers = seen[0].headers
    assert headers["Accept"] == "text/csv"
    assert headers["Content-Type"] == "text/plain"
    assert headers["X-Trace"] == "abc"
    assert headers.get_list("Accept") == ["text/csv"]


def test_post_with_authorization_uses_bearer_token_and_form_body():
    client, seen = _recording_client()
    client.post("/login", {"Authorization": "tok"}, {"u": "a", "p": "b"})
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/login"
    assert request.headers["Authorization"] == "Bearer tok"
    assert request.headers.get_list("Authorization") == ["Bearer tok"]
    assert _form(request) == {"u": ["a"], "p": ["b"]}


def test_empty_authorization_sends_no_auth_header():
    client, seen = _recording_client()
    client.get("/r", {"Authorization": ""})
    assert "Authorization" not in seen[0].headers


def test_lowercase_authorization_is_a_literal_header():
    client, seen = _recording_client()
    client.get("/r", {"authorization": "Basic abc"})
    assert seen[0].headers["Authorization"] == "Basic abc"


def test_form_values_are_coerced_to_strings():
    client, seen = _recording_client()
    client.put("/r", None, {"n": 42, "f": 1.5, "whole": 2.0, "yes": True, "no": False, "nil": None, "s": "x y"})
    assert seen[0].method == "PUT"
    assert _form(seen[0]) == {
        "n": ["42"],
        "f": ["1.5"],
        "whole": ["2"],
        "yes": ["true"],
        "no": ["false"],
        "nil": [""],
        "s": ["x y"],
    }
    assert seen[0].headers["Content-Length"] == str(len(seen[0].content))


def test_form_with_unsupported_value_is_rejected_before_dispatch():
    client, seen = _recording_client()
    with pytest.raises(FormEncodingError):
        client.post("/r", None, {"bad": object()})
    assert seen == []


def test_post_without_data_sends_empty_body():
    client, seen = _recording_client()
    client.post("/r")
    assert seen[0].content == b""


def test_post_raw_serializes_json():
    client, seen = _recording_client()
    client.post_raw("/x", None, {"n": 1})
    request = seen[0]
    assert request.method == "POST"
    assert request.content == b'{"n":1}'
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Content-Length"] == "7"


def test_post_raw_passes_strings_and_bytes_through():
    client, seen = _recording_client()
    client.post_raw("/x", {"Content-Type": "text/plain"}, "plain text")
    client.post_raw("/x", {"Content-Type": "application/octet-stream"}, b"\x00\x01")
    assert seen[0].content == b"plain text"
    assert seen[1].content == b"\x00\x01"


def test_post_raw_form_content_type_encodes_mapping():
    client, seen = _recording_client()
    client.post_raw("/x", {"Content-Type": "application/x-www-form-urlencoded"}, {"a": 1})
    assert seen[0].content == b"a=1"


def test_post_raw_unsupported_content_type_raises():
    client, seen = _recording_client()
    with pytest.raises(BodyEncodingError):
        client.post_raw("/x", {"Content-Type": "application/xml"}, {"a": 1})
    assert seen == []


def test_patch_raw_sends_patch():
    client, seen = _recording_client()
    client.patch_raw("/items/1", {"Authorization": "t"}, [1, 2])
    assert seen[0].method == "PATCH"
    assert seen[0].content == b"[1,2]"
    assert seen[0].headers["Authorization"] == "Bearer t"


def test_patch_raw_can_fall_back_to_post():
    client, seen = _recording_client(settings=ClientSettings(patch_as_post=True))
    client.patch_raw("/items/1", None, {"a": 1})
    assert seen[0].method == "POST"


def test_delete_raw_carries_body():
    client, seen = _recording_client()
    client.delete_raw("/items", None, {"ids": [1, 2]})
    assert seen[0].method == "DELETE"
    assert seen[0].content == b'{"ids":[1,2]}'


def test_none_raw_body_sends_nothing():
    client, seen = _recording_client()
    client.delete_raw("/items", None, None)
    assert seen[0].content == b""


def test_absolute_url_bypasses_host():
    client, seen = _recording_client()
    client.get("http://other.example/path?q=1")
    assert str(seen[0].url) == "http://other.example/path?q=1"


def test_error_status_is_returned_not_raised():
    client, _ = _recording_client(status=503, content=b'{"error":"down"}')
    resp = client.get("/r")
    assert resp.status_code == 503
    assert resp.json() == {"error": "down"}


def test_transport_errors_propagate_unchanged():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = RestClient(HOST, settings=ClientSettings(), transport=httpx.MockTransport(handler))
    with pytest.raises(httpx.ConnectError, match="connection refused"):
        client.get("/r")


def test_set_timeout_applies_to_subsequent_requests():
    client, seen = _recording_client()
    assert client.timeout is None
    client.set_timeout(2.5)
    client.get("/r")
    assert client.timeout == 2.5
    assert client.http_client.timeout == httpx.Timeout(2.5)
    assert seen[0].extensions["timeout"]["read"] == 2.5


@pytest.mark.parametrize("bad", [0, -1, True, "5", None, float("inf"), float("nan"), 10**9])
def test_set_timeout_ignores_rejected_values(bad, caplog):
    client, _ = _recording_client(settings=ClientSettings(timeout=3.0))
    caplog.set_level(logging.WARNING, logger="restwrap.http.client")
    client.set_timeout(bad)
    assert client.timeout == 3.0
    assert client.http_client.timeout == httpx.Timeout(3.0)
    assert "Ignoring timeout" in caplog.text


def test_accessors_and_host_is_read_only():
    client = new(HOST, True)
    try:
        assert client.host == HOST
        assert client.debug is True
        with pytest.raises(AttributeError):
            client.host = "https://elsewhere/"
    finally:
        client.close()


def test_user_agent_comes_from_settings():
    client, seen = _recording_client(settings=ClientSettings(user_agent="UA/1.0"))
    client.get("/r")
    assert seen[0].headers["User-Agent"] == "UA/1.0"


def test_debug_trace_logs_requests_with_redacted_token(caplog):
    caplog.set_level(logging.DEBUG, logger="restwrap.trace")
    client, _ = _recording_client(status=201, debug=True)
    client.post_raw("/trace", {"Authorization": "secret-token"}, {"a": 1})
    messages = [record.getMessage() for record in caplog.records if record.name == "restwrap.trace"]
    assert any(m.startswith("request POST https://api.example/trace") for m in messages)
    assert any("-> 201" in m for m in messages)
    assert all("secret-token" not in m for m in messages)


def test_no_trace_without_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="restwrap.trace")
    client, _ = _recording_client()
    client.get("/r")
    assert not [record for record in caplog.records if record.name == "restwrap.trace"]


def test_new_request_and_execute():
    client, seen = _recording_client()
    request = client.new_request({"X-Id": "7"}).set_body({"k": "v"})
    client.execute("PUT", "/custom", request)
    assert seen[0].method == "PUT"
    assert seen[0].headers["X-Id"] == "7"
    assert seen[0].content == b'{"k":"v"}'


def test_context_manager_closes_transport():
    with create_client(HOST, settings=ClientSettings()) as client:
        assert client.http_client.is_closed is False
    assert client.http_client.is_closed is True


@pytest.mark.parametrize("verb", ["post", "put"])
def test_form_body_is_labelled_as_form(verb):
    client, seen = _recording_client()
    getattr(client, verb)("/login", None, {"u": "a"})
    assert seen[0].headers.get_list("Content-Type") == ["application/x-www-form-urlencoded"]
    assert seen[0].content == b"u=a"


def test_caller_content_type_wins_over_form_type():
    client, seen = _recording_client()
    client.post("/login", {"Content-Type": "application/json"}, {"u": "a"})
    assert seen[0].headers.get_list("Content-Type") == ["application/json"]
    assert seen[0].content == b"u=a"


def test_empty_form_keeps_json_content_type():
    client, seen = _recording_client()
    client.put("/r", None, {})
    assert seen[0].headers["Content-Type"] == "application/json"
    assert seen[0].content == b""
