# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json
import socket

import httpx
import pytest

from availwatch.config import REQUEST_TIMEOUT_SECONDS, MonitorSettings
from availwatch.errors import ErrorCategory, categorize_exception, error_category_to_reason
from availwatch.http import create_default_http_client
from availwatch.http.adapters import StubHttpClient
from availwatch.http.httpx_client import HttpxClient
from availwatch.http.models import HttpRequest, HttpResponse


def _client_with(handler, settings: MonitorSettings | None = None) -> HttpxClient:
    settings = settings or MonitorSettings(user_agent="UA/1.0")
    return HttpxClient(settings, client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_httpx_client_sends_method_headers_and_json():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["method"] = request.method
        captured["headers"] = request.headers
        captured["body"] = json.loads(request.content)
        captured["timeout"] = request.extensions.get("timeout")
        return httpx.Response(201, text="created")

    client = _client_with(handler)
    response = client.request(
        HttpRequest(
            url="https://example.com/items",
            method="POST",
            headers={"X-Test": "1"},
            json={"foo": "bar"},
            timeout=REQUEST_TIMEOUT_SECONDS,
        )
    )

    assert response.ok is True
    assert response.status_code == 201
    assert response.meta["body_bytes_read"] == len("created")
    assert captured["method"] == "POST"
    assert captured["headers"]["x-test"] == "1"
    assert captured["headers"]["user-agent"] == "UA/1.0"
    assert captured["headers"]["content-type"] == "application/json"
    assert captured["body"] == {"foo": "bar"}
    assert captured["timeout"]["connect"] == REQUEST_TIMEOUT_SECONDS


def test_httpx_client_keeps_configured_user_agent():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["ua"] = request.headers["user-agent"]
        return httpx.Response(200)

    _client_with(handler).request(HttpRequest(url="https://example.com", headers={"user-agent": "Custom/2"}))
    assert seen["ua"] == "Custom/2"


def test_httpx_client_reports_error_status_as_transport_success():
    client = _client_with(lambda request: httpx.Response(503))
    response = client.request(HttpRequest(url="https://example.com"))
    assert response.ok is True
    assert response.status_code == 503


def test_httpx_client_truncates_large_bodies():
    settings = MonitorSettings(max_body_bytes=4)
    client = _client_with(lambda request: httpx.Response(200, content=b"0123456789"), settings)
    response = client.request(HttpRequest(url="https://example.com"))
    assert response.ok is True
    assert response.meta["body_truncated"] is True


@pytest.mark.parametrize(
    ("exc", "category"),
    [
        (httpx.ConnectError("refused"), ErrorCategory.CONNECTION_ERROR),
        (httpx.ReadTimeout("slow"), ErrorCategory.TIMEOUT),
        (httpx.RemoteProtocolError("garbage"), ErrorCategory.PROTOCOL_ERROR),
    ],
)
def test_httpx_client_converts_exceptions(exc, category):
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc

    response = _client_with(handler).request(HttpRequest(url="https://example.com"))
    assert response.ok is False
    assert response.status_code is None
    assert response.error_type == type(exc).__name__
    assert response.meta["error_category"] == category.value


def test_httpx_client_close_closes_underlying_client():
    inner = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    HttpxClient(MonitorSettings(), client=inner).close()
    assert inner.is_closed


def test_create_default_http_client_uses_settings():
    settings = MonitorSettings(user_agent="Factory/1.0", verify_ssl=False)
    client = create_default_http_client(settings)
    try:
        assert isinstance(client, HttpxClient)
        assert client.settings is settings
    finally:
        client.close()


def test_categorize_exception_follows_cause_chain():
    try:
        try:
            raise socket.gaierror(-2, "Name or service not known")
        except socket.gaierror as inner:
            raise httpx.ConnectError("dns failed") from inner
    except httpx.ConnectError as exc:
        assert categorize_exception(exc) is ErrorCategory.DNS_ERROR

    assert categorize_exception(ConnectionRefusedError()) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(TimeoutError()) is ErrorCategory.TIMEOUT
    assert categorize_exception(RuntimeError("boom")) is ErrorCategory.UNKNOWN_ERROR


def test_error_category_reasons():
    assert error_category_to_reason(ErrorCategory.TIMEOUT) == "Request timed out"
    assert error_category_to_reason(ErrorCategory.NONE) == ""
    assert error_category_to_reason(None) == ""


def test_stub_client_replays_sequences():
    client = StubHttpClient(
        {"https://example.com": [HttpResponse(ok=True, status_code=200), HttpResponse(ok=False)]}
    )
    request = HttpRequest(url="https://example.com")
    assert client.request(request).ok is True
    assert client.request(request).ok is False
    assert client.request(request).ok is False
    assert client.request(HttpRequest(url="https://other.example")).error_message == "No stubbed response configured"
    assert len(client.requests) == 4
    client.close()
    assert client.closed is True


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TrickleStream(httpx.SyncByteStream):
    """Yields one byte per simulated second."""

    def __init__(self, clock: FakeClock, size: int) -> None:
        self.clock = clock
        self.size = size
        self.sent = 0
        self.closed = False

    def __iter__(self):
        for _ in range(self.size):
            self.clock.now += 1.0
            self.sent += 1
            yield b"x"

    def close(self) -> None:
        self.closed = True


def test_httpx_client_enforces_total_deadline_on_trickling_body():
    clock = FakeClock()
    stream = TrickleStream(clock, size=8)

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"Content-Length": "8"}, stream=stream)

    client = HttpxClient(
        MonitorSettings(),
        client=httpx.Client(transport=httpx.MockTransport(handler)),
        clock=clock,
    )
    response = client.request(HttpRequest(url="https://example.com/slow", timeout=REQUEST_TIMEOUT_SECONDS))

    assert response.ok is False
    assert response.status_code is None
    assert response.error_type == "ReadTimeout"
    assert response.meta["error_category"] == ErrorCategory.TIMEOUT.value
    assert stream.sent == 5
    assert clock.now <= REQUEST_TIMEOUT_SECONDS
    assert stream.closed is True


def test_httpx_client_deadline_covers_time_before_body():
    clock = FakeClock()

    def handler(request: httpx.Request) -> httpx.Response:
        clock.now += 6.0
        return httpx.Response(200, text="late")

    client = HttpxClient(MonitorSettings(), client=httpx.Client(transport=httpx.MockTransport(handler)), clock=clock)
    response = client.request(HttpRequest(url="https://example.com/"))

    assert response.ok is False
    assert response.meta["error_category"] == ErrorCategory.TIMEOUT.value


def _redirecting_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/start":
        return httpx.Response(302, headers={"Location": "/final"})
    return httpx.Response(200, text="final")


def test_httpx_client_honors_redirect_setting():
    no_follow = _client_with(_redirecting_handler, MonitorSettings(allow_redirects=False))
    response = no_follow.request(HttpRequest(url="https://example.com/start"))
    assert response.ok is True
    assert response.status_code == 302

    follow = _client_with(_redirecting_handler, MonitorSettings(allow_redirects=True))
    response = follow.request(HttpRequest(url="https://example.com/start"))
    assert response.status_code == 200
    assert response.url == "https://example.com/final"


def test_request_level_redirect_flag_overrides_setting():
    client = _client_with(_redirecting_handler, MonitorSettings(allow_redirects=False))
    response = client.request(HttpRequest(url="https://example.com/start", allow_redirects=True))
    assert response.status_code == 200


def test_redirect_is_down_when_not_followed():
    from availwatch.models import EndpointSpec
    from availwatch.probe import EndpointProber

    client = _client_with(_redirecting_handler, MonitorSettings(allow_redirects=False))
    result = EndpointProber(client).probe(EndpointSpec(url="https://example.com/start"))
    assert result.up is False
    assert result.status_code == 302
