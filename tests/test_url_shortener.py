from __future__ import annotations

import httpx

from utils.url_shortener import ISGD_ENDPOINT, TINYURL_ENDPOINT, shorten_url


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_tinyurl_success():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, text="https://tinyurl.com/abc\n")

    with _client(handler) as client:
        result = shorten_url("https://example.com/a b", "tinyurl", client=client)

    assert result.success
    assert result.short_url == "https://tinyurl.com/abc"
    assert seen["url"].startswith(TINYURL_ENDPOINT)
    assert seen["params"] == {"url": "https://example.com/a b"}


def test_isgd_sends_simple_format():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, text="https://is.gd/xyz")

    with _client(handler) as client:
        result = shorten_url("https://example.com", "isgd", client=client)

    assert result.short_url == "https://is.gd/xyz"
    assert seen["params"] == {"format": "simple", "url": "https://example.com"}
    assert ISGD_ENDPOINT.startswith("https://is.gd")


def test_http_error_becomes_failed_result():
    with _client(lambda request: httpx.Response(500, text="boom")) as client:
        result = shorten_url("https://example.com", "tinyurl", client=client)
    assert not result.success
    assert result.error == "TinyURL API error"


def test_network_error_becomes_failed_result():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline", request=request)

    with _client(handler) as client:
        result = shorten_url("https://example.com", "isgd", client=client)
    assert not result.success
    assert result.error == "is.gd API error"


def test_non_url_response_is_rejected():
    with _client(lambda request: httpx.Response(200, text="Error: invalid")) as client:
        result = shorten_url("https://example.com", "isgd", client=client)
    assert result.error == "Invalid response from is.gd"


def test_invalid_input_and_unknown_provider_never_hit_network():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with _client(handler) as client:
        assert shorten_url("example.com", client=client).error == "Invalid URL"
        assert shorten_url("https://example.com", "bitly", client=client).error == "Unknown provider"
