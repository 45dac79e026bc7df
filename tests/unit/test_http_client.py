"""
Unit tests for bridge/http/client.py
"""
import threading
import time
from unittest.mock import MagicMock, patch

import pytest
import requests
from urllib3.exceptions import ReadTimeoutError

from bridge.http.client import HttpClient, HttpError, HttpResponse, HttpTimeoutError


def _streamed_response(chunks, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.headers = {"content-type": "application/json"}
    response.url = "https://api.example.com/"
    response.iter_content.return_value = iter(chunks)
    return response


class TestHttpResponse:
    def test_ok_range(self):
        assert HttpResponse(status_code=200, content=b"").ok
        assert HttpResponse(status_code=299, content=b"").ok
        assert not HttpResponse(status_code=300, content=b"").ok

    def test_text_decodes_utf8(self):
        response = HttpResponse(status_code=200, content="héllo".encode("utf-8"))

        assert response.text == "héllo"

    def test_text_uses_declared_charset(self):
        response = HttpResponse(
            status_code=200,
            content="café".encode("latin-1"),
            encoding="ISO-8859-1",
        )

        assert response.text == "café"

    def test_text_unknown_charset_falls_back_to_utf8(self):
        response = HttpResponse(
            status_code=200,
            content="héllo".encode("utf-8"),
            encoding="x-no-such-charset",
        )

        assert response.text == "héllo"


class TestHttpClientRequest:
    def test_str_body_sent_as_utf8(self):
        with patch("requests.Session.request", return_value=_streamed_response([b"ok"])) as mock_request:
            response = HttpClient().post("https://api.example.com", data="✓")

        assert response.content == b"ok"
        kwargs = mock_request.call_args.kwargs
        assert kwargs["data"] == "✓".encode("utf-8")
        assert kwargs["method"] == "POST"
        assert kwargs["stream"] is True
        assert kwargs["timeout"] == 30.0

    def test_body_joined_from_chunks(self):
        with patch("requests.Session.request", return_value=_streamed_response([b"ab", b"cd"])):
            response = HttpClient().post("https://api.example.com", data=b"")

        assert response.content == b"abcd"
        assert response.status_code == 200

    def test_headers_merged_with_defaults(self):
        client = HttpClient(default_headers={"Accept": "application/json"})
        with patch("requests.Session.request", return_value=_streamed_response([])) as mock_request:
            client.post("https://api.example.com", headers={"X-Auth": "abc"})

        assert mock_request.call_args.kwargs["headers"] == {
            "Accept": "application/json",
            "X-Auth": "abc",
        }

    def test_requests_timeout_raises_timeout_error(self):
        with patch("requests.Session.request", side_effect=requests.ReadTimeout("read timed out")):
            with pytest.raises(HttpTimeoutError) as exc_info:
                HttpClient(timeout=3).post("https://api.example.com")

        assert exc_info.value.timeout == 3

    def test_body_read_timeout_raises_timeout_error(self):
        response = _streamed_response([])
        response.iter_content.side_effect = requests.ConnectionError(
            ReadTimeoutError(None, "https://api.example.com", "Read timed out.")
        )
        with patch("requests.Session.request", return_value=response):
            with pytest.raises(HttpTimeoutError):
                HttpClient().post("https://api.example.com")

        response.close.assert_called_once()

    def test_deadline_bounds_blocked_exchange(self):
        release = threading.Event()

        def _blocked(**kwargs):
            release.wait(5)
            return _streamed_response([b"late"])

        started = time.monotonic()
        try:
            with patch("requests.Session.request", side_effect=_blocked):
                with pytest.raises(HttpTimeoutError) as exc_info:
                    HttpClient(timeout=0.2).post("https://api.example.com")
        finally:
            release.set()

        assert time.monotonic() - started < 1.0
        assert exc_info.value.timeout == 0.2

    def test_body_read_stops_once_cancelled(self):
        response = _streamed_response([b"a", b"b"])
        cancelled = threading.Event()
        cancelled.set()

        with pytest.raises(HttpTimeoutError):
            HttpClient._read_body(response, cancelled, 1.0)

    def test_declared_charset_carried_on_response(self):
        streamed = _streamed_response(["café".encode("latin-1")])
        streamed.headers = {"content-type": "text/plain; charset=iso-8859-1"}
        with patch("requests.Session.request", return_value=streamed):
            response = HttpClient().post("https://api.example.com")

        assert response.encoding == "iso-8859-1"
        assert response.text == "café"

    def test_connection_error_raises_http_error(self):
        with patch("requests.Session.request", side_effect=requests.ConnectionError("refused")):
            with pytest.raises(HttpError) as exc_info:
                HttpClient().post("https://api.example.com")

        assert not isinstance(exc_info.value, HttpTimeoutError)
        assert str(exc_info.value) == "refused"

    def test_proxy_applied_to_session(self):
        client = HttpClient(proxy="http://proxy:3128")
        session = client._new_session()

        assert session.proxies == {"http": "http://proxy:3128", "https": "http://proxy:3128"}
        session.close()
