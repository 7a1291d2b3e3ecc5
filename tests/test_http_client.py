"""Tests for the requests based HTTP transport."""

from unittest.mock import MagicMock

import pytest
import requests

from shop_union.core.clients.http_client import HttpResponse, RequestsHttpClient
from shop_union.core.errors import ErrorCode, TransportError


def _response(status=200, text='{"ok": true}'):
    resp = requests.Response()
    resp.status_code = status
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    resp.headers["Content-Type"] = "application/json"
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


class TestRequestsHttpClient:

    def test_form_params_sent_as_body(self, session):
        session.request.return_value = _response()
        http = RequestsHttpClient(session=session, timeout=30, connect_timeout=10)

        result = http.request("POST", "https://gw.example.com/router", {"form_params": {"a": "1"}})

        session.request.assert_called_once_with(
            method="POST",
            url="https://gw.example.com/router",
            timeout=(10, 30),
            data={"a": "1"},
        )
        assert isinstance(result, HttpResponse)
        assert result.body == '{"ok": true}'
        assert result.status == 200
        assert result.headers["Content-Type"] == "application/json"

    def test_headers_and_query_passed_through(self, session):
        session.request.return_value = _response()
        http = RequestsHttpClient(session=session, timeout=5, connect_timeout=1)
        http.request("GET", "https://example.com", {"headers": {"X-A": "1"}, "query": {"q": "x"}})
        _, kwargs = session.request.call_args
        assert kwargs["headers"] == {"X-A": "1"}
        assert kwargs["params"] == {"q": "x"}

    def test_timeouts_default_to_settings(self, session, monkeypatch):
        monkeypatch.setenv("SHOP_UNION_HTTP_TIMEOUT", "12")
        monkeypatch.setenv("SHOP_UNION_HTTP_CONNECT_TIMEOUT", "3")
        session.request.return_value = _response()
        RequestsHttpClient(session=session).request("POST", "https://example.com")
        _, kwargs = session.request.call_args
        assert kwargs["timeout"] == (3.0, 12.0)

    def test_connection_error_wrapped(self, session):
        cause = requests.exceptions.ConnectionError("connection refused")
        session.request.side_effect = cause
        http = RequestsHttpClient(session=session)

        with pytest.raises(TransportError) as exc_info:
            http.request("POST", "https://example.com")
        assert exc_info.value.code == ErrorCode.TRANSPORT_ERROR
        assert exc_info.value.__cause__ is cause

    def test_timeout_wrapped(self, session):
        session.request.side_effect = requests.exceptions.ReadTimeout("read timed out")
        with pytest.raises(TransportError, match="超时"):
            RequestsHttpClient(session=session).request("POST", "https://example.com")

    def test_http_error_status(self, session):
        session.request.return_value = _response(status=502, text="Bad Gateway")
        with pytest.raises(TransportError) as exc_info:
            RequestsHttpClient(session=session).request("POST", "https://example.com")
        assert isinstance(exc_info.value.__cause__, requests.exceptions.HTTPError)

    def test_close(self, session):
        RequestsHttpClient(session=session).close()
        session.close.assert_called_once_with()
