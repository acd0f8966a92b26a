"""Tests for health check endpoint."""

import pytest
import json
from io import BytesIO
from unittest.mock import Mock
from http.server import BaseHTTPRequestHandler
from api.health import handler, health_payload


class MockSocket:
    def __init__(self, request_line: bytes):
        self.request_line = request_line

    def makefile(self, *args, **kwargs):
        return BytesIO(self.request_line)

    def sendall(self, data):
        pass

    def close(self):
        pass


def _call(method: str) -> tuple:
    h = handler(MockSocket(f"{method} /api/health HTTP/1.1\r\n\r\n".encode()), ("127.0.0.1", 8000), None)
    h.wfile = BytesIO()
    h.send_response = Mock()
    h.send_header = Mock()
    h.end_headers = Mock()

    getattr(h, f"do_{method}")()

    h.wfile.seek(0)
    return h, json.loads(h.wfile.read().decode('utf-8'))


@pytest.mark.unit
def test_health_handler_class():
    """Test that handler is a BaseHTTPRequestHandler subclass."""
    assert issubclass(handler, BaseHTTPRequestHandler)


@pytest.mark.unit
def test_health_get_request():
    """GET returns status and the error code catalog."""
    h, body = _call("GET")

    assert h.send_response.call_args[0][0] == 200
    h.send_header.assert_called_with('Content-Type', 'application/json')
    assert body["status"] == "ok"
    assert body["service"] == "brief-management-api"
    assert body["error_codes"] == [
        "PERMISSION_DENIED",
        "INVALID_REFERENCE",
        "DUPLICATE_RECORD",
        "INTERNAL_ERROR",
    ]


@pytest.mark.unit
def test_health_post_request():
    """POST behaves like GET."""
    _, body = _call("POST")

    assert body == health_payload()
