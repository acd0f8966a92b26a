"""Health check endpoint."""

from http.server import BaseHTTPRequestHandler
import json

from src.utils.errors import ErrorCode
from src.utils.logging_config import LoggingConfig

SERVICE_NAME = "brief-management-api"

LoggingConfig.setup_logging()


def health_payload() -> dict:
    """Service status plus the error codes clients may receive."""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "error_codes": [code.value for code in ErrorCode],
    }


class handler(BaseHTTPRequestHandler):
    """Health check handler for serverless deployment."""

    def do_GET(self):
        self.send_response(200)
        self.send_header('Content-Type', 'application/json')
        self.end_headers()
        self.wfile.write(json.dumps(health_payload()).encode('utf-8'))

    def do_POST(self):
        """Same as GET."""
        self.do_GET()
