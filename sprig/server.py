"""
HTTP front end for Sprig.

Protocol: JSON over HTTP.
- Request:  POST /submit-code  {"code": "(+ 1 2)"}
- Response: {"output": "3", "success": true}
            {"output": "<diagnostic>", "success": false}

Every request is evaluated against a freshly constructed environment; nothing
is shared between requests, so concurrent requests on the threaded server
never touch the same cells.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from sprig.errors import SprigError
from sprig.interpreter import Interpreter
from sprig.printer import print_cell

logger = logging.getLogger(__name__)

HOST = "127.0.0.1"
PORT = 8081
SUBMIT_PATH = "/submit-code"
CORS_ALLOW_ORIGIN = "*"


@dataclass
class SubmitCodeResponse:
    output: str
    success: bool


def run_code(code: str, trace_logger: logging.Logger | None = None) -> SubmitCodeResponse:
    """Evaluate `code` in an isolated environment and describe the outcome.

    This is the only place where an evaluation error becomes a value.
    """
    try:
        result = Interpreter(trace_logger).eval(code)
        return SubmitCodeResponse(output=print_cell(result), success=True)
    except (SprigError, RecursionError) as ex:
        logger.info("evaluation failed: %s: %s", type(ex).__name__, ex)
        return SubmitCodeResponse(output=f"{type(ex).__name__}: {ex}", success=False)


class SubmitCodeHandler(BaseHTTPRequestHandler):
    server_version = "sprig"

    def do_POST(self):
        if self.path != SUBMIT_PATH:
            self._send_json(HTTPStatus.NOT_FOUND, {"error": f"Unknown path: {self.path}"})
            return
        try:
            length = int(self.headers.get("Content-Length") or 0)
            if length < 0:
                raise ValueError(f"negative Content-Length {length}")
            req = json.loads(self.rfile.read(length).decode("utf-8"))
            code = req["code"]
            if not isinstance(code, str):
                raise TypeError("code must be a string")
        except (ValueError, KeyError, TypeError) as ex:
            self._send_json(HTTPStatus.BAD_REQUEST, {"error": f"Invalid request: {ex}"})
            return
        response = run_code(code, getattr(self.server, "trace_logger", None))
        self._send_json(HTTPStatus.OK, asdict(response))

    def do_OPTIONS(self):
        # CORS preflight, so browser front ends on other origins can submit code
        self.send_response(HTTPStatus.NO_CONTENT)
        self._send_cors_headers()
        self.send_header("Content-Length", "0")
        self.end_headers()

    def _send_cors_headers(self) -> None:
        self.send_header("Access-Control-Allow-Origin", CORS_ALLOW_ORIGIN)
        self.send_header("Access-Control-Allow-Methods", "POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")

    def _send_json(self, status: HTTPStatus, payload: dict) -> None:
        data = (json.dumps(payload) + "\n").encode("utf-8")
        self.send_response(status)
        self._send_cors_headers()
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)


class SprigServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, host: str = HOST, port: int = PORT, trace_logger: logging.Logger | None = None):
        super().__init__((host, port), SubmitCodeHandler)
        self.trace_logger = trace_logger


def serve(host: str = HOST, port: int = PORT, trace_logger: logging.Logger | None = None):
    with SprigServer(host, port, trace_logger) as httpd:
        logger.info("Server started on %s:%d", *httpd.server_address[:2])
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            logger.info("Server stopping")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    serve()
