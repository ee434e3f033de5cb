"""HTTP service exposing order cleaning."""

from __future__ import annotations

import argparse
import json
import signal
import sys
from http import HTTPStatus
from socketserver import ThreadingMixIn
from typing import Any
from wsgiref.simple_server import WSGIRequestHandler, WSGIServer, make_server

from flask import Flask, Response, request

from ordercleaner.cleaning import CleanOrderUsecase
from ordercleaner.config import Config, read, timeout
from ordercleaner.models import ErrorDetail, FieldValidationError, Message, parse_order_request
from ordercleaner.responses import (
    get_error_code,
    get_message,
    get_status_code,
    handle_bad_request,
    handle_error,
    handle_success,
)


class Handler:
    """Request handler for the clean-orders endpoint."""

    def __init__(self, usecase: CleanOrderUsecase | None = None) -> None:
        self.usecase = usecase or CleanOrderUsecase()

    def clean_orders(self, payload: Any) -> tuple[int, dict[str, Any]]:
        """Decode, validate and clean an order request; return status and body."""
        try:
            order_request = parse_order_request(payload)
        except (FieldValidationError, ValueError) as exc:
            return handle_bad_request(exc)

        try:
            result = self.usecase.clean_orders(order_request)
        except Exception as exc:  # every failure becomes an error response
            detail = ErrorDetail(error_code=get_error_code(exc), message=get_message(exc))
            return handle_error(get_status_code(exc), Message(error=detail))

        return handle_success(HTTPStatus.OK.value, result.cleaned_orders or None)


def _json_response(status: int, body: Any) -> Response:
    text = json.dumps(body, ensure_ascii=False, separators=(",", ":"))
    return Response(text, status=status, mimetype="application/json")


def create_app(config: Config | None = None) -> Flask:
    """Build the web application with its routes."""
    app = Flask(__name__)
    app.config["APP_CONFIG"] = config or Config()
    handler = Handler()

    @app.get("/ping")
    def ping() -> Response:
        return _json_response(HTTPStatus.OK.value, {"message": "pong"})

    @app.post("/v1/clean-orders")
    def clean_orders() -> Response:
        return _json_response(*handler.clean_orders(request.get_data()))

    return app


class _ThreadingWSGIServer(ThreadingMixIn, WSGIServer):
    block_on_close = True


def main(argv: list[str] | None = None) -> int:
    """Run the HTTP server until interrupted."""
    parser = argparse.ArgumentParser(prog="ordercleaner", description="Order cleaning HTTP service.")
    parser.add_argument("--env-file", default=".env", help="settings file to read")
    args = parser.parse_args(argv)

    config = read(args.env_file)

    class _RequestHandler(WSGIRequestHandler):
        timeout = (timeout() * 2).total_seconds() or None

    print("Starting the server on port...", config.app_port, file=sys.stderr)
    try:
        server = make_server(
            "",
            int(config.app_port),
            create_app(config),
            server_class=_ThreadingWSGIServer,
            handler_class=_RequestHandler,
        )
    except (ValueError, OSError):
        print("Failed to gracefully shutdown", file=sys.stderr)
        return 1

    signal.signal(signal.SIGTERM, signal.default_int_handler)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
    return 0