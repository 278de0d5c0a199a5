"""Access logging for incoming requests."""

from __future__ import annotations

import time

from flask import Flask, Response, g, request


def init_request_logging(app: Flask) -> None:
    """Log one line per request: method, path, status, size and duration."""

    @app.before_request
    def _start_timer() -> None:
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response: Response) -> Response:
        started = getattr(g, "request_started", None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        length = response.calculate_content_length()
        app.logger.info(
            "%s %s %s %s - %.1f ms",
            request.method,
            request.path,
            response.status_code,
            "-" if length is None else length,
            elapsed_ms,
        )
        return response
