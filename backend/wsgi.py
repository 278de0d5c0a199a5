"""WSGI entry point for the Orderly embedded app backend."""

from __future__ import annotations

from orderly import create_app

app = create_app()

if __name__ == "__main__":  # pragma: no cover - manual runtime entrypoint
    app.run(host="0.0.0.0", port=app.config["PORT"])
