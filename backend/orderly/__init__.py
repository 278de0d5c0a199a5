"""Application factory for the Orderly embedded app backend."""
from __future__ import annotations

from http import HTTPStatus

from flask import Flask, jsonify
from werkzeug.exceptions import TooManyRequests
from werkzeug.middleware.proxy_fix import ProxyFix

from .config import Config
from .extensions import cors, limiter
from .store import EXTENSION_KEY, SettingsStore


def create_app(
    config_class: type[Config] = Config,
    settings_store: SettingsStore | None = None,
) -> Flask:
    """Create and configure the Flask application instance."""
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(str(app.config.get("LOG_LEVEL") or "INFO").upper())

    proxy_count = int(app.config.get("TRUSTED_PROXY_COUNT") or 0)
    if proxy_count > 0:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=proxy_count, x_proto=proxy_count)

    if settings_store is None:
        settings_store = SettingsStore(
            reset_missing_flags=bool(app.config.get("RESET_MISSING_NOTIFICATION_FLAGS")),
            logger=app.logger,
        )
    app.extensions[EXTENSION_KEY] = settings_store

    allowed_origins = [
        origin.strip()
        for origin in (app.config.get("CORS_ALLOWED_ORIGINS") or "").split(",")
        if origin.strip()
    ]
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": allowed_origins}},
        allow_headers=["Content-Type"],
    )

    limiter.init_app(app)

    from .api.auth import bp as auth_bp
    from .api.health import bp as health_bp
    from .api.pages import bp as pages_bp
    from .api.settings import bp as settings_bp
    from .utils.request_logging import init_request_logging
    from .utils.security import init_security_headers

    app.register_blueprint(pages_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(settings_bp, url_prefix="/api")
    app.register_blueprint(auth_bp, url_prefix="/auth")

    init_security_headers(app)
    init_request_logging(app)
    _register_error_handlers(app)

    return app


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(TooManyRequests)
    def _rate_limited(exc: TooManyRequests):
        return jsonify({"ok": False, "error": "rate limit exceeded"}), HTTPStatus.TOO_MANY_REQUESTS


__all__ = ["Config", "SettingsStore", "create_app"]
