"""Health check endpoint."""

from flask import Blueprint, current_app, jsonify

bp = Blueprint("health", __name__)


@bp.get("/health")
def health() -> tuple[dict[str, object], int]:
    """Return the service health status."""
    return jsonify({"ok": True, "service": current_app.config["SERVICE_NAME"]}), 200
