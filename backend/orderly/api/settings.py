"""REST endpoints for reading and saving per-shop settings."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, current_app, jsonify, request

from ..extensions import limiter
from ..models.settings import SettingsUpdate
from ..store import get_settings_store
from ..utils.security import single_query_value

bp = Blueprint("settings", __name__)

MISSING_SHOP_ERROR = "Missing ?shop="


def _settings_write_limit() -> str:
    return current_app.config["SETTINGS_WRITE_RATE_LIMIT"]


def _requested_shop() -> str | None:
    shop = single_query_value("shop")
    return shop or None


def _missing_shop() -> tuple[object, int]:
    return jsonify({"ok": False, "error": MISSING_SHOP_ERROR}), HTTPStatus.BAD_REQUEST


@bp.get("/settings")
def get_settings() -> tuple[object, int]:
    shop = _requested_shop()
    if shop is None:
        return _missing_shop()

    settings = get_settings_store().get_or_create(shop)
    return jsonify({"ok": True, "settings": settings.to_dict()}), HTTPStatus.OK


@bp.post("/settings")
@limiter.limit(_settings_write_limit)
def save_settings() -> tuple[object, int]:
    shop = _requested_shop()
    if shop is None:
        return _missing_shop()

    payload = request.get_json(force=True, silent=True) or {}
    update = SettingsUpdate.from_payload(payload)

    settings = get_settings_store().merge_update(shop, update)
    return jsonify({"ok": True, "settings": settings.to_dict()}), HTTPStatus.OK
