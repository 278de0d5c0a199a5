"""Embedded dashboard page served inside Shopify Admin."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, make_response, render_template, request

from ..models.settings import DEFAULT_ACCENT, DEFAULT_BRAND_NAME

bp = Blueprint("pages", __name__)


@bp.get("/")
def dashboard():
    shop = request.args.get("shop", "")
    response = make_response(
        render_template(
            "dashboard.html",
            shop=shop,
            default_brand_name=DEFAULT_BRAND_NAME,
            default_accent=DEFAULT_ACCENT,
        ),
        HTTPStatus.OK,
    )
    response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
    return response
