"""Shopify OAuth endpoints."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint

bp = Blueprint("auth", __name__)

CALLBACK_PLACEHOLDER = "OAuth callback is not implemented yet. Open the app from Shopify Admin."


@bp.get("/callback")
def oauth_callback() -> tuple[str, int, dict[str, str]]:
    # TODO: exchange the authorization code for an offline access token once OAuth lands.
    return CALLBACK_PLACEHOLDER, HTTPStatus.OK, {"Content-Type": "text/plain; charset=utf-8"}
