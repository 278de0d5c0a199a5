"""Response headers allowing Shopify Admin to embed the app."""
from __future__ import annotations

import re

from flask import Flask, Response, request

SHOPIFY_FRAME_ANCESTORS = ("https://admin.shopify.com", "https://*.myshopify.com")

_SHOP_DOMAIN_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9.-]*\.myshopify\.com")

_BASE_DIRECTIVES = (
    "default-src 'self' https: data: blob:",
    "script-src 'self' 'unsafe-inline' https://cdn.shopify.com https://unpkg.com",
    "style-src 'self' 'unsafe-inline' https://cdn.shopify.com https://unpkg.com",
    "img-src 'self' https: data: blob:",
    "connect-src 'self' https:",
)

# Baseline hardening headers. X-Frame-Options is left out since it would block the iframe.
HARDENING_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
}


def is_shop_domain(shop: object) -> bool:
    """Return whether ``shop`` is a plain ``*.myshopify.com`` hostname."""

    return isinstance(shop, str) and _SHOP_DOMAIN_RE.fullmatch(shop) is not None


def frame_ancestors(shop: str | None) -> list[str]:
    ancestors = list(SHOPIFY_FRAME_ANCESTORS)
    if is_shop_domain(shop):
        ancestors.append(f"https://{shop}")
    return ancestors


def build_content_security_policy(shop: str | None) -> str:
    """Return the CSP header value for a request made on behalf of ``shop``."""

    directives = [*_BASE_DIRECTIVES, f"frame-ancestors {' '.join(frame_ancestors(shop))}"]
    return "; ".join(directives)


def single_query_value(name: str) -> str | None:
    """Return the query parameter ``name`` only when it was given exactly once."""

    values = request.args.getlist(name)
    if len(values) != 1:
        return None
    return values[0]


def init_security_headers(app: Flask) -> None:
    """Attach the embedding headers to every response of ``app``."""

    @app.after_request
    def _apply_security_headers(response: Response) -> Response:
        response.headers["Content-Security-Policy"] = build_content_security_policy(
            single_query_value("shop")
        )
        for header, value in HARDENING_HEADERS.items():
            response.headers.setdefault(header, value)
        return response
