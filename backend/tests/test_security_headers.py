"""Tests for the iframe embedding headers."""

from __future__ import annotations

import pytest

from backend.orderly.utils.security import build_content_security_policy, is_shop_domain

BASE_ANCESTORS = "frame-ancestors https://admin.shopify.com https://*.myshopify.com"


def _frame_ancestors(response) -> str:
    policy = response.headers["Content-Security-Policy"]
    directives = [directive.strip() for directive in policy.split(";")]
    return next(d for d in directives if d.startswith("frame-ancestors"))


def test_policy_without_shop_lists_shopify_origins():
    policy = build_content_security_policy(None)

    assert policy.startswith("default-src 'self' https: data: blob:; ")
    assert "script-src 'self' 'unsafe-inline' https://cdn.shopify.com https://unpkg.com" in policy
    assert policy.endswith(BASE_ANCESTORS)


def test_shop_origin_is_appended_for_myshopify_domains(client):
    response = client.get("/health?shop=acme.myshopify.com")

    assert _frame_ancestors(response) == f"{BASE_ANCESTORS} https://acme.myshopify.com"


@pytest.mark.parametrize(
    "shop",
    [
        "acme.example.com",
        "evil.com; script-src *; x.myshopify.com",
        "https://acme.myshopify.com",
        ".myshopify.com",
        "acme.myshopify.com\n",
    ],
)
def test_other_shop_values_are_not_trusted(client, shop):
    response = client.get("/health", query_string={"shop": shop})

    assert _frame_ancestors(response) == BASE_ANCESTORS
    assert not is_shop_domain(shop)


def test_every_response_carries_the_policy(client):
    for path in ("/", "/api/settings", "/auth/callback", "/does-not-exist"):
        response = client.get(path)
        assert "frame-ancestors" in response.headers["Content-Security-Policy"]
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert "X-Frame-Options" not in response.headers
