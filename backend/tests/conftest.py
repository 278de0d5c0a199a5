from __future__ import annotations

import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _load_dependencies():
    from orderly import Config, SettingsStore, create_app

    return Config, SettingsStore, create_app


ConfigBase, SettingsStore, create_app = _load_dependencies()


class TestConfig(ConfigBase):
    TESTING = True
    CORS_ALLOWED_ORIGINS = "https://admin.shopify.com"
    SETTINGS_WRITE_RATE_LIMIT = "1000 per minute"
    RESET_MISSING_NOTIFICATION_FLAGS = False


@pytest.fixture()
def store():
    return SettingsStore()


@pytest.fixture()
def app(store):
    app = create_app(TestConfig, settings_store=store)
    ctx = app.app_context()
    ctx.push()
    yield app
    ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()
