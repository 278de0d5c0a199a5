"""Compatibility package that exposes the backend Flask application factory."""

from backend.orderly import Config, SettingsStore, create_app

__all__ = ["Config", "SettingsStore", "create_app"]
