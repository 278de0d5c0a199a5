"""Data models for the Orderly backend."""

from .settings import ShopSettings, SettingsUpdate

__all__ = ["ShopSettings", "SettingsUpdate"]
