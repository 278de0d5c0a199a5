"""In-memory settings store keyed by shop domain."""

from __future__ import annotations

import logging
import threading

from flask import current_app

from .models.settings import SettingsUpdate, ShopSettings

EXTENSION_KEY = "settings_store"


class SettingsStore:
    """Holds one settings record per shop for the lifetime of the application.

    Records are created with defaults on first access and are never removed;
    nothing survives a process restart.
    """

    def __init__(
        self,
        *,
        reset_missing_flags: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self._records: dict[str, ShopSettings] = {}
        self._lock = threading.Lock()
        self._reset_missing_flags = reset_missing_flags
        self._logger = logger or logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, shop: object) -> bool:
        return shop in self._records

    def shops(self) -> list[str]:
        return sorted(self._records)

    def get(self, shop: str) -> ShopSettings | None:
        """Return the stored record without creating one."""

        return self._records.get(shop)

    def get_or_create(self, shop: str) -> ShopSettings:
        """Return the record for ``shop``, storing a default one if missing."""

        with self._lock:
            return self._get_or_create_locked(shop)

    def merge_update(self, shop: str, update: SettingsUpdate) -> ShopSettings:
        """Merge ``update`` into the shop's current record and store the result."""

        with self._lock:
            current = self._get_or_create_locked(shop)
            merged = update.apply(current, reset_missing_flags=self._reset_missing_flags)
            self._records[shop] = merged

        self._logger.info(
            "Updated settings for %s (%s notifications enabled)",
            shop,
            merged.enabled_notifications(),
        )
        return merged

    def _get_or_create_locked(self, shop: str) -> ShopSettings:
        record = self._records.get(shop)
        if record is None:
            record = ShopSettings(shop=shop)
            self._records[shop] = record
            self._logger.debug("Created default settings for %s", shop)
        return record


def get_settings_store() -> SettingsStore:
    """Return the store bound to the current application."""

    return current_app.extensions[EXTENSION_KEY]
