"""Per-shop settings record and the partial update applied to it."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

BRAND_NAME_MAX_LENGTH = 40
DEFAULT_BRAND_NAME = "Orderly"
DEFAULT_ACCENT = "#16a34a"

NOTIFICATION_FLAGS = ("notifyDelay", "notifyOutForDelivery", "notifyDelivered")


@dataclass(frozen=True)
class ShopSettings:
    """Settings of a single shop as shown on the dashboard."""

    shop: str
    brand_name: str = DEFAULT_BRAND_NAME
    accent: str = DEFAULT_ACCENT
    notify_delay: bool = True
    notify_out_for_delivery: bool = True
    notify_delivered: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Serialize the record using the field names of the JSON API."""

        return {
            "shop": self.shop,
            "brandName": self.brand_name,
            "accent": self.accent,
            "notifyDelay": self.notify_delay,
            "notifyOutForDelivery": self.notify_out_for_delivery,
            "notifyDelivered": self.notify_delivered,
        }

    def enabled_notifications(self) -> int:
        return sum(
            (self.notify_delay, self.notify_out_for_delivery, self.notify_delivered)
        )


@dataclass(frozen=True)
class SettingsUpdate:
    """Partial settings update; ``None`` marks a field the request did not supply."""

    brand_name: str | None = None
    accent: str | None = None
    notify_delay: bool | None = None
    notify_out_for_delivery: bool | None = None
    notify_delivered: bool | None = None

    @classmethod
    def from_payload(cls, payload: object) -> SettingsUpdate:
        """Build an update from a decoded JSON body.

        String fields holding anything but a string are dropped. Notification
        flags that are present are coerced by truthiness, so ``"yes"`` becomes
        ``True`` and ``null`` becomes ``False``.
        """

        if not isinstance(payload, dict):
            return cls()

        brand_name = payload.get("brandName")
        accent = payload.get("accent")
        flags = {
            key: bool(payload[key]) if key in payload else None
            for key in NOTIFICATION_FLAGS
        }

        return cls(
            brand_name=brand_name if isinstance(brand_name, str) else None,
            accent=accent if isinstance(accent, str) else None,
            notify_delay=flags["notifyDelay"],
            notify_out_for_delivery=flags["notifyOutForDelivery"],
            notify_delivered=flags["notifyDelivered"],
        )

    def apply(self, current: ShopSettings, *, reset_missing_flags: bool = False) -> ShopSettings:
        """Return ``current`` with this update merged in."""

        def _flag(value: bool | None, previous: bool) -> bool:
            if value is not None:
                return value
            return False if reset_missing_flags else previous

        return replace(
            current,
            brand_name=(
                self.brand_name[:BRAND_NAME_MAX_LENGTH]
                if self.brand_name is not None
                else current.brand_name
            ),
            accent=self.accent if self.accent is not None else current.accent,
            notify_delay=_flag(self.notify_delay, current.notify_delay),
            notify_out_for_delivery=_flag(
                self.notify_out_for_delivery, current.notify_out_for_delivery
            ),
            notify_delivered=_flag(self.notify_delivered, current.notify_delivered),
        )
