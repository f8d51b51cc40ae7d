"""Runtime settings for the fulfillment engine.

Values come from environment variables so the same build can run with
different thresholds in development, test and production:

    STOREFRONT_LOW_STOCK_THRESHOLD          int, default 10
    STOREFRONT_PAYMENT_TIMEOUT              seconds, default 5.0 ("none" disables)
    STOREFRONT_DEFAULT_CANCELLATION_REASON  default "No reason provided"
    STOREFRONT_CURRENCY                     default "USD"
    STOREFRONT_SEED_CATALOGUE               seed demo products at app startup, default on
"""

import os
from dataclasses import dataclass

DEFAULT_LOW_STOCK_THRESHOLD = 10
DEFAULT_PAYMENT_TIMEOUT = 5.0
DEFAULT_CANCELLATION_REASON = "No reason provided"

_FALSY = {"0", "false", "no", "off"}


def _env_float_or_none(name: str, default: float | None) -> float | None:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip().lower()
    if raw in ("", "none"):
        return None
    value = float(raw)
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSY


@dataclass(frozen=True)
class FulfillmentSettings:
    """Tunables consumed by FulfillmentEngine and the HTTP app."""

    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    payment_timeout: float | None = DEFAULT_PAYMENT_TIMEOUT
    default_cancellation_reason: str = DEFAULT_CANCELLATION_REASON
    currency: str = "USD"
    seed_catalogue: bool = True

    @classmethod
    def from_env(cls) -> "FulfillmentSettings":
        threshold = int(os.getenv("STOREFRONT_LOW_STOCK_THRESHOLD", DEFAULT_LOW_STOCK_THRESHOLD))
        if threshold < 0:
            raise ValueError(f"STOREFRONT_LOW_STOCK_THRESHOLD must not be negative, got {threshold}")

        reason = os.getenv("STOREFRONT_DEFAULT_CANCELLATION_REASON", "").strip() or DEFAULT_CANCELLATION_REASON

        return cls(
            low_stock_threshold=threshold,
            payment_timeout=_env_float_or_none("STOREFRONT_PAYMENT_TIMEOUT", DEFAULT_PAYMENT_TIMEOUT),
            default_cancellation_reason=reason,
            currency=os.getenv("STOREFRONT_CURRENCY", "USD"),
            seed_catalogue=_env_bool("STOREFRONT_SEED_CATALOGUE", True),
        )
