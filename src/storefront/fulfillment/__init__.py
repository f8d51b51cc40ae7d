"""Fulfillment engine factory.

Provides get_engine() / set_engine(). The default engine is wired to the
domain's Product and Order repositories, the active payment authority and
the active notifier. Must be called inside a domain context.
"""

import threading

from storefront.fulfillment.engine import FulfillmentEngine

_current_engine: FulfillmentEngine | None = None
_engine_lock = threading.Lock()


def build_engine(settings=None) -> FulfillmentEngine:
    """Compose an engine from the currently registered collaborators."""
    from protean.utils.globals import current_domain

    from storefront.catalogue.product import Product
    from storefront.config import FulfillmentSettings
    from storefront.notifications import get_notifier
    from storefront.ordering.order import Order
    from storefront.payments import get_payment_authority

    return FulfillmentEngine(
        catalog=current_domain.repository_for(Product),
        orders=current_domain.repository_for(Order),
        payments=get_payment_authority(),
        notifier=get_notifier(),
        settings=settings or FulfillmentSettings.from_env(),
    )


def get_engine() -> FulfillmentEngine:
    """Return the process-wide engine, building it on first use."""
    global _current_engine
    with _engine_lock:
        if _current_engine is None:
            _current_engine = build_engine()
        return _current_engine


def set_engine(engine: FulfillmentEngine) -> None:
    """Override the active engine (useful for tests)."""
    global _current_engine
    with _engine_lock:
        _current_engine = engine


def reset_engine() -> None:
    """Drop the active engine so the next get_engine() rebuilds it."""
    global _current_engine
    with _engine_lock:
        if _current_engine is not None:
            _current_engine.shutdown()
        _current_engine = None
