"""Shared fixtures for fulfillment engine tests."""

import pytest
from protean import current_domain
from storefront.catalogue.product import Product
from storefront.catalogue.seed import seed_catalogue
from storefront.config import FulfillmentSettings
from storefront.fulfillment.engine import FulfillmentEngine
from storefront.notifications.port import Notifier
from storefront.ordering.order import Order
from storefront.payments import set_payment_authority
from storefront.payments.fake_adapter import FakePaymentAuthority


class RecordingNotifier(Notifier):
    """Notifier that keeps every event it receives, in arrival order."""

    def __init__(self):
        self.events: list[tuple] = []

    def order_confirmed(self, customer_id, order):
        self.events.append(("order_confirmed", customer_id, order.order_id))

    def stock_low(self, product):
        self.events.append(("stock_low", product.product_id, product.stock))

    def order_cancelled(self, customer_id, order_id, reason):
        self.events.append(("order_cancelled", customer_id, order_id, reason))

    def of_kind(self, kind: str) -> list[tuple]:
        return [event for event in self.events if event[0] == kind]


@pytest.fixture()
def catalog():
    return current_domain.repository_for(Product)


@pytest.fixture()
def orders():
    return current_domain.repository_for(Order)


@pytest.fixture()
def payments():
    authority = FakePaymentAuthority()
    set_payment_authority(authority)
    return authority


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def settings():
    return FulfillmentSettings(payment_timeout=2.0)


@pytest.fixture()
def engine(catalog, orders, payments, notifier, settings):
    engine = FulfillmentEngine(catalog, orders, payments, notifier, settings=settings)
    yield engine
    engine.shutdown()


@pytest.fixture()
def products(catalog):
    """Laptop Pro (1), Wireless Mouse (2) and Mechanical Keyboard (3)."""
    return {p.product_id: p for p in seed_catalogue(catalog)}
