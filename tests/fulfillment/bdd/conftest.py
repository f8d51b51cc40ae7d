"""Shared BDD fixtures and step definitions for the order lifecycle."""

import pytest
from pytest_bdd import given, parsers, then, when
from storefront.errors import FulfillmentError, InsufficientStock, PaymentDeclined
from storefront.fulfillment.results import LineRequest


@pytest.fixture()
def outcome():
    """Container for the last transition result or placement error."""
    return {"result": None, "exc": None}


def _product_id(catalog, name):
    for product in catalog.list_all():
        if product.name == name:
            return product.product_id
    raise AssertionError(f"No product named {name!r}")


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" priced at {price:f} with {stock:d} in stock'))
def _(catalog, name, price, stock):
    catalog.add_product(name, price, stock=stock)


@given(parsers.cfparse('"{name}" has its stock set to {stock:d}'))
def _(catalog, name, stock):
    catalog.adjust_stock(_product_id(catalog, name), stock)


@given(parsers.cfparse('customer "{customer_id}" has ordered {quantity:d} of "{name}"'), target_fixture="order")
def _(engine, catalog, customer_id, quantity, name):
    return engine.place_order(customer_id, [LineRequest(_product_id(catalog, name), quantity)])


@given("the order was shipped")
def _(engine, order):
    assert engine.ship_order(order.order_id)


@given("the order was cancelled")
def _(engine, order):
    assert engine.cancel_order(order.order_id)


@given("the payment authority declines every charge")
def _(payments):
    payments.configure(should_succeed=False, failure_reason="Card declined")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('customer "{customer_id}" orders {quantity:d} of "{name}"'), target_fixture="order")
def _(engine, catalog, customer_id, quantity, name):
    return engine.place_order(customer_id, [LineRequest(_product_id(catalog, name), quantity)])


@when(parsers.cfparse('customer "{customer_id}" tries to order {quantity:d} of "{name}"'))
def _(engine, catalog, outcome, customer_id, quantity, name):
    try:
        engine.place_order(customer_id, [LineRequest(_product_id(catalog, name), quantity)])
    except FulfillmentError as exc:
        outcome["exc"] = exc


@when("the order is shipped")
def _(engine, order, outcome):
    outcome["result"] = engine.ship_order(order.order_id)


@when(parsers.cfparse('the order is cancelled with reason "{reason}"'))
def _(engine, order, outcome, reason):
    outcome["result"] = engine.cancel_order(order.order_id, reason)


@when("the order is cancelled without a reason")
def _(engine, order, outcome):
    outcome["result"] = engine.cancel_order(order.order_id)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order status is "{status}"'))
def _(orders, order, status):
    assert orders.lookup(order.order_id).status == status


@then(parsers.cfparse("the order total is {total:f}"))
def _(order, total):
    assert order.total_amount == total


@then(parsers.cfparse('"{name}" has {stock:d} in stock'))
def _(catalog, name, stock):
    assert catalog.lookup(_product_id(catalog, name)).stock == stock


@then(parsers.cfparse('the transition outcome is "{value}"'))
def _(outcome, value):
    assert outcome["result"].outcome.value == value


@then("the order is rejected for insufficient stock")
def _(outcome):
    assert isinstance(outcome["exc"], InsufficientStock)


@then("the order is rejected because payment was declined")
def _(outcome):
    assert isinstance(outcome["exc"], PaymentDeclined)


@then(parsers.cfparse('a cancellation notice with reason "{reason}" was sent'))
def _(notifier, order, reason):
    assert ("order_cancelled", str(order.customer_id), order.order_id, reason) in notifier.of_kind("order_cancelled")


@then(parsers.cfparse("exactly {count:d} cancellation notice was sent"))
def _(notifier, count):
    assert len(notifier.of_kind("order_cancelled")) == count


@then(parsers.cfparse('customer "{customer_id}" has no orders'))
def _(orders, customer_id):
    assert orders.list_for_customer(customer_id) == []
