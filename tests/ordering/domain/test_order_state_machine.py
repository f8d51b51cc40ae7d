"""Tests for the Order state machine — legal and illegal transitions."""

from datetime import UTC, datetime

import pytest
from storefront.ordering.order import Order, OrderLine, OrderStatus


def _order_in(status: OrderStatus) -> Order:
    return Order(
        order_id=1,
        customer_id="cust-001",
        created_at=datetime.now(UTC),
        total_amount=0.0,
        status=status.value,
    )


class TestOrderStatusTransitions:
    @pytest.mark.parametrize(
        "current, target",
        [
            (OrderStatus.PENDING, OrderStatus.PROCESSED),
            (OrderStatus.PENDING, OrderStatus.CANCELLED),
            (OrderStatus.PROCESSED, OrderStatus.SHIPPED),
            (OrderStatus.PROCESSED, OrderStatus.CANCELLED),
        ],
    )
    def test_allowed_transitions(self, current, target):
        assert _order_in(current).can_transition_to(target)

    @pytest.mark.parametrize(
        "current, target",
        [
            (OrderStatus.PENDING, OrderStatus.SHIPPED),
            (OrderStatus.PROCESSED, OrderStatus.PENDING),
            (OrderStatus.SHIPPED, OrderStatus.CANCELLED),
            (OrderStatus.SHIPPED, OrderStatus.PROCESSED),
            (OrderStatus.CANCELLED, OrderStatus.PROCESSED),
            (OrderStatus.CANCELLED, OrderStatus.SHIPPED),
        ],
    )
    def test_disallowed_transitions(self, current, target):
        assert not _order_in(current).can_transition_to(target)

    @pytest.mark.parametrize("terminal", [OrderStatus.SHIPPED, OrderStatus.CANCELLED])
    def test_terminal_states_have_no_exits(self, terminal):
        order = _order_in(terminal)
        assert not any(order.can_transition_to(target) for target in OrderStatus)

    def test_default_status_is_pending(self):
        order = Order(order_id=1, customer_id="cust-001", created_at=datetime.now(UTC), total_amount=0.0)
        assert order.status == OrderStatus.PENDING.value


class TestOrderLines:
    def _order_with_lines(self, *lines):
        order = _order_in(OrderStatus.PROCESSED)
        for position, (product_id, quantity, unit_price) in enumerate(lines):
            order.add_lines(
                OrderLine(position=position, product_id=product_id, quantity=quantity, unit_price=unit_price)
            )
        return order

    def test_line_total(self):
        line = OrderLine(position=0, product_id=1, quantity=3, unit_price=25.0)
        assert line.line_total == 75.0

    def test_ordered_lines_follow_placement_order(self):
        order = self._order_with_lines((3, 1, 75.0), (1, 1, 1200.0), (2, 4, 25.0))
        assert [line.product_id for line in order.ordered_lines()] == [3, 1, 2]

    def test_lines_total_recomputes_snapshot_sum(self):
        order = self._order_with_lines((1, 1, 1200.0), (2, 2, 25.0))
        assert order.lines_total() == 1250.0

    def test_quantities_by_product_sums_repeated_products(self):
        order = self._order_with_lines((2, 1, 25.0), (1, 1, 1200.0), (2, 3, 25.0))
        assert order.quantities_by_product() == {2: 4, 1: 1}
        assert list(order.quantities_by_product()) == [2, 1]
