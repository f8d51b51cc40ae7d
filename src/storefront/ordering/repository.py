"""Order store — orders keyed by a monotonically increasing integer id."""

import itertools
import threading
from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError

from storefront.domain import logger, storefront
from storefront.errors import OrderNotFound
from storefront.ordering.order import Order, OrderLine, OrderStatus

# Ids are handed out process-wide so that every repository instance agrees
# on the next one; they are never reused, even after a data reset.
_sequence = itertools.count(1)
_sequence_lock = threading.Lock()


def _next_order_id() -> int:
    with _sequence_lock:
        return next(_sequence)


@storefront.repository(part_of=Order)
class OrderRepository:
    """Repository for the Order aggregate.

    The store owns identity and creation time. It does not judge status
    transitions; that is the fulfillment engine's job.
    """

    def create(self, customer_id, lines, total_amount: float, status: OrderStatus) -> Order:
        """Persist a new order and return it complete with id and timestamp.

        ``lines`` is a sequence of mappings with product_id, quantity and
        unit_price, in placement order.
        """
        order = Order(
            order_id=_next_order_id(),
            customer_id=customer_id,
            created_at=datetime.now(UTC),
            total_amount=total_amount,
            status=status.value,
        )
        for position, line in enumerate(lines):
            order.add_lines(
                OrderLine(
                    position=position,
                    product_id=line["product_id"],
                    quantity=line["quantity"],
                    unit_price=line["unit_price"],
                )
            )

        self.add(order)
        logger.info(
            "Order created",
            order_id=order.order_id,
            customer_id=str(customer_id),
            status=order.status,
        )
        return order

    def lookup(self, order_id) -> Order | None:
        try:
            return self.get(order_id)
        except ObjectNotFoundError:
            return None

    def require(self, order_id) -> Order:
        """Like lookup, but raises OrderNotFound for an unknown id."""
        order = self.lookup(order_id)
        if order is None:
            raise OrderNotFound(order_id)
        return order

    def set_status(self, order_id, new_status: OrderStatus) -> bool:
        """Overwrite the status. Returns False when the order does not exist."""
        order = self.lookup(order_id)
        if order is None:
            return False

        order.status = new_status.value
        self.add(order)
        logger.info("Order status updated", order_id=order_id, status=new_status.value)
        return True

    def list_for_customer(self, customer_id) -> list[Order]:
        orders = self._dao.query.filter(customer_id=str(customer_id)).all().items
        return sorted(orders, key=lambda o: o.order_id)
