"""Order aggregate — the unit the fulfillment engine moves through its lifecycle.

State Machine:
    PENDING → PROCESSED → SHIPPED        (success path)
    PENDING → CANCELLED                  (payment never completed)
    PROCESSED → CANCELLED                (stock is replenished)

SHIPPED and CANCELLED are terminal. The order store never validates a
transition; callers ask ``can_transition_to`` before changing status.
"""

from enum import Enum

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from storefront.domain import storefront


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "Pending"
    PROCESSED = "Processed"
    SHIPPED = "Shipped"
    CANCELLED = "Cancelled"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PROCESSED, OrderStatus.CANCELLED},
    OrderStatus.PROCESSED: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order")
class OrderLine:
    """A product and quantity, priced at the moment the order was placed.

    The unit price is a snapshot; later catalogue price changes do not touch it.
    """

    position = Integer(required=True, min_value=0)  # placement order within the order
    product_id = Integer(required=True)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    order_id = Integer(identifier=True, required=True)
    customer_id = Identifier(required=True)
    created_at = DateTime(required=True)
    lines = HasMany(OrderLine)
    total_amount = Float(required=True, min_value=0.0)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.PENDING.value,
    )

    def ordered_lines(self) -> list:
        """Lines in the order they were placed."""
        return sorted(self.lines, key=lambda line: line.position)

    def lines_total(self) -> float:
        """Recompute the sum of the line snapshots (verification only)."""
        return round(sum(line.line_total for line in self.lines), 2)

    def can_transition_to(self, target_status: OrderStatus) -> bool:
        current = OrderStatus(self.status)
        return target_status in _VALID_TRANSITIONS.get(current, set())

    def quantities_by_product(self) -> dict:
        """Total ordered quantity per product, in first-seen line order."""
        totals: dict = {}
        for line in self.ordered_lines():
            totals[line.product_id] = totals.get(line.product_id, 0) + line.quantity
        return totals
