"""Failures raised by order placement and the stores it depends on.

Ship and cancel never raise these for expected business outcomes; they
report a TransitionResult instead.
"""


class FulfillmentError(Exception):
    """Base class for fulfillment failures."""


class InvalidRequest(FulfillmentError):
    """The request itself is malformed (no lines, non-positive quantity, ...)."""


class NotFound(FulfillmentError):
    """A referenced product or order does not exist."""


class ProductNotFound(NotFound):
    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product with ID {product_id} not found.")


class OrderNotFound(NotFound):
    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"Order with ID {order_id} not found.")


class InsufficientStock(FulfillmentError):
    def __init__(self, product_id, product_name: str, available: int, requested: int):
        self.product_id = product_id
        self.product_name = product_name
        self.available = available
        self.requested = requested
        super().__init__(
            f"Not enough stock for product '{product_name}'. Available: {available}, Requested: {requested}."
        )


class PaymentDeclined(FulfillmentError):
    """The payment authority refused the charge, failed, or did not answer in time."""

    def __init__(self, customer_id: str, amount: float, reason: str):
        self.customer_id = customer_id
        self.amount = amount
        self.reason = reason
        super().__init__(f"Payment of {amount:.2f} for customer {customer_id} declined: {reason}")
