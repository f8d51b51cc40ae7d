"""Notifier port — receives order lifecycle events from the fulfillment engine.

Notifications are advisory. The engine never consumes a return value and
never lets a notifier failure undo or block the operation that raised it.
"""

from abc import ABC, abstractmethod
from enum import Enum


class NotificationType(Enum):
    ORDER_CONFIRMATION = "Order_Confirmation"
    LOW_STOCK_ALERT = "Low_Stock_Alert"
    ORDER_CANCELLATION = "Order_Cancellation"


class Notifier(ABC):
    """Abstract interface for lifecycle notifications."""

    @abstractmethod
    def order_confirmed(self, customer_id: str, order) -> None:
        """An order was placed, paid for and had its stock deducted."""
        ...

    @abstractmethod
    def stock_low(self, product) -> None:
        """A product's stock fell below the low-stock threshold."""
        ...

    @abstractmethod
    def order_cancelled(self, customer_id: str, order_id: int, reason: str) -> None:
        """An order was cancelled."""
        ...
