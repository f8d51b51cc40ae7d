"""Email-backed notifier — renders lifecycle templates and sends them.

Customers receive confirmations and cancellations at an address derived
from their id; low-stock alerts go to the operations mailbox.
"""

import structlog

from storefront.notifications.channel.email_port import EmailPort
from storefront.notifications.port import NotificationType, Notifier
from storefront.notifications.templates import get_template

logger = structlog.get_logger(__name__)

OPERATIONS_MAILBOX = "operations@storefront.local"


class EmailNotifier(Notifier):
    def __init__(self, channel: EmailPort, currency: str = "USD", operations_mailbox: str = OPERATIONS_MAILBOX):
        self.channel = channel
        self.currency = currency
        self.operations_mailbox = operations_mailbox

    def order_confirmed(self, customer_id: str, order) -> None:
        self._dispatch(
            NotificationType.ORDER_CONFIRMATION,
            to=self._customer_address(customer_id),
            context={
                "order_id": order.order_id,
                "total_amount": order.total_amount,
                "currency": self.currency,
                "line_count": len(order.lines),
            },
        )

    def stock_low(self, product) -> None:
        self._dispatch(
            NotificationType.LOW_STOCK_ALERT,
            to=self.operations_mailbox,
            context={
                "product_id": product.product_id,
                "name": product.name,
                "current_stock": product.stock,
            },
        )

    def order_cancelled(self, customer_id: str, order_id: int, reason: str) -> None:
        self._dispatch(
            NotificationType.ORDER_CANCELLATION,
            to=self._customer_address(customer_id),
            context={"order_id": order_id, "reason": reason},
        )

    @staticmethod
    def _customer_address(customer_id: str) -> str:
        return f"{customer_id}@customers.storefront.local"

    def _dispatch(self, notification_type: NotificationType, to: str, context: dict) -> None:
        content = get_template(notification_type).render(context)
        result = self.channel.send(to=to, subject=content["subject"], body=content["body"])

        if result.delivered:
            logger.info(
                "Notification sent",
                notification_type=notification_type.value,
                to=to,
                message_id=result.message_id,
            )
        else:
            logger.error(
                "Notification dispatch failed",
                notification_type=notification_type.value,
                to=to,
                error=result.error or "Unknown dispatch error",
            )
