"""Order cancellation — sent to the customer when an order is cancelled."""

from storefront.notifications.port import NotificationType
from storefront.notifications.templates.base import EmailTemplate


class OrderCancellationTemplate(EmailTemplate):
    notification_type = NotificationType.ORDER_CANCELLATION.value
    defaults = {"order_id": "N/A", "reason": "No reason provided"}
    subject = "Order #{order_id} Cancelled"
    body = "Your order #{order_id} has been cancelled.\n\nReason: {reason}\n"
