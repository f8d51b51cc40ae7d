"""Order confirmation — sent to the customer once an order is paid and stock is deducted."""

from storefront.notifications.port import NotificationType
from storefront.notifications.templates.base import EmailTemplate


class OrderConfirmationTemplate(EmailTemplate):
    notification_type = NotificationType.ORDER_CONFIRMATION.value
    defaults = {"order_id": "N/A", "total_amount": 0.0, "currency": "USD", "line_count": 0}
    subject = "Order #{order_id} Confirmed"
    body = (
        "Your order #{order_id} has been confirmed.\n\n"
        "Items: {line_count}\n"
        "Order Total: {currency} {total_amount:.2f}\n\n"
        "We'll let you know when it ships."
    )
