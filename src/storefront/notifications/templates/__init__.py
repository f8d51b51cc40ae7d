"""Template registry — one email template per NotificationType."""

from storefront.notifications.port import NotificationType
from storefront.notifications.templates.base import EmailTemplate
from storefront.notifications.templates.low_stock_alert import LowStockAlertTemplate
from storefront.notifications.templates.order_cancellation import OrderCancellationTemplate
from storefront.notifications.templates.order_confirmation import OrderConfirmationTemplate

TEMPLATE_REGISTRY: dict[str, type[EmailTemplate]] = {
    template.notification_type: template
    for template in (OrderConfirmationTemplate, LowStockAlertTemplate, OrderCancellationTemplate)
}


def get_template(notification_type: NotificationType | str) -> type[EmailTemplate]:
    """Look up the template for a notification type (enum or its string value)."""
    key = notification_type.value if isinstance(notification_type, NotificationType) else notification_type
    try:
        return TEMPLATE_REGISTRY[key]
    except KeyError:
        raise ValueError(f"No template registered for notification type: {key}") from None
