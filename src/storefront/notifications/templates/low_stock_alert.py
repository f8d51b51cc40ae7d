"""Low stock alert — internal mail to operations after a deduction crosses the threshold."""

from storefront.notifications.port import NotificationType
from storefront.notifications.templates.base import EmailTemplate


class LowStockAlertTemplate(EmailTemplate):
    notification_type = NotificationType.LOW_STOCK_ALERT.value
    defaults = {"product_id": "N/A", "name": "N/A", "current_stock": 0}
    subject = "[Low Stock] {name}"
    body = (
        "{name} (product {product_id}) is running low.\n\n"
        "Current Stock: {current_stock}\n\n"
        "Restock through PUT /products/{product_id}/stock."
    )
