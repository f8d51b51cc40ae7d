"""Notifier factory.

Provides get_notifier() / set_notifier(). The default is an EmailNotifier
wired to the registered email channel.
"""

from storefront.notifications.port import Notifier

_current_notifier: Notifier | None = None


def get_notifier() -> Notifier:
    """Return the current notifier. Defaults to EmailNotifier on the email channel."""
    global _current_notifier
    if _current_notifier is None:
        from storefront.config import FulfillmentSettings
        from storefront.notifications.channel import get_channel
        from storefront.notifications.email_notifier import EmailNotifier

        _current_notifier = EmailNotifier(get_channel(), currency=FulfillmentSettings.from_env().currency)
    return _current_notifier


def set_notifier(notifier: Notifier) -> None:
    """Override the active notifier (useful for tests)."""
    global _current_notifier
    _current_notifier = notifier


def reset_notifier() -> None:
    """Reset to default notifier."""
    global _current_notifier
    _current_notifier = None
