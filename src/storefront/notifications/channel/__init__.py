"""Email channel registry.

Provides singleton access to the email adapter. The fake adapter is used
by default; a real SMTP/SendGrid adapter can be installed with set_channel().
"""

from storefront.notifications.channel.email_port import EmailPort

_email_channel: EmailPort | None = None


def get_channel() -> EmailPort:
    """Return the configured email adapter (singleton)."""
    global _email_channel
    if _email_channel is None:
        from storefront.notifications.channel.fake_email import FakeEmailAdapter

        _email_channel = FakeEmailAdapter()
    return _email_channel


def set_channel(channel: EmailPort) -> None:
    global _email_channel
    _email_channel = channel


def reset_channels() -> None:
    """Reset the channel singleton (useful for testing)."""
    global _email_channel
    _email_channel = None
