"""Payment authority factory.

Provides get_payment_authority() / set_payment_authority() to swap
implementations. FakePaymentAuthority is the default.
"""

from storefront.payments.fake_adapter import FakePaymentAuthority
from storefront.payments.port import PaymentAuthority

_current_authority: PaymentAuthority | None = None


def get_payment_authority() -> PaymentAuthority:
    """Return the current payment authority. Defaults to FakePaymentAuthority."""
    global _current_authority
    if _current_authority is None:
        _current_authority = FakePaymentAuthority()
    return _current_authority


def set_payment_authority(authority: PaymentAuthority) -> None:
    """Override the active payment authority (useful for tests)."""
    global _current_authority
    _current_authority = authority


def reset_payment_authority() -> None:
    """Reset to default authority."""
    global _current_authority
    _current_authority = None
