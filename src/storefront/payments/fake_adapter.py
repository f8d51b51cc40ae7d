"""Configurable fake payment authority for development and testing.

Simulates a gateway without any external calls. It can be told to approve
or decline, and to stall for a while, which is how tests exercise the
engine's payment timeout.
"""

import time
from uuid import uuid4

from storefront.payments.port import AuthorizationResult, PaymentAuthority


class FakePaymentAuthority(PaymentAuthority):
    """Configurable fake payment authority."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Card declined"
        self.delay: float = 0.0
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Card declined", delay: float = 0.0) -> None:
        """Configure authority behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.delay = delay

    def authorize(self, customer_id: str, amount: float) -> AuthorizationResult:
        self.calls.append({"method": "authorize", "customer_id": customer_id, "amount": amount})

        if self.delay:
            time.sleep(self.delay)

        if self.should_succeed:
            return AuthorizationResult(approved=True, reference=f"fake_auth_{uuid4().hex[:12]}")
        return AuthorizationResult(approved=False, failure_reason=self.failure_reason)
