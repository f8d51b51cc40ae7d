"""Payment authority port (abstract interface).

Defines the contract that every payment adapter implements, so the
fulfillment engine can run against the fake authority in development and
tests and against a real gateway elsewhere without code changes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class AuthorizationResult:
    """Result of a charge authorization attempt."""

    approved: bool
    reference: str | None = None
    failure_reason: str | None = None


class PaymentAuthority(ABC):
    """Abstract payment authority interface."""

    @abstractmethod
    def authorize(self, customer_id: str, amount: float) -> AuthorizationResult:
        """Authorize a charge of ``amount`` against the customer."""
        ...
