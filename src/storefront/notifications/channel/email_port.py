"""Email channel port — the one outbound channel storefront notifications use."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class SendResult:
    """Outcome of handing one message to the mail transport."""

    delivered: bool
    message_id: str | None = None
    error: str | None = None


class EmailPort(ABC):
    """Mail transport used by EmailNotifier."""

    sender: str = "orders@storefront.local"

    @abstractmethod
    def send(self, to: str, subject: str, body: str) -> SendResult:
        """Hand a message to the transport. Failures are reported, not raised."""
        ...
