"""Fake email adapter — keeps an in-memory outbox instead of sending mail."""

from uuid import uuid4

from storefront.notifications.channel.email_port import EmailPort, SendResult


class FakeEmailAdapter(EmailPort):
    def __init__(self) -> None:
        self.outbox: list[dict] = []
        self.fail_with: str | None = None

    def configure(self, should_succeed: bool = True, failure_reason: str = "Email delivery failed") -> None:
        """Make every following send fail with ``failure_reason``, or succeed again."""
        self.fail_with = None if should_succeed else failure_reason

    def send(self, to: str, subject: str, body: str) -> SendResult:
        if self.fail_with is not None:
            return SendResult(delivered=False, error=self.fail_with)

        message_id = f"email-{uuid4().hex[:12]}"
        self.outbox.append(
            {
                "message_id": message_id,
                "from": self.sender,
                "to": to,
                "subject": subject,
                "body": body,
            }
        )
        return SendResult(delivered=True, message_id=message_id)

    def messages_to(self, address: str) -> list[dict]:
        return [message for message in self.outbox if message["to"] == address]

    def reset(self) -> None:
        self.outbox.clear()
        self.fail_with = None
