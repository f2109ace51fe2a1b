"""Outbound email transport interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Attachment:
    """Email attachment with base64-encoded content."""

    filename: str
    content: str


@dataclass(frozen=True)
class EmailMessage:
    """Message handed to a transport."""

    sender: str
    to: list[str]
    subject: str
    text: str
    attachments: list[Attachment] = field(default_factory=list)


class EmailTransport(ABC):
    """Abstract outbound email transport."""

    @abstractmethod
    def send(self, message: EmailMessage) -> None:
        """Send a message.

        Raises:
            ExternalServiceError: If the provider rejects the request
        """
        pass
