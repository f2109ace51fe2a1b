"""Resend HTTP API email transport."""

import logging
from typing import Optional

import requests

from scvs_export.domain.errors import ConfigurationError, ExternalServiceError
from scvs_export.mail.transport import EmailMessage, EmailTransport

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"
DEFAULT_TIMEOUT = 30


class ResendTransport(EmailTransport):
    """Sends email through the Resend REST API."""

    def __init__(
        self,
        api_key: Optional[str],
        session: Optional[requests.Session] = None,
        api_url: str = RESEND_API_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        """Initialize the transport.

        Args:
            api_key: Resend API key
            session: Optional requests session to reuse connections
            api_url: Endpoint URL
            timeout: Request timeout in seconds

        Raises:
            ConfigurationError: If no API key is given
        """
        if not api_key:
            raise ConfigurationError("RESEND_API_KEY is not configured")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.api_url = api_url
        self.timeout = timeout

    def send(self, message: EmailMessage) -> None:
        """Send a message through Resend."""
        payload = {
            "from": message.sender,
            "to": list(message.to),
            "subject": message.subject,
            "text": message.text,
            "attachments": [
                {"filename": attachment.filename, "content": attachment.content}
                for attachment in message.attachments
            ],
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        try:
            response = self.session.post(
                self.api_url, json=payload, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error("Resend request failed: %s", e)
            raise ExternalServiceError(f"Resend request failed: {e}") from e

        if not response.ok:
            logger.error("Resend rejected message (%s): %s", response.status_code, response.text)
            raise ExternalServiceError(f"Resend error: {response.text}")
