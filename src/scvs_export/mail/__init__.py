"""Outbound email for scvs_export."""

from scvs_export.mail.transport import Attachment, EmailMessage, EmailTransport
from scvs_export.mail.resend import ResendTransport

__all__ = ["Attachment", "EmailMessage", "EmailTransport", "ResendTransport"]
