"""Email delivery of the SCVS export."""

import base64
import logging

from scvs_export.database.base import Database
from scvs_export.domain.errors import ValidationError
from scvs_export.domain.export import ExportService
from scvs_export.mail.transport import Attachment, EmailMessage, EmailTransport

logger = logging.getLogger(__name__)

EMAIL_SUBJECT = "Archivos TXT SCVS - {company_id}"
EMAIL_BODY = (
    "Adjunto encontrarás los archivos TXT requeridos por la Superintendencia de Compañías."
)


class EmailService:
    """Sends the four statement files as attachments."""

    def __init__(self, db: Database, transport: EmailTransport, sender: str):
        """Initialize email service.

        Args:
            db: Database instance
            transport: Outbound email transport
            sender: Sender address
        """
        self.db = db
        self.transport = transport
        self.sender = sender
        self.export_service = ExportService(db)

    def send_export(self, company_id: str, to: str) -> None:
        """Build the export and email it.

        Nothing is sent unless all four files were built.

        Raises:
            ValidationError: If the company ID or destination is missing
            DataAccessError: If the export fails
            ExternalServiceError: If the transport rejects the message
        """
        company_id = (company_id or "").strip()
        to = (to or "").strip()
        if not company_id or not to:
            raise ValidationError("Company ID and destination address are required")

        files = self.export_service.build_all_files(company_id)
        message = EmailMessage(
            sender=self.sender,
            to=[to],
            subject=EMAIL_SUBJECT.format(company_id=company_id),
            text=EMAIL_BODY,
            attachments=[
                Attachment(
                    filename=f.filename,
                    content=base64.b64encode(f.content.encode("utf-8")).decode("ascii"),
                )
                for f in files
            ],
        )
        logger.info("Sending export of company %s to %s", company_id, to)
        self.transport.send(message)
