"""Tests for emailing the export."""

import base64

import pytest
import requests

from scvs_export.domain.email import EmailService
from scvs_export.domain.errors import (
    ConfigurationError,
    DataAccessError,
    ExternalServiceError,
    ValidationError,
)
from scvs_export.mail.resend import RESEND_API_URL, ResendTransport
from scvs_export.mail.transport import Attachment, EmailMessage


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400


class FakeSession:
    """Records posts and returns a canned response."""

    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


class BrokenCatalogDatabase:
    """Delegates to a real database but every catalog read fails."""

    def __init__(self, db):
        self._db = db

    def __getattr__(self, name):
        return getattr(self._db, name)

    def list_catalog(self, statement_type=None):
        raise DataAccessError("catalog unavailable")


class TestEmailService:
    """Tests for EmailService."""

    def test_sends_four_attachments(self, temp_db, sample_accounts, sample_company, fake_transport):
        """The four files are attached base64 encoded."""
        service = EmailService(temp_db, fake_transport, sender="reportes@andina.ec")
        service.send_export(sample_company.id, "contador@andina.ec")

        assert len(fake_transport.sent) == 1
        message = fake_transport.sent[0]
        assert message.sender == "reportes@andina.ec"
        assert message.to == ["contador@andina.ec"]
        assert sample_company.id in message.subject
        assert [a.filename for a in message.attachments] == [
            "ESTADO_SITUACION_FINANCIERA.txt",
            "ESTADO_RESULTADO_INTEGRAL.txt",
            "ESTADO_FLUJO_EFECTIVO.txt",
            "ESTADO_CAMBIOS_PATRIMONIO.txt",
        ]
        assert base64.b64decode(message.attachments[2].content).decode("utf-8") == "95\t0.00"

    @pytest.mark.parametrize("company_id,to", [("", "a@b.ec"), ("abc", ""), ("  ", "  ")])
    def test_requires_company_and_destination(self, temp_db, fake_transport, company_id, to):
        """Both the company and the destination are required."""
        service = EmailService(temp_db, fake_transport, sender="x@y.ec")
        with pytest.raises(ValidationError):
            service.send_export(company_id, to)
        assert fake_transport.sent == []

    def test_nothing_sent_when_export_fails(
        self, temp_db, sample_accounts, sample_company, fake_transport
    ):
        """A failed export sends no message."""
        service = EmailService(BrokenCatalogDatabase(temp_db), fake_transport, sender="x@y.ec")
        with pytest.raises(DataAccessError):
            service.send_export(sample_company.id, "a@b.ec")
        assert fake_transport.sent == []


class TestResendTransport:
    """Tests for the Resend transport."""

    def make_message(self):
        return EmailMessage(
            sender="x@y.ec",
            to=["a@b.ec"],
            subject="Archivos",
            text="Adjunto",
            attachments=[Attachment(filename="A.txt", content="MQ==")],
        )

    def test_missing_api_key(self):
        """A missing key is a configuration error."""
        with pytest.raises(ConfigurationError, match="RESEND_API_KEY"):
            ResendTransport(api_key=None)

    def test_posts_payload(self):
        """The message is posted as JSON with bearer auth."""
        session = FakeSession()
        ResendTransport(api_key="re_test", session=session).send(self.make_message())

        url, kwargs = session.calls[0]
        assert url == RESEND_API_URL
        assert kwargs["headers"]["Authorization"] == "Bearer re_test"
        assert kwargs["json"]["to"] == ["a@b.ec"]
        assert kwargs["json"]["attachments"] == [{"filename": "A.txt", "content": "MQ=="}]

    def test_rejected(self):
        """A non-success response surfaces the provider's text."""
        session = FakeSession(response=FakeResponse(422, '{"message": "invalid from"}'))
        transport = ResendTransport(api_key="re_test", session=session)
        with pytest.raises(ExternalServiceError, match="invalid from"):
            transport.send(self.make_message())

    def test_network_error(self):
        """Connection failures become external service errors."""
        session = FakeSession(error=requests.ConnectionError("no route"))
        transport = ResendTransport(api_key="re_test", session=session)
        with pytest.raises(ExternalServiceError, match="no route"):
            transport.send(self.make_message())
