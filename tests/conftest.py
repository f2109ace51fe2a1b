"""Shared pytest fixtures for scvs_export tests."""

import logging
import os
import tempfile
from decimal import Decimal

import pytest

from scvs_export.database.factories import create_sqlite_database
from scvs_export.domain.account import AccountService
from scvs_export.domain.adjustment import AdjustmentService
from scvs_export.domain.company import CompanyService
from scvs_export.domain.entities import StatementType
from scvs_export.domain.export import ExportService
from scvs_export.domain.statement import StatementService
from scvs_export.logger import LOGGER_NAME
from scvs_export.mail.transport import EmailMessage, EmailTransport


# (code, description, statement type, order)
SAMPLE_CATALOG = [
    ("1", "ACTIVO", StatementType.ESF, 1),
    ("101", "ACTIVO CORRIENTE", StatementType.ESF, 2),
    ("10101", "EFECTIVO Y EQUIVALENTES AL EFECTIVO", StatementType.ESF, 3),
    ("103", "CUENTAS POR COBRAR COMERCIALES", StatementType.ESF, 4),
    ("2", "PASIVO", StatementType.ESF, 6),
    ("201", "CUENTAS POR PAGAR COMERCIALES", StatementType.ESF, 7),
    ("301", "CAPITAL", StatementType.ESF, 9),
    ("410", "INGRESOS DE ACTIVIDADES ORDINARIAS", StatementType.ERI, 1),
    ("510", "COSTO DE VENTAS", StatementType.ERI, 2),
    ("610", "GASTOS ADMINISTRATIVOS", StatementType.ERI, 3),
    ("95", "FLUJOS DE EFECTIVO", StatementType.EFE, 1),
    ("99", "PATRIMONIO AL FINAL DEL PERIODO", StatementType.ECP, 1),
]


class FakeTransport(EmailTransport):
    """In-memory transport recording sent messages."""

    def __init__(self):
        self.sent: list[EmailMessage] = []

    def send(self, message: EmailMessage) -> None:
        self.sent.append(message)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI installs so they don't outlive a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def company_service(temp_db):
    """Create a CompanyService with a temporary database."""
    return CompanyService(temp_db)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def adjustment_service(temp_db):
    """Create an AdjustmentService with a temporary database."""
    return AdjustmentService(temp_db)


@pytest.fixture
def statement_service(temp_db):
    """Create a StatementService with a temporary database."""
    return StatementService(temp_db)


@pytest.fixture
def export_service(temp_db):
    """Create an ExportService with a temporary database."""
    return ExportService(temp_db)


@pytest.fixture
def sample_catalog(temp_db):
    """Load a small catalog covering all four statements."""
    for code, description, statement_type, order in SAMPLE_CATALOG:
        temp_db.upsert_catalog_entry(
            code=code, description=description, statement_type=statement_type, order=order
        )
    return SAMPLE_CATALOG


@pytest.fixture
def sample_company(company_service):
    """Register a sample company."""
    company_id = company_service.register_company(
        ruc="1790012345001", name="Comercial Andina S.A.", period=2024
    )
    return company_service.get_company(company_id)


@pytest.fixture
def sample_accounts(temp_db, sample_catalog, sample_company):
    """Create mapped and unmapped accounts for the sample company.

    Returns a dict of accounting code to account ID.
    """
    rows = [
        ("1.1.01", "Caja general", Decimal("150.25"), "10101"),
        ("1.1.02", "Banco Pichincha", Decimal("1000.00"), "10101"),
        ("1.1.03", "Clientes locales", Decimal("500.50"), "103"),
        ("2.1.01", "Proveedores", Decimal("-300.00"), "201"),
        ("3.1.01", "Capital suscrito", Decimal("-800.00"), "301"),
        ("4.1.01", "Ventas tarifa 12%", Decimal("-2500.00"), "410"),
        ("5.1.01", "Mercaderia vendida", Decimal("1200.00"), None),
        ("6.1.01", "Gasto de Representación", Decimal("75.00"), None),
    ]
    ids = {}
    for accounting_code, name, balance, code in rows:
        ids[accounting_code] = temp_db.create_account(
            company_id=sample_company.id,
            accounting_code=accounting_code,
            name=name,
            balance=balance,
            scvs_code=code,
        )
    return ids


@pytest.fixture
def fake_transport():
    """Create an in-memory email transport."""
    return FakeTransport()


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
