"""Tests for ORM to domain mapping."""

from decimal import Decimal

import pytest
from sqlalchemy import text

from scvs_export.database.mappers import (
    account_to_domain,
    adjustment_to_domain,
    catalog_entry_to_domain,
    to_decimal,
)
from scvs_export.database.models import Account, Adjustment, CodigoSCVS
from scvs_export.domain.entities import StatementType
from scvs_export.domain.errors import DataAccessError


class TestToDecimal:
    """Tests for numeric parsing."""

    def test_none_is_zero(self):
        """NULL amounts read as zero."""
        assert to_decimal(None, "saldo") == Decimal("0")

    def test_parses_text_and_numbers(self):
        """Stored text and numbers become Decimals."""
        assert to_decimal("12.50", "saldo") == Decimal("12.50")
        assert to_decimal(3, "saldo") == Decimal("3")

    def test_malformed(self):
        """Non-numeric values are a data access error."""
        with pytest.raises(DataAccessError, match="saldo"):
            to_decimal("doce", "saldo")


class TestEntityMappers:
    """Tests for row validation in the mappers."""

    def test_account_blank_code_is_unmapped(self):
        """A blank regulatory code reads as no mapping."""
        orm = Account(
            id="a", company_id="c", codigo_contable="1.1", nombre="Caja", saldo=None, codigo_scvs=" "
        )
        account = account_to_domain(orm)
        assert account.scvs_code is None
        assert account.balance == Decimal("0")

    def test_catalog_entry(self):
        """Valid catalog rows map to entries."""
        orm = CodigoSCVS(code="10101", descripcion="EFECTIVO", tipo_estado="ESF", orden=3)
        entry = catalog_entry_to_domain(orm)
        assert entry.statement_type == StatementType.ESF
        assert entry.order == 3

    def test_catalog_entry_unknown_type(self):
        """An unknown statement type is rejected."""
        orm = CodigoSCVS(code="10101", descripcion="EFECTIVO", tipo_estado="XYZ", orden=3)
        with pytest.raises(DataAccessError):
            catalog_entry_to_domain(orm)

    def test_catalog_entry_missing_order(self):
        """An entry without display order is rejected."""
        orm = CodigoSCVS(code="10101", descripcion="EFECTIVO", tipo_estado="ESF", orden=None)
        with pytest.raises(DataAccessError):
            catalog_entry_to_domain(orm)

    def test_adjustment_empty_code(self):
        """Adjustments must carry a code."""
        orm = Adjustment(id="j", company_id="c", code="", value=Decimal("1"))
        with pytest.raises(DataAccessError):
            adjustment_to_domain(orm)


class TestStoredValues:
    """Tests for values read back from the database."""

    def test_malformed_stored_balance(self, temp_db, sample_accounts, sample_company):
        """A balance that is not a number fails the read with DataAccessError."""
        session = temp_db.session_factory()
        try:
            session.execute(
                text("UPDATE accounts SET saldo = 'doce' WHERE codigo_contable = '1.1.01'")
            )
            session.commit()
        finally:
            session.close()

        with pytest.raises(DataAccessError, match="saldo"):
            temp_db.list_accounts(sample_company.id)

    def test_non_finite_text(self):
        """NaN and infinities are not valid amounts."""
        with pytest.raises(DataAccessError):
            to_decimal("NaN", "value")
        with pytest.raises(DataAccessError):
            to_decimal("Infinity", "value")
