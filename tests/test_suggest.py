"""Tests for mapping suggestions."""

import pytest

from scvs_export.domain.entities import Account
from scvs_export.domain.errors import DataAccessError, PartialUpdateError
from scvs_export.domain.suggest import (
    SuggestionRule,
    SuggestionService,
    suggest_code,
    suggest_mappings,
)


def make_account(account_id, name, code=None):
    """Build an Account entity for suggestion tests."""
    return Account(
        id=account_id,
        company_id="c",
        accounting_code=account_id,
        name=name,
        balance=0,
        scvs_code=code,
    )


class FailingUpdateDatabase:
    """Delegates to a real database but fails updates for chosen accounts."""

    def __init__(self, db, failing_ids):
        self._db = db
        self._failing_ids = set(failing_ids)

    def __getattr__(self, name):
        return getattr(self._db, name)

    def assign_code_if_unmapped(self, account_id, scvs_code):
        if account_id in self._failing_ids:
            raise DataAccessError("database is locked")
        return self._db.assign_code_if_unmapped(account_id, scvs_code)


class MappedAfterPreviewDatabase:
    """Delegates to a real database; maps an account right after it is listed."""

    def __init__(self, db, account_id, code):
        self._db = db
        self._account_id = account_id
        self._code = code

    def __getattr__(self, name):
        return getattr(self._db, name)

    def list_accounts(self, company_id, **kwargs):
        accounts = self._db.list_accounts(company_id, **kwargs)
        self._db.update_account_code(self._account_id, self._code)
        return accounts


class TestSuggestCode:
    """Tests for the keyword rules."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Banco Pichincha", "10101"),
            ("CAJA CHICA", "10101"),
            ("Clientes locales", "103"),
            ("Cuentas por cobrar relacionadas", "103"),
            ("Inventario de mercaderías", "105"),
            ("Maquinaria pesada", "121"),
            ("Depreciación acumulada", "12199"),
            ("Proveedores del exterior", "201"),
            ("Capital suscrito", "301"),
            ("Ventas tarifa 12%", "410"),
            ("Costo de produccion", "510"),
            ("Gastos administrativos varios", "610"),
            ("Gasto de Representación", None),
            ("", None),
        ],
    )
    def test_heuristics(self, name, expected):
        """Names map to the first matching rule's code."""
        assert suggest_code(name) == expected

    def test_first_rule_wins(self):
        """Rule order decides between several matches."""
        # "Caja" matches cash before "capital" is tried
        assert suggest_code("Caja de capital") == "10101"

    def test_custom_rules(self):
        """Callers can supply their own rules."""
        rules = [SuggestionRule(("representación",), "620")]
        assert suggest_code("Gasto de Representación", rules) == "620"


class TestSuggestMappings:
    """Tests for the batch suggestion function."""

    def test_mapped_accounts_never_suggested(self):
        """Accounts that already have a code are left alone."""
        accounts = [
            make_account("a1", "Banco Pichincha", code="103"),
            make_account("a2", "Banco Guayaquil"),
            make_account("a3", "Gasto de Representación"),
        ]
        assert suggest_mappings(accounts) == {"a2": "10101"}


class TestSuggestionService:
    """Tests for applying suggestions to the database."""

    def test_preview_does_not_write(self, temp_db, sample_accounts, sample_company):
        """Previewing leaves the accounts unmapped."""
        service = SuggestionService(temp_db)
        preview = service.preview(sample_company.id)

        assert preview == {sample_accounts["5.1.01"]: "105"}
        assert temp_db.get_account(sample_accounts["5.1.01"]).scvs_code is None

    def test_apply(self, temp_db, sample_accounts, sample_company):
        """Suggestions are written and unmatched accounts stay unmapped."""
        applied = SuggestionService(temp_db).apply_suggestions(sample_company.id)

        assert applied == {sample_accounts["5.1.01"]: "105"}
        assert temp_db.get_account(sample_accounts["5.1.01"]).scvs_code == "105"
        assert temp_db.get_account(sample_accounts["6.1.01"]).scvs_code is None

    def test_apply_keeps_existing_mappings(self, temp_db, sample_accounts, sample_company):
        """A mapped account is not overwritten even if a rule matches it."""
        SuggestionService(temp_db).apply_suggestions(sample_company.id)
        # "Caja general" matches the cash rule and is already on 10101
        assert temp_db.get_account(sample_accounts["1.1.01"]).scvs_code == "10101"
        # "Clientes locales" stays where it was mapped
        assert temp_db.get_account(sample_accounts["1.1.03"]).scvs_code == "103"

    def test_nothing_to_apply(self, temp_db, sample_catalog, sample_company):
        """No unmapped accounts means nothing applied."""
        assert SuggestionService(temp_db).apply_suggestions(sample_company.id) == {}

    def test_partial_failure(self, temp_db, sample_catalog, sample_company):
        """Failed updates are reported and successful ones stay applied."""
        ids = {
            name: temp_db.create_account(
                company_id=sample_company.id,
                accounting_code=code,
                name=name,
                balance=None,
            )
            for code, name in [
                ("1.1.01", "Banco Pichincha"),
                ("1.1.02", "Clientes locales"),
                ("2.1.01", "Proveedores"),
            ]
        }
        db = FailingUpdateDatabase(temp_db, [ids["Clientes locales"]])

        with pytest.raises(PartialUpdateError) as excinfo:
            SuggestionService(db).apply_suggestions(sample_company.id)

        error = excinfo.value
        assert error.applied == {
            ids["Banco Pichincha"]: "10101",
            ids["Proveedores"]: "201",
        }
        assert [account_id for account_id, _ in error.failures] == [ids["Clientes locales"]]
        assert "database is locked" in error.failures[0][1]

        assert temp_db.get_account(ids["Banco Pichincha"]).scvs_code == "10101"
        assert temp_db.get_account(ids["Proveedores"]).scvs_code == "201"
        assert temp_db.get_account(ids["Clientes locales"]).scvs_code is None

    def test_mapping_made_after_preview_is_kept(self, temp_db, sample_accounts, sample_company):
        """An account mapped between preview and write keeps its new code."""
        account_id = sample_accounts["5.1.01"]
        db = MappedAfterPreviewDatabase(temp_db, account_id, "510")

        applied = SuggestionService(db).apply_suggestions(sample_company.id)

        assert applied == {}
        assert temp_db.get_account(account_id).scvs_code == "510"


class TestAssignCodeIfUnmapped:
    """Tests for the conditional mapping write."""

    def test_unmapped_account_is_updated(self, temp_db, sample_accounts):
        """An account without code gets the new code."""
        account_id = sample_accounts["5.1.01"]
        assert temp_db.assign_code_if_unmapped(account_id, "510") is True
        assert temp_db.get_account(account_id).scvs_code == "510"

    def test_mapped_account_is_untouched(self, temp_db, sample_accounts):
        """An account with a code keeps it."""
        account_id = sample_accounts["1.1.03"]
        assert temp_db.assign_code_if_unmapped(account_id, "10101") is False
        assert temp_db.get_account(account_id).scvs_code == "103"

    def test_unknown_account(self, temp_db, sample_catalog):
        """Nothing is written for an unknown account."""
        assert temp_db.assign_code_if_unmapped("missing", "10101") is False
