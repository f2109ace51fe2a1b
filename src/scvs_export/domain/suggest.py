"""Keyword-based mapping suggestions for unmapped accounts.

Suggestions are a convenience to speed up mapping. They are not validated
against accounting standards and never replace an accountant's review.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from scvs_export.database.base import Database
from scvs_export.domain.entities import Account
from scvs_export.domain.errors import PartialUpdateError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuggestionRule:
    """Lowercase keyword substrings and the code they suggest."""

    keywords: tuple[str, ...]
    code: str


# Evaluated in order; the first rule with a matching keyword wins.
HEURISTIC_RULES: tuple[SuggestionRule, ...] = (
    # Cash and equivalents
    SuggestionRule(("banco", "caja", "efectivo"), "10101"),
    # Trade receivables
    SuggestionRule(("cliente", "cuentas por cobrar", "cxc"), "103"),
    # Inventories
    SuggestionRule(("inventario", "mercaderia", "mercaderías", "inventarios"), "105"),
    # Property, plant and equipment
    SuggestionRule(("propiedad", "planta", "equipo", "maquinaria"), "121"),
    # Accumulated depreciation
    SuggestionRule(("depreciacion", "depreciación"), "12199"),
    # Trade payables
    SuggestionRule(("proveedor", "cuentas por pagar", "cxp"), "201"),
    # Share capital
    SuggestionRule(("capital",), "301"),
    # Sales revenue
    SuggestionRule(("ventas", "ingresos", "operacional"), "410"),
    # Cost of sales
    SuggestionRule(("costo de ventas", "costos", "costo"), "510"),
    # Administrative expenses
    SuggestionRule(("gasto administrativo", "gastos administrativos", "administrativo"), "610"),
)


def suggest_code(
    account_name: str, rules: Iterable[SuggestionRule] = HEURISTIC_RULES
) -> Optional[str]:
    """Suggest a regulatory code for an account name.

    Matching is a case-insensitive substring search. Returns None when no
    rule matches.
    """
    name = (account_name or "").lower()
    for rule in rules:
        if any(keyword in name for keyword in rule.keywords):
            return rule.code
    return None


def suggest_mappings(
    accounts: Iterable[Account], rules: Iterable[SuggestionRule] = HEURISTIC_RULES
) -> dict[str, str]:
    """Map account ID to suggested code for unmapped accounts.

    Accounts that already have a code, or for which no rule matches, are
    left out of the result.
    """
    rules = tuple(rules)
    suggestions: dict[str, str] = {}
    for account in accounts:
        if account.scvs_code is not None:
            continue
        code = suggest_code(account.name, rules)
        if code is not None:
            suggestions[account.id] = code
    return suggestions


class SuggestionService:
    """Computes and applies mapping suggestions for a company."""

    def __init__(self, db: Database, rules: Iterable[SuggestionRule] = HEURISTIC_RULES):
        """Initialize suggestion service.

        Args:
            db: Database instance
            rules: Ordered heuristic rules
        """
        self.db = db
        self.rules = tuple(rules)

    def preview(self, company_id: str) -> dict[str, str]:
        """Suggestions for the company's unmapped accounts, without writing."""
        return suggest_mappings(self.db.list_accounts(company_id, unmapped_only=True), self.rules)

    async def apply_suggestions_async(self, company_id: str) -> dict[str, str]:
        """Write suggestions for all unmapped accounts concurrently.

        One update is issued per account. There is no transaction across the
        batch: updates that succeed stay applied even when others fail.

        Returns:
            Mapping of account ID to the code written

        Raises:
            PartialUpdateError: If at least one update failed
        """
        suggestions = self.preview(company_id)
        if not suggestions:
            return {}

        account_ids = list(suggestions)
        results = await asyncio.gather(
            *(
                asyncio.to_thread(self._apply_one, account_id, suggestions[account_id])
                for account_id in account_ids
            ),
            return_exceptions=True,
        )

        applied: dict[str, str] = {}
        failures: list[tuple[str, str]] = []
        for account_id, result in zip(account_ids, results):
            if isinstance(result, Exception):
                failures.append((account_id, str(result)))
            elif result:
                applied[account_id] = suggestions[account_id]

        logger.info(
            "Applied %d suggestions for company %s (%d failed)",
            len(applied), company_id, len(failures),
        )
        if failures:
            raise PartialUpdateError(applied, failures)
        return applied

    def apply_suggestions(self, company_id: str) -> dict[str, str]:
        """Synchronous entry point for apply_suggestions_async."""
        return asyncio.run(self.apply_suggestions_async(company_id))

    def _apply_one(self, account_id: str, code: str) -> bool:
        # False when the account was mapped after the preview was taken
        return self.db.assign_code_if_unmapped(account_id, code)
