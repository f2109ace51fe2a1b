"""Statement line builder."""

import logging
from decimal import Decimal
from typing import Optional

from scvs_export.database.base import Database
from scvs_export.domain.aggregation import AggregationService, ZERO
from scvs_export.domain.catalog import CatalogService
from scvs_export.domain.entities import StatementLine, StatementType
from scvs_export.domain.serializer import format_value

logger = logging.getLogger(__name__)

TOTAL_ASSETS_CODE = "1"
TOTAL_LIABILITIES_EQUITY_CODE = "2"


class StatementService:
    """Builds ordered statement lines from the catalog and company data."""

    def __init__(self, db: Database):
        """Initialize statement service.

        Args:
            db: Database instance
        """
        self.db = db
        self.catalog = CatalogService(db)
        self.aggregation = AggregationService(db)

    def build_lines(self, company_id: str, statement_type: StatementType) -> list[StatementLine]:
        """Build the lines of one statement.

        The catalog drives the output: there is exactly one line per catalog
        entry of the statement type, in ascending display order, valued at the
        account total plus the adjustment total for its code (each defaulting
        to zero). Totals on codes outside the catalog are dropped.

        Args:
            company_id: Company ID
            statement_type: Statement to build

        Returns:
            Ordered list of statement lines

        Raises:
            DataAccessError: If any of the underlying reads fails
        """
        codes = self.catalog.get_codes(statement_type)
        account_totals = self.aggregation.account_totals(company_id)
        adjustment_totals = self.aggregation.adjustment_totals(company_id)

        lines = [
            StatementLine(
                code=entry.code,
                value=account_totals.get(entry.code, ZERO) + adjustment_totals.get(entry.code, ZERO),
                description=entry.description,
            )
            for entry in codes
        ]
        logger.debug(
            "Built %d %s lines for company %s", len(lines), StatementType(statement_type).value, company_id
        )
        return lines

    def build_statements(self, company_id: str) -> dict[StatementType, list[StatementLine]]:
        """Build the lines of all four statements, one after the other."""
        return {
            statement_type: self.build_lines(company_id, statement_type)
            for statement_type in StatementType
        }


def check_balance(esf_lines: list[StatementLine]) -> Optional[str]:
    """Check that total assets equal total liabilities plus equity.

    Returns:
        A warning message when code 1 and code 2 differ, otherwise None
    """
    values = {line.code: line.value for line in esf_lines}
    total_assets: Decimal = values.get(TOTAL_ASSETS_CODE, ZERO)
    total_liabilities_equity: Decimal = values.get(TOTAL_LIABILITIES_EQUITY_CODE, ZERO)
    if total_assets == total_liabilities_equity:
        return None
    return (
        f"Total assets (code 1) is {format_value(total_assets)} and does not match "
        f"total liabilities+equity (code 2): {format_value(total_liabilities_equity)}."
    )
