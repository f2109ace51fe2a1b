"""Per-code aggregation of account balances and adjustments."""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Optional

from scvs_export.database.base import Database
from scvs_export.domain.entities import Account, Adjustment

ZERO = Decimal("0")


def sum_by_code(items: Iterable[tuple[Optional[str], Optional[Decimal]]]) -> dict[str, Decimal]:
    """Sum amounts grouped by code.

    Items with a null code are skipped and null amounts count as zero.
    Decimal addition keeps the result independent of item order.
    """
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for code, amount in items:
        if code is None:
            continue
        totals[code] += amount if amount is not None else ZERO
    return dict(totals)


def sum_account_balances(accounts: Iterable[Account]) -> dict[str, Decimal]:
    """Sum account balances per regulatory code, ignoring unmapped accounts."""
    return sum_by_code((account.scvs_code, account.balance) for account in accounts)


def sum_adjustments(adjustments: Iterable[Adjustment]) -> dict[str, Decimal]:
    """Sum adjustment values per regulatory code."""
    return sum_by_code((adjustment.code, adjustment.value) for adjustment in adjustments)


class AggregationService:
    """Reads a company's rows and reduces them to per-code totals."""

    def __init__(self, db: Database):
        """Initialize aggregation service.

        Args:
            db: Database instance
        """
        self.db = db

    def account_totals(self, company_id: str) -> dict[str, Decimal]:
        """Sum of balances of the company's mapped accounts, per code."""
        return sum_account_balances(self.db.list_accounts(company_id, mapped_only=True))

    def adjustment_totals(self, company_id: str) -> dict[str, Decimal]:
        """Sum of the company's adjustments, per code."""
        return sum_adjustments(self.db.list_adjustments(company_id))
