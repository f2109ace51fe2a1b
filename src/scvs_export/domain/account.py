"""Account domain service."""

import logging
from typing import Optional

from scvs_export.database.base import Database
from scvs_export.domain.entities import Account as AccountEntity
from scvs_export.domain.errors import (
    NotFoundError,
    account_not_found,
    code_not_found,
)

logger = logging.getLogger(__name__)


class AccountService:
    """Service for managing a company's chart of accounts and its mapping."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_account(self, account_id: str) -> Optional[AccountEntity]:
        """Get account by ID."""
        return self.db.get_account(account_id)

    def list_accounts(self, company_id: str) -> list[AccountEntity]:
        """List a company's accounts ordered by accounting code."""
        return self.db.list_accounts(company_id)

    def list_unmapped(self, company_id: str) -> list[AccountEntity]:
        """List accounts that still have no regulatory code."""
        return self.db.list_accounts(company_id, unmapped_only=True)

    def count_unmapped(self, company_id: str) -> int:
        """Count accounts that still have no regulatory code.

        Unmapped accounts are left out of every aggregate; callers surface this
        count as a warning, it never blocks an export.
        """
        return len(self.list_unmapped(company_id))

    def assign_code(self, account_id: str, code: Optional[str]) -> None:
        """Set or clear the regulatory code of an account.

        Args:
            account_id: Account ID
            code: Regulatory code, or None to clear the mapping

        Raises:
            NotFoundError: If the account or the code does not exist
        """
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))

        if code is not None:
            code = code.strip() or None
        if code is not None and self.db.get_catalog_entry(code) is None:
            raise NotFoundError(code_not_found(code))

        self.db.update_account_code(account_id, code)
        logger.info("Account %s mapped to %s", account_id, code or "<none>")
