"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from scvs_export.domain.entities import (
    Account,
    Adjustment,
    CatalogEntry,
    Company,
    StatementType,
)


class Database(ABC):
    """Abstract database interface for scvs_export.

    Implementations must be safe to call from several threads at once: the
    export fans statement computations out to worker threads.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Company operations
    @abstractmethod
    def create_company(self, ruc: str, name: str, period: int) -> str:
        """Create a company. Returns company ID."""
        pass

    @abstractmethod
    def get_company(self, company_id: str) -> Optional[Company]:
        """Get company by ID."""
        pass

    @abstractmethod
    def get_company_by_ruc(self, ruc: str) -> Optional[Company]:
        """Get company by tax ID."""
        pass

    @abstractmethod
    def list_companies(self) -> list[Company]:
        """List all companies ordered by legal name."""
        pass

    # Code catalog operations
    @abstractmethod
    def list_catalog(self, statement_type: Optional[StatementType] = None) -> list[CatalogEntry]:
        """List catalog entries, ordered by statement type and display order.

        Args:
            statement_type: If given, only entries of that statement type
        """
        pass

    @abstractmethod
    def get_catalog_entry(self, code: str) -> Optional[CatalogEntry]:
        """Get catalog entry by code."""
        pass

    @abstractmethod
    def upsert_catalog_entry(
        self, code: str, description: str, statement_type: StatementType, order: int
    ) -> None:
        """Insert or replace a catalog entry."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self,
        company_id: str,
        accounting_code: str,
        name: str,
        balance: Optional[Decimal],
        scvs_code: Optional[str] = None,
    ) -> str:
        """Create an account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: str) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def account_exists(self, company_id: str, accounting_code: str) -> bool:
        """Check if an account with given accounting code exists for company."""
        pass

    @abstractmethod
    def list_accounts(
        self, company_id: str, mapped_only: bool = False, unmapped_only: bool = False
    ) -> list[Account]:
        """List accounts of a company ordered by accounting code.

        Args:
            company_id: Company ID
            mapped_only: If True, only accounts with a regulatory code
            unmapped_only: If True, only accounts without a regulatory code
        """
        pass

    @abstractmethod
    def update_account_code(self, account_id: str, scvs_code: Optional[str]) -> None:
        """Set or clear the regulatory code of an account."""
        pass

    @abstractmethod
    def assign_code_if_unmapped(self, account_id: str, scvs_code: str) -> bool:
        """Set the regulatory code only if the account has none.

        The check and the write are a single statement.

        Returns:
            True if the account was updated, False if it was already mapped
            or does not exist
        """
        pass

    # Adjustment operations
    @abstractmethod
    def create_adjustment(self, company_id: str, code: str, value: Decimal) -> str:
        """Create an adjustment. Returns adjustment ID."""
        pass

    @abstractmethod
    def list_adjustments(self, company_id: str) -> list[Adjustment]:
        """List adjustments of a company."""
        pass

    @abstractmethod
    def delete_adjustment(self, adjustment_id: str) -> None:
        """Delete an adjustment."""
        pass
