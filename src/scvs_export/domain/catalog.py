"""Code catalog accessor."""

from typing import Optional

from scvs_export.database.base import Database
from scvs_export.domain.entities import CatalogEntry, StatementType


class CatalogService:
    """Read access to the regulatory code catalog."""

    def __init__(self, db: Database):
        """Initialize catalog service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_codes(self, statement_type: StatementType) -> list[CatalogEntry]:
        """Return the catalog entries of one statement type.

        Entries are sorted ascending by display order.

        Raises:
            DataAccessError: If the store fails or returns malformed rows
        """
        entries = self.db.list_catalog(statement_type=StatementType(statement_type))
        return sorted(entries, key=lambda entry: entry.order)

    def list_catalog(self, statement_type: Optional[StatementType] = None) -> list[CatalogEntry]:
        """List catalog entries, optionally limited to one statement type."""
        return self.db.list_catalog(statement_type=statement_type)

    def get_entry(self, code: str) -> Optional[CatalogEntry]:
        """Get a catalog entry by code."""
        return self.db.get_catalog_entry(code)
