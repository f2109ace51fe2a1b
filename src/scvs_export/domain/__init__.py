"""Domain layer for scvs_export application.

Services are imported from their modules directly; only the dependency-free
entities are re-exported here so the database layer can import them without
a cycle.
"""

from scvs_export.domain.entities import (
    Account,
    Adjustment,
    CatalogEntry,
    Company,
    ExportFile,
    StatementLine,
    StatementType,
)

__all__ = [
    "Account",
    "Adjustment",
    "CatalogEntry",
    "Company",
    "ExportFile",
    "StatementLine",
    "StatementType",
]
