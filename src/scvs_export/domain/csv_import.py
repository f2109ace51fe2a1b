"""CSV import domain services for accounts and the code catalog."""

import csv
import logging
from pathlib import Path
from typing import Any, Iterator, Optional

from scvs_export.database.base import Database
from scvs_export.domain.entities import StatementType
from scvs_export.domain.errors import NotFoundError, ValidationError, company_not_found
from scvs_export.utils.amount_parser import parse_amount

logger = logging.getLogger(__name__)

ACCOUNT_REQUIRED_COLUMNS = ("codigo_contable", "nombre", "saldo")
CATALOG_REQUIRED_COLUMNS = ("code", "descripcion", "tipo_estado", "orden")


def _read_rows(
    csv_file_path: str, required: tuple[str, ...], errors: list[str]
) -> Iterator[tuple[int, dict[str, str]]]:
    """Yield (row number, row) pairs after checking the header.

    Rows with more non-empty fields than the header are reported in errors
    and skipped.
    """
    csv_path = Path(csv_file_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_file_path}")

    with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
        # Try to detect delimiter
        sample = f.read(1024)
        f.seek(0)
        try:
            delimiter = csv.Sniffer().sniff(sample, delimiters=",;\t").delimiter
        except csv.Error:
            delimiter = ","

        reader = csv.DictReader(f, delimiter=delimiter)
        csv_columns = reader.fieldnames
        if csv_columns is None:
            raise ValidationError("CSV file has no columns")

        columns = {c.strip().lower() for c in csv_columns}
        missing_columns = [c for c in required if c not in columns]
        if missing_columns:
            raise ValidationError(
                f"CSV file missing required columns: {', '.join(missing_columns)}"
            )

        for row_num, row in enumerate(reader, start=2):  # Start at 2 (header is row 1)
            # DictReader collects surplus fields under a None key; blank
            # trailing fields are tolerated
            if any((extra or "").strip() for extra in row.get(None) or []):
                errors.append(f"Row {row_num}: Too many fields")
                continue
            yield row_num, {
                key.strip().lower(): (value or "").strip()
                for key, value in row.items()
                if key is not None
            }


class AccountImportService:
    """Service for importing a company's chart of accounts."""

    def __init__(self, db: Database):
        """Initialize account import service.

        Args:
            db: Database instance
        """
        self.db = db

    def import_csv(self, company_id: str, csv_file_path: str) -> dict[str, Any]:
        """Import accounts from a CSV file.

        Expected columns are codigo_contable, nombre, saldo and an optional
        codigo_scvs. Rows whose accounting code already exists for the
        company are skipped.

        Returns:
            Dict with import statistics:
            - imported: number of accounts imported
            - skipped: number of rows skipped (duplicates)
            - errors: list of error messages

        Raises:
            NotFoundError: If the company doesn't exist
            ValidationError: If required columns are missing
            FileNotFoundError: If CSV file doesn't exist
        """
        if self.db.get_company(company_id) is None:
            raise NotFoundError(company_not_found(company_id))

        imported = 0
        skipped = 0
        errors: list[str] = []

        for row_num, row in _read_rows(csv_file_path, ACCOUNT_REQUIRED_COLUMNS, errors):
            accounting_code = row.get("codigo_contable")
            if not accounting_code:
                errors.append(f"Row {row_num}: Missing codigo_contable")
                continue

            name = row.get("nombre")
            if not name:
                errors.append(f"Row {row_num}: Missing nombre")
                continue

            balance_str = row.get("saldo")
            balance = None
            if balance_str:
                try:
                    balance = parse_amount(balance_str)
                except ValueError as e:
                    errors.append(f"Row {row_num}: {e}")
                    continue

            scvs_code: Optional[str] = row.get("codigo_scvs") or None
            if scvs_code is not None and self.db.get_catalog_entry(scvs_code) is None:
                errors.append(f"Row {row_num}: Regulatory code '{scvs_code}' not found in catalog")
                continue

            if self.db.account_exists(company_id, accounting_code):
                skipped += 1
                continue

            self.db.create_account(
                company_id=company_id,
                accounting_code=accounting_code,
                name=name,
                balance=balance,
                scvs_code=scvs_code,
            )
            imported += 1

        logger.info(
            "Imported %d accounts for company %s (%d skipped, %d errors)",
            imported, company_id, skipped, len(errors),
        )
        return {"imported": imported, "skipped": skipped, "errors": errors}


class CatalogImportService:
    """Service for loading the regulatory code catalog."""

    def __init__(self, db: Database):
        """Initialize catalog import service.

        Args:
            db: Database instance
        """
        self.db = db

    def import_csv(self, csv_file_path: str) -> dict[str, Any]:
        """Load catalog entries from a CSV file, replacing entries by code.

        Returns:
            Dict with keys loaded (int) and errors (list of messages)

        Raises:
            ValidationError: If required columns are missing
            FileNotFoundError: If CSV file doesn't exist
        """
        loaded = 0
        errors: list[str] = []
        seen_orders: dict[tuple[StatementType, int], str] = {
            (entry.statement_type, entry.order): entry.code for entry in self.db.list_catalog()
        }

        for row_num, row in _read_rows(csv_file_path, CATALOG_REQUIRED_COLUMNS, errors):
            code = row.get("code")
            if not code:
                errors.append(f"Row {row_num}: Missing code")
                continue

            try:
                statement_type = StatementType(row.get("tipo_estado", "").upper())
            except ValueError:
                errors.append(f"Row {row_num}: Unknown statement type '{row.get('tipo_estado')}'")
                continue

            try:
                order = int(row.get("orden", ""))
            except ValueError:
                errors.append(f"Row {row_num}: Invalid order '{row.get('orden')}'")
                continue

            holder = seen_orders.get((statement_type, order))
            if holder is not None and holder != code:
                errors.append(
                    f"Row {row_num}: Order {order} already used by code '{holder}' "
                    f"in {statement_type.value}"
                )
                continue

            existing = self.db.get_catalog_entry(code)
            if existing is not None:
                seen_orders.pop((existing.statement_type, existing.order), None)

            self.db.upsert_catalog_entry(
                code=code,
                description=row.get("descripcion", ""),
                statement_type=statement_type,
                order=order,
            )
            seen_orders[(statement_type, order)] = code
            loaded += 1

        logger.info("Loaded %d catalog entries (%d errors)", loaded, len(errors))
        return {"loaded": loaded, "errors": errors}
