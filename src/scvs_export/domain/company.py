"""Company domain service."""

import logging
from typing import Optional

from scvs_export.database.base import Database
from scvs_export.domain.entities import Company as CompanyEntity
from scvs_export.domain.errors import ConflictError, ValidationError, duplicate_ruc
from scvs_export.utils.validation import validate_ruc

logger = logging.getLogger(__name__)

MIN_PERIOD = 1900
MAX_PERIOD = 2100


class CompanyService:
    """Service for registering and looking up companies."""

    def __init__(self, db: Database):
        """Initialize company service.

        Args:
            db: Database instance
        """
        self.db = db

    def register_company(self, ruc: str, name: str, period: int | str | None) -> str:
        """Register a new company.

        Args:
            ruc: Tax ID, 13 numeric digits
            name: Legal name (razón social)
            period: Fiscal period year

        Returns:
            Company ID

        Raises:
            ValidationError: If any field is missing or malformed
            ConflictError: If a company with the same RUC exists
        """
        ruc = (ruc or "").strip()
        if not validate_ruc(ruc):
            raise ValidationError("RUC must have 13 numeric digits")

        name = (name or "").strip()
        if not name:
            raise ValidationError("Legal name is required")

        if period is None or (isinstance(period, str) and not period.strip()):
            raise ValidationError("Fiscal period is required")
        try:
            period_year = int(period)
        except (TypeError, ValueError):
            raise ValidationError(f"Fiscal period must be a year, got '{period}'")
        if not MIN_PERIOD <= period_year <= MAX_PERIOD:
            raise ValidationError(
                f"Fiscal period must be between {MIN_PERIOD} and {MAX_PERIOD}"
            )

        if self.db.get_company_by_ruc(ruc) is not None:
            raise ConflictError(duplicate_ruc(ruc))

        company_id = self.db.create_company(ruc=ruc, name=name, period=period_year)
        logger.info("Registered company %s (RUC %s)", company_id, ruc)
        return company_id

    def get_company(self, company_id: str) -> Optional[CompanyEntity]:
        """Get company by ID."""
        return self.db.get_company(company_id)

    def get_company_by_ruc(self, ruc: str) -> Optional[CompanyEntity]:
        """Get company by RUC."""
        return self.db.get_company_by_ruc(ruc)

    def list_companies(self) -> list[CompanyEntity]:
        """List all companies ordered by legal name."""
        return self.db.list_companies()
