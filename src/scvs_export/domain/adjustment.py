"""Adjustment domain service."""

import logging
from decimal import Decimal

from scvs_export.database.base import Database
from scvs_export.domain.entities import Adjustment as AdjustmentEntity
from scvs_export.domain.errors import NotFoundError, ValidationError, company_not_found

logger = logging.getLogger(__name__)


class AdjustmentService:
    """Service for manual adjustment entries."""

    def __init__(self, db: Database):
        """Initialize adjustment service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_adjustment(self, company_id: str, code: str, value: Decimal) -> str:
        """Record an adjustment for a regulatory code.

        The code is not checked against the catalog; adjustments on codes the
        catalog does not list are simply never exported.

        Returns:
            Adjustment ID

        Raises:
            NotFoundError: If the company does not exist
            ValidationError: If the code is empty
        """
        if self.db.get_company(company_id) is None:
            raise NotFoundError(company_not_found(company_id))
        code = (code or "").strip()
        if not code:
            raise ValidationError("Regulatory code is required")

        adjustment_id = self.db.create_adjustment(company_id=company_id, code=code, value=value)
        logger.info("Adjustment %s on %s for company %s: %s", adjustment_id, code, company_id, value)
        return adjustment_id

    def list_adjustments(self, company_id: str) -> list[AdjustmentEntity]:
        """List a company's adjustments."""
        return self.db.list_adjustments(company_id)

    def delete_adjustment(self, adjustment_id: str) -> None:
        """Delete an adjustment."""
        self.db.delete_adjustment(adjustment_id)
