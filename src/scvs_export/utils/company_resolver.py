"""Utility for resolving company references to IDs."""

from scvs_export.domain.company import CompanyService
from scvs_export.domain.errors import NotFoundError
from scvs_export.utils.validation import validate_ruc


def resolve_company(company_service: CompanyService, company: str) -> str:
    """Resolve a company ID or RUC to a company ID.

    Args:
        company_service: CompanyService instance
        company: Company ID or 13-digit RUC

    Returns:
        Company ID

    Raises:
        NotFoundError: If no company matches
    """
    company = company.strip()
    if validate_ruc(company):
        found = company_service.get_company_by_ruc(company)
        if found is not None:
            return found.id

    found = company_service.get_company(company)
    if found is not None:
        return found.id

    raise NotFoundError(f"Company '{company}' not found")
