"""Mapper functions to convert SQLAlchemy models into domain entities.

This is the ingress boundary: every row is parsed and checked here once, so
a malformed row surfaces as a DataAccessError instead of leaking loosely typed
values into the aggregation logic.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from scvs_export.domain import entities as domain
from scvs_export.domain.errors import DataAccessError
from scvs_export.database.models import (
    Company as ORMCompany,
    Account as ORMAccount,
    CodigoSCVS as ORMCodigoSCVS,
    Adjustment as ORMAdjustment,
)


def to_decimal(value: Any, field: str) -> Decimal:
    """Parse a stored numeric value, treating NULL as zero."""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation:
        raise DataAccessError(f"Malformed numeric value for {field}: {value!r}")
    if not parsed.is_finite():
        raise DataAccessError(f"Malformed numeric value for {field}: {value!r}")
    return parsed


def _optional_code(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _required_code(value: Optional[str], field: str) -> str:
    code = _optional_code(value)
    if code is None:
        raise DataAccessError(f"Malformed row: empty {field}")
    return code


def company_to_domain(orm_company: ORMCompany) -> domain.Company:
    """Convert SQLAlchemy Company model to domain Company entity."""
    return domain.Company(
        id=orm_company.id,
        ruc=orm_company.ruc,
        name=orm_company.razon_social,
        period=orm_company.periodo,
    )


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        company_id=orm_account.company_id,
        accounting_code=orm_account.codigo_contable,
        name=orm_account.nombre,
        balance=to_decimal(orm_account.saldo, "saldo"),
        scvs_code=_optional_code(orm_account.codigo_scvs),
    )


def catalog_entry_to_domain(orm_code: ORMCodigoSCVS) -> domain.CatalogEntry:
    """Convert SQLAlchemy CodigoSCVS model to domain CatalogEntry entity."""
    try:
        statement_type = domain.StatementType(orm_code.tipo_estado)
    except ValueError:
        raise DataAccessError(
            f"Malformed row: unknown statement type {orm_code.tipo_estado!r} "
            f"for code {orm_code.code!r}"
        )
    if orm_code.orden is None:
        raise DataAccessError(f"Malformed row: missing order for code {orm_code.code!r}")
    return domain.CatalogEntry(
        code=_required_code(orm_code.code, "code"),
        description=orm_code.descripcion or "",
        statement_type=statement_type,
        order=int(orm_code.orden),
    )


def adjustment_to_domain(orm_adjustment: ORMAdjustment) -> domain.Adjustment:
    """Convert SQLAlchemy Adjustment model to domain Adjustment entity."""
    return domain.Adjustment(
        id=orm_adjustment.id,
        company_id=orm_adjustment.company_id,
        code=_required_code(orm_adjustment.code, "code"),
        value=to_decimal(orm_adjustment.value, "value"),
    )
