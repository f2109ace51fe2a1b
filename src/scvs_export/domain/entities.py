"""Domain model entities for scvs_export.

These are pure data classes representing business concepts, independent of
database schema. Rows coming from the store are parsed into these shapes once,
so aggregation and export logic only ever see checked values.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


class StatementType(str, Enum):
    """The four financial statements required by the SCVS."""

    ESF = "ESF"
    ERI = "ERI"
    EFE = "EFE"
    ECP = "ECP"

    @property
    def filename(self) -> str:
        """Fixed export filename expected by the regulator."""
        return STATEMENT_FILENAMES[self]

    @property
    def title(self) -> str:
        """Human readable statement name."""
        return STATEMENT_TITLES[self]


STATEMENT_FILENAMES = {
    StatementType.ESF: "ESTADO_SITUACION_FINANCIERA.txt",
    StatementType.ERI: "ESTADO_RESULTADO_INTEGRAL.txt",
    StatementType.EFE: "ESTADO_FLUJO_EFECTIVO.txt",
    StatementType.ECP: "ESTADO_CAMBIOS_PATRIMONIO.txt",
}

STATEMENT_TITLES = {
    StatementType.ESF: "Estado de Situación Financiera",
    StatementType.ERI: "Estado de Resultado Integral",
    StatementType.EFE: "Estado de Flujo de Efectivo",
    StatementType.ECP: "Estado de Cambios en el Patrimonio",
}


@dataclass(frozen=True)
class Company:
    """Company domain entity."""

    id: str
    ruc: str
    name: str
    period: int


@dataclass(frozen=True)
class Account:
    """Chart-of-accounts entry belonging to one company."""

    id: str
    company_id: str
    accounting_code: str
    name: str
    balance: Decimal
    scvs_code: Optional[str]

    @property
    def is_mapped(self) -> bool:
        return self.scvs_code is not None


@dataclass(frozen=True)
class CatalogEntry:
    """Regulatory code catalog entry (read-only reference data)."""

    code: str
    description: str
    statement_type: StatementType
    order: int


@dataclass(frozen=True)
class Adjustment:
    """Manual correcting entry keyed directly by regulatory code."""

    id: str
    company_id: str
    code: str
    value: Decimal


@dataclass(frozen=True)
class StatementLine:
    """Derived statement line, computed on demand and never persisted."""

    code: str
    value: Decimal
    description: Optional[str] = None


@dataclass(frozen=True)
class ExportFile:
    """One serialized statement ready to be archived or attached."""

    filename: str
    content: str
