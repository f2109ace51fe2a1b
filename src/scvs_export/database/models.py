"""SQLAlchemy models for the scvs_export database."""

import uuid
from datetime import datetime, UTC
from decimal import Decimal
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    TypeDecorator,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class DecimalText(TypeDecorator):
    """Exact decimal amount stored as its text representation.

    SQLite has no decimal type and would keep Numeric columns as REAL. Values
    are read back as the stored text; the mappers parse them into Decimal.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        return f"{value:f}"

    def process_result_value(self, value, dialect):
        return value


def _new_id() -> str:
    return str(uuid.uuid4())


class Company(Base):
    """Company model."""

    __tablename__ = "companies"

    id = Column(String(36), primary_key=True, default=_new_id)
    ruc = Column(String(13), unique=True, nullable=False)
    razon_social = Column(String, nullable=False)
    periodo = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    accounts = relationship("Account", back_populates="company", cascade="all, delete-orphan")
    adjustments = relationship("Adjustment", back_populates="company", cascade="all, delete-orphan")


class CodigoSCVS(Base):
    """Regulatory code catalog model."""

    __tablename__ = "codigo_scvs"

    code = Column(String, primary_key=True)
    descripcion = Column(String, nullable=False, default="")
    tipo_estado = Column(String(3), nullable=False)
    orden = Column(Integer, nullable=False)

    # Display order is unique within a statement type
    __table_args__ = (UniqueConstraint("tipo_estado", "orden", name="uq_tipo_estado_orden"),)


class Account(Base):
    """Chart-of-accounts model."""

    __tablename__ = "accounts"

    id = Column(String(36), primary_key=True, default=_new_id)
    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False)
    codigo_contable = Column(String, nullable=False)
    nombre = Column(String, nullable=False)
    saldo = Column(DecimalText, nullable=True)
    codigo_scvs = Column(String, ForeignKey("codigo_scvs.code"), nullable=True)

    __table_args__ = (
        UniqueConstraint("company_id", "codigo_contable", name="uq_company_codigo_contable"),
    )

    # Relationships
    company = relationship("Company", back_populates="accounts")


class Adjustment(Base):
    """Manual adjustment model."""

    __tablename__ = "ajustes"

    id = Column(String(36), primary_key=True, default=_new_id)
    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False)
    code = Column(String, nullable=False)
    value = Column(DecimalText, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    company = relationship("Company", back_populates="adjustments")


def create_db_engine(database_url: str) -> Engine:
    """Create the SQLAlchemy engine and make sure the schema exists."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Statements are computed on worker threads
        connect_args["check_same_thread"] = False
    engine = create_engine(database_url, echo=False, connect_args=connect_args)
    Base.metadata.create_all(engine)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory bound to an engine."""
    return sessionmaker(bind=engine, expire_on_commit=False)
