"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DataAccessError(DomainError):
    """The backing store is unreachable or returned malformed rows."""


class ExternalServiceError(DomainError):
    """An external collaborator (email transport) rejected the request."""


class ConfigurationError(DomainError):
    """Required configuration is missing."""


class PartialUpdateError(DomainError):
    """Some updates of a batch failed while others were applied.

    Attributes:
        applied: Mapping of account ID to the code that was written
        failures: List of (account_id, message) for the updates that failed
    """

    def __init__(self, applied: dict[str, str], failures: list[tuple[str, str]]):
        self.applied = applied
        self.failures = failures
        super().__init__(partial_update_failed(failures))


def company_not_found(company_id: str) -> str:
    """Return message for missing company."""
    return f"Company {company_id} not found"


def account_not_found(account_id: str) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def code_not_found(code: str) -> str:
    """Return message for a regulatory code missing from the catalog."""
    return f"Regulatory code '{code}' not found in catalog"


def adjustment_not_found(adjustment_id: str) -> str:
    """Return message for missing adjustment."""
    return f"Adjustment {adjustment_id} not found"


def duplicate_ruc(ruc: str) -> str:
    """Return message for duplicate company tax ID."""
    return f"Company with RUC '{ruc}' already exists"


def partial_update_failed(failures: list[tuple[str, str]]) -> str:
    """Return aggregated message for a partially applied batch."""
    details = ", ".join(f"{account_id}: {message}" for account_id, message in failures)
    return (
        f"Failed to apply {len(failures)} suggestion{'s' if len(failures) != 1 else ''}: "
        f"{details}"
    )
