"""CLI helpers for company resolution."""

from __future__ import annotations

import click

from scvs_export.domain.company import CompanyService
from scvs_export.domain.errors import NotFoundError
from scvs_export.utils.company_resolver import resolve_company


def resolve_company_or_exit(ctx: click.Context, company: str) -> str:
    """Resolve a company ID or RUC, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_company(CompanyService(ctx.obj["db"]), company)
    except NotFoundError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
