"""Company registration commands."""

import click

from scvs_export.cli.company_resolution import resolve_company_or_exit
from scvs_export.cli.error_handling import handle_domain_error
from scvs_export.domain.account import AccountService
from scvs_export.domain.company import CompanyService
from scvs_export.domain.errors import DomainError


@click.group()
def company_group():
    """Manage companies."""
    pass


@company_group.command("create")
@click.argument("ruc")
@click.argument("name", metavar="LEGAL_NAME")
@click.option("--period", required=True, help="Fiscal period (year)")
@click.pass_context
def create_company(ctx, ruc: str, name: str, period: str):
    """Register a company.

    Examples:
        scvs company create 1790012345001 "Comercial Andina S.A." --period 2024
    """
    service = CompanyService(ctx.obj["db"])

    try:
        company_id = service.register_company(ruc=ruc, name=name, period=period)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Created company '{name.strip()}' (ID: {company_id})")


@company_group.command("list")
@click.pass_context
def list_companies(ctx):
    """List all companies."""
    service = CompanyService(ctx.obj["db"])

    companies = service.list_companies()
    if not companies:
        click.echo("No companies found.")
        return

    click.echo("\nCompanies:")
    click.echo("-" * 90)
    for c in companies:
        click.echo(f"{c.id} | RUC: {c.ruc} | {c.period} | {c.name}")


@company_group.command("show")
@click.argument("company", metavar="COMPANY")
@click.pass_context
def show_company(ctx, company: str):
    """Show a company and its mapping progress.

    COMPANY can be a company ID or RUC.
    """
    db = ctx.obj["db"]
    company_id = resolve_company_or_exit(ctx, company)
    company_obj = CompanyService(db).get_company(company_id)
    account_service = AccountService(db)

    accounts = account_service.list_accounts(company_id)
    unmapped = sum(1 for acc in accounts if not acc.is_mapped)

    click.echo(f"{company_obj.name}")
    click.echo(f"  ID: {company_obj.id}")
    click.echo(f"  RUC: {company_obj.ruc} · Period: {company_obj.period}")
    click.echo(f"  Accounts: {len(accounts)} ({unmapped} without regulatory code)")


def register_commands(cli):
    """Register company commands with main CLI."""
    cli.add_command(company_group, name="company")
