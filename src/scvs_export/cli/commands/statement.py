"""Statement display commands."""

import click

from scvs_export.cli.company_resolution import resolve_company_or_exit
from scvs_export.cli.error_handling import handle_domain_error
from scvs_export.domain.account import AccountService
from scvs_export.domain.entities import StatementType
from scvs_export.domain.errors import DomainError
from scvs_export.domain.serializer import format_value
from scvs_export.domain.statement import StatementService, check_balance

STATEMENT_CHOICES = click.Choice([t.value for t in StatementType], case_sensitive=False)


@click.group()
def statement_group():
    """View computed financial statements."""
    pass


@statement_group.command("show")
@click.argument("company", metavar="COMPANY")
@click.option("--type", "statement_type", type=STATEMENT_CHOICES, help="Only one statement")
@click.pass_context
def show_statements(ctx, company: str, statement_type: str | None):
    """Show the statement lines computed for a company.

    Values are the account balances summed per regulatory code plus any
    adjustments, in catalog order.
    """
    db = ctx.obj["db"]
    company_id = resolve_company_or_exit(ctx, company)
    service = StatementService(db)

    unmapped = AccountService(db).count_unmapped(company_id)
    if unmapped:
        click.echo(f"Warning: {unmapped} account(s) without regulatory code are not included.\n")

    try:
        if statement_type:
            selected = StatementType(statement_type.upper())
            statements = {selected: service.build_lines(company_id, selected)}
        else:
            statements = service.build_statements(company_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    for kind, lines in statements.items():
        click.echo(f"{kind.title} ({kind.value})")
        click.echo("-" * 80)
        if not lines:
            click.echo("  No catalog codes for this statement.")
        for line in lines:
            click.echo(f"  {line.code:10s} {line.description or '':50s} {format_value(line.value):>15s}")
        click.echo("")

    if StatementType.ESF in statements:
        warning = check_balance(statements[StatementType.ESF])
        if warning:
            click.echo(f"Warning: {warning}")


def register_commands(cli):
    """Register statement commands with main CLI."""
    cli.add_command(statement_group, name="statement")
