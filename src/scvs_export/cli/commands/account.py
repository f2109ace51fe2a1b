"""Chart-of-accounts and mapping commands."""

import click

from scvs_export.cli.company_resolution import resolve_company_or_exit
from scvs_export.cli.error_handling import handle_domain_error
from scvs_export.domain.account import AccountService
from scvs_export.domain.csv_import import AccountImportService
from scvs_export.domain.errors import DomainError, PartialUpdateError
from scvs_export.domain.serializer import format_value
from scvs_export.domain.suggest import SuggestionService


@click.group()
def account_group():
    """Manage a company's accounts and their regulatory codes."""
    pass


@account_group.command("import")
@click.argument("company", metavar="COMPANY")
@click.argument("csv_file", type=click.Path(exists=True))
@click.pass_context
def import_accounts(ctx, company: str, csv_file: str):
    """Import accounts from a CSV file.

    The file needs the columns codigo_contable, nombre and saldo, and may
    carry a codigo_scvs column with existing mappings.
    """
    company_id = resolve_company_or_exit(ctx, company)
    service = AccountImportService(ctx.obj["db"])

    try:
        result = service.import_csv(company_id=company_id, csv_file_path=csv_file)
    except (DomainError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"\nImport complete:")
    click.echo(f"  Imported: {result['imported']} accounts")
    click.echo(f"  Skipped: {result['skipped']} duplicates")
    if result["errors"]:
        click.echo(f"  Errors: {len(result['errors'])}")
        for error in result["errors"]:
            click.echo(f"    {error}", err=True)


@account_group.command("list")
@click.argument("company", metavar="COMPANY")
@click.option("--unmapped", is_flag=True, help="Only accounts without a regulatory code")
@click.pass_context
def list_accounts(ctx, company: str, unmapped: bool):
    """List a company's accounts."""
    company_id = resolve_company_or_exit(ctx, company)
    service = AccountService(ctx.obj["db"])

    accounts = service.list_unmapped(company_id) if unmapped else service.list_accounts(company_id)
    if not accounts:
        click.echo("No accounts found.")
        return

    for acc in accounts:
        code = acc.scvs_code or "-"
        click.echo(
            f"{acc.accounting_code:12s} | {acc.name:40s} | {format_value(acc.balance):>15s} | {code:8s} | {acc.id}"
        )

    unmapped_count = sum(1 for acc in accounts if not acc.is_mapped)
    if unmapped_count and not unmapped:
        click.echo(
            f"\nWarning: {unmapped_count} account(s) without regulatory code. "
            "Assign a code to every account so the TXT files are complete."
        )


@account_group.command("map")
@click.argument("account_id", metavar="ACCOUNT_ID")
@click.argument("code", required=False)
@click.option("--clear", is_flag=True, help="Remove the current mapping")
@click.pass_context
def map_account(ctx, account_id: str, code: str | None, clear: bool):
    """Assign a regulatory code to an account.

    Examples:
        scvs account map 3f2c... 10101
        scvs account map 3f2c... --clear
    """
    if not clear and not code:
        click.echo("Error: Provide a CODE or use --clear", err=True)
        ctx.exit(1)

    service = AccountService(ctx.obj["db"])
    try:
        service.assign_code(account_id, None if clear else code)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if clear:
        click.echo(f"Cleared mapping of account {account_id}")
    else:
        click.echo(f"Account {account_id} mapped to {code}")


@account_group.command("suggest")
@click.argument("company", metavar="COMPANY")
@click.option("--dry-run", is_flag=True, help="Show suggestions without applying them")
@click.pass_context
def suggest_mappings(ctx, company: str, dry_run: bool):
    """Suggest codes for unmapped accounts from keywords in their names.

    Suggestions are a starting point and should be reviewed by an accountant.
    Accounts that already have a code are never changed.
    """
    db = ctx.obj["db"]
    company_id = resolve_company_or_exit(ctx, company)
    service = SuggestionService(db)
    accounts = {acc.id: acc for acc in AccountService(db).list_accounts(company_id)}

    suggestions = service.preview(company_id)
    if not suggestions:
        click.echo("No automatic suggestions found for unmapped accounts. Review them manually.")
        return

    if dry_run:
        for account_id, code in suggestions.items():
            click.echo(f"{accounts[account_id].name} -> {code}")
        return

    try:
        applied = service.apply_suggestions(company_id)
    except PartialUpdateError as e:
        for account_id, code in e.applied.items():
            click.echo(f"✓ {accounts[account_id].name} -> {code}")
        handle_domain_error(ctx, e)
        return
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    for account_id, code in applied.items():
        click.echo(f"✓ {accounts[account_id].name} -> {code}")
    click.echo(f"\nApplied {len(applied)} suggestion(s)")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
