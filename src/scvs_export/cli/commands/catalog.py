"""Code catalog commands."""

import click

from scvs_export.cli.error_handling import handle_domain_error
from scvs_export.domain.catalog import CatalogService
from scvs_export.domain.csv_import import CatalogImportService
from scvs_export.domain.entities import StatementType
from scvs_export.domain.errors import DomainError

STATEMENT_CHOICES = click.Choice([t.value for t in StatementType], case_sensitive=False)


@click.group()
def catalog_group():
    """Inspect and load the SCVS code catalog."""
    pass


@catalog_group.command("load")
@click.argument("csv_file", type=click.Path(exists=True))
@click.pass_context
def load_catalog(ctx, csv_file: str):
    """Load catalog entries from a CSV file.

    The file needs the columns code, descripcion, tipo_estado and orden.
    Existing codes are replaced.
    """
    service = CatalogImportService(ctx.obj["db"])

    try:
        result = service.import_csv(csv_file)
    except (DomainError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Loaded {result['loaded']} catalog entries")
    if result["errors"]:
        click.echo(f"  Errors: {len(result['errors'])}")
        for error in result["errors"]:
            click.echo(f"    {error}", err=True)


@catalog_group.command("list")
@click.option("--type", "statement_type", type=STATEMENT_CHOICES, help="Statement type")
@click.pass_context
def list_catalog(ctx, statement_type: str | None):
    """List catalog codes in display order."""
    service = CatalogService(ctx.obj["db"])

    try:
        entries = service.list_catalog(
            StatementType(statement_type.upper()) if statement_type else None
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not entries:
        click.echo("No catalog entries found.")
        return

    for entry in entries:
        click.echo(
            f"{entry.statement_type.value} {entry.order:5d} | {entry.code:10s} | {entry.description}"
        )


def register_commands(cli):
    """Register catalog commands with main CLI."""
    cli.add_command(catalog_group, name="catalog")
