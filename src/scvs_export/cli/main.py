"""Main CLI entry point."""

import click

from scvs_export.config import load_settings
from scvs_export.database.factories import create_database
from scvs_export.domain.errors import DataAccessError
from scvs_export.logger import configure_logging

# Import and register all commands at module level
from scvs_export.cli.commands import (
    account,
    adjustment,
    catalog,
    company,
    export,
    statement,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to SQLite database file (overrides SCVS_DB_PATH environment variable)",
    envvar="SCVS_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level (overrides SCVS_LOG_LEVEL environment variable)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """SCVS export - map a chart of accounts to the SCVS code catalog.

    Aggregates account balances per regulatory code and exports the four
    financial statements as the tab-delimited text files required by the
    Superintendencia de Compañías.
    """
    ctx.ensure_object(dict)
    settings = load_settings()
    ctx.obj["settings"] = settings

    configure_logging(level=log_level or settings.log_level, log_file=settings.log_file)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        database_url = None if db_path else settings.database_url
        db = create_database(database_url=database_url, database_path=db_path or settings.db_path)
        try:
            db.connect()
            db.initialize_schema()
        except DataAccessError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
company.register_commands(cli)
catalog.register_commands(cli)
account.register_commands(cli)
adjustment.register_commands(cli)
statement.register_commands(cli)
export.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
