"""Export and email commands."""

from pathlib import Path

import click

from scvs_export.cli.company_resolution import resolve_company_or_exit
from scvs_export.cli.error_handling import handle_domain_error
from scvs_export.domain.account import AccountService
from scvs_export.domain.email import EmailService
from scvs_export.domain.errors import DomainError
from scvs_export.domain.export import ExportService
from scvs_export.mail.resend import ResendTransport


def _warn_unmapped(db, company_id: str) -> None:
    unmapped = AccountService(db).count_unmapped(company_id)
    if unmapped:
        click.echo(
            f"Warning: {unmapped} account(s) without regulatory code are not included.",
            err=True,
        )


@click.command("export")
@click.argument("company", metavar="COMPANY")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    default=".",
    show_default=True,
    help="Directory for the generated files",
)
@click.option("--unzipped", is_flag=True, help="Write the four TXT files instead of a zip")
@click.pass_context
def export_statements(ctx, company: str, output_dir: str, unzipped: bool):
    """Export the four SCVS TXT files for a company.

    By default writes TXT_SCVS_<companyId>.zip into the output directory.
    """
    db = ctx.obj["db"]
    company_id = resolve_company_or_exit(ctx, company)
    _warn_unmapped(db, company_id)
    service = ExportService(db)
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    try:
        if unzipped:
            files = service.build_all_files(company_id)
            for export_file in files:
                (out / export_file.filename).write_text(export_file.content, encoding="utf-8")
                click.echo(f"Wrote {out / export_file.filename}")
            return
        filename, data = service.build_archive(company_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    (out / filename).write_bytes(data)
    click.echo(f"Wrote {out / filename}")


@click.command("email")
@click.argument("company", metavar="COMPANY")
@click.argument("to", metavar="EMAIL")
@click.pass_context
def email_statements(ctx, company: str, to: str):
    """Email the four SCVS TXT files as attachments.

    Requires RESEND_API_KEY; the sender is FROM_EMAIL.
    """
    db = ctx.obj["db"]
    settings = ctx.obj["settings"]
    company_id = resolve_company_or_exit(ctx, company)
    _warn_unmapped(db, company_id)

    try:
        transport = ResendTransport(api_key=settings.resend_api_key)
        EmailService(db, transport, sender=settings.from_email).send_export(company_id, to)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Sent TXT files to {to}")


def register_commands(cli):
    """Register export and email commands with main CLI."""
    cli.add_command(export_statements)
    cli.add_command(email_statements)
