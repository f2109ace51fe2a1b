"""Adjustment commands."""

import click

from scvs_export.cli.company_resolution import resolve_company_or_exit
from scvs_export.cli.error_handling import handle_domain_error
from scvs_export.domain.adjustment import AdjustmentService
from scvs_export.domain.errors import DomainError
from scvs_export.domain.serializer import format_value
from scvs_export.utils.amount_parser import parse_amount


@click.group()
def adjustment_group():
    """Manage manual adjustments on regulatory codes."""
    pass


@adjustment_group.command("add")
@click.argument("company", metavar="COMPANY")
@click.argument("code")
@click.option("--value", required=True, help="Signed adjustment value (e.g. -150.25)")
@click.pass_context
def add_adjustment(ctx, company: str, code: str, value: str):
    """Add an adjustment to a regulatory code.

    Examples:
        scvs adjustment add 1790012345001 10101 --value -0.50
    """
    company_id = resolve_company_or_exit(ctx, company)
    service = AdjustmentService(ctx.obj["db"])

    try:
        amount = parse_amount(value)
        adjustment_id = service.add_adjustment(company_id=company_id, code=code, value=amount)
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Added adjustment of {format_value(amount)} on {code} (ID: {adjustment_id})")


@adjustment_group.command("list")
@click.argument("company", metavar="COMPANY")
@click.pass_context
def list_adjustments(ctx, company: str):
    """List a company's adjustments."""
    company_id = resolve_company_or_exit(ctx, company)
    service = AdjustmentService(ctx.obj["db"])

    adjustments = service.list_adjustments(company_id)
    if not adjustments:
        click.echo("No adjustments found.")
        return

    for adj in adjustments:
        click.echo(f"{adj.code:10s} | {format_value(adj.value):>15s} | {adj.id}")


@adjustment_group.command("delete")
@click.argument("adjustment_id", metavar="ADJUSTMENT_ID")
@click.pass_context
def delete_adjustment(ctx, adjustment_id: str):
    """Delete an adjustment."""
    service = AdjustmentService(ctx.obj["db"])

    try:
        service.delete_adjustment(adjustment_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted adjustment {adjustment_id}")


def register_commands(cli):
    """Register adjustment commands with main CLI."""
    cli.add_command(adjustment_group, name="adjustment")
