#!/usr/bin/env python3
"""
Drawer CLI - Entering Counts and Reading Results

Every command restores the session from the snapshot, applies its change,
settles (recompute + save) and prints the result.

Examples:
  cashdrawer set bill-50 350
  cashdrawer mode count
  cashdrawer adjust 1 --amount 12,40 --label "Bakery"
  cashdrawer envelope
"""

from pathlib import Path
from typing import Optional

import click

from ..core.config import Config
from ..core.currency import format_amount
from ..drawer.denominations import DENOMINATIONS, FIELD_IDS
from ..drawer.report import build_report, default_report_path, write_report
from ..drawer.session import DrawerSession
from ..drawer.state import InputMode
from ..drawer.views import DenominationLine

TOTAL_LABELS = {
    "grand_total": "TAMEIO",
    "adjustments_total": "EXODA",
    "cash_total": "METRITA",
    "cash_limited_total": "METRITA LIM",
    "income_limited_total": "ESODA LIM",
}


def _open_session(ctx: click.Context) -> DrawerSession:
    config: Config = ctx.obj["config"]
    return DrawerSession.restore(config)


def _symbol(session: DrawerSession) -> str:
    return session.config.reconciliation.currency_symbol


def _echo_lines(lines: list[DenominationLine]) -> None:
    for line in lines:
        click.echo(f"  {line.count:>4} x {line.label}")


def _echo_totals(session: DrawerSession) -> None:
    for key, value in session.totals.formatted(_symbol(session)).items():
        click.echo(f"{TOTAL_LABELS[key]:<12} {value:>12}")


@click.command(name="set")
@click.argument("field_id", type=click.Choice(FIELD_IDS))
@click.argument("value")
@click.pass_context
def set_field(ctx: click.Context, field_id: str, value: str) -> None:
    """
    Enter a value for a bill, coin or other field.

    In amount mode bills and coins take the money amount (bill-50 350);
    in count mode they take the number of pieces (bill-50 7).
    """
    session = _open_session(ctx)
    result = session.enter(field_id, value)
    session.settle()

    click.echo(f"{field_id} = {result.stored_value or '(empty)'}")
    if not result.is_valid:
        expected = "a whole number of pieces" if session.state.is_count_mode else "a multiple of the face value"
        click.echo(f"⚠️  {field_id} should be {expected}", err=True)


@click.command()
@click.argument("target", type=click.Choice([m.value for m in InputMode]))
@click.pass_context
def mode(ctx: click.Context, target: str) -> None:
    """Switch bills and coins between amount and count input."""
    session = _open_session(ctx)
    if not session.switch_mode(InputMode(target)):
        click.echo(f"Already in {target} mode.")
        return

    click.echo(f"Switched to {target} mode.")
    for denomination in DENOMINATIONS:
        value = session.state.values.get(denomination.id)
        if value:
            click.echo(f"  {denomination.id} = {value}")


@click.command()
@click.argument("index", type=int)
@click.option("--amount", help="Expense amount")
@click.option("--label", help="Description")
@click.pass_context
def adjust(ctx: click.Context, index: int, amount: Optional[str], label: Optional[str]) -> None:
    """Edit adjustment (expense) entry INDEX."""
    if amount is None and label is None:
        raise click.UsageError("Give --amount and/or --label")

    session = _open_session(ctx)
    try:
        session.enter_adjustment(index, amount=amount, label=label)
    except ValueError as e:
        raise click.ClickException(str(e))
    session.settle()

    entry = session.state.get_adjustment(index)
    click.echo(f"Exoda {index}: {entry.label or '-'} {entry.amount or '0'}")


@click.command()
@click.argument("count", type=int)
@click.pass_context
def adjustments(ctx: click.Context, count: int) -> None:
    """Set how many adjustment (expense) entries are in use."""
    session = _open_session(ctx)
    try:
        session.resize_adjustments(count)
    except ValueError as e:
        raise click.ClickException(str(e))

    for index, entry in enumerate(session.state.adjustments, start=1):
        click.echo(f"Exoda {index}: {entry.label or '-'} {entry.amount or '0'}")


@click.command()
@click.argument("name")
@click.pass_context
def operator(ctx: click.Context, name: str) -> None:
    """Set the operator name shown on the summary."""
    session = _open_session(ctx)
    session.set_operator(name)
    session.settle()
    click.echo(f"Operator: {session.state.operator_name}")


@click.command()
@click.pass_context
def totals(ctx: click.Context) -> None:
    """Show the derived totals."""
    session = _open_session(ctx)
    _echo_totals(session)

    if session.invalid_fields:
        click.echo(f"⚠️  Check: {', '.join(sorted(session.invalid_fields))}", err=True)


@click.command()
@click.pass_context
def envelope(ctx: click.Context) -> None:
    """Show which bills and coins go into the envelope and which remain."""
    session = _open_session(ctx)
    view = session.breakdown()
    symbol = _symbol(session)

    if not view.has_cash:
        click.echo("No cash for the envelope.")
        return

    if view.put:
        click.echo("PUT IN:")
        _echo_lines(view.put)
        click.echo(f"  = {format_amount(view.put_total, symbol)}")

    click.echo("REMAINING:")
    _echo_lines(view.keep)
    click.echo(f"  = {format_amount(view.keep_total, symbol)}")

    if view.nothing_available:
        click.echo("No bills or coins available.")

    if view.shortfall:
        click.echo(f"⚠️  Missing: {format_amount(view.shortfall, symbol)}")


@click.command()
@click.pass_context
def summary(ctx: click.Context) -> None:
    """Show the end-of-shift summary."""
    session = _open_session(ctx)
    view = session.summary()
    symbol = _symbol(session)

    if view.operator_name:
        click.echo(f"{view.operator_name}  {view.shift_date.strftime('%d/%m/%Y')}")
    click.echo(f"TAMEIO   {format_amount(view.grand_total, symbol)}")
    click.echo(f"METRITA  {format_amount(view.cash_total, symbol)}")
    click.echo(f"EXODA    {format_amount(view.adjustments_total, symbol)}")
    for line in view.adjustments + view.channels:
        click.echo(f"  {line.label}: {format_amount(line.amount, symbol)}")

    if view.remaining_bills:
        click.echo("Bills:")
        _echo_lines(view.remaining_bills)
    if view.remaining_coins:
        click.echo("Coins:")
        _echo_lines(view.remaining_coins)

    click.echo(f"Safe box: {format_amount(view.safe_box, symbol)}")


@click.command()
@click.option("--output", "output_file", type=click.Path(dir_okay=False, path_type=Path), help="Report file (default: reports dir)")
@click.pass_context
def export(ctx: click.Context, output_file: Optional[Path]) -> None:
    """Write the end-of-shift summary as a YAML report."""
    session = _open_session(ctx)
    view = session.summary()
    report = build_report(view, session.totals, session.breakdown(), _symbol(session))

    path = output_file or default_report_path(session.config.persistence.reports_dir, view)
    write_report(path, report)
    click.echo(f"Report written to {path}")


@click.command()
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def reset(ctx: click.Context, yes: bool) -> None:
    """Clear every field and the saved snapshot."""
    confirmed = yes or click.confirm("Clear all fields? This cannot be undone.", default=False)

    session = _open_session(ctx)
    if session.reset(confirm=confirmed):
        click.echo("Drawer cleared.")
    else:
        click.echo("Cancelled.")


def register_drawer_commands(group: click.Group) -> None:
    """Attach the drawer commands to the main group."""
    for command in (set_field, mode, adjust, adjustments, operator, totals, envelope, summary, export, reset):
        group.add_command(command)
