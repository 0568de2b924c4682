"""CLI entry point for marina-ledger.

Invoked as::

    marina [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m marina.cli.main

Commands
--------
inventory   Show every boat in a data file
add         Add a boat from a data-file line
remove      Remove a boat by name
pay         Apply a payment to a boat
month       Bill one month of charges to every boat
export      Dump the inventory as JSON or YAML
shell       Interactive menu over a data file, saving on exit
version     Show version information

Every command that changes the inventory writes the data file back when
it succeeds.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from marina.billing import InvalidPaymentError, PaymentExceedsBalanceError
from marina.codec import ParseError, lenient_float
from marina.config import ConfigError, MarinaSettings, load_settings
from marina.convenience import MarinaSession
from marina.model import BoatSerializer, describe_placement
from marina.registry import BoatRegistry, CapacityError, DuplicateBoatError, NotFoundError

console = Console()
err_console = Console(stderr=True)

MENU = "(I)nventory, (A)dd, (R)emove, (P)ayment, (M)onth, e(X)it"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def _open_session(path: str, settings: MarinaSettings) -> MarinaSession:
    """Load a data file, exiting on any error other than a missing file."""
    try:
        return MarinaSession.open(path, settings=settings, missing_ok=True)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _save_or_exit(session: MarinaSession) -> None:
    try:
        session.save()
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot write {session.path}: {exc}")
        sys.exit(1)


def _print_inventory(registry: BoatRegistry) -> None:
    if not len(registry):
        console.print("[dim]No boats in inventory.[/dim]")
        return

    table = Table(show_header=True, box=None)
    table.add_column("Name", min_width=20)
    table.add_column("Length", justify="right")
    table.add_column("Kind", min_width=8)
    table.add_column("Extra", min_width=8)
    table.add_column("Owes", justify="right")

    for boat in registry:
        table.add_row(
            escape(boat.name),
            f"{boat.length:.0f}'",
            boat.kind.wire_name,
            escape(describe_placement(boat.placement)),
            f"${boat.amount_owed:,.2f}",
        )
    console.print(table)


# ---------------------------------------------------------------------------
# Operations shared by the one-shot commands and the shell
# ---------------------------------------------------------------------------


def _add(session: MarinaSession, line: str) -> bool:
    try:
        boat = session.add_line(line)
    except ParseError as exc:
        err_console.print(f"[red]Invalid boat data:[/red] {escape(exc.message)}")
        return False
    except (CapacityError, DuplicateBoatError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return False
    console.print(f"[green]Boat added successfully.[/green] {escape(boat.name)}")
    return True


def _remove(session: MarinaSession, name: str) -> bool:
    try:
        session.remove(name)
    except NotFoundError:
        err_console.print("[yellow]No boat with that name.[/yellow]")
        return False
    console.print("[green]Boat removed successfully.[/green]")
    return True


def _pay(session: MarinaSession, name: str, amount: float) -> bool:
    try:
        balance = session.pay(name, amount)
    except NotFoundError:
        err_console.print("[yellow]No boat with that name.[/yellow]")
        return False
    except PaymentExceedsBalanceError as exc:
        err_console.print(
            f"[yellow]That is more than the amount owed,[/yellow] ${exc.balance:.2f}"
        )
        return False
    except InvalidPaymentError as exc:
        err_console.print(f"[red]Invalid payment:[/red] {escape(str(exc))}")
        return False
    console.print(f"[green]Payment accepted.[/green] New amount owed: ${balance:.2f}")
    return True


def _month(session: MarinaSession) -> None:
    total = session.accrue()
    console.print(f"[green]Monthly charges updated.[/green] Total billed: ${total:,.2f}")


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="marina-ledger")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    envvar="MARINA_CONFIG",
    default=None,
    help="YAML settings file (capacity and monthly rates)",
)
@click.option(
    "--capacity",
    type=click.IntRange(min=0),
    envvar="MARINA_CAPACITY",
    default=None,
    help="Maximum number of boats (overrides the settings file)",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, capacity: int | None, verbose: bool) -> None:
    """Inventory and billing for marina boats."""
    _configure_logging(verbose)
    try:
        settings = load_settings(config_path)
    except (ConfigError, OSError) as exc:
        err_console.print(f"[red]Error:[/red] Cannot load settings: {exc}")
        sys.exit(1)
    ctx.obj = settings.with_capacity(capacity)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from marina import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]marina-ledger[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# inventory command
# ---------------------------------------------------------------------------


@cli.command(name="inventory")
@click.argument("file", type=click.Path(exists=False))
@click.pass_obj
def inventory_command(settings: MarinaSettings, file: str) -> None:
    """Show every boat in FILE, sorted by name."""
    session = _open_session(file, settings)
    _print_inventory(session.registry)


# ---------------------------------------------------------------------------
# mutating commands
# ---------------------------------------------------------------------------


@cli.command(name="add")
@click.argument("file", type=click.Path(exists=False))
@click.argument("line")
@click.pass_obj
def add_command(settings: MarinaSettings, file: str, line: str) -> None:
    """Add a boat to FILE.

    LINE is the boat in data-file form: name,length,kind,extra,amountOwed

    \b
        marina add BoatData.csv "Sea Lion,21,slip,21,100.50"
    """
    session = _open_session(file, settings)
    if not _add(session, line):
        sys.exit(1)
    _save_or_exit(session)


@cli.command(name="remove")
@click.argument("file", type=click.Path(exists=False))
@click.argument("name")
@click.pass_obj
def remove_command(settings: MarinaSettings, file: str, name: str) -> None:
    """Remove the boat called NAME (case-insensitive) from FILE."""
    session = _open_session(file, settings)
    if not _remove(session, name):
        sys.exit(1)
    _save_or_exit(session)


@cli.command(name="pay")
@click.argument("file", type=click.Path(exists=False))
@click.argument("name")
@click.argument("amount", type=float)
@click.pass_obj
def pay_command(settings: MarinaSettings, file: str, name: str, amount: float) -> None:
    """Apply a payment of AMOUNT to the boat called NAME in FILE."""
    session = _open_session(file, settings)
    if not _pay(session, name, amount):
        sys.exit(1)
    _save_or_exit(session)


@cli.command(name="month")
@click.argument("file", type=click.Path(exists=False))
@click.pass_obj
def month_command(settings: MarinaSettings, file: str) -> None:
    """Bill one month of charges to every boat in FILE."""
    session = _open_session(file, settings)
    _month(session)
    _save_or_exit(session)


# ---------------------------------------------------------------------------
# export command
# ---------------------------------------------------------------------------


@cli.command(name="export")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Export format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
@click.pass_obj
def export_command(
    settings: MarinaSettings, file: str, output_format: str, output: str | None
) -> None:
    """Dump the inventory in FILE as JSON or YAML."""
    session = _open_session(file, settings)
    serializer = BoatSerializer()

    if output_format.lower() == "json":
        text = serializer.to_json(session.registry, indent=2)
        lang = "json"
    else:
        text = serializer.to_yaml(session.registry)
        lang = "yaml"

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Inventory written to[/green] {output}")
    else:
        console.print(Syntax(text, lang))


# ---------------------------------------------------------------------------
# shell command
# ---------------------------------------------------------------------------


@cli.command(name="shell")
@click.argument("file", type=click.Path(exists=False))
@click.pass_obj
def shell_command(settings: MarinaSettings, file: str) -> None:
    """Interactive menu over FILE.

    Choose an option by its letter.  e(X)it writes the inventory back to
    FILE; end of input leaves without saving.
    """
    session = _open_session(file, settings)

    while True:
        try:
            answer = click.prompt(
                f"\n{MENU} ", default="", show_default=False, prompt_suffix=": "
            )
            option = answer.strip()[:1].lower()
            if not option:
                continue

            if option == "i":
                _print_inventory(session.registry)
            elif option == "a":
                _add(session, click.prompt("Please enter the boat data in CSV format"))
            elif option == "r":
                _remove(session, click.prompt("Please enter the boat name"))
            elif option == "p":
                name = click.prompt("Please enter the boat name")
                if name not in session.registry:
                    err_console.print("[yellow]No boat with that name.[/yellow]")
                    continue
                amount = lenient_float(click.prompt("Please enter the amount to be paid"))
                _pay(session, name, amount)
            elif option == "m":
                _month(session)
            elif option == "x":
                _save_or_exit(session)
                console.print("\nExiting the Boat Management System")
                return
            else:
                err_console.print(f"[red]Invalid option[/red] {option}")
        except click.Abort:
            err_console.print("\n[yellow]End of input:[/yellow] exiting without saving")
            return


if __name__ == "__main__":
    cli()
