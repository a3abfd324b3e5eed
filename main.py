"""Hotel-Rezeption — Haupt-CLI.

Verwendung:
  python main.py                          Rezeption starten (= run)
  python main.py run                      Interaktives Menü
  python main.py rooms                    Startbestand anzeigen
  python main.py config init              Standard-Konfiguration anlegen
  python main.py config show              Konfiguration anzeigen

Globale Optionen:
  --config PATH        Konfigurationsdatei (Default: config/hotel_config.yaml)
  --log-level LEVEL    Überschreibt logging.level aus der Konfiguration
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

console = Console()

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _setup_logging(level: str) -> None:
    """Leitet alle Logmeldungen über Rich auf die Konsole."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_config_or_abort(ctx: click.Context):
    """Lädt die Konfiguration (oder Defaults) oder bricht mit Fehlermeldung ab."""
    from config.manager import ConfigManager

    mgr = ConfigManager()
    path: Optional[Path] = ctx.obj.get("config_path")
    try:
        config = mgr.load_or_default(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    _setup_logging(ctx.obj.get("log_level") or config.logging.level)
    return mgr, config


def build_front_desk(config):
    """Erzeugt Zimmerbestand, Journal und Check-in-Service aus der Konfiguration."""
    from config.defaults import starter_rooms_from_config
    from frontdesk.checkin import CheckInService
    from frontdesk.inventory import RoomInventory
    from frontdesk.ledger import BookingLedger

    inventory = RoomInventory.initialize(
        starter_rooms_from_config(config.inventory.starter_rooms),
        capacity=config.inventory.capacity,
    )
    ledger = BookingLedger(capacity=config.ledger.capacity)
    service = CheckInService(
        inventory,
        ledger,
        min_check_in_year=config.booking.min_check_in_year,
        max_stay_days=config.booking.max_stay_days,
    )
    return inventory, ledger, service


# ─── RUN ──────────────────────────────────────────────────────────────────────

@click.command("run")
@click.pass_context
def cmd_run(ctx: click.Context):
    """Startet das interaktive Rezeptionsmenü."""
    from terminal.menu import FrontDeskMenu
    from terminal.prompts import Prompter

    _, config = _load_config_or_abort(ctx)
    inventory, ledger, service = build_front_desk(config)
    menu = FrontDeskMenu(inventory, ledger, service, config, Prompter(console))
    menu.run()


# ─── ROOMS ────────────────────────────────────────────────────────────────────

@click.command("rooms")
@click.pass_context
def cmd_rooms(ctx: click.Context):
    """Zeigt den Zimmerbestand beim Programmstart."""
    from terminal.render import room_table

    _, config = _load_config_or_abort(ctx)
    inventory, _, _ = build_front_desk(config)
    console.print(room_table(inventory.list_all(), title="Startbestand",
                             currency=config.display.currency))
    console.print(f"[dim]{len(inventory)} von {inventory.capacity} Plätzen belegt.[/dim]")


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anlegen oder anzeigen."""


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Bestehende Konfiguration überschreiben.")
@click.pass_context
def config_init(ctx: click.Context, force: bool):
    """Schreibt die Standard-Konfiguration als YAML."""
    from config.defaults import default_hotel_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    target = ctx.obj.get("config_path") or mgr.DEFAULT_CONFIG
    if target.exists() and not force:
        console.print(
            f"[yellow]Konfiguration existiert bereits: {target}[/yellow]\n"
            "Mit [bold]--force[/bold] überschreiben."
        )
        return
    mgr.save(default_hotel_config(), target)


@cmd_config.command("show")
@click.pass_context
def config_show(ctx: click.Context):
    """Zeigt die aktuelle Konfiguration an."""
    _, config = _load_config_or_abort(ctx)

    console.print(Panel(
        f"[bold]{config.hotel_name}[/bold]  |  Währung: {config.display.currency}  |  "
        f"Log: {config.logging.level}",
        title="Hotel-Konfiguration",
        border_style="cyan",
    ))

    table = Table(title="Grenzen", box=box.ROUNDED)
    table.add_column("Parameter", style="bold")
    table.add_column("Wert")
    table.add_row("Zimmer-Kapazität", str(config.inventory.capacity))
    table.add_row("Buchungs-Kapazität", str(config.ledger.capacity))
    table.add_row("Frühestes Check-in-Jahr", str(config.booking.min_check_in_year))
    table.add_row("Max. Aufenthalt (Tage)", str(config.booking.max_stay_days))
    table.add_row("Min. Tagespreis", f"{config.booking.min_room_price:.2f}")
    table.add_row("Zimmer pro Seite", str(config.display.page_size))
    console.print(table)

    table2 = Table(title="Startzimmer", box=box.ROUNDED)
    table2.add_column("Zimmer", style="bold")
    table2.add_column("Typ")
    table2.add_column("Preis", justify="right")
    for s in config.inventory.starter_rooms:
        table2.add_row(s.room_id, s.room_type.label, f"{s.price:,.2f}")
    console.print(table2)


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group(invoke_without_command=True)
@click.option("--config", "config_path", type=click.Path(path_type=Path),
              default=None, help="Pfad zur Konfigurationsdatei (YAML).")
@click.option("--log-level", type=click.Choice(_LOG_LEVELS, case_sensitive=False),
              default=None, help="Loglevel (überschreibt die Konfiguration).")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], log_level: Optional[str]):
    """Hotel-Rezeption: Zimmerverwaltung und Check-in (nur im Arbeitsspeicher).

    Ohne Befehl startet das interaktive Menü.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["log_level"] = log_level.upper() if log_level else None
    if ctx.invoked_subcommand is None:
        ctx.invoke(cmd_run)


def main():
    """Einstiegspunkt."""
    cli(obj={})


# Befehle registrieren
cli.add_command(cmd_run)
cli.add_command(cmd_rooms)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
