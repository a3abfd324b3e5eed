"""Darstellung von Zimmern, Buchungen und Rechnungen mit Rich."""

from rich import box
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from frontdesk.checkin import CheckInReceipt
from models.booking import Booking
from models.room import Room, RoomStatus

_STATUS_STYLES = {
    RoomStatus.AVAILABLE: "green",
    RoomStatus.OCCUPIED: "red",
    RoomStatus.MAINTENANCE: "yellow",
}

MENU_ENTRIES = [
    "Zimmer hinzufügen",
    "Zimmer ändern",
    "Zimmer in Wartung setzen (sperren)",
    "Zimmerliste anzeigen",
    "Zimmer nach Typ suchen",
    "Nach Preis sortieren",
    "Check-in (Buchung)",
    "Mietverlauf eines Zimmers",
    "Beenden",
]


def format_money(value: float) -> str:
    """Festkomma mit zwei Nachkommastellen und Tausendertrennern."""
    return f"{value:,.2f}"


def main_menu(hotel_name: str) -> Panel:
    lines = [f"[bold]{i}.[/bold] {label}" for i, label in enumerate(MENU_ENTRIES, 1)]
    return Panel("\n".join(lines), title=f"[bold]{hotel_name}[/bold]",
                 border_style="cyan", expand=False)


def room_table(rooms: list[Room], title: str = "Zimmer",
               currency: str = "VND") -> Table:
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Zimmer", style="bold")
    table.add_column("Typ")
    table.add_column(f"Preis ({currency})", justify="right")
    table.add_column("Status")
    for room in rooms:
        style = _STATUS_STYLES[room.status]
        table.add_row(
            escape(room.room_id),
            room.room_type.label,
            format_money(room.price),
            f"[{style}]{room.status.label}[/{style}]",
        )
    return table


def room_details(room: Room, currency: str = "VND") -> str:
    return (
        f"Zimmer: {escape(room.room_id)}\n"
        f"Typ:    {room.room_type.label}\n"
        f"Preis:  {format_money(room.price)} {currency}\n"
        f"Status: {room.status.label}"
    )


def history_table(bookings: list[Booking], room_id: str,
                  currency: str = "VND") -> Table:
    table = Table(title=f"Mietverlauf Zimmer {escape(room_id)}", box=box.ROUNDED)
    table.add_column("Nr.", justify="right")
    table.add_column("Buchung")
    table.add_column("Zimmer")
    table.add_column("Gast")
    table.add_column("Check-in")
    table.add_column("Tage", justify="right")
    table.add_column(f"Gesamt ({currency})", justify="right")
    for nr, b in enumerate(bookings, 1):
        table.add_row(str(nr), escape(b.booking_id), escape(b.room_id),
                      escape(b.customer_name), b.check_in_date, str(b.days),
                      format_money(b.total_cost))
    return table


def invoice(receipt: CheckInReceipt, currency: str = "VND") -> Panel:
    b, room = receipt.booking, receipt.room
    lines = [
        f"Buchungsnummer : {escape(b.booking_id)}",
        f"Zimmer         : {escape(room.room_id)}",
        f"Zimmertyp      : {room.room_type.label}",
        f"Gast           : {escape(b.customer_name)}",
        f"Check-in       : {b.check_in_date}",
        f"Tage           : {b.days}",
        f"Tagespreis     : {format_money(room.price)} {currency}",
        "─" * 38,
        f"[bold]GESAMT         : {format_money(b.total_cost)} {currency}[/bold]",
    ]
    return Panel("\n".join(lines), title="Check-in-Rechnung",
                 border_style="green", expand=False)


def paginate(items: list, page_size: int) -> list[list]:
    """Teilt ``items`` in Seiten zu ``page_size``; leere Liste → keine Seiten."""
    return [items[i:i + page_size] for i in range(0, len(items), page_size)]
