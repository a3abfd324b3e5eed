"""Interaktives Hauptmenü der Rezeption.

Liest Eingaben über den Prompter, ruft die Kernoperationen auf und zeigt
Ergebnis oder Fehlermeldung an. Fehler aus dem Kern beenden nie die Schleife.
"""

import logging
from typing import Callable

from rich.console import Console
from rich.markup import escape

from config.schema import HotelConfig
from frontdesk.checkin import CheckInService
from frontdesk.errors import FrontDeskError, InventoryFullError, RoomOccupiedError
from frontdesk.inventory import RoomInventory
from frontdesk.ledger import BookingLedger
from frontdesk.validation import is_valid_integer
from models.room import Room, RoomStatus, RoomType
from terminal import render
from terminal.prompts import Prompter

logger = logging.getLogger(__name__)

EXIT_OPTION = len(render.MENU_ENTRIES)
_TYPE_PROMPT = "Zimmertyp (1: Einzel, 2: Doppel)"


class FrontDeskMenu:
    """Hauptschleife: Menü anzeigen, Aktion ausführen, pausieren."""

    def __init__(
        self,
        inventory: RoomInventory,
        ledger: BookingLedger,
        service: CheckInService,
        config: HotelConfig,
        prompter: Prompter,
    ) -> None:
        self.inventory = inventory
        self.ledger = ledger
        self.service = service
        self.config = config
        self.prompter = prompter
        self.actions: dict[int, Callable[[], None]] = {
            1: self.add_room,
            2: self.update_room,
            3: self.maintenance_room,
            4: self.list_rooms,
            5: self.search_by_type,
            6: self.sort_by_price,
            7: self.check_in,
            8: self.rental_history,
        }

    @property
    def console(self) -> Console:
        return self.prompter.console

    @property
    def currency(self) -> str:
        return self.config.display.currency

    def run(self) -> None:
        while True:
            self.console.print(render.main_menu(self.config.hotel_name))
            option = self.prompter.integer("Ihre Auswahl", 1, EXIT_OPTION)
            self.console.clear()
            if option == EXIT_OPTION:
                self.console.print("Vielen Dank und auf Wiedersehen!")
                return
            self.dispatch(option)
            self.prompter.pause()

    def dispatch(self, option: int) -> None:
        """Führt eine Menüaktion aus und meldet Kernfehler."""
        try:
            self.actions[option]()
        except FrontDeskError as e:
            logger.debug(f"Aktion {option} abgebrochen: {e.kind.value}")
            self.prompter.error(e.message)

    def _no_rooms(self, message: str) -> bool:
        if self.inventory.is_empty:
            self.console.print(f"[yellow]{message}[/yellow]")
            return True
        return False

    def _read_room_type(self) -> RoomType:
        return RoomType.from_code(self.prompter.integer(_TYPE_PROMPT, 1, 2))

    def _read_price(self) -> float:
        return self.prompter.decimal("Tagespreis",
                                     self.config.booking.min_room_price)

    # ─── 1. Zimmer hinzufügen ───

    def add_room(self) -> None:
        if self.inventory.is_full:
            raise InventoryFullError(self.inventory.capacity)
        self.console.rule("Zimmer hinzufügen")

        def new_room_id(raw: str) -> str:
            self.inventory.check_new_id(raw)
            return raw

        room_id = self.prompter.retry("Zimmernummer", new_room_id)
        room = Room(room_id=room_id, room_type=self._read_room_type(),
                    price=self._read_price())
        self.inventory.add(room)
        self.console.print(f"[green]✓[/green] Zimmer {escape(room_id)} hinzugefügt.")

    # ─── 2. Zimmer ändern ───

    def update_room(self) -> None:
        self.console.rule("Zimmer ändern")
        room_id = self.prompter.text("Zimmernummer")
        room = self.inventory.get(room_id)
        if room.status is RoomStatus.OCCUPIED:
            raise RoomOccupiedError(room_id, "geändert")

        self.console.print("\n[bold]Aktuelle Daten:[/bold]")
        self.console.print(render.room_details(room, self.currency))
        self.console.print("\n[bold]Neue Daten:[/bold]")
        updated = self.inventory.update(room_id, self._read_room_type(),
                                        self._read_price())
        self.console.print(f"[green]✓[/green] Zimmer {escape(updated.room_id)} aktualisiert.")

    # ─── 3. Wartung ───

    def maintenance_room(self) -> None:
        if self._no_rooms("Keine Zimmer im System!"):
            return
        self.console.rule("Zimmer in Wartung setzen")
        room_id = self.prompter.text("Zimmernummer")
        room = self.inventory.set_maintenance(room_id)
        self.console.print(f"[green]✓[/green] Zimmer {escape(room.room_id)} ist jetzt in Wartung.")

    # ─── 4. Zimmerliste (seitenweise) ───

    def list_rooms(self) -> None:
        if self._no_rooms("Keine Zimmer in der Liste!"):
            return
        pages = render.paginate(self.inventory.list_all(),
                                self.config.display.page_size)
        total = len(pages)
        current = 0
        while True:
            self.console.clear()
            self.console.print(render.room_table(
                pages[current],
                title=f"Zimmerliste (Seite {current + 1}/{total})",
                currency=self.currency,
            ))
            raw = self.prompter.text(
                f"Seite (1-{total}), Enter = nächste Seite, 'q' = zurück"
            )
            if raw == "":
                if current < total - 1:
                    current += 1
                else:
                    self.console.print("Letzte Seite erreicht.")
                    return
            elif raw == "q":
                return
            elif is_valid_integer(raw) and 1 <= int(raw) <= total:
                current = int(raw) - 1
            else:
                self.prompter.error("Ungültige Seitenzahl!")

    # ─── 5. Suche nach Typ ───

    def search_by_type(self) -> None:
        if self._no_rooms("Keine Zimmer zum Suchen!"):
            return
        self.console.rule("Zimmer nach Typ suchen")
        room_type = self._read_room_type()
        rooms = self.inventory.filter_by_type(room_type)
        self.console.print(render.room_table(rooms, title="Suchergebnis",
                                             currency=self.currency))
        if not rooms:
            self.console.print("Kein passendes Zimmer gefunden!")

    # ─── 6. Sortieren ───

    def sort_by_price(self) -> None:
        if self._no_rooms("Keine Zimmer zum Sortieren!"):
            return
        self.inventory.sort_by_price_descending()
        self.console.print(render.room_table(
            self.inventory.list_all(),
            title="Zimmer nach Preis (absteigend)",
            currency=self.currency,
        ))

    # ─── 7. Check-in ───

    def check_in(self) -> None:
        if self._no_rooms("Noch keine Zimmer im System!"):
            return
        self.console.rule("Check-in")
        room_id = self.prompter.text("Zimmernummer")
        self.service.ensure_bookable(room_id)

        rules = self.config.booking
        customer_name = self.prompter.required_text("Name des Gastes")
        check_in_date = self.prompter.check_in_date(
            "Check-in-Datum (TT/MM/JJJJ)", rules.min_check_in_year)
        days = self.prompter.integer(
            f"Anzahl Tage (1-{rules.max_stay_days})", 1, rules.max_stay_days)

        receipt = self.service.check_in(room_id, customer_name, check_in_date, days)
        self.console.print("[bold green]Check-in erfolgreich![/bold green]")
        self.console.print(render.invoice(receipt, self.currency))

    # ─── 8. Mietverlauf ───

    def rental_history(self) -> None:
        if self.ledger.is_empty:
            self.console.print("[yellow]Noch keine Buchungen vorhanden![/yellow]")
            return
        self.console.rule("Mietverlauf")
        room_id = self.prompter.text("Zimmernummer")
        bookings = self.ledger.filter_by_room(room_id)
        if not bookings:
            self.console.print(f"Zimmer {escape(room_id)} hat noch keinen Mietverlauf!")
            return
        self.console.print(render.history_table(bookings, room_id, self.currency))
