"""Check-in: die einzige Operation, die Zimmerbestand und Journal gemeinsam ändert.

Ablauf:
1. Zimmer vorhanden?                      → RoomNotFound
2. Zimmer frei (nicht belegt/Wartung)?    → RoomUnavailable
3. Datum TT/MM/JJJJ und Jahr ≥ Mindestjahr → InvalidDate
4. Tage im Bereich 1..max_stay_days       → OutOfRange
5. Gesamtpreis = Tagespreis × Tage
6. Buchungsnummer = "BK" + Zimmernummer
7. Zimmer → Belegt
8. Buchung ins Journal

Schritte 7 und 8 passieren zusammen oder gar nicht.
"""

import logging
from dataclasses import dataclass

from models.booking import Booking, make_booking_id
from models.room import Room
from frontdesk.errors import ErrorKind, input_error
from frontdesk.inventory import RoomInventory
from frontdesk.ledger import BookingLedger
from frontdesk.validation import parse_check_in_date

logger = logging.getLogger(__name__)

MIN_CHECK_IN_YEAR = 2025
MAX_STAY_DAYS = 365


@dataclass
class CheckInReceipt:
    """Ergebnis eines Check-ins: die Buchung plus Zimmer-Momentaufnahme
    (für die Rechnung)."""

    booking: Booking
    room: Room


class CheckInService:
    """Führt Check-ins gegen einen Zimmerbestand und ein Journal aus."""

    def __init__(
        self,
        inventory: RoomInventory,
        ledger: BookingLedger,
        min_check_in_year: int = MIN_CHECK_IN_YEAR,
        max_stay_days: int = MAX_STAY_DAYS,
    ) -> None:
        self.inventory = inventory
        self.ledger = ledger
        self.min_check_in_year = min_check_in_year
        self.max_stay_days = max_stay_days

    def ensure_bookable(self, room_id: str) -> Room:
        """Schritte 1–2: gibt das freie Zimmer zurück oder wirft."""
        return self.inventory.ensure_available(room_id)

    def check_in(self, room_id: str, customer_name: str,
                 check_in_date: str, days: int) -> CheckInReceipt:
        room = self.ensure_bookable(room_id)
        parse_check_in_date(check_in_date, self.min_check_in_year)
        if not 1 <= days <= self.max_stay_days:
            raise input_error(
                ErrorKind.OUT_OF_RANGE,
                f"Aufenthaltsdauer muss zwischen 1 und {self.max_stay_days} Tagen liegen!",
            )

        booking = Booking(
            booking_id=make_booking_id(room.room_id),
            room_id=room.room_id,
            customer_name=customer_name,
            check_in_date=check_in_date,
            days=days,
            total_cost=room.price * days,
        )

        self.ledger.ensure_capacity()
        occupied = self.inventory.occupy(room_id)
        self.ledger.append(booking)

        logger.info(
            f"Check-in {booking.booking_id}: {customer_name}, "
            f"{days} Tage ab {check_in_date}, {booking.total_cost:.2f}"
        )
        return CheckInReceipt(booking=booking, room=occupied)
