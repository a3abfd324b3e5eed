"""BookingLedger – das fortlaufende Buchungsjournal (nur Anhängen)."""

import logging

from models.booking import Booking
from frontdesk.errors import LedgerFullError

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100


class BookingLedger:
    """Buchungen in Einfügereihenfolge. Kein Ändern, kein Löschen."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._bookings: list[Booking] = []

    def __len__(self) -> int:
        return len(self._bookings)

    @property
    def is_full(self) -> bool:
        return len(self._bookings) >= self.capacity

    @property
    def is_empty(self) -> bool:
        return not self._bookings

    def ensure_capacity(self) -> None:
        """LedgerFullError, wenn keine weitere Buchung Platz hat."""
        if self.is_full:
            raise LedgerFullError(self.capacity)

    def append(self, booking: Booking) -> None:
        self.ensure_capacity()
        self._bookings.append(booking)
        logger.info(f"Buchung {booking.booking_id} erfasst ({booking.total_cost:.2f})")

    def all(self) -> list[Booking]:
        return list(self._bookings)

    def filter_by_room(self, room_id: str) -> list[Booking]:
        """Mietverlauf eines Zimmers; leer wenn es keine Buchungen gibt."""
        return [b for b in self._bookings if b.room_id == room_id]
