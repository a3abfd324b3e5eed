"""RoomInventory – besitzt alle Zimmer und ihre Statusübergänge.

Statusautomat pro Zimmer:
  Frei → Belegt    (nur über den Check-in)
  Frei → Wartung   (set_maintenance)
Rückwege (Check-out, Wartungsende) gibt es nicht.
"""

import logging
import math
from typing import Iterable, Optional

from models.room import Room, RoomStatus, RoomType
from frontdesk.errors import (
    ErrorKind,
    InventoryFullError,
    RoomIdAlreadyExistsError,
    RoomNotFoundError,
    RoomOccupiedError,
    RoomUnavailableError,
    input_error,
)

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100

# Startbestand: 7 Zimmer, alle frei
STARTER_ROOMS = [
    ("101", RoomType.SINGLE, 150000),
    ("102", RoomType.DOUBLE, 500000),
    ("103", RoomType.SINGLE, 280000),
    ("104", RoomType.DOUBLE, 550000),
    ("105", RoomType.SINGLE, 320000),
    ("106", RoomType.DOUBLE, 600000),
    ("107", RoomType.SINGLE, 290000),
]


def default_starter_rooms() -> list[Room]:
    """Die sieben Startzimmer als Room-Objekte."""
    return [
        Room(room_id=room_id, room_type=room_type, price=price)
        for room_id, room_type, price in STARTER_ROOMS
    ]


class RoomInventory:
    """Kapazitätsbegrenzte, geordnete Zimmerliste mit linearer Suche nach ID."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._rooms: list[Room] = []

    @classmethod
    def initialize(cls, seeds: Optional[Iterable[Room]] = None,
                   capacity: int = DEFAULT_CAPACITY) -> "RoomInventory":
        """Legt den Bestand mit den Startzimmern an (alle frei)."""
        inventory = cls(capacity=capacity)
        for room in (seeds if seeds is not None else default_starter_rooms()):
            inventory.add(room)
        logger.info(f"Zimmerbestand initialisiert: {len(inventory)} Zimmer")
        return inventory

    def __len__(self) -> int:
        return len(self._rooms)

    @property
    def is_full(self) -> bool:
        return len(self._rooms) >= self.capacity

    @property
    def is_empty(self) -> bool:
        return not self._rooms

    # ─── Suche ───

    def find_by_id(self, room_id: str) -> Optional[int]:
        """Index des Zimmers oder None. Exakter, groß-/kleinschreibungs-
        sensitiver Vergleich."""
        for index, room in enumerate(self._rooms):
            if room.room_id == room_id:
                return index
        return None

    def exists(self, room_id: str) -> bool:
        return self.find_by_id(room_id) is not None

    def get(self, room_id: str) -> Room:
        """Kopie des Zimmers; RoomNotFoundError wenn unbekannt."""
        return self._lookup(room_id).model_copy()

    def _lookup(self, room_id: str) -> Room:
        index = self.find_by_id(room_id)
        if index is None:
            raise RoomNotFoundError(room_id)
        return self._rooms[index]

    # ─── Änderungen ───

    def check_new_id(self, room_id: str) -> None:
        """Prüft, ob ``room_id`` für ein neues Zimmer verwendbar ist."""
        if room_id == "":
            raise input_error(ErrorKind.EMPTY_INPUT,
                              "Zimmernummer darf nicht leer sein!")
        if self.exists(room_id):
            raise RoomIdAlreadyExistsError(room_id)

    def add(self, room: Room) -> Room:
        """Fügt ein Zimmer hinzu. Der Status wird immer auf Frei gesetzt."""
        if self.is_full:
            logger.warning(f"Zimmer {room.room_id} abgelehnt: Bestand voll")
            raise InventoryFullError(self.capacity)
        self.check_new_id(room.room_id)

        stored = room.model_copy(update={"status": RoomStatus.AVAILABLE})
        self._rooms.append(stored)
        logger.info(f"Zimmer {stored.room_id} hinzugefügt "
                    f"({stored.room_type.value}, {stored.price:.2f})")
        return stored.model_copy()

    def update(self, room_id: str, room_type: RoomType, price: float) -> Room:
        """Überschreibt Typ und Preis. Status und ID bleiben unverändert."""
        index = self.find_by_id(room_id)
        if index is None:
            raise RoomNotFoundError(room_id)
        room = self._rooms[index]
        if room.status is RoomStatus.OCCUPIED:
            logger.warning(f"Änderung von Zimmer {room_id} abgelehnt: belegt")
            raise RoomOccupiedError(room_id, "geändert")

        if not (math.isfinite(price) and price > 0):
            raise input_error(ErrorKind.OUT_OF_RANGE, "Preis muss größer als 0 sein!")
        # Neuer Zustand wird komplett validiert, bevor er den alten ersetzt
        updated = Room.model_validate(
            {**room.model_dump(), "room_type": room_type, "price": price}
        )
        self._rooms[index] = updated
        logger.info(f"Zimmer {room_id} aktualisiert "
                    f"({updated.room_type.value}, {updated.price:.2f})")
        return updated.model_copy()

    def set_maintenance(self, room_id: str) -> Room:
        """Setzt ein nicht belegtes Zimmer auf Wartung."""
        room = self._lookup(room_id)
        if room.status is RoomStatus.OCCUPIED:
            logger.warning(f"Wartung für Zimmer {room_id} abgelehnt: belegt")
            raise RoomOccupiedError(room_id, "gewartet")
        room.status = RoomStatus.MAINTENANCE
        logger.info(f"Zimmer {room_id} in Wartung")
        return room.model_copy()

    def ensure_available(self, room_id: str) -> Room:
        """Kopie des Zimmers, wenn es frei ist; sonst NotFound/Unavailable."""
        room = self._lookup(room_id)
        if room.status is not RoomStatus.AVAILABLE:
            raise RoomUnavailableError(room_id, room.status)
        return room.model_copy()

    def occupy(self, room_id: str) -> Room:
        """Frei → Belegt. Nur vom Check-in aufzurufen."""
        self.ensure_available(room_id)
        room = self._lookup(room_id)
        room.status = RoomStatus.OCCUPIED
        logger.info(f"Zimmer {room_id} belegt")
        return room.model_copy()

    # ─── Abfragen ───

    def list_all(self) -> list[Room]:
        """Momentaufnahme aller Zimmer in Speicherreihenfolge."""
        return [room.model_copy() for room in self._rooms]

    def filter_by_type(self, room_type: RoomType) -> list[Room]:
        return [room.model_copy() for room in self._rooms
                if room.room_type == room_type]

    def sort_by_price_descending(self) -> None:
        """Sortiert den Bestand in-place nach Preis absteigend (stabil)."""
        self._rooms.sort(key=lambda r: r.price, reverse=True)
