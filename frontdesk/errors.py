"""Fehlerarten der Rezeption.

Jeder Fehler trägt eine ``ErrorKind``-Markierung, damit die Oberfläche
entscheiden kann, ob sie neu nachfragt (Eingabefehler) oder nur meldet
(Geschäftsfehler). Kein Fehler hier ist für den Prozess fatal.
"""

from enum import Enum
from typing import Optional

from models.room import RoomStatus


class ErrorKind(str, Enum):
    EMPTY_INPUT = "EmptyInput"
    NOT_A_NUMBER = "NotANumber"
    NOT_A_DECIMAL = "NotADecimal"
    OUT_OF_RANGE = "OutOfRange"
    INVALID_DATE = "InvalidDate"
    ROOM_NOT_FOUND = "RoomNotFound"
    ROOM_ID_ALREADY_EXISTS = "RoomIdAlreadyExists"
    ROOM_OCCUPIED_CANNOT_MODIFY = "RoomOccupiedCannotModify"
    ROOM_UNAVAILABLE = "RoomUnavailable"
    INVENTORY_FULL = "InventoryFull"
    LEDGER_FULL = "LedgerFull"


class FrontDeskError(Exception):
    """Basisklasse aller Rezeptions-Fehler."""

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


class InputError(FrontDeskError):
    """Ungültige Eingabe (leer, keine Zahl, außerhalb des Bereichs, Datum)."""


class RoomNotFoundError(FrontDeskError):
    def __init__(self, room_id: str) -> None:
        super().__init__(ErrorKind.ROOM_NOT_FOUND,
                         f"Zimmer {room_id} nicht gefunden!")
        self.room_id = room_id


class RoomIdAlreadyExistsError(FrontDeskError):
    def __init__(self, room_id: str) -> None:
        super().__init__(ErrorKind.ROOM_ID_ALREADY_EXISTS,
                         f"Zimmer {room_id} existiert bereits!")
        self.room_id = room_id


class RoomOccupiedError(FrontDeskError):
    """Belegte Zimmer dürfen weder geändert noch gewartet werden."""

    def __init__(self, room_id: str, action: str = "geändert") -> None:
        super().__init__(ErrorKind.ROOM_OCCUPIED_CANNOT_MODIFY,
                         f"Zimmer {room_id} ist belegt und kann nicht {action} werden!")
        self.room_id = room_id


class RoomUnavailableError(FrontDeskError):
    """Zimmer ist belegt oder in Wartung; ``status`` unterscheidet beides."""

    def __init__(self, room_id: str, status: RoomStatus) -> None:
        if status is RoomStatus.OCCUPIED:
            message = f"Zimmer {room_id} ist bereits belegt!"
        else:
            message = f"Zimmer {room_id} ist in Wartung!"
        super().__init__(ErrorKind.ROOM_UNAVAILABLE, message)
        self.room_id = room_id
        self.status = status


class InventoryFullError(FrontDeskError):
    def __init__(self, capacity: int) -> None:
        super().__init__(ErrorKind.INVENTORY_FULL,
                         f"Zimmerbestand voll ({capacity}), kein weiteres Zimmer möglich!")
        self.capacity = capacity


class LedgerFullError(FrontDeskError):
    def __init__(self, capacity: int) -> None:
        super().__init__(ErrorKind.LEDGER_FULL,
                         f"Buchungsjournal voll ({capacity}), keine weitere Buchung möglich!")
        self.capacity = capacity


def input_error(kind: ErrorKind, message: Optional[str] = None) -> InputError:
    """Baut einen InputError mit Standardmeldung für ``kind``."""
    return InputError(kind, message or _INPUT_MESSAGES[kind])


_INPUT_MESSAGES = {
    ErrorKind.EMPTY_INPUT: "Eingabe darf nicht leer sein!",
    ErrorKind.NOT_A_NUMBER: "Bitte nur ganze Zahlen eingeben!",
    ErrorKind.NOT_A_DECIMAL: "Bitte nur Dezimalzahlen eingeben!",
    ErrorKind.OUT_OF_RANGE: "Wert außerhalb des erlaubten Bereichs!",
    ErrorKind.INVALID_DATE: "Ungültiges Datum! Bitte erneut eingeben.",
}
