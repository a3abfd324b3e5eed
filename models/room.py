"""Datenmodell für ein Hotelzimmer (Pydantic v2)."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RoomType(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"

    @classmethod
    def from_code(cls, code: int) -> "RoomType":
        """Menü-Code (1 = Einzel, 2 = Doppel) → RoomType."""
        return {1: cls.SINGLE, 2: cls.DOUBLE}[code]

    @property
    def code(self) -> int:
        return 1 if self is RoomType.SINGLE else 2

    @property
    def label(self) -> str:
        return "Einzelzimmer" if self is RoomType.SINGLE else "Doppelzimmer"


class RoomStatus(str, Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    RoomStatus.AVAILABLE: "Frei",
    RoomStatus.OCCUPIED: "Belegt",
    RoomStatus.MAINTENANCE: "Wartung",
}


class Room(BaseModel):
    """Repräsentiert ein Zimmer im Bestand."""

    model_config = ConfigDict(validate_assignment=True)

    room_id: str = Field(frozen=True)   # "101", "A12"
    room_type: RoomType
    price: float = Field(gt=0)          # Tagespreis
    status: RoomStatus = RoomStatus.AVAILABLE

    @property
    def is_available(self) -> bool:
        return self.status is RoomStatus.AVAILABLE
