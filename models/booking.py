"""Datenmodell für eine Buchung (Pydantic v2)."""

from pydantic import BaseModel, ConfigDict, Field

BOOKING_ID_PREFIX = "BK"


def make_booking_id(room_id: str) -> str:
    """Buchungsnummer = Präfix + Zimmernummer (z.B. "BK101")."""
    return BOOKING_ID_PREFIX + room_id


class Booking(BaseModel):
    """Eine abgeschlossene Check-in-Buchung. Unveränderlich nach Erstellung."""

    model_config = ConfigDict(frozen=True)

    booking_id: str
    room_id: str          # Kopie der Zimmernummer, keine Referenz
    customer_name: str
    check_in_date: str    # "TT/MM/JJJJ"
    days: int = Field(ge=1)
    total_cost: float     # Tagespreis × Tage, beim Check-in eingefroren
