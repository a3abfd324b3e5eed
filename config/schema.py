from pydantic import BaseModel, Field, field_validator, model_validator

from models.room import RoomType


# ─── ZIMMERBESTAND ───

class StarterRoom(BaseModel):
    """Ein Zimmer, mit dem der Bestand beim Programmstart angelegt wird."""
    # Zimmernummer, z.B. "101"
    room_id: str = Field(min_length=1)
    # Einzel- oder Doppelzimmer
    room_type: RoomType
    # Tagespreis
    price: float = Field(gt=0)


def _default_starter_rooms() -> list[StarterRoom]:
    from config.defaults import default_starter_room_config
    return default_starter_room_config()


class InventoryConfig(BaseModel):
    """Zimmerbestand: Kapazität und Startbelegung."""
    # Maximale Anzahl Zimmer im Bestand
    capacity: int = Field(100, ge=1, le=10000,
        description="Maximale Anzahl Zimmer")
    # Zimmer, die beim Start angelegt werden (alle frei)
    starter_rooms: list[StarterRoom] = Field(
        default_factory=_default_starter_rooms,
        description="Startzimmer (alle frei)")

    @field_validator("starter_rooms")
    @classmethod
    def unique_room_ids(cls, v: list[StarterRoom]) -> list[StarterRoom]:
        seen: set[str] = set()
        for room in v:
            if room.room_id in seen:
                raise ValueError(f"Zimmernummer {room.room_id} doppelt in starter_rooms")
            seen.add(room.room_id)
        return v

    @model_validator(mode='after')
    def starter_rooms_fit(self):
        if len(self.starter_rooms) > self.capacity:
            raise ValueError(
                f"{len(self.starter_rooms)} Startzimmer passen nicht in "
                f"Kapazität {self.capacity}"
            )
        return self


# ─── BUCHUNGSJOURNAL ───

class LedgerConfig(BaseModel):
    """Buchungsjournal."""
    # Maximale Anzahl Buchungen
    capacity: int = Field(100, ge=1, le=100000,
        description="Maximale Anzahl Buchungen")


# ─── BUCHUNGSREGELN ───

class BookingRulesConfig(BaseModel):
    """Regeln für Check-in und Preise."""
    # Früheste zulässige Jahreszahl für ein Check-in-Datum
    min_check_in_year: int = Field(2025, ge=1900, le=2100,
        description="Frühestes Check-in-Jahr")
    # Längster Aufenthalt in Tagen
    max_stay_days: int = Field(365, ge=1, le=3650,
        description="Maximale Aufenthaltsdauer (Tage)")
    # Kleinster erlaubter Tagespreis
    min_room_price: float = Field(0.01, gt=0,
        description="Minimaler Tagespreis")


# ─── ANZEIGE ───

class DisplayConfig(BaseModel):
    """Darstellung in der Konsole."""
    # Zimmer pro Seite in der Zimmerliste
    page_size: int = Field(10, ge=1, le=100,
        description="Zimmer pro Seite")
    # Währungsbezeichnung hinter Beträgen
    currency: str = Field("VND",
        description="Währungsbezeichnung")


# ─── LOGGING ───

class LoggingConfig(BaseModel):
    """Log-Ausgabe (über Rich)."""
    # Python-Loglevel: DEBUG, INFO, WARNING, ERROR
    level: str = Field("WARNING",
        description="Loglevel")

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unbekanntes Loglevel: {v}")
        return v


# ─── GESAMT-CONFIG ───

class HotelConfig(BaseModel):
    """Gesamtkonfiguration der Rezeption."""
    # Name des Hotels (Menütitel)
    hotel_name: str = Field("Hotelverwaltung",
        description="Name des Hotels")
    # Zimmerbestand
    inventory: InventoryConfig = Field(default_factory=InventoryConfig)
    # Buchungsjournal
    ledger: LedgerConfig = Field(default_factory=LedgerConfig)
    # Check-in-Regeln
    booking: BookingRulesConfig = Field(default_factory=BookingRulesConfig)
    # Konsolen-Darstellung
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    # Logging
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
