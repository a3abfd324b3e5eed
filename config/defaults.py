from config.schema import (
    HotelConfig,
    InventoryConfig,
    StarterRoom,
)
from frontdesk.inventory import STARTER_ROOMS
from models.room import Room


def default_starter_room_config() -> list[StarterRoom]:
    return [
        StarterRoom(room_id=room_id, room_type=room_type, price=price)
        for room_id, room_type, price in STARTER_ROOMS
    ]


def starter_rooms_from_config(starters: list[StarterRoom]) -> list[Room]:
    return [
        Room(room_id=s.room_id, room_type=s.room_type, price=s.price)
        for s in starters
    ]


def default_hotel_config() -> HotelConfig:
    """Vollständige Standardkonfiguration."""
    return HotelConfig(
        inventory=InventoryConfig(
            capacity=100,
            starter_rooms=default_starter_room_config(),
        ),
    )
