"""Tests für den Kern: Validierung, Zimmerbestand, Journal und Check-in."""

import pytest

from frontdesk.checkin import CheckInService
from frontdesk.errors import (
    ErrorKind,
    FrontDeskError,
    InputError,
    InventoryFullError,
    LedgerFullError,
    RoomIdAlreadyExistsError,
    RoomNotFoundError,
    RoomOccupiedError,
    RoomUnavailableError,
)
from frontdesk.inventory import RoomInventory
from frontdesk.ledger import BookingLedger
from frontdesk.validation import (
    is_valid_date,
    is_valid_decimal,
    is_valid_integer,
    parse_check_in_date,
    parse_decimal,
    parse_integer,
)
from models.booking import Booking
from models.room import Room, RoomStatus, RoomType


# ─── Testdaten-Hilfsfunktionen ────────────────────────────────────────────────

def _room(room_id: str, price: float = 100000, room_type=RoomType.SINGLE,
          status=RoomStatus.AVAILABLE) -> Room:
    return Room(room_id=room_id, room_type=room_type, price=price, status=status)


def _booking(room_id: str, days: int = 1) -> Booking:
    return Booking(booking_id=f"BK{room_id}", room_id=room_id, customer_name="Gast",
                   check_in_date="01/01/2026", days=days, total_cost=100.0 * days)


def _make_desk(capacity: int = 100, ledger_capacity: int = 100):
    inventory = RoomInventory.initialize(capacity=capacity)
    ledger = BookingLedger(capacity=ledger_capacity)
    return inventory, ledger, CheckInService(inventory, ledger)


# ─── VALIDIERUNG ──────────────────────────────────────────────────────────────

class TestValidation:
    @pytest.mark.parametrize("text", ["0", "42", "+7", "-13", "007"])
    def test_valid_integers(self, text):
        assert is_valid_integer(text)

    @pytest.mark.parametrize("text", ["", "+", "-", "1.5", "12a", " 1", "١٢", "²"])
    def test_invalid_integers(self, text):
        assert not is_valid_integer(text)

    @pytest.mark.parametrize("text", ["1", "1.5", "-0.25", "+3.", ".5", ".", "+."])
    def test_valid_decimals(self, text):
        assert is_valid_decimal(text)

    @pytest.mark.parametrize("text", ["", "+", "-", "1.2.3", "abc", "1,5", "1e5"])
    def test_invalid_decimals(self, text):
        assert not is_valid_decimal(text)

    def test_leap_day_valid(self):
        """29.02. in einem Schaltjahr ist gültig."""
        assert is_valid_date("29/02/2024")
        assert is_valid_date("29/02/2000")

    def test_leap_day_invalid_in_common_year(self):
        assert not is_valid_date("29/02/2023")
        assert not is_valid_date("29/02/2100")

    def test_april_has_30_days(self):
        assert not is_valid_date("31/04/2025")
        assert is_valid_date("30/04/2025")

    @pytest.mark.parametrize("text", [
        "00/01/2025", "01/13/2025", "01/00/2025", "01/01/1899", "01/01/2101",
        "1/1/2025", "01-01-2025", "01/01/25", "aa/01/2025", "01/01/2025 ",
    ])
    def test_invalid_dates(self, text):
        assert not is_valid_date(text)

    def test_parse_integer_reports_kind(self):
        """Jede verletzte Bedingung hat ihre eigene Fehlerart."""
        with pytest.raises(InputError) as exc:
            parse_integer("", 1, 9)
        assert exc.value.kind is ErrorKind.EMPTY_INPUT
        with pytest.raises(InputError) as exc:
            parse_integer("x", 1, 9)
        assert exc.value.kind is ErrorKind.NOT_A_NUMBER
        with pytest.raises(InputError) as exc:
            parse_integer("10", 1, 9)
        assert exc.value.kind is ErrorKind.OUT_OF_RANGE
        assert parse_integer("+9", 1, 9) == 9

    def test_parse_decimal(self):
        assert parse_decimal("150000", 0.01) == 150000.0
        with pytest.raises(InputError) as exc:
            parse_decimal("1.2.3", 0.01)
        assert exc.value.kind is ErrorKind.NOT_A_DECIMAL
        with pytest.raises(InputError) as exc:
            parse_decimal("0", 0.01)
        assert exc.value.kind is ErrorKind.OUT_OF_RANGE
        with pytest.raises(InputError) as exc:
            parse_decimal("11", 0.01, maximum=10)
        assert exc.value.kind is ErrorKind.OUT_OF_RANGE

    def test_parse_decimal_without_digits_is_zero(self):
        """"." ist formal gültig, zählt aber als 0 und scheitert am Minimum."""
        assert parse_decimal(".", 0) == 0.0
        for text in (".", "+.", "-."):
            with pytest.raises(InputError) as exc:
                parse_decimal(text, 0.01)
            assert exc.value.kind is ErrorKind.OUT_OF_RANGE

    def test_parse_check_in_date_min_year(self):
        """Gültiges Datum vor dem Mindestjahr → InvalidDate."""
        assert parse_check_in_date("10/03/2025", 2025) == "10/03/2025"
        with pytest.raises(InputError) as exc:
            parse_check_in_date("10/03/2024", 2025)
        assert exc.value.kind is ErrorKind.INVALID_DATE
        with pytest.raises(InputError) as exc:
            parse_check_in_date("", 2025)
        assert exc.value.kind is ErrorKind.INVALID_DATE


# ─── ZIMMERBESTAND ────────────────────────────────────────────────────────────

class TestInventory:
    def test_initialize_seeds_seven_available_rooms(self):
        inventory = RoomInventory.initialize()
        rooms = inventory.list_all()
        assert len(rooms) == 7
        assert all(r.status is RoomStatus.AVAILABLE for r in rooms)
        ids = [r.room_id for r in rooms]
        assert len(set(ids)) == len(ids)
        assert ids == ["101", "102", "103", "104", "105", "106", "107"]

    def test_find_by_id_case_sensitive(self):
        inventory = RoomInventory()
        inventory.add(_room("A1"))
        assert inventory.find_by_id("A1") == 0
        assert inventory.find_by_id("a1") is None
        assert inventory.exists("A1")
        assert not inventory.exists("A2")

    def test_add_forces_available(self):
        """Ein mitgegebener Status wird ignoriert."""
        inventory = RoomInventory()
        stored = inventory.add(_room("201", status=RoomStatus.OCCUPIED))
        assert stored.status is RoomStatus.AVAILABLE
        assert len(inventory) == 1

    def test_add_duplicate_rejected(self):
        inventory = RoomInventory.initialize()
        with pytest.raises(RoomIdAlreadyExistsError):
            inventory.add(_room("101"))
        assert len(inventory) == 7

    def test_add_empty_id_rejected(self):
        inventory = RoomInventory()
        with pytest.raises(InputError) as exc:
            inventory.add(_room(""))
        assert exc.value.kind is ErrorKind.EMPTY_INPUT
        assert len(inventory) == 0

    def test_add_at_capacity_rejected(self):
        inventory = RoomInventory(capacity=2)
        inventory.add(_room("1"))
        inventory.add(_room("2"))
        with pytest.raises(InventoryFullError) as exc:
            inventory.add(_room("3"))
        assert exc.value.kind is ErrorKind.INVENTORY_FULL
        assert len(inventory) == 2

    def test_update_changes_type_and_price_only(self):
        inventory = RoomInventory.initialize()
        inventory.set_maintenance("103")
        updated = inventory.update("103", RoomType.DOUBLE, 999.5)
        assert updated.room_type is RoomType.DOUBLE
        assert updated.price == 999.5
        assert updated.status is RoomStatus.MAINTENANCE
        assert inventory.find_by_id("103") == 2

    def test_update_unknown_room(self):
        inventory = RoomInventory.initialize()
        with pytest.raises(RoomNotFoundError) as exc:
            inventory.update("999", RoomType.SINGLE, 1)
        assert exc.value.kind is ErrorKind.ROOM_NOT_FOUND

    def test_update_occupied_rejected(self):
        """Belegtes Zimmer: weder Änderung noch Wartung, keine Seiteneffekte."""
        inventory, _, service = _make_desk()
        service.check_in("102", "Gast", "01/06/2025", 2)
        with pytest.raises(RoomOccupiedError) as exc:
            inventory.update("102", RoomType.SINGLE, 1)
        assert exc.value.kind is ErrorKind.ROOM_OCCUPIED_CANNOT_MODIFY
        with pytest.raises(RoomOccupiedError):
            inventory.set_maintenance("102")
        room = inventory.get("102")
        assert room.room_type is RoomType.DOUBLE
        assert room.price == 500000
        assert room.status is RoomStatus.OCCUPIED

    def test_update_rejects_non_positive_price(self):
        inventory = RoomInventory.initialize()
        with pytest.raises(InputError):
            inventory.update("101", RoomType.DOUBLE, 0)
        assert inventory.get("101").room_type is RoomType.SINGLE

    @pytest.mark.parametrize("price", [float("nan"), float("inf")])
    def test_update_rejects_non_finite_price_without_side_effects(self, price):
        """Abgelehnter Preis ändert auch den Typ nicht."""
        inventory = RoomInventory.initialize()
        with pytest.raises(InputError) as exc:
            inventory.update("101", RoomType.DOUBLE, price)
        assert exc.value.kind is ErrorKind.OUT_OF_RANGE
        room = inventory.get("101")
        assert room.room_type is RoomType.SINGLE
        assert room.price == 150000

    def test_set_maintenance(self):
        inventory = RoomInventory.initialize()
        room = inventory.set_maintenance("105")
        assert room.status is RoomStatus.MAINTENANCE
        assert inventory.get("105").status is RoomStatus.MAINTENANCE

    def test_list_all_returns_copies(self):
        """Änderungen an der Momentaufnahme wirken nicht auf den Bestand."""
        inventory = RoomInventory.initialize()
        snapshot = inventory.list_all()
        snapshot[0].price = 1.0
        assert inventory.get("101").price == 150000

    def test_room_id_is_immutable(self):
        room = _room("101")
        with pytest.raises(Exception):
            room.room_id = "102"

    def test_filter_by_type_keeps_order(self):
        inventory = RoomInventory.initialize()
        doubles = inventory.filter_by_type(RoomType.DOUBLE)
        assert [r.room_id for r in doubles] == ["102", "104", "106"]
        singles = inventory.filter_by_type(RoomType.SINGLE)
        assert [r.room_id for r in singles] == ["101", "103", "105", "107"]

    def test_sort_by_price_descending(self):
        inventory = RoomInventory.initialize()
        before = {r.room_id for r in inventory.list_all()}
        inventory.sort_by_price_descending()
        rooms = inventory.list_all()
        prices = [r.price for r in rooms]
        assert prices == sorted(prices, reverse=True)
        assert {r.room_id for r in rooms} == before
        assert rooms[0].room_id == "106"

    def test_sort_is_idempotent_and_stable(self):
        inventory = RoomInventory()
        for room_id, price in [("a", 10), ("b", 30), ("c", 10), ("d", 30)]:
            inventory.add(_room(room_id, price=price))
        inventory.sort_by_price_descending()
        once = [r.room_id for r in inventory.list_all()]
        inventory.sort_by_price_descending()
        twice = [r.room_id for r in inventory.list_all()]
        assert once == twice == ["b", "d", "a", "c"]


# ─── BUCHUNGSJOURNAL ──────────────────────────────────────────────────────────

class TestLedger:
    def test_filter_on_empty_ledger(self):
        assert BookingLedger().filter_by_room("101") == []

    def test_filter_keeps_insertion_order(self):
        ledger = BookingLedger()
        ledger.append(_booking("101", days=1))
        ledger.append(_booking("102"))
        ledger.append(_booking("101", days=2))
        history = ledger.filter_by_room("101")
        assert [b.days for b in history] == [1, 2]
        assert len(ledger) == 3

    def test_append_at_capacity(self):
        ledger = BookingLedger(capacity=1)
        ledger.append(_booking("101"))
        with pytest.raises(LedgerFullError) as exc:
            ledger.append(_booking("102"))
        assert exc.value.kind is ErrorKind.LEDGER_FULL
        assert len(ledger) == 1

    def test_booking_is_frozen(self):
        booking = _booking("101")
        with pytest.raises(Exception):
            booking.total_cost = 0


# ─── CHECK-IN ─────────────────────────────────────────────────────────────────

class TestCheckIn:
    def test_reference_scenario(self):
        """Zimmer 101 (150000), 3 Tage ab 10/03/2025 → BK101, 450000."""
        inventory, ledger, service = _make_desk()
        receipt = service.check_in("101", "A", "10/03/2025", 3)
        assert receipt.booking.booking_id == "BK101"
        assert receipt.booking.total_cost == 450000.0
        assert receipt.booking.room_id == "101"
        assert receipt.room.status is RoomStatus.OCCUPIED
        assert inventory.get("101").status is RoomStatus.OCCUPIED
        assert ledger.filter_by_room("101") == [receipt.booking]

    def test_second_check_in_rejected(self):
        inventory, ledger, service = _make_desk()
        service.check_in("104", "A", "01/01/2026", 1)
        with pytest.raises(RoomUnavailableError) as exc:
            service.check_in("104", "B", "02/01/2026", 1)
        assert exc.value.kind is ErrorKind.ROOM_UNAVAILABLE
        assert exc.value.status is RoomStatus.OCCUPIED
        assert "belegt" in exc.value.message
        assert len(ledger) == 1

    def test_maintenance_room_unavailable(self):
        """Fehlermeldung unterscheidet Wartung von Belegung."""
        inventory, ledger, service = _make_desk()
        inventory.set_maintenance("105")
        with pytest.raises(RoomUnavailableError) as exc:
            service.check_in("105", "A", "01/01/2026", 1)
        assert exc.value.status is RoomStatus.MAINTENANCE
        assert "Wartung" in exc.value.message
        assert len(ledger) == 0

    def test_unknown_room(self):
        _, ledger, service = _make_desk()
        with pytest.raises(RoomNotFoundError):
            service.check_in("999", "A", "01/01/2026", 1)
        assert len(ledger) == 0

    @pytest.mark.parametrize("date", ["31/12/2024", "31/04/2025", "2025-01-01", ""])
    def test_invalid_date_leaves_state_untouched(self, date):
        """Auch ein leeres Datum ist InvalidDate."""
        inventory, ledger, service = _make_desk()
        with pytest.raises(InputError) as exc:
            service.check_in("101", "A", date, 1)
        assert exc.value.kind is ErrorKind.INVALID_DATE
        assert inventory.get("101").status is RoomStatus.AVAILABLE
        assert len(ledger) == 0

    @pytest.mark.parametrize("days", [0, -1, 366])
    def test_days_out_of_range(self, days):
        inventory, ledger, service = _make_desk()
        with pytest.raises(InputError) as exc:
            service.check_in("101", "A", "01/01/2026", days)
        assert exc.value.kind is ErrorKind.OUT_OF_RANGE
        assert inventory.get("101").status is RoomStatus.AVAILABLE
        assert len(ledger) == 0

    def test_full_ledger_leaves_room_available(self):
        """Volles Journal: Zimmer bleibt frei, keine halbe Buchung."""
        inventory, ledger, service = _make_desk(ledger_capacity=1)
        service.check_in("101", "A", "01/01/2026", 1)
        with pytest.raises(LedgerFullError):
            service.check_in("102", "B", "01/01/2026", 1)
        assert inventory.get("102").status is RoomStatus.AVAILABLE
        assert len(ledger) == 1

    def test_total_cost_for_added_room(self):
        inventory, ledger, service = _make_desk()
        inventory.add(_room("301", price=200))
        receipt = service.check_in("301", "A", "01/01/2026", 2)
        assert receipt.booking.total_cost == 400.0
        assert ledger.filter_by_room("301")[0].total_cost == 400.0

    def test_all_errors_are_front_desk_errors(self):
        _, _, service = _make_desk()
        with pytest.raises(FrontDeskError):
            service.check_in("nope", "A", "01/01/2026", 1)

    def test_ensure_bookable(self):
        inventory, _, service = _make_desk()
        assert service.ensure_bookable("101").room_id == "101"
        inventory.set_maintenance("101")
        with pytest.raises(RoomUnavailableError):
            service.ensure_bookable("101")
