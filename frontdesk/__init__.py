from frontdesk.errors import ErrorKind, FrontDeskError, InputError
from frontdesk.inventory import RoomInventory
from frontdesk.ledger import BookingLedger
from frontdesk.checkin import CheckInReceipt, CheckInService

__all__ = [
    "ErrorKind",
    "FrontDeskError",
    "InputError",
    "RoomInventory",
    "BookingLedger",
    "CheckInReceipt",
    "CheckInService",
]
