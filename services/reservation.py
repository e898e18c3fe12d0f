from models.reservation import Reservation
from models.room import Room
from models.user import User
from services.base import CrudService
from utils.validation import DATE, EntitySchema, Field, INTEGER, STRING

_DATE_MESSAGE = "Invalid date format. Should be in YYYY-MM-DD format."

RESERVATION_SCHEMA = EntitySchema(
    {
        "user_id": Field(INTEGER, message="user_id must be a number", reference=True),
        "room_id": Field(INTEGER, message="room_id must be a number", reference=True),
        "check_in_date": Field(DATE, message=_DATE_MESSAGE),
        "check_out_date": Field(DATE, message=_DATE_MESSAGE),
        "status": Field(STRING, message="status must be a string"),
    },
    falsy_is_missing=False,
)


class ReservationService(CrudService):
    model = Reservation
    schema = RESERVATION_SCHEMA
    label = "Reservation"
    plural = "reservations"
    include = ("room", "services", "payment_records")
    parents = {
        "user_id": (User, "User"),
        "room_id": (Room, "Room"),
    }
    unique_fields = ("user_id", "room_id", "check_in_date", "check_out_date", "status")
    conflict_message = "A reservation already exists with the same details."
    recheck_unique_on_update = True
