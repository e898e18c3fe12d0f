from models.hotel import Hotel
from models.room import Room
from services.base import CrudService
from utils.validation import BOOLEAN, EntitySchema, Field, INTEGER, NUMBER, STRING

ROOM_SCHEMA = EntitySchema(
    {
        "hotel_id": Field(
            INTEGER, minimum=0, exclusive_minimum=True, message="Hotel ID must be a positive number", reference=True,
        ),
        "roomNumber": Field(INTEGER, minimum=0, exclusive_minimum=True, message="Room number must be a positive number"),
        "room_type": Field(STRING, message="Room type must be a string"),
        "price": Field(NUMBER, minimum=0, message="Price must be a positive number"),
        "availability": Field(BOOLEAN, message="Availability must be a boolean"),
    },
    falsy_is_missing=False,
)


class RoomService(CrudService):
    model = Room
    schema = ROOM_SCHEMA
    label = "Room"
    plural = "rooms"
    include = ("hotel",)
    parents = {"hotel_id": (Hotel, "Hotel")}
    unique_fields = ("hotel_id", "roomNumber")
    conflict_message = "Room with this number already exists in this hotel"
