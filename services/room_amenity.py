from models.room import Room
from models.room_amenity import RoomAmenity
from services.base import CrudService
from utils.validation import EntitySchema, Field, INTEGER, STRING

ROOM_AMENITY_SCHEMA = EntitySchema(
    {
        "room_id": Field(INTEGER, reference=True),
        "amenity_type": Field(STRING),
    },
    updatable=("amenity_type",),
)


class RoomAmenityService(CrudService):
    model = RoomAmenity
    schema = ROOM_AMENITY_SCHEMA
    label = "Room amenity"
    plural = "room amenities"
    include = ("room",)
    parents = {"room_id": (Room, "Room")}
    empty_list_not_found = True
