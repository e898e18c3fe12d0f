from models.hotel import Hotel
from services.base import CrudService
from utils.validation import EntitySchema, Field, NUMBER, STRING

HOTEL_SCHEMA = EntitySchema({
    "name": Field(STRING),
    "location": Field(STRING),
    # 0 is a legitimate rating, so only absence counts as missing
    "rating": Field(NUMBER, minimum=0, maximum=5, message="Rating must be a number between 0 and 5", falsy_is_missing=False),
    "description": Field(STRING),
})


class HotelService(CrudService):
    model = Hotel
    schema = HOTEL_SCHEMA
    label = "Hotel"
    plural = "hotels"
    include = ("rooms",)
    unique_fields = ("name",)
    conflict_message = "Hotel with this name already exists"
