from models.hotel import Hotel
from models.service import Service
from services.base import CrudService
from utils.errors import InvalidArgument
from utils.validation import EntitySchema, Field, INTEGER, NUMBER, STRING

SERVICE_SCHEMA = EntitySchema({
    "hotel_id": Field(INTEGER, reference=True),
    "service_type": Field(STRING),
    "price": Field(NUMBER, minimum=0, message="Price must be a positive number"),
})


class ServiceService(CrudService):
    model = Service
    schema = SERVICE_SCHEMA
    label = "Service"
    plural = "services"
    include = ("hotel",)
    parents = {"hotel_id": (Hotel, "Hotel")}

    def check_changes(self, row, changes: dict):
        if changes and all(getattr(row, name) == value for name, value in changes.items()):
            raise InvalidArgument("No changes detected: The service already has identical data")
