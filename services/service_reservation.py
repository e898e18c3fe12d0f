from models.reservation import Reservation
from models.service import Service
from models.service_reservation import ServiceReservation
from services.base import CrudService
from utils.validation import EntitySchema, Field, INTEGER, NUMBER

SERVICE_RESERVATION_SCHEMA = EntitySchema({
    "reservation_id": Field(INTEGER, reference=True),
    "service_id": Field(INTEGER, reference=True),
    "quantity": Field(INTEGER, minimum=0, exclusive_minimum=True, message="Quantity must be greater than zero"),
    "price": Field(NUMBER, minimum=0, exclusive_minimum=True, message="Price must be greater than zero"),
})


class ServiceReservationService(CrudService):
    model = ServiceReservation
    schema = SERVICE_RESERVATION_SCHEMA
    label = "Service reservation"
    plural = "service reservations"
    include = ("reservation", "service")
    parents = {
        "reservation_id": (Reservation, "Reservation"),
        "service_id": (Service, "Service"),
    }
    unique_fields = ("reservation_id", "service_id")
    conflict_message = "Service reservation already exists with this reservation_id and service_id"
    recheck_unique_on_update = True
    empty_list_not_found = True
