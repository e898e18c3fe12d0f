from flask import Blueprint

from models import db
from services.service_reservation import ServiceReservationService
from utils.responses import send_response
from utils.validation import get_payload

service_reservation_bp = Blueprint("service_reservation", __name__, url_prefix="/service_reservation")


def _service() -> ServiceReservationService:
    return ServiceReservationService(db.session)


@service_reservation_bp.get("/getAll")
def get_all_service_reservations():
    service_reservations = _service().list()
    return send_response(200, True, "Service reservations fetched successfully", service_reservations)


@service_reservation_bp.get("/get/<entity_id>")
def get_service_reservation(entity_id):
    service_reservation = _service().get(entity_id)
    return send_response(200, True, "Service reservation fetched successfully", service_reservation)


@service_reservation_bp.post("/create")
def create_service_reservation():
    service_reservation = _service().create(get_payload())
    return send_response(201, True, "Service reservation created successfully", service_reservation)


@service_reservation_bp.patch("/update/<entity_id>")
def update_service_reservation(entity_id):
    service_reservation = _service().update(entity_id, get_payload())
    return send_response(200, True, "Service reservation updated successfully", service_reservation)


@service_reservation_bp.delete("/delete/<entity_id>")
def delete_service_reservation(entity_id):
    _service().delete(entity_id)
    return send_response(200, True, "Service reservation deleted successfully")
