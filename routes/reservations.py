from flask import Blueprint

from models import db
from services.reservation import ReservationService
from utils.responses import send_response
from utils.validation import get_payload

reservations_bp = Blueprint("reservation", __name__, url_prefix="/reservations")


def _service() -> ReservationService:
    return ReservationService(db.session)


@reservations_bp.get("/getAll")
def get_all_reservations():
    reservations = _service().list()
    return send_response(200, True, "Reservations fetched successfully", reservations)


@reservations_bp.post("/create")
def create_reservation():
    reservation = _service().create(get_payload())
    return send_response(201, True, "Reservation created successfully", reservation)


@reservations_bp.patch("/update/<entity_id>")
def update_reservation(entity_id):
    reservation = _service().update(entity_id, get_payload())
    return send_response(200, True, "Reservation updated successfully", reservation)


@reservations_bp.delete("/delete/<entity_id>")
def delete_reservation(entity_id):
    _service().delete(entity_id)
    return send_response(200, True, "Reservation deleted successfully")
