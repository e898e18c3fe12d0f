from flask import Blueprint

from models import db
from services.hotel import HotelService
from utils.responses import send_response
from utils.validation import get_payload

hotels_bp = Blueprint("hotel", __name__, url_prefix="/hotels")


def _service() -> HotelService:
    return HotelService(db.session)


@hotels_bp.get("/getAll")
def get_all_hotels():
    hotels = _service().list()
    return send_response(200, True, "Hotels fetched successfully", hotels)


@hotels_bp.post("/create")
def create_hotel():
    hotel = _service().create(get_payload())
    return send_response(201, True, "Hotel created successfully", hotel)


@hotels_bp.patch("/update/<entity_id>")
def update_hotel(entity_id):
    hotel = _service().update(entity_id, get_payload())
    return send_response(200, True, "Hotel updated successfully", hotel)


@hotels_bp.delete("/delete/<entity_id>")
def delete_hotel(entity_id):
    _service().delete(entity_id)
    return send_response(200, True, "Hotel deleted successfully")
