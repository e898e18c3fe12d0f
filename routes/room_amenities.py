from flask import Blueprint

from models import db
from services.room_amenity import RoomAmenityService
from utils.responses import send_response
from utils.validation import get_payload

room_amenity_bp = Blueprint("room_amenity", __name__, url_prefix="/room_amenity")


def _service() -> RoomAmenityService:
    return RoomAmenityService(db.session)


@room_amenity_bp.get("/getAll")
def get_all_room_amenities():
    room_amenities = _service().list()
    return send_response(200, True, "Room amenities fetched successfully", room_amenities)


@room_amenity_bp.get("/get/<entity_id>")
def get_room_amenity(entity_id):
    room_amenity = _service().get(entity_id)
    return send_response(200, True, "Room amenity fetched successfully", room_amenity)


@room_amenity_bp.post("/create")
def create_room_amenity():
    room_amenity = _service().create(get_payload())
    return send_response(201, True, "Room amenity created successfully", room_amenity)


@room_amenity_bp.patch("/update/<entity_id>")
def update_room_amenity(entity_id):
    room_amenity = _service().update(entity_id, get_payload())
    return send_response(200, True, "Room amenity updated successfully", room_amenity)


@room_amenity_bp.delete("/delete/<entity_id>")
def delete_room_amenity(entity_id):
    _service().delete(entity_id)
    return send_response(200, True, "Room amenity deleted successfully")
