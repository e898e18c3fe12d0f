from flask import Blueprint

from models import db
from services.room import RoomService
from utils.responses import send_response
from utils.validation import get_payload

rooms_bp = Blueprint("room", __name__, url_prefix="/rooms")


def _service() -> RoomService:
    return RoomService(db.session)


@rooms_bp.get("/getAll")
def get_all_rooms():
    rooms = _service().list()
    return send_response(200, True, "Rooms fetched successfully", rooms)


@rooms_bp.post("/create")
def create_room():
    room = _service().create(get_payload())
    return send_response(201, True, "Room created successfully", room)


@rooms_bp.patch("/update/<entity_id>")
def update_room(entity_id):
    room = _service().update(entity_id, get_payload())
    return send_response(200, True, "Room updated successfully", room)


@rooms_bp.delete("/delete/<entity_id>")
def delete_room(entity_id):
    _service().delete(entity_id)
    return send_response(200, True, "Room deleted successfully")
