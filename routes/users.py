from flask import Blueprint

from models import db
from services.user import UserService
from utils.responses import send_response
from utils.validation import get_payload

users_bp = Blueprint("user", __name__, url_prefix="/users")


def _service() -> UserService:
    return UserService(db.session)


@users_bp.get("/getAll")
def get_all_users():
    users = _service().list()
    return send_response(200, True, "Users fetched successfully", users)


@users_bp.post("/create")
def create_user():
    user = _service().create(get_payload())
    return send_response(201, True, "User created successfully", user)


@users_bp.patch("/update/<entity_id>")
def update_user(entity_id):
    user = _service().update(entity_id, get_payload())
    return send_response(200, True, "User updated successfully", user)


@users_bp.delete("/delete/<entity_id>")
def delete_user(entity_id):
    _service().delete(entity_id)
    return send_response(200, True, "User deleted successfully")
