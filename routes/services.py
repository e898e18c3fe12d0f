from flask import Blueprint

from models import db
from services.service import ServiceService
from utils.responses import send_response
from utils.validation import get_payload

services_bp = Blueprint("service", __name__, url_prefix="/services")


def _service() -> ServiceService:
    return ServiceService(db.session)


@services_bp.get("/getAll")
def get_all_services():
    services = _service().list()
    return send_response(200, True, "Services fetched successfully", services)


@services_bp.get("/get/<entity_id>")
def get_service(entity_id):
    service = _service().get(entity_id)
    return send_response(200, True, "Service fetched successfully", service)


@services_bp.post("/create")
def create_service():
    service = _service().create(get_payload())
    return send_response(201, True, "Service created successfully", service)


@services_bp.patch("/update/<entity_id>")
def update_service(entity_id):
    service = _service().update(entity_id, get_payload())
    return send_response(200, True, "Service updated successfully", service)


@services_bp.delete("/delete/<entity_id>")
def delete_service(entity_id):
    _service().delete(entity_id)
    return send_response(200, True, "Service deleted successfully")
