from flask import Blueprint

from models import db
from services.payment_record import PaymentRecordService
from utils.responses import send_response
from utils.validation import get_payload

payment_record_bp = Blueprint("payment_record", __name__, url_prefix="/payment_record")


def _service() -> PaymentRecordService:
    return PaymentRecordService(db.session)


@payment_record_bp.get("/getAll")
def get_all_payment_records():
    payment_records = _service().list()
    return send_response(200, True, "Payment records fetched successfully", payment_records)


@payment_record_bp.get("/get/<entity_id>")
def get_payment_record(entity_id):
    payment_record = _service().get(entity_id)
    return send_response(200, True, "Payment record fetched successfully", payment_record)


@payment_record_bp.post("/create")
def create_payment_record():
    payment_record = _service().create(get_payload())
    return send_response(201, True, "Payment record created successfully", payment_record)


@payment_record_bp.patch("/update/<entity_id>")
def update_payment_record(entity_id):
    payment_record = _service().update(entity_id, get_payload())
    return send_response(200, True, "Payment record updated successfully", payment_record)


@payment_record_bp.delete("/delete/<entity_id>")
def delete_payment_record(entity_id):
    _service().delete(entity_id)
    return send_response(200, True, "Payment record deleted successfully")
