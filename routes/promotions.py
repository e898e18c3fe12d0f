from flask import Blueprint

from models import db
from services.promotion import PromotionService
from utils.responses import send_response
from utils.validation import get_payload

promotions_bp = Blueprint("promotion", __name__, url_prefix="/promotions")


def _service() -> PromotionService:
    return PromotionService(db.session)


@promotions_bp.get("/getAll")
def get_all_promotions():
    promotions = _service().list()
    return send_response(200, True, "Promotions fetched successfully", promotions)


@promotions_bp.get("/get/<entity_id>")
def get_promotion(entity_id):
    promotion = _service().get(entity_id)
    return send_response(200, True, "Promotion fetched successfully", promotion)


@promotions_bp.post("/create")
def create_promotion():
    promotion = _service().create(get_payload())
    return send_response(201, True, "Promotion created successfully", promotion)


@promotions_bp.patch("/update/<entity_id>")
def update_promotion(entity_id):
    promotion = _service().update(entity_id, get_payload())
    return send_response(200, True, "Promotion updated successfully", promotion)


@promotions_bp.delete("/delete/<entity_id>")
def delete_promotion(entity_id):
    _service().delete(entity_id)
    return send_response(200, True, "Promotion deleted successfully")
