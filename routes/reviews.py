from flask import Blueprint

from models import db
from services.review import ReviewService
from utils.responses import send_response
from utils.validation import get_payload

reviews_bp = Blueprint("review", __name__, url_prefix="/reviews")


def _service() -> ReviewService:
    return ReviewService(db.session)


@reviews_bp.get("/getAll")
def get_all_reviews():
    reviews = _service().list()
    return send_response(200, True, "Reviews fetched successfully", reviews)


@reviews_bp.get("/get/<entity_id>")
def get_review(entity_id):
    review = _service().get(entity_id)
    return send_response(200, True, "Review fetched successfully", review)


@reviews_bp.post("/create")
def create_review():
    review = _service().create(get_payload())
    return send_response(201, True, "Review created successfully", review)


@reviews_bp.patch("/update/<entity_id>")
def update_review(entity_id):
    review = _service().update(entity_id, get_payload())
    return send_response(200, True, "Review updated successfully", review)


@reviews_bp.delete("/delete/<entity_id>")
def delete_review(entity_id):
    _service().delete(entity_id)
    return send_response(200, True, "Review deleted successfully")
