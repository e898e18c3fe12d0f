from flask import Blueprint

from .hotels import hotels_bp
from .rooms import rooms_bp
from .reviews import reviews_bp
from .users import users_bp
from .room_amenities import room_amenity_bp
from .promotions import promotions_bp
from .payment_records import payment_record_bp
from .services import services_bp
from .reservations import reservations_bp
from .service_reservations import service_reservation_bp

api_bp = Blueprint("api", __name__, url_prefix="/api/v1")

for child in (
    hotels_bp,
    rooms_bp,
    reviews_bp,
    users_bp,
    room_amenity_bp,
    promotions_bp,
    payment_record_bp,
    services_bp,
    reservations_bp,
    service_reservation_bp,
):
    api_bp.register_blueprint(child)
