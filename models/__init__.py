from .db import db
from .hotel import Hotel
from .room import Room
from .room_amenity import RoomAmenity
from .user import User
from .reservation import Reservation
from .review import Review
from .service import Service
from .service_reservation import ServiceReservation
from .promotion import Promotion
from .payment_record import PaymentRecord
