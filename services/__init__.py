from .hotel import HotelService
from .room import RoomService
from .room_amenity import RoomAmenityService
from .user import UserService
from .reservation import ReservationService
from .review import ReviewService
from .service import ServiceService
from .service_reservation import ServiceReservationService
from .promotion import PromotionService
from .payment_record import PaymentRecordService
