from models.hotel import Hotel
from models.review import Review
from models.user import User
from services.base import CrudService
from utils.validation import DATE, EntitySchema, Field, INTEGER, NUMBER, STRING

REVIEW_SCHEMA = EntitySchema(
    {
        "user_id": Field(INTEGER, reference=True),
        "hotel_id": Field(INTEGER, reference=True),
        "rating": Field(NUMBER, minimum=0, maximum=5, message="Rating must be between 0 and 5"),
        "comment": Field(STRING),
        "review_date": Field(DATE),
    },
    updatable=("rating", "comment", "review_date"),
)


class ReviewService(CrudService):
    model = Review
    schema = REVIEW_SCHEMA
    label = "Review"
    plural = "reviews"
    include = ("user", "hotel")
    parents = {
        "user_id": (User, "User"),
        "hotel_id": (Hotel, "Hotel"),
    }
    unique_fields = ("user_id", "hotel_id")
    conflict_message = "Review already exists for this user and hotel"
    empty_list_not_found = True
