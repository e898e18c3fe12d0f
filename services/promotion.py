from models.hotel import Hotel
from models.promotion import Promotion
from services.base import CrudService
from utils.errors import InvalidArgument
from utils.validation import DATE, EntitySchema, Field, INTEGER, NUMBER, STRING

PROMOTION_SCHEMA = EntitySchema(
    {
        "hotel_id": Field(INTEGER, reference=True),
        "promotion_type": Field(STRING),
        "discount_percentage": Field(
            NUMBER,
            minimum=0,
            maximum=100,
            exclusive_minimum=True,
            message="Discount percentage must be between 0 and 100",
        ),
        "start_date": Field(DATE),
        "end_date": Field(DATE),
    },
    updatable=("promotion_type", "discount_percentage", "start_date", "end_date"),
)


class PromotionService(CrudService):
    model = Promotion
    schema = PROMOTION_SCHEMA
    label = "Promotion"
    plural = "promotions"
    include = ("hotel",)
    parents = {"hotel_id": (Hotel, "Hotel")}
    unique_fields = ("hotel_id", "promotion_type", "start_date", "end_date")
    conflict_message = "Promotion already exists with this hotel_id, promotion_type, start_date, and end_date"
    recheck_unique_on_update = True
    empty_list_not_found = True

    def check_rules(self, record: dict):
        if record["start_date"] > record["end_date"]:
            raise InvalidArgument("Start date cannot be after end date")
