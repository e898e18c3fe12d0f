from models.payment_record import PaymentRecord
from models.reservation import Reservation
from services.base import CrudService
from utils.validation import DATE, EntitySchema, Field, INTEGER, NUMBER, STRING

PAYMENT_RECORD_SCHEMA = EntitySchema(
    {
        "reservation_id": Field(INTEGER, reference=True),
        "amount": Field(NUMBER),
        "payment_date": Field(DATE),
        "payment_method": Field(STRING),
    },
    updatable=("amount", "payment_date", "payment_method"),
)


class PaymentRecordService(CrudService):
    model = PaymentRecord
    schema = PAYMENT_RECORD_SCHEMA
    label = "Payment record"
    plural = "payment records"
    include = ("reservation",)
    parents = {"reservation_id": (Reservation, "Reservation")}
