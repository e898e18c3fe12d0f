from models.db import db, SerializerMixin


class PaymentRecord(SerializerMixin, db.Model):
    __tablename__ = "payment_records"

    id = db.Column(db.Integer, primary_key=True)
    reservation_id = db.Column(db.Integer, db.ForeignKey("reservations.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = db.Column(db.Float, nullable=False)
    payment_date = db.Column(db.Date, nullable=False)
    payment_method = db.Column(db.String(40), nullable=False)

    reservation = db.relationship("Reservation", back_populates="payment_records")
