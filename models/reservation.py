from models.db import db, SerializerMixin


class Reservation(SerializerMixin, db.Model):
    __tablename__ = "reservations"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    room_id = db.Column(db.Integer, db.ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False, index=True)
    check_in_date = db.Column(db.Date, nullable=False)
    check_out_date = db.Column(db.Date, nullable=False)
    status = db.Column(db.String(20), nullable=False)

    user = db.relationship("User", back_populates="reservations")
    room = db.relationship("Room", back_populates="reservations")
    services = db.relationship("ServiceReservation", back_populates="reservation", passive_deletes="all")
    payment_records = db.relationship("PaymentRecord", back_populates="reservation", passive_deletes="all")

    __table_args__ = (
        db.UniqueConstraint(
            "user_id", "room_id", "check_in_date", "check_out_date", "status",
            name="uq_reservation_details",
        ),
    )
