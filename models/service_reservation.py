from models.db import db, SerializerMixin


class ServiceReservation(SerializerMixin, db.Model):
    __tablename__ = "service_reservations"

    id = db.Column(db.Integer, primary_key=True)
    reservation_id = db.Column(db.Integer, db.ForeignKey("reservations.id", ondelete="CASCADE"), nullable=False, index=True)
    service_id = db.Column(db.Integer, db.ForeignKey("services.id", ondelete="CASCADE"), nullable=False, index=True)
    quantity = db.Column(db.Integer, nullable=False)
    price = db.Column(db.Float, nullable=False)

    reservation = db.relationship("Reservation", back_populates="services")
    service = db.relationship("Service", back_populates="reservations")

    __table_args__ = (
        db.UniqueConstraint("reservation_id", "service_id", name="uq_service_per_reservation"),
    )
