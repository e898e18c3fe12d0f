from models.db import db, SerializerMixin


class Service(SerializerMixin, db.Model):
    __tablename__ = "services"

    id = db.Column(db.Integer, primary_key=True)
    hotel_id = db.Column(db.Integer, db.ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False, index=True)
    service_type = db.Column(db.String(80), nullable=False)
    price = db.Column(db.Float, nullable=False)

    hotel = db.relationship("Hotel", back_populates="services")
    reservations = db.relationship("ServiceReservation", back_populates="service", passive_deletes="all")
