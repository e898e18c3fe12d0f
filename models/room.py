from models.db import db, SerializerMixin


class Room(SerializerMixin, db.Model):
    __tablename__ = "rooms"

    id = db.Column(db.Integer, primary_key=True)
    hotel_id = db.Column(db.Integer, db.ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False, index=True)
    # camelCase is part of the public payload
    roomNumber = db.Column(db.Integer, nullable=False)
    room_type = db.Column(db.String(60), nullable=False)
    price = db.Column(db.Float, nullable=False)
    availability = db.Column(db.Boolean, nullable=False, default=True)

    hotel = db.relationship("Hotel", back_populates="rooms")
    amenities = db.relationship("RoomAmenity", back_populates="room", passive_deletes="all")
    reservations = db.relationship("Reservation", back_populates="room", passive_deletes="all")

    __table_args__ = (
        db.UniqueConstraint("hotel_id", "roomNumber", name="uq_room_number_per_hotel"),
    )
