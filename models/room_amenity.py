from models.db import db, SerializerMixin


class RoomAmenity(SerializerMixin, db.Model):
    __tablename__ = "room_amenities"

    id = db.Column(db.Integer, primary_key=True)
    room_id = db.Column(db.Integer, db.ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False, index=True)
    amenity_type = db.Column(db.String(80), nullable=False)

    room = db.relationship("Room", back_populates="amenities")
