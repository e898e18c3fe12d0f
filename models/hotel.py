from models.db import db, SerializerMixin


class Hotel(SerializerMixin, db.Model):
    __tablename__ = "hotels"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), unique=True, nullable=False)
    location = db.Column(db.String(160), nullable=False)
    rating = db.Column(db.Float, nullable=False)
    description = db.Column(db.Text, nullable=False)

    rooms = db.relationship("Room", back_populates="hotel", passive_deletes="all")
    reviews = db.relationship("Review", back_populates="hotel", passive_deletes="all")
    promotions = db.relationship("Promotion", back_populates="hotel", passive_deletes="all")
    services = db.relationship("Service", back_populates="hotel", passive_deletes="all")
