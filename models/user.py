from models.db import db, SerializerMixin


class User(SerializerMixin, db.Model):
    __tablename__ = "users"

    hidden_fields = ("password",)

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    # bcrypt hash, see security.password
    password = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(30), nullable=False)

    reservations = db.relationship("Reservation", back_populates="user", passive_deletes="all")
    reviews = db.relationship("Review", back_populates="user", passive_deletes="all")
