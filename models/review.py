from models.db import db, SerializerMixin


class Review(SerializerMixin, db.Model):
    __tablename__ = "reviews"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    hotel_id = db.Column(db.Integer, db.ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False, index=True)
    rating = db.Column(db.Float, nullable=False)
    comment = db.Column(db.Text, nullable=False)
    review_date = db.Column(db.Date, nullable=False)

    user = db.relationship("User", back_populates="reviews")
    hotel = db.relationship("Hotel", back_populates="reviews")

    __table_args__ = (
        # one review per user and hotel
        db.UniqueConstraint("user_id", "hotel_id", name="uq_review_user_hotel"),
    )
