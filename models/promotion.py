from models.db import db, SerializerMixin


class Promotion(SerializerMixin, db.Model):
    __tablename__ = "promotions"

    id = db.Column(db.Integer, primary_key=True)
    hotel_id = db.Column(db.Integer, db.ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False, index=True)
    promotion_type = db.Column(db.String(80), nullable=False)
    discount_percentage = db.Column(db.Float, nullable=False)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)

    hotel = db.relationship("Hotel", back_populates="promotions")

    __table_args__ = (
        db.UniqueConstraint(
            "hotel_id", "promotion_type", "start_date", "end_date",
            name="uq_promotion_window",
        ),
    )
