import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    # Secrets
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-only-change-me")

    # SQLite database file stored next to the code as hotel_booking.db
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URL",
        "sqlite:///" + os.path.join(BASE_DIR, "hotel_booking.db")
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # HTTP listener
    PORT = int(os.getenv("APPLICATION_PORT", "7000"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Password hashing cost for stored user passwords
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

    # Keep field order of the envelope as written
    JSON_SORT_KEYS = False

    # Basic app settings
    DEBUG = False
