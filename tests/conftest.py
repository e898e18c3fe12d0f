import itertools

import pytest

from app import create_app
from models import db

API = "/api/v1"


@pytest.fixture
def app():
    app = create_app(
        SQLALCHEMY_DATABASE_URI="sqlite://",
        TESTING=True,
        BCRYPT_ROUNDS=4,
        LOG_LEVEL="WARNING",
    )
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _creator(client, path, defaults):
    counter = itertools.count(1)

    def _create(**overrides):
        n = next(counter)
        payload = {key: (value(n) if callable(value) else value) for key, value in defaults.items()}
        payload.update(overrides)
        resp = client.post(f"{API}/{path}/create", json=payload)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["data"]

    return _create


@pytest.fixture
def make_hotel(client):
    return _creator(client, "hotels", {
        "name": lambda n: f"Hotel {n}",
        "location": "NYC",
        "rating": 4.5,
        "description": "Central and quiet",
    })


@pytest.fixture
def make_user(client):
    return _creator(client, "users", {
        "name": lambda n: f"Guest {n}",
        "email": lambda n: f"guest{n}@example.com",
        "password": "s3cret-pass",
        "phone": "+1-555-0100",
    })


@pytest.fixture
def hotel(make_hotel):
    return make_hotel()


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def make_room(client, hotel):
    return _creator(client, "rooms", {
        "hotel_id": hotel["id"],
        "roomNumber": lambda n: 100 + n,
        "room_type": "double",
        "price": 120.0,
        "availability": True,
    })


@pytest.fixture
def room(make_room):
    return make_room()


@pytest.fixture
def make_reservation(client, user, room):
    return _creator(client, "reservations", {
        "user_id": user["id"],
        "room_id": room["id"],
        "check_in_date": lambda n: f"2024-05-{n:02d}",
        "check_out_date": lambda n: f"2024-05-{n + 2:02d}",
        "status": "CONFIRMED",
    })


@pytest.fixture
def reservation(make_reservation):
    return make_reservation()


@pytest.fixture
def make_service(client, hotel):
    return _creator(client, "services", {
        "hotel_id": hotel["id"],
        "service_type": lambda n: f"Service {n}",
        "price": 25.0,
    })


@pytest.fixture
def service(make_service):
    return make_service()
