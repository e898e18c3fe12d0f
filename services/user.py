from flask import current_app

from models.user import User
from security.password import hash_password
from services.base import CrudService
from utils.validation import EntitySchema, Field, STRING

USER_SCHEMA = EntitySchema({
    "name": Field(STRING),
    "email": Field(STRING),
    "password": Field(STRING),
    "phone": Field(STRING),
})


class UserService(CrudService):
    model = User
    schema = USER_SCHEMA
    label = "User"
    plural = "users"
    include = ("reservations", "reviews")
    unique_fields = ("email",)
    conflict_message = "Email already in use"

    def prepare(self, data: dict) -> dict:
        if "password" in data:
            rounds = current_app.config.get("BCRYPT_ROUNDS", 12)
            data = dict(data, password=hash_password(data["password"], rounds=rounds))
        return data
