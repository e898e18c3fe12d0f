"""
Field-specification driven validation shared by every entity service.

Each entity declares an ``EntitySchema`` once; create and update payloads are
interpreted against it. Violations are collected and reported together as a
single ``InvalidArgument``.
"""
import math
import re
from datetime import date, datetime

from flask import request

from utils.errors import InvalidArgument

STRING = "string"
NUMBER = "number"
INTEGER = "integer"
BOOLEAN = "boolean"
DATE = "date"

_KIND_LABELS = {
    STRING: "a string",
    NUMBER: "a number",
    INTEGER: "an integer",
    BOOLEAN: "a boolean",
    DATE: "a valid date (YYYY-MM-DD)",
}

_ID_RE = re.compile(r"[+-]?\d+")

# signed 64-bit range of an SQL INTEGER column
SQL_INTEGER_MIN = -(2 ** 63)
SQL_INTEGER_MAX = 2 ** 63 - 1


def parse_id(raw) -> int:
    if raw is None or not _ID_RE.fullmatch(str(raw).strip()):
        raise InvalidArgument("Invalid ID format")
    return int(str(raw).strip(), 10)


def fits_sql_integer(value: int) -> bool:
    return SQL_INTEGER_MIN <= value <= SQL_INTEGER_MAX


def parse_date(value):
    """Accepts ``YYYY-MM-DD`` or a full ISO timestamp; returns None otherwise."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def get_payload() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidArgument("Request body must be a JSON object")
    return data


class Field:
    def __init__(
        self,
        kind: str,
        minimum=None,
        maximum=None,
        exclusive_minimum: bool = False,
        message: str = None,
        falsy_is_missing: bool = None,
        reference: bool = False,
    ):
        self.kind = kind
        self.minimum = minimum
        self.maximum = maximum
        self.exclusive_minimum = exclusive_minimum
        self.message = message
        # None defers to the schema default
        self.falsy_is_missing = falsy_is_missing
        # foreign keys: out-of-range ids are left to the parent lookup
        self.reference = reference

    def check(self, name: str, value):
        """Returns ``(normalized_value, error_message)``."""
        failure = self.message or f"{name} must be {_KIND_LABELS[self.kind]}"

        if self.kind == STRING:
            ok = isinstance(value, str)
        elif self.kind == NUMBER:
            ok = (
                isinstance(value, (int, float))
                and not isinstance(value, bool)
                and not (isinstance(value, float) and math.isnan(value))
            )
            if ok and isinstance(value, int) and not fits_sql_integer(value):
                try:
                    value = float(value)
                except OverflowError:
                    ok = False
        elif self.kind == INTEGER:
            if isinstance(value, float) and value.is_integer():
                value = int(value)
            ok = isinstance(value, int) and not isinstance(value, bool)
            if ok and not self.reference and not fits_sql_integer(value):
                ok = False
        elif self.kind == BOOLEAN:
            ok = isinstance(value, bool)
        elif self.kind == DATE:
            value = parse_date(value)
            ok = value is not None
        else:
            raise ValueError(f"Unknown field kind: {self.kind}")

        if not ok:
            return None, failure

        if self.minimum is not None:
            if value < self.minimum or (self.exclusive_minimum and value == self.minimum):
                return None, failure
        if self.maximum is not None and value > self.maximum:
            return None, failure
        return value, None


class EntitySchema:
    def __init__(self, fields: dict, updatable=None, falsy_is_missing: bool = True):
        self.fields = fields
        self.updatable = tuple(updatable) if updatable is not None else tuple(fields)
        self.falsy_is_missing = falsy_is_missing

    def validate_create(self, payload: dict) -> dict:
        return self._validate(payload, tuple(self.fields), require=True)

    def validate_update(self, payload: dict) -> dict:
        return self._validate(payload, self.updatable, require=False)

    def _is_missing(self, name: str, field: Field, payload: dict) -> bool:
        if name not in payload:
            return True
        falsy_is_missing = self.falsy_is_missing if field.falsy_is_missing is None else field.falsy_is_missing
        return falsy_is_missing and not payload[name]

    def _validate(self, payload: dict, allowed: tuple, require: bool) -> dict:
        errors = []
        clean = {}

        for name in allowed:
            field = self.fields[name]
            if require and self._is_missing(name, field, payload):
                errors.append(f"{name} is required")
                continue
            if name not in payload:
                continue
            value, error = field.check(name, payload[name])
            if error:
                if error not in errors:
                    errors.append(error)
            else:
                clean[name] = value

        unexpected = [key for key in payload if key not in allowed]
        if unexpected:
            errors.append(f"Unexpected fields provided: {', '.join(unexpected)}")

        if errors:
            raise InvalidArgument(", ".join(errors))
        return clean
