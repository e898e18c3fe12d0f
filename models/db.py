from datetime import date, datetime

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

db = SQLAlchemy()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless the pragma is set per connection
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _jsonable(value):
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


class SerializerMixin:
    # column keys never sent to clients
    hidden_fields = ()

    def to_dict(self, include=()):
        out = {
            column.key: _jsonable(getattr(self, column.key))
            for column in self.__table__.columns
            if column.key not in self.hidden_fields
        }
        for name in include:
            related = getattr(self, name)
            if related is None:
                out[name] = None
            elif isinstance(related, list):
                out[name] = [row.to_dict() for row in related]
            else:
                out[name] = related.to_dict()
        return out
