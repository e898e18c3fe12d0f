import logging

import click
from flask import Flask
from flask_migrate import Migrate

from config import Config
from models import db
from routes import api_bp
from utils.errors import register_error_handlers
from utils.logging_utils import setup_logger


def create_app(config_object=Config, **overrides):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.update(overrides)
    # JSON_SORT_KEYS is no longer read by the JSON provider itself
    app.json.sort_keys = app.config.get("JSON_SORT_KEYS", False)

    setup_logger(__name__, app.config.get("LOG_LEVEL", "INFO"))

    # Register routes
    app.register_blueprint(api_bp)

    # Database init
    db.init_app(app)

    # Migrations
    Migrate(app, db)

    register_error_handlers(app)
    register_cli(app)

    return app


def register_cli(app):
    @app.cli.command("init-db")
    def init_db():
        """Create every table that does not exist yet."""
        db.create_all()
        click.echo("Database tables created")

    @app.cli.command("drop-db")
    @click.confirmation_option(prompt="Drop every table?")
    def drop_db():
        db.drop_all()
        click.echo("Database tables dropped")


if __name__ == "__main__":
    app = create_app()
    logger = logging.getLogger(__name__)
    logger.info("Server is running on port %s", app.config["PORT"])
    app.run(host="127.0.0.1", port=app.config["PORT"])
