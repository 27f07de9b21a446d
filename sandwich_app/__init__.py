import logging

from flask import Flask
from sandwich_app.extensions import db, cors, migrate
from sandwich_app.routes import register_routes
from sandwich_app.services.data_client import init_data_client


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if overrides:
        app.config.update(overrides)

    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    app.logger.setLevel(level)
    logging.getLogger("sandwich_app").setLevel(level)

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS only matters for the JSON API and its event streams
    cors.init_app(app,
                  resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
                  allow_headers=["Content-Type"],
                  methods=["GET", "POST", "OPTIONS"])

    init_data_client(app)
    register_routes(app)

    return app
