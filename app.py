import logging

from flask import Flask
from sqlalchemy.exc import SQLAlchemyError

from config import Config
from db import db
from extensions.cors import init_cors
from routes.cars import create_cars_blueprint
from services.car_store import CarStore

logger = logging.getLogger(__name__)


def create_app(config_class=Config, config_overrides=None, store=None):
    """Configure the app, make sure the cars table exists and register the routes.

    ``config_overrides`` is applied on top of ``config_class``. ``store``
    replaces the SQLAlchemy-backed ``CarStore``; tests use it to simulate
    storage faults. Raises ``RuntimeError`` when the database cannot
    be opened, so a broken deployment never starts serving.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    if config_overrides:
        app.config.update(config_overrides)

    # initialize app
    db.init_app(app)
    init_cors(app)

    if store is None:
        store = CarStore(db)
        try:
            with app.app_context():
                store.init_schema()
        except SQLAlchemyError as exc:
            logger.exception("Error opening database %s", app.config["SQLALCHEMY_DATABASE_URI"])
            raise RuntimeError("Database initialization failed") from exc
        logger.info("Connected to database %s", app.config["SQLALCHEMY_DATABASE_URI"])

    app.extensions["car_store"] = store
    app.register_blueprint(create_cars_blueprint(store))

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    port = app.config["PORT"]
    print(f"Server running on http://localhost:{port}")
    app.run(host="0.0.0.0", port=port, debug=False)
