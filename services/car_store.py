import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError

from db import Car

logger = logging.getLogger(__name__)


class CarStore:
    """Storage client for the ``cars`` table.

    Built once by the app factory and handed to the cars blueprint. Every
    method issues a single statement through the Flask-SQLAlchemy session and
    must run inside an app context. Failed writes roll the session back and
    re-raise the driver error unchanged.
    """

    def __init__(self, db):
        self.db = db

    def init_schema(self):
        """Create the cars table if it does not exist yet."""
        Car.__table__.create(self.db.engine, checkfirst=True)
        logger.info("cars table ready at %s", self.db.engine.url)

    def list_cars(self):
        return self.db.session.scalars(select(Car).order_by(Car.id)).all()

    def count_cars(self):
        return self.db.session.scalar(select(func.count()).select_from(Car))

    def create_car(self, brand, model, price):
        car = Car(brand=brand, model=model, price=price)
        try:
            self.db.session.add(car)
            self.db.session.commit()
        except SQLAlchemyError:
            self.db.session.rollback()
            raise
        return car

    def clear_cars(self):
        try:
            result = self.db.session.execute(delete(Car))
            self.db.session.commit()
        except SQLAlchemyError:
            self.db.session.rollback()
            raise
        return result.rowcount
