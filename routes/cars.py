import logging

from flask import Blueprint, jsonify
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from schemas import CarCreate, REQUIRED_FIELDS_MESSAGE
from utils.helper import get_request_data

logger = logging.getLogger(__name__)


def create_cars_blueprint(store):
    """Build the cars blueprint around an already constructed ``CarStore``."""
    cars_bp = Blueprint("cars", __name__)

    @cars_bp.route('/cars', methods=['GET'])
    def list_cars():
        try:
            cars = store.list_cars()
        except SQLAlchemyError as e:
            logger.exception("Error in GET /cars")
            return jsonify({"error": str(e)}), 500

        return jsonify({"cars": [car.serialize() for car in cars]}), 200

    @cars_bp.route('/cars', methods=['POST'])
    def create_car():
        try:
            payload = CarCreate.model_validate(get_request_data())
        except ValidationError:
            return jsonify({"error": REQUIRED_FIELDS_MESSAGE}), 400

        try:
            car = store.create_car(payload.brand, payload.model, payload.price)
        except SQLAlchemyError as e:
            logger.exception("Error in POST /cars")
            return jsonify({"error": str(e)}), 500

        logger.info("Created car %s", car.id)
        return jsonify(car.serialize()), 201

    @cars_bp.route('/clear-cars', methods=['GET'])
    def clear_cars():
        """Delete every car. There is no confirmation step."""
        try:
            deleted = store.clear_cars()
        except SQLAlchemyError as e:
            logger.exception("Error in GET /clear-cars")
            return jsonify({"error": str(e)}), 500

        logger.info("Deleted %s cars", deleted)
        return jsonify({"message": "All cars deleted"}), 200

    return cars_bp
