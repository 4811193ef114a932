#!/usr/bin/env python3
"""
Database setup script: creates the cars table and optionally loads sample cars
"""
import argparse
import logging

from app import create_app

SAMPLE_CARS = [
    ("Volvo", "V70", "70000"),
    ("Volvo", "V40", "45000"),
]


def setup_database(seed=False, app=None):
    """Initialize the database, insert the sample cars when asked and return every row"""
    app = app or create_app()
    store = app.extensions["car_store"]
    with app.app_context():
        if seed:
            for brand, model, price in SAMPLE_CARS:
                store.create_car(brand, model, price)
            print(f"Inserted {len(SAMPLE_CARS)} sample cars")

        cars = store.list_cars()
        print(f"Cars in database: {store.count_cars()}")
        for car in cars:
            print(f"   {car.id}: {car.brand} {car.model}, Price: {car.price}")
        return [car.serialize() for car in cars]


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", action="store_true", help="insert the sample Volvo rows")
    args = parser.parse_args()
    setup_database(seed=args.seed)
