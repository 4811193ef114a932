from __future__ import annotations

import tempfile
from pathlib import Path
from unittest import TestCase
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from app import create_app
from config import TestingConfig
from db import db


class CarStoreTests(TestCase):
    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        db_path = Path(self.tmpdir.name) / "cars.sqlite"
        self.app = create_app(TestingConfig, {"SQLALCHEMY_DATABASE_URI": f"sqlite:///{db_path}"})
        self.store = self.app.extensions["car_store"]
        self.ctx = self.app.app_context()
        self.ctx.push()

    def tearDown(self) -> None:
        self.ctx.pop()
        self.tmpdir.cleanup()

    def test_create_assigns_increasing_ids(self) -> None:
        first = self.store.create_car("Volvo", "V70", "70000")
        second = self.store.create_car("Volvo", "V40", "45000")

        self.assertEqual(1, first.id)
        self.assertEqual(2, second.id)
        self.assertEqual(
            {"id": 2, "brand": "Volvo", "model": "V40", "price": "45000"},
            second.serialize(),
        )

    def test_list_is_ordered_by_insertion(self) -> None:
        for model in ("V70", "V40", "XC90"):
            self.store.create_car("Volvo", model, "1")

        self.assertEqual(["V70", "V40", "XC90"], [car.model for car in self.store.list_cars()])

    def test_clear_reports_deleted_rows(self) -> None:
        self.store.create_car("Volvo", "V70", "70000")
        self.store.create_car("Volvo", "V40", "45000")

        self.assertEqual(2, self.store.clear_cars())
        self.assertEqual(0, self.store.count_cars())
        self.assertEqual([], self.store.list_cars())

    def test_init_schema_is_idempotent(self) -> None:
        self.store.create_car("Volvo", "V70", "70000")

        self.store.init_schema()
        self.store.init_schema()

        self.assertEqual(1, self.store.count_cars())

    def test_failed_insert_rolls_back_session(self) -> None:
        error = OperationalError("INSERT INTO cars", {}, Exception("database is locked"))

        with patch.object(db.session, "commit", side_effect=error), \
                patch.object(db.session, "rollback") as mock_rollback:
            with self.assertRaises(OperationalError):
                self.store.create_car("Volvo", "V70", "70000")

        mock_rollback.assert_called_once()

    def test_failed_clear_rolls_back_session(self) -> None:
        error = OperationalError("DELETE FROM cars", {}, Exception("disk I/O error"))

        with patch.object(db.session, "execute", side_effect=error), \
                patch.object(db.session, "rollback") as mock_rollback:
            with self.assertRaises(OperationalError):
                self.store.clear_cars()

        mock_rollback.assert_called_once()
