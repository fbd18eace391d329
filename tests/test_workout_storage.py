# -*- coding: utf-8 -*-

from __future__ import annotations

import shutil
import sqlite3
import tempfile
import unittest
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

from fittrack.app_db import db_conn, init_app_db
from fittrack.workouts.parser import ParsedWorkout
from fittrack.workouts.storage import day_bounds, get_dashboard, get_workouts_by_date, insert_workouts


def _workout(user: str, name: str = "Squat", calories: float | None = 207.0) -> ParsedWorkout:
    return ParsedWorkout(
        category="Legs",
        workout_name=name,
        sets=3,
        reps=10,
        weight=80.0,
        time=45.0,
        calories_burned=calories,
        user=user,
    )


class TestWorkoutStorage(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="fittrack-test-"))
        self.db_path = self._tmp / "fittrack.db"
        init_app_db(self.db_path)
        with db_conn(self.db_path) as conn:
            for user_id in ("u1", "u2"):
                conn.execute(
                    "INSERT INTO users (id, name, email, password_hash, img, created_at) VALUES (?, ?, ?, ?, NULL, ?)",
                    (user_id, user_id, f"{user_id}@example.com", "x", "2026-01-01T00:00:00Z"),
                )
        self.today = datetime.now(timezone.utc).date()

    def tearDown(self) -> None:
        shutil.rmtree(self._tmp, ignore_errors=True)

    def _count(self) -> int:
        with db_conn(self.db_path) as conn:
            return conn.execute("SELECT COUNT(*) FROM workouts").fetchone()[0]

    def test_insert_assigns_ids_and_dates(self) -> None:
        stored = insert_workouts([_workout("u1"), _workout("u1", "Lunge")], db_path=self.db_path)
        self.assertEqual(len(stored), 2)
        self.assertNotEqual(stored[0]["id"], stored[1]["id"])
        self.assertTrue(stored[0]["date"].startswith(self.today.isoformat()))
        self.assertEqual(stored[0]["user"], "u1")
        self.assertEqual(self._count(), 2)

    def test_batch_is_all_or_nothing(self) -> None:
        batch = [_workout("u1"), _workout("u1", "Broken", calories=None)]
        with self.assertRaises(sqlite3.IntegrityError):
            insert_workouts(batch, db_path=self.db_path)
        self.assertEqual(self._count(), 0)

    def test_unknown_owner_is_rejected(self) -> None:
        with self.assertRaises(sqlite3.IntegrityError):
            insert_workouts([_workout("nobody")], db_path=self.db_path)
        self.assertEqual(self._count(), 0)

    def test_workouts_by_date(self) -> None:
        insert_workouts([_workout("u1"), _workout("u1", "Lunge", calories=100.0)], db_path=self.db_path)
        insert_workouts([_workout("u2")], db_path=self.db_path)

        data = get_workouts_by_date("u1", self.today, db_path=self.db_path)
        self.assertEqual([w["workout_name"] for w in data["todays_workouts"]], ["Squat", "Lunge"])
        self.assertEqual(data["total_calories_burnt"], 307.0)

        yesterday = get_workouts_by_date("u1", self.today - timedelta(days=1), db_path=self.db_path)
        self.assertEqual(yesterday, {"todays_workouts": [], "total_calories_burnt": 0})

    def test_dashboard(self) -> None:
        insert_workouts([_workout("u1"), _workout("u1", calories=93.0)], db_path=self.db_path)
        data = get_dashboard("u1", self.today, db_path=self.db_path)
        self.assertEqual(data["total_workouts"], 2)
        self.assertEqual(data["total_calories_burnt"], 300.0)
        self.assertEqual(data["avg_calories_burnt_per_workout"], 150.0)

    def test_dashboard_without_workouts(self) -> None:
        data = get_dashboard("u2", self.today, db_path=self.db_path)
        self.assertEqual(
            data,
            {"total_calories_burnt": 0.0, "total_workouts": 0, "avg_calories_burnt_per_workout": 0.0},
        )

    def test_day_bounds(self) -> None:
        self.assertEqual(
            day_bounds(date(2026, 12, 31)),
            ("2026-12-31T00:00:00", "2027-01-01T00:00:00"),
        )


if __name__ == "__main__":
    unittest.main()
