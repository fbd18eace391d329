# -*- coding: utf-8 -*-
"""Workouts — DB storage helpers and daily aggregation."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from .parser import ParsedWorkout

_COLUMNS = (
    "id",
    "user_id",
    "category",
    "workout_name",
    "sets",
    "reps",
    "weight",
    "time",
    "calories_burned",
    "date",
)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")


def _record(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "user": row["user_id"],
        "category": row["category"],
        "workout_name": row["workout_name"],
        "sets": row["sets"],
        "reps": row["reps"],
        "weight": row["weight"],
        "time": row["time"],
        "calories_burned": row["calories_burned"],
        "date": row["date"],
    }


def insert_workouts(workouts: Iterable[ParsedWorkout], db_path: Path | None = None) -> List[Dict[str, Any]]:
    """Insert a batch of workouts in one transaction.

    Every workout must carry ``user`` and ``calories_burned``. If any row is
    rejected nothing from the batch is committed and the sqlite error
    propagates.
    """
    now = _utc_now()
    rows: List[Dict[str, Any]] = []
    for workout in workouts:
        row = workout.to_dict()
        row["user_id"] = row.pop("user")
        row.update(id=str(uuid4()), date=now)
        rows.append(row)
    placeholders = ", ".join(f":{c}" for c in _COLUMNS)
    with db_conn(db_path or settings.app_db_path) as conn:
        conn.executemany(
            f"INSERT INTO workouts ({', '.join(_COLUMNS)}) VALUES ({placeholders})",
            rows,
        )
    return [_record(r) for r in rows]


def day_bounds(day: date) -> Tuple[str, str]:
    start = day.isoformat()
    end = (day + timedelta(days=1)).isoformat()
    return f"{start}T00:00:00", f"{end}T00:00:00"


def _today() -> date:
    return datetime.now(timezone.utc).date()


def list_workouts(user_id: str, *, day: date, db_path: Path | None = None) -> List[Dict[str, Any]]:
    start, end = day_bounds(day)
    with db_conn(db_path or settings.app_db_path) as conn:
        rows = conn.execute(
            """
            SELECT * FROM workouts
            WHERE user_id = ? AND date >= ? AND date < ?
            ORDER BY date ASC, rowid ASC
            """,
            (user_id, start, end),
        ).fetchall()
        return [_record(dict(r)) for r in rows]


def get_workouts_by_date(user_id: str, day: Optional[date] = None, db_path: Path | None = None) -> Dict[str, Any]:
    workouts = list_workouts(user_id, day=day or _today(), db_path=db_path)
    total = sum(float(w["calories_burned"]) for w in workouts)
    return {"todays_workouts": workouts, "total_calories_burnt": total}


def get_dashboard(user_id: str, today: Optional[date] = None, db_path: Path | None = None) -> Dict[str, Any]:
    start, end = day_bounds(today or _today())
    with db_conn(db_path or settings.app_db_path) as conn:
        row = conn.execute(
            """
            SELECT COUNT(*) AS total_workouts, COALESCE(SUM(calories_burned), 0) AS total_calories
            FROM workouts
            WHERE user_id = ? AND date >= ? AND date < ?
            """,
            (user_id, start, end),
        ).fetchone()
    total_workouts = int(row["total_workouts"])
    total_calories = float(row["total_calories"])
    avg = total_calories / total_workouts if total_workouts else 0.0
    return {
        "total_calories_burnt": total_calories,
        "total_workouts": total_workouts,
        "avg_calories_burnt_per_workout": avg,
    }
