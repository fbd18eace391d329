# -*- coding: utf-8 -*-
"""Workout ingestion: text submission -> parsed, annotated, stored batch."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from .calories import estimate_calories
from .parser import ParsedWorkout, parse_entry, split_submission
from .storage import insert_workouts

logger = logging.getLogger(__name__)

WorkoutStore = Callable[[Iterable[ParsedWorkout]], List[Dict[str, Any]]]


class InvalidRequest(ValueError):
    """The submission as a whole cannot be accepted."""


def parse_submission(workout_string: str) -> List[ParsedWorkout]:
    """Parse every entry, keeping only complete ones.

    Entries with fewer than five fields, with a numeric sub-field that has
    no usable numeral, or whose calories overflow are dropped individually;
    the rest of the submission is still accepted.
    """
    accepted: List[ParsedWorkout] = []
    for index, block in enumerate(split_submission(workout_string), start=1):
        workout = parse_entry(block)
        if workout is None:
            logger.warning("Dropping workout entry %d: fewer than 5 lines", index)
            continue
        if not workout.is_complete:
            logger.warning("Dropping workout entry %d (%s): missing numeric value", index, workout.workout_name)
            continue
        if estimate_calories(workout) is None:
            logger.warning("Dropping workout entry %d (%s): calories out of range", index, workout.workout_name)
            continue
        accepted.append(workout)
    return accepted


def add_workout(
    owner_id: str,
    workout_string: Optional[str],
    *,
    store: WorkoutStore = insert_workouts,
) -> List[Dict[str, Any]]:
    if not workout_string:
        raise InvalidRequest("Workout string is missing")

    workouts = parse_submission(workout_string)
    if not workouts:
        raise InvalidRequest("Invalid workout format")

    for workout in workouts:
        workout.calories_burned = estimate_calories(workout)
        workout.user = owner_id

    try:
        stored = store(workouts)
    except Exception:
        logger.exception("Failed to store %d workouts for user %s", len(workouts), owner_id)
        raise
    logger.info("Added %d workouts for user %s", len(stored), owner_id)
    return stored
