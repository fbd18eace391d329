# -*- coding: utf-8 -*-
"""Workouts — API endpoints."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user
from .ingest import InvalidRequest, add_workout
from .models import AddWorkoutRequest, AddWorkoutResponse, DashboardResponse, WorkoutsByDateResponse
from .storage import get_dashboard, get_workouts_by_date

router = APIRouter(prefix="/api/user", tags=["Workouts"])


def _parse_day(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid date: {value}") from exc
    # Stored dates are UTC; offset-aware timestamps pick their UTC day.
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()


@router.post("/workout", response_model=AddWorkoutResponse, status_code=201, summary="Log workouts from text")
def add_workouts(request: AddWorkoutRequest, user: dict = Depends(get_current_user)):
    try:
        workouts = add_workout(user["id"], request.workout_string)
    except InvalidRequest as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return AddWorkoutResponse(workouts=workouts)


@router.get("/workout", response_model=WorkoutsByDateResponse, summary="Workouts logged on a day")
def workouts_by_date(
    day: Optional[str] = Query(default=None, alias="date", description="YYYY-MM-DD, defaults to today (UTC)"),
    user: dict = Depends(get_current_user),
):
    data = get_workouts_by_date(user["id"], _parse_day(day))
    return WorkoutsByDateResponse.model_validate(data)


@router.get("/dashboard", response_model=DashboardResponse, summary="Today's calorie totals")
def dashboard(user: dict = Depends(get_current_user)):
    return DashboardResponse.model_validate(get_dashboard(user["id"]))
