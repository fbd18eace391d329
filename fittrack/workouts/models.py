# -*- coding: utf-8 -*-
"""Workouts — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AddWorkoutRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    workout_string: Optional[str] = Field(None, alias="workoutString")


class WorkoutRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    user: str
    category: str
    workout_name: str = Field(..., alias="workoutName")
    sets: int
    reps: int
    weight: float
    time: float
    calories_burned: float = Field(..., alias="caloriesBurned")
    date: str


class AddWorkoutResponse(BaseModel):
    message: str = "Workouts added successfully"
    workouts: List[WorkoutRecord]


class WorkoutsByDateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    todays_workouts: List[WorkoutRecord] = Field(default_factory=list, alias="todaysWorkouts")
    total_calories_burnt: float = Field(0.0, alias="totalCaloriesBurnt")


class DashboardResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_calories_burnt: float = Field(0.0, alias="totalCaloriesBurnt")
    total_workouts: int = Field(0, ge=0, alias="totalWorkouts")
    avg_calories_burnt_per_workout: float = Field(0.0, alias="avgCaloriesBurntPerWorkout")
