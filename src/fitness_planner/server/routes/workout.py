"""
Workout generation and periodization API routes.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ...enums import (
    EquipmentType,
    ExperienceLevel,
    FitnessGoal,
    Gender,
    MeasurementSystem,
    MuscleGroup,
    WorkoutType,
)
from ...generator import WorkoutExercise, WorkoutRequest, WorkoutSet
from ...periodization import deload_parameters, periodization_block, week_parameters
from ...progression import exercise_readiness
from ...services.workout_service import UserProfile, WorkoutService

router = APIRouter()


class GenerateRequest(BaseModel):
    goal: FitnessGoal
    experience: ExperienceLevel
    available_equipment: list[EquipmentType] = Field(..., min_length=1)
    time_available: int = Field(60, ge=1, le=240)
    week_in_cycle: int = 1
    muscle_group_preferences: list[MuscleGroup] = Field(default_factory=list)
    excluded_exercises: list[str] = Field(default_factory=list)

    bodyweight: float = Field(70, gt=0)
    gender: Gender = Gender.MALE
    age: int = Field(30, ge=1, le=120)
    measurement_system: MeasurementSystem = MeasurementSystem.METRIC
    seed: int | None = None


class SetLog(BaseModel):
    reps: int = Field(..., ge=0)
    weight: float = 0
    rpe: int | None = Field(None, ge=1, le=10)
    is_warmup: bool = False
    completed: bool = False
    actual_reps: int | None = Field(None, ge=0)
    actual_rpe: int | None = Field(None, ge=1, le=10)


class SessionLog(BaseModel):
    exercise_id: str
    sets: list[SetLog]
    rest_between_sets: int = 0


class ReadinessRequest(BaseModel):
    experience: ExperienceLevel
    history: list[SessionLog]


@router.post("/workout/generate")
async def generate(req: GenerateRequest) -> dict[str, Any]:
    """Generate a workout with per-set weights for the given profile."""
    request = WorkoutRequest(
        goal=req.goal,
        experience=req.experience,
        available_equipment=req.available_equipment,
        time_available=req.time_available,
        week_in_cycle=req.week_in_cycle,
        muscle_group_preferences=req.muscle_group_preferences,
        excluded_exercises=req.excluded_exercises,
    )
    profile = UserProfile(
        bodyweight=req.bodyweight,
        gender=req.gender,
        age=req.age,
        experience=req.experience,
        measurement_system=req.measurement_system,
        goal=req.goal,
    )

    service = WorkoutService()
    workout = await service.generate_plan(request, profile, seed=req.seed)
    if not workout.exercises:
        logging.info("No exercises available for request: %s", req.model_dump(mode="json"))
        raise HTTPException(status_code=422, detail="No exercises match the given equipment")

    return {
        "ok": True,
        "workout": workout.to_dict(),
        "periodization": week_parameters(req.goal, req.week_in_cycle).to_dict(),
        "message": service.render_plan_message(workout, unit=profile.unit),
        "unit": profile.unit,
    }


@router.get("/periodization/block/{weeks}")
async def periodization_plan(weeks: int) -> dict[str, Any]:
    if weeks < 1 or weeks > 52:
        raise HTTPException(status_code=422, detail="weeks must be between 1 and 52")
    return {
        "ok": True,
        "weeks": [
            {"week_number": w.week_number, "deload": w.deload} for w in periodization_block(weeks)
        ],
    }


@router.get("/periodization/{goal}/{week}")
async def periodization_week(goal: FitnessGoal, week: int) -> dict[str, Any]:
    """Training-phase parameters for a week of the 4-week cycle."""
    params = week_parameters(goal, week)
    result: dict[str, Any] = {"ok": True, "week": params.to_dict()}
    if params.type is WorkoutType.DELOAD:
        result["deload"] = deload_parameters().to_dict()
    return result


@router.post("/workout/readiness")
async def readiness(req: ReadinessRequest) -> dict[str, Any]:
    """Progression readiness from recent sessions of one exercise."""
    history = [
        WorkoutExercise(
            exercise_id=s.exercise_id,
            sets=[WorkoutSet(**set_log.model_dump()) for set_log in s.sets],
            rest_between_sets=s.rest_between_sets,
        )
        for s in req.history
    ]
    return {"ok": True, **exercise_readiness(history, req.experience).to_dict()}
