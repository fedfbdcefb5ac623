"""
Weight calculator API routes.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, model_validator

from ...enums import ExperienceLevel, FitnessGoal, Gender, MeasurementSystem
from ...exercise_file import get_catalog
from ...progression import adjust_for_rpe_feedback, progression
from ...weights import adjust_for_goal, baseline_weight, round_weight, rpe_weight_table

router = APIRouter()


class WeightRequest(BaseModel):
    bodyweight: float = Field(..., gt=0)
    gender: Gender
    age: int = Field(..., ge=1, le=120)
    experience: ExperienceLevel
    measurement_system: MeasurementSystem = MeasurementSystem.METRIC
    goal: FitnessGoal = FitnessGoal.MAINTENANCE
    exercise_ratio: float | None = Field(None, ge=0)
    exercise_id: str | None = None

    @model_validator(mode="after")
    def ratio_or_exercise(self):
        if self.exercise_ratio is None and not self.exercise_id:
            raise ValueError("exercise_ratio or exercise_id is required")
        return self


class ProgressionRequest(BaseModel):
    current_weight: float = Field(..., ge=0)
    experience: ExperienceLevel
    success_rate: float = Field(..., ge=0, le=1)
    rpe: float = Field(..., ge=1, le=10)
    measurement_system: MeasurementSystem = MeasurementSystem.METRIC
    target_rpe: float | None = Field(None, ge=1, le=10)


def _unit(system: MeasurementSystem) -> str:
    return "kg" if system is MeasurementSystem.METRIC else "lbs"


@router.post("/calculator/weight")
async def calculate_weight(req: WeightRequest) -> dict[str, Any]:
    """Baseline and goal-adjusted load for one exercise, plus an RPE table."""
    ratio = req.exercise_ratio
    exercise_name = None
    if req.exercise_id:
        exercise = get_catalog().get(req.exercise_id)
        if exercise is None:
            raise HTTPException(status_code=404, detail="Exercise not found")
        exercise_name = exercise.name
        if ratio is None:
            ratio = exercise.baseline_strength_ratio

    base = baseline_weight(
        ratio, req.bodyweight, req.gender, req.age, req.experience, req.measurement_system
    )
    adjusted = adjust_for_goal(base, req.goal)
    logging.debug("Calculated baseline=%s adjusted=%s ratio=%s", base, adjusted, ratio)

    return {
        "ok": True,
        "exercise": exercise_name,
        "exercise_ratio": ratio,
        "baseline": base,
        "adjusted": adjusted,
        "adjusted_rounded": round_weight(adjusted, req.measurement_system),
        "rpe_table": {
            str(rpe): weight
            for rpe, weight in rpe_weight_table(adjusted, req.measurement_system).items()
        },
        "unit": _unit(req.measurement_system),
    }


@router.post("/calculator/progression")
async def calculate_progression(req: ProgressionRequest) -> dict[str, Any]:
    """Next week's load, and an RPE feedback adjustment when a target is given."""
    new_weight = progression(
        req.current_weight, req.experience, req.success_rate, req.rpe, req.measurement_system
    )
    result: dict[str, Any] = {
        "ok": True,
        "current_weight": req.current_weight,
        "new_weight": new_weight,
        "unit": _unit(req.measurement_system),
    }
    if req.target_rpe is not None:
        result["rpe_adjusted_weight"] = adjust_for_rpe_feedback(
            req.current_weight, req.rpe, req.target_rpe
        )
    return result
