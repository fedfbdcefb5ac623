"""
Exercise catalog API routes.
"""

import logging

from fastapi import APIRouter, HTTPException, Query

from ...enums import Difficulty, EquipmentType, MuscleGroup
from ...exercise_file import get_catalog

router = APIRouter()


@router.get("/exercises")
async def exercises_search(
    q: str | None = Query(None, max_length=100),
    muscle_group: MuscleGroup | None = None,
    equipment: EquipmentType | None = None,
    difficulty: Difficulty | None = None,
) -> dict:
    """
    Browse the catalog. Every filter is optional; the muscle filter matches
    primary or secondary muscles.
    """
    items = get_catalog().search(q, muscle_group, equipment, difficulty)
    logging.debug("Exercise search q=%r returned %d items", q, len(items))
    return {"ok": True, "items": [ex.to_dict() for ex in items], "total": len(items)}


@router.get("/exercises/filters")
async def exercises_filters() -> dict:
    """List the muscle groups, equipment and difficulty levels present in the catalog."""
    catalog = get_catalog()
    return {
        "ok": True,
        "muscle_groups": [m.value for m in catalog.muscle_groups()],
        "equipment": [e.value for e in catalog.equipment_types()],
        "difficulty": [d.value for d in Difficulty],
    }


@router.get("/exercises/{exercise_id}")
async def exercise_by_id(exercise_id: str) -> dict:
    """Fetch a single exercise with its alternatives expanded."""
    catalog = get_catalog()
    exercise = catalog.get(exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return {
        "ok": True,
        "item": exercise.to_dict(),
        "alternatives": [
            {"id": alt.id, "name": alt.name} for alt in catalog.alternatives_for(exercise_id)
        ],
    }
