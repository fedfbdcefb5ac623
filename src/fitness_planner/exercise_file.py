"""
Disk-backed exercise catalog.

Reads a JSON array of ``{name, muscleGroups, equipment, difficulty,
baselineStrengthRatio, alternatives}`` records. A missing or malformed file
is treated as an empty catalog.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from .catalog import Exercise, ExerciseCatalog, build_catalog, make_exercise, resolve_alternatives
from .config import SETTINGS

logger = logging.getLogger(__name__)


def _record_to_exercise(record: dict[str, Any]) -> Exercise:
    if not isinstance(record, dict):
        raise TypeError(f"expected an object, got {type(record).__name__}")
    name = record["name"]
    if not isinstance(name, str) or not name.strip():
        raise TypeError(f"name must be a non-empty string, got {name!r}")
    return make_exercise(
        name=name,
        description=record.get("description", ""),
        primary=record.get("muscleGroups", []),
        secondary=[],
        equipment=record.get("equipment", []),
        difficulty=record.get("difficulty", "beginner"),
        baseline_ratio=record.get("baselineStrengthRatio", 0.0),
        alternatives=record.get("alternatives", []),
    )


def load_catalog_file(path: str | Path) -> list[Exercise]:
    """Load exercises from a JSON file, skipping records that do not parse."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except Exception as e:
        logger.error("Failed to load exercises data from %s: %s", path, e)
        return []

    if not isinstance(data, list):
        logger.error("Exercise file %s must contain a JSON array", path)
        return []

    exercises: list[Exercise] = []
    for i, record in enumerate(data):
        try:
            exercises.append(_record_to_exercise(record))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping exercise record %d in %s: %s", i, path, e)
    return resolve_alternatives(exercises)


@lru_cache
def get_catalog() -> ExerciseCatalog:
    """Cached catalog: the configured file when usable, else the built-in list."""
    if SETTINGS.FF_FILE_CATALOG and SETTINGS.CATALOG_PATH:
        exercises = load_catalog_file(SETTINGS.CATALOG_PATH)
        if exercises:
            logger.info("Loaded %d exercises from %s", len(exercises), SETTINGS.CATALOG_PATH)
            return ExerciseCatalog(exercises)
        logger.warning("Catalog file %s is empty, using built-in catalog", SETTINGS.CATALOG_PATH)
    return ExerciseCatalog(build_catalog())
