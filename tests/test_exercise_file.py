import json
from pathlib import Path

import pytest

from fitness_planner import exercise_file
from fitness_planner.catalog import build_catalog
from fitness_planner.enums import MuscleGroup
from fitness_planner.exercise_file import get_catalog, load_catalog_file


def _write(tmp_path: Path, data: object) -> Path:
    path = tmp_path / "exercises.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_catalog_file(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        [
            {
                "name": "Kettlebell Swing",
                "muscleGroups": ["glutes", "hamstrings"],
                "equipment": ["kettlebell"],
                "difficulty": "intermediate",
                "baselineStrengthRatio": 0.4,
                "alternatives": ["goblet-squat", "romanian-deadlift"],
            },
            {
                "name": "Goblet Squat",
                "muscleGroups": ["quads"],
                "equipment": ["kettlebell"],
                "difficulty": "beginner",
                "baselineStrengthRatio": 0.5,
                "alternatives": [],
            },
        ],
    )
    exercises = load_catalog_file(path)
    assert [ex.id for ex in exercises] == ["kettlebell-swing", "goblet-squat"]
    swing = exercises[0]
    assert swing.primary_muscles == (MuscleGroup.GLUTES, MuscleGroup.HAMSTRINGS)
    assert swing.secondary_muscles == ()
    assert swing.alternative_exercises == ("goblet-squat",)


def test_missing_file_is_empty(tmp_path: Path) -> None:
    assert load_catalog_file(tmp_path / "nope.json") == []


def test_malformed_file_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "exercises.json"
    path.write_text("[{not json", encoding="utf-8")
    assert load_catalog_file(path) == []


def test_non_array_is_empty(tmp_path: Path) -> None:
    assert load_catalog_file(_write(tmp_path, {"name": "Squat"})) == []


def test_bad_records_skipped(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        [
            {"muscleGroups": ["quads"]},
            {"name": 5, "muscleGroups": ["quads"]},
            {"name": "  ", "muscleGroups": ["quads"]},
            "Front Squat",
            None,
            {"name": "Odd Lift", "muscleGroups": ["quads"], "difficulty": "mythic"},
            {"name": "Plank", "muscleGroups": ["core"], "equipment": ["bodyweight"]},
        ],
    )
    assert [ex.id for ex in load_catalog_file(path)] == ["plank"]


@pytest.fixture
def fresh_catalog():
    get_catalog.cache_clear()
    yield
    get_catalog.cache_clear()


def test_get_catalog_uses_configured_file(tmp_path: Path, monkeypatch, fresh_catalog) -> None:
    path = _write(tmp_path, [{"name": "Plank", "muscleGroups": ["core"]}])
    monkeypatch.setattr(exercise_file.SETTINGS, "CATALOG_PATH", str(path))
    monkeypatch.setattr(exercise_file.SETTINGS, "FF_FILE_CATALOG", True)

    catalog = get_catalog()
    assert len(catalog) == 1
    assert "plank" in catalog


def test_get_catalog_falls_back_to_builtin(tmp_path: Path, monkeypatch, fresh_catalog) -> None:
    monkeypatch.setattr(exercise_file.SETTINGS, "CATALOG_PATH", str(tmp_path / "missing.json"))
    monkeypatch.setattr(exercise_file.SETTINGS, "FF_FILE_CATALOG", True)
    assert len(get_catalog()) == len(build_catalog())


def test_get_catalog_flag_off(tmp_path: Path, monkeypatch, fresh_catalog) -> None:
    path = _write(tmp_path, [{"name": "Plank", "muscleGroups": ["core"]}])
    monkeypatch.setattr(exercise_file.SETTINGS, "CATALOG_PATH", str(path))
    monkeypatch.setattr(exercise_file.SETTINGS, "FF_FILE_CATALOG", False)
    assert len(get_catalog()) == len(build_catalog())
