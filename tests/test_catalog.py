from fitness_planner.catalog import (
    ExerciseCatalog,
    build_catalog,
    make_exercise,
    resolve_alternatives,
    slugify,
)
from fitness_planner.enums import Difficulty, EquipmentType, MuscleGroup


def test_slugify() -> None:
    assert slugify("Barbell Back Squat") == "barbell-back-squat"
    assert slugify("Push-up") == "push-up"
    assert slugify("Chest  Press\tMachine") == "chest-press-machine"


def test_build_catalog_is_deterministic() -> None:
    catalog = build_catalog()
    assert len(catalog) == 25
    assert catalog == build_catalog()
    assert len({ex.id for ex in catalog}) == len(catalog)


def test_alternatives_only_reference_catalog_ids() -> None:
    catalog = build_catalog()
    ids = {ex.id for ex in catalog}
    for ex in catalog:
        assert set(ex.alternative_exercises) <= ids


def test_dangling_alternatives_dropped_in_order() -> None:
    squat = next(ex for ex in build_catalog() if ex.id == "barbell-back-squat")
    # hack-squat is not in the catalog
    assert squat.alternative_exercises == ("front-squat", "goblet-squat")


def test_resolve_alternatives_on_custom_list() -> None:
    a = make_exercise("Alpha", "", ["chest"], [], ["bodyweight"], "beginner", 0.0, ["beta", "zeta"])
    b = make_exercise("Beta", "", ["back"], [], ["bodyweight"], "beginner", 0.0, ["alpha"])
    resolved = resolve_alternatives([a, b])
    assert resolved[0].alternative_exercises == ("beta",)
    assert resolved[1].alternative_exercises == ("alpha",)
    # originals are untouched
    assert a.alternative_exercises == ("beta", "zeta")


def test_instructions_and_tips() -> None:
    catalog = ExerciseCatalog(build_catalog())
    squat = catalog.get("goblet-squat")
    assert squat is not None
    assert squat.instructions[0] == "Stand with feet shoulder-width apart"

    bench = catalog.get("barbell-bench-press")
    assert bench is not None
    assert "Focus on squeezing your chest at the top of the movement" in bench.tips
    assert "Ensure even grip width on both sides of the barbell" in bench.tips

    press = catalog.get("dumbbell-shoulder-press")
    assert press is not None
    assert press.tips[-1].startswith("Using dumbbells allows")
    assert press.instructions[0] == "Set up with proper form and body alignment"


def test_search_filters() -> None:
    catalog = ExerciseCatalog(build_catalog())
    names = {ex.name for ex in catalog.search("SQUAT")}
    assert names == {"Barbell Back Squat", "Front Squat", "Goblet Squat", "Bodyweight Squat"}

    core = catalog.search(muscle_group="core")
    assert core and all(ex.targets(MuscleGroup.CORE) for ex in core)

    cable = catalog.search(equipment=EquipmentType.CABLE, difficulty=Difficulty.BEGINNER)
    assert {ex.id for ex in cable} == {
        "lat-pulldown",
        "bicep-curl",
        "tricep-pushdown",
        "lateral-raise",
    }

    assert catalog.search(difficulty="advanced") == []
    assert len(catalog.search()) == len(catalog)


def test_alternatives_for() -> None:
    catalog = ExerciseCatalog(build_catalog())
    names = [ex.name for ex in catalog.alternatives_for("barbell-bench-press")]
    assert names == ["Dumbbell Bench Press", "Incline Bench Press", "Push-up"]
    assert catalog.alternatives_for("missing") == []


def test_filter_values() -> None:
    catalog = ExerciseCatalog(build_catalog())
    muscles = catalog.muscle_groups()
    assert muscles == sorted(muscles, key=lambda m: m.value)
    assert MuscleGroup.FULL_BODY not in muscles
    assert EquipmentType.PULL_UP_BAR in catalog.equipment_types()
    assert "push-up" in catalog
