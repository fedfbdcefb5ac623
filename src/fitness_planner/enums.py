"""Shared enums for the calculator, catalog and generator."""

from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class FitnessGoal(str, Enum):
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    STRENGTH = "strength"
    ENDURANCE = "endurance"
    MAINTENANCE = "maintenance"


class ExperienceLevel(str, Enum):
    """Training experience, ordered from least to most."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class MeasurementSystem(str, Enum):
    METRIC = "metric"  # kg
    IMPERIAL = "imperial"  # lbs


class MuscleGroup(str, Enum):
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    FOREARMS = "forearms"
    ABS = "abs"
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"
    TRAPS = "traps"
    LATS = "lats"
    CORE = "core"
    FULL_BODY = "full_body"


class EquipmentType(str, Enum):
    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    KETTLEBELL = "kettlebell"
    MACHINE = "machine"
    CABLE = "cable"
    BODYWEIGHT = "bodyweight"
    RESISTANCE_BAND = "resistance_band"
    MEDICINE_BALL = "medicine_ball"
    STABILITY_BALL = "stability_ball"
    FOAM_ROLLER = "foam_roller"
    BENCH = "bench"
    PULL_UP_BAR = "pull_up_bar"
    TRX = "trx"
    OTHER = "other"


class Difficulty(str, Enum):
    """Exercise difficulty, ordered from easiest."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class WorkoutType(str, Enum):
    """Training phase of a session."""

    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    ENDURANCE = "endurance"
    DELOAD = "deload"
