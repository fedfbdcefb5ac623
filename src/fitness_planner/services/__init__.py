"""
Services layer for workout generation.
"""

from .workout_service import UserProfile, WorkoutService, apply_set_weights

__all__ = ["UserProfile", "WorkoutService", "apply_set_weights"]
