"""Fitness Planner - weight recommendations, exercise catalog and workout generation."""

import importlib.metadata

try:
    __version__ = importlib.metadata.version("fitness-planner")
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"
