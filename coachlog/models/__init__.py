from .entry import SESSION_TYPES, Exercise, TrainingEntry
from .filters import FilterCriteria

__all__ = ["SESSION_TYPES", "Exercise", "TrainingEntry", "FilterCriteria"]
