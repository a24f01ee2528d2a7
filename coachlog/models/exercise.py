from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ._coerce import to_number, to_text


@dataclass(frozen=True)
class Exercise:
    """Eine Übung innerhalb einer Einheit (Reihenfolge zählt)."""

    id: str = ""
    goal: str = ""
    exercise_type: str = ""
    focus: str = ""
    description: str = ""
    duration: Optional[float] = None
    fitness_indicator: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Exercise":
        return cls(
            id=to_text(data.get("id")),
            goal=to_text(data.get("goal")),
            exercise_type=to_text(data.get("exerciseType")),
            focus=to_text(data.get("focus")),
            description=to_text(data.get("description")),
            duration=to_number(data.get("duration")),
            fitness_indicator=to_text(data.get("fitnessIndicator")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "goal": self.goal,
            "exerciseType": self.exercise_type,
            "focus": self.focus,
            "description": self.description,
            "duration": self.duration,
            "fitnessIndicator": self.fitness_indicator,
        }
