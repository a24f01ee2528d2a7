from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ._coerce import to_int, to_number, to_optional_text, to_text
from .exercise import Exercise

# Feste Auswahl im Formular; weitere Typen aus dem Backend werden akzeptiert.
SESSION_TYPES: Tuple[str, ...] = ("Training", "Match", "Recovery", "Other")

EntryId = Union[int, str]


@dataclass(frozen=True)
class TrainingEntry:
    """
    Eine geloggte Trainingseinheit.

    Optionale Zahlen (volume, intensity, complexity) sind None, wenn sie fehlen;
    Aggregationen behandeln None als 0. `exercises` ist immer ein Tupel.
    """

    date: str
    objective1: str
    microcycle: Optional[int] = None
    session_type: str = ""
    volume: Optional[float] = None
    intensity: Optional[float] = None
    complexity: Optional[float] = None
    objective2: Optional[str] = None
    exercises: Tuple[Exercise, ...] = field(default_factory=tuple)
    id: Optional[EntryId] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TrainingEntry":
        """Build an entry from the backend's JSON shape (camelCase keys)."""
        raw_exercises = data.get("exercises") or ()
        return cls(
            id=data.get("id"),
            date=to_text(data.get("date")),
            microcycle=to_int(data.get("microcycle")),
            session_type=to_text(data.get("sessionType")),
            volume=to_number(data.get("volume")),
            intensity=to_number(data.get("intensity")),
            complexity=to_number(data.get("complexity")),
            objective1=to_text(data.get("objective1")),
            objective2=to_optional_text(data.get("objective2")),
            exercises=tuple(Exercise.from_dict(ex) for ex in raw_exercises),
        )

    def to_dict(self, include_id: bool = True) -> Dict[str, Any]:
        """JSON shape; without id this is the body for POST /api/entries."""
        data: Dict[str, Any] = {
            "date": self.date,
            "microcycle": self.microcycle,
            "sessionType": self.session_type,
            "volume": self.volume,
            "intensity": self.intensity,
            "complexity": self.complexity,
            "objective1": self.objective1,
            "objective2": self.objective2,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }
        if include_id:
            data = {"id": self.id, **data}
        return data

    def with_id(self, entry_id: EntryId) -> "TrainingEntry":
        return replace(self, id=entry_id)
