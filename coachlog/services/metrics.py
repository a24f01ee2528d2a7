from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

from ..models import TrainingEntry

Number = Union[int, float]


@dataclass(frozen=True)
class DashboardMetrics:
    session_count: int = 0
    total_minutes: Number = 0

    def to_dict(self) -> dict:
        return {"sessionCount": self.session_count, "totalMinutes": self.total_minutes}


@dataclass(frozen=True)
class MicrocycleTotals:
    total_volume: Number = 0
    total_intensity: Number = 0
    total_complexity: Number = 0

    def to_dict(self) -> dict:
        return {
            "totalVolume": self.total_volume,
            "totalIntensity": self.total_intensity,
            "totalComplexity": self.total_complexity,
        }


def _sum(values: Iterable[Optional[Number]]) -> Number:
    """Summe, fehlende Werte zählen als 0."""
    total: Number = 0
    for v in values:
        total += v or 0
    return total


def summarize(entries: Sequence[TrainingEntry]) -> DashboardMetrics:
    """Anzahl Einheiten und Gesamtminuten (Summe von volume)."""
    return DashboardMetrics(
        session_count=len(entries),
        total_minutes=_sum(e.volume for e in entries),
    )


def summarize_microcycle(entries: Sequence[TrainingEntry]) -> MicrocycleTotals:
    """Summen von Volumen, Intensität und Komplexität für den Mikrozyklus-Export."""
    return MicrocycleTotals(
        total_volume=_sum(e.volume for e in entries),
        total_intensity=_sum(e.intensity for e in entries),
        total_complexity=_sum(e.complexity for e in entries),
    )
