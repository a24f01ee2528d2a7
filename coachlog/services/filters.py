"""
Service: Filter
Leitet aus der vollständigen Liste die sichtbaren Einträge ab.
Alle gesetzten Kriterien werden UND-verknüpft; die Reihenfolge bleibt erhalten.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..models import FilterCriteria, TrainingEntry
from ..models.dates import parse_date


def apply_filters(entries: Sequence[TrainingEntry], criteria: FilterCriteria) -> List[TrainingEntry]:
    """Return the entries matching every active criterion, in input order."""
    return [entry for entry in entries if matches(entry, criteria)]


def matches(entry: TrainingEntry, criteria: FilterCriteria) -> bool:
    if criteria.session_type is not None and entry.session_type != criteria.session_type:
        return False

    if criteria.microcycle is not None and entry.microcycle != criteria.microcycle:
        return False

    if criteria.objective is not None:
        needle = criteria.objective.casefold()
        haystacks = (entry.objective1 or "", entry.objective2 or "")
        if not any(needle in text.casefold() for text in haystacks):
            return False

    if criteria.start_date is not None or criteria.end_date is not None:
        day = parse_date(entry.date)
        # Ohne lesbares Datum kann kein Zeitraum erfüllt sein
        if day is None:
            return False
        if criteria.start_date is not None and day < criteria.start_date:
            return False
        if criteria.end_date is not None and day > criteria.end_date:
            return False

    return True


def available_microcycles(entries: Iterable[TrainingEntry]) -> List[int]:
    """Distinct microcycles, ascending (options of the filter dropdown)."""
    return sorted({e.microcycle for e in entries if e.microcycle is not None})
