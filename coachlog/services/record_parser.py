"""
Utilities for parsing the add-entry form into a TrainingEntry.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping
from uuid import uuid4

from ..errors import InvalidEntryError
from ..models import SESSION_TYPES, Exercise, TrainingEntry
from ..models._coerce import to_int, to_number, to_optional_text
from ..models.dates import parse_date

EXERCISE_FIELDS = ("goal", "exerciseType", "focus", "description", "duration", "fitnessIndicator")


def parse_exercises_form(form: Mapping[str, Any]) -> List[Dict[str, str]]:
    """
    Extracts the rows under "ex[<n>][<field>]" created by the dashboard form.

    Returns the rows ordered by <n>; completely blank rows are dropped.
    """
    rows: Dict[int, Dict[str, str]] = {}
    for full_key, raw_value in form.items():
        if not full_key.startswith("ex["):
            continue
        try:
            left = full_key.index("[") + 1
            right = full_key.index("]", left)
            row_no = int(full_key[left:right])
            sub_left = full_key.index("[", right) + 1
            sub_right = full_key.index("]", sub_left)
        except ValueError:
            continue

        subkey = full_key[sub_left:sub_right]
        if subkey not in EXERCISE_FIELDS:
            continue
        rows.setdefault(row_no, {})[subkey] = str(raw_value or "").strip()

    return [rows[n] for n in sorted(rows) if any(rows[n].values())]


def parse_entry_form(form: Mapping[str, Any]) -> TrainingEntry:
    """Build a new (id-less) entry from the submitted form; raises InvalidEntryError."""
    date = str(form.get("date") or "").strip()
    if not date:
        raise InvalidEntryError("Please enter a date.")
    if parse_date(date) is None:
        raise InvalidEntryError(f"Unrecognised date: {date}")

    objective1 = str(form.get("objective1") or "").strip()
    if not objective1:
        raise InvalidEntryError("Objective 1 is required.")

    raw_micro = str(form.get("microcycle") or "").strip()
    microcycle = to_int(raw_micro) if raw_micro else None
    if raw_micro and microcycle is None:
        raise InvalidEntryError("Microcycle must be a whole number.")

    session_type = str(form.get("sessionType") or "").strip()
    if session_type not in SESSION_TYPES:
        raise InvalidEntryError(f"Unknown session type: {session_type or '(empty)'}")

    exercises = tuple(
        Exercise(
            id=uuid4().hex,
            goal=row.get("goal", ""),
            exercise_type=row.get("exerciseType", ""),
            focus=row.get("focus", ""),
            description=row.get("description", ""),
            duration=to_number(row.get("duration")),
            fitness_indicator=row.get("fitnessIndicator", ""),
        )
        for row in parse_exercises_form(form)
    )

    return TrainingEntry(
        date=date,
        microcycle=microcycle,
        session_type=session_type,
        volume=to_number(form.get("volume")),
        intensity=to_number(form.get("intensity")),
        complexity=to_number(form.get("complexity")),
        objective1=objective1,
        objective2=to_optional_text((form.get("objective2") or "").strip()),
        exercises=exercises,
    )
