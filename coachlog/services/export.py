# -*- coding: utf-8 -*-
"""
Service: Export
Erzeugt Word-Dokumente für eine einzelne Einheit oder einen ganzen Mikrozyklus.

Beide Exporte sind reine Transformationen Daten -> Bytes; das Speichern bzw.
der Download passiert in der View.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from werkzeug.utils import secure_filename

from ..errors import ExportValidationError
from ..models import Exercise, TrainingEntry
from .document_builder import DocumentBuilder, DocxBuilder
from .metrics import summarize_microcycle

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"
EXERCISE_COLUMNS = ("Goal", "Type", "Focus", "Description", "Duration", "Fitness Indicator")

MSG_SELECT_MICROCYCLE = "Please select a microcycle to export."
MSG_NO_ENTRIES = "No entries available to export."

BuilderFactory = Callable[[], DocumentBuilder]


@dataclass(frozen=True)
class ExportedDocument:
    filename: str
    content: bytes
    mimetype: str


def fmt(value) -> str:
    """Zahlen ohne überflüssiges '.0'; fehlende Werte als 'N/A'."""
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def safe_filename(name: str) -> str:
    """Unzulässige Zeichen im Dateinamen werden durch '_' ersetzt."""
    return secure_filename(name) or "export"


def _exercise_row(ex: Exercise) -> List[str]:
    return [
        ex.goal,
        ex.exercise_type,
        ex.focus,
        ex.description,
        f"{fmt(ex.duration)} minutes",
        ex.fitness_indicator,
    ]


def export_entry(entry: TrainingEntry, builder_factory: BuilderFactory = DocxBuilder) -> ExportedDocument:
    """Eine Einheit: Kopfzeilen, dann Übungstabelle mit fester Spaltenfolge."""
    doc = builder_factory()
    doc.add_title(f"Training Session on {entry.date}")
    doc.add_paragraph(f"Microcycle: {fmt(entry.microcycle)}", space_after=10)
    doc.add_paragraph(f"Session Type: {entry.session_type}", space_after=10)
    doc.add_paragraph(f"Volume: {fmt(entry.volume)}", space_after=10)
    doc.add_paragraph(f"Intensity: {fmt(entry.intensity)}", space_after=10)
    doc.add_paragraph(f"Objective 1: {entry.objective1}", space_after=10)
    doc.add_paragraph(f"Objective 2: {entry.objective2 or NOT_AVAILABLE}", space_after=20)
    doc.add_heading("Exercises", level=1, space_after=20)
    doc.add_table(EXERCISE_COLUMNS, [_exercise_row(ex) for ex in entry.exercises])

    filename = safe_filename(f"Training_Session_{entry.date}.{doc.extension}")
    logger.info("Exported entry %s as %s", entry.id, filename)
    return ExportedDocument(filename=filename, content=doc.to_bytes(), mimetype=doc.mimetype)


def export_microcycle(
    microcycle: Optional[int],
    entries: Sequence[TrainingEntry],
    builder_factory: BuilderFactory = DocxBuilder,
) -> ExportedDocument:
    """
    Gesamter Mikrozyklus: je Einheit ein Block mit Übungsliste, am Ende Summen.

    Raises ExportValidationError, wenn kein Mikrozyklus gewählt ist oder keine
    passenden Einträge vorliegen; dann wird kein Dokument erzeugt.
    """
    if microcycle is None:
        logger.info("Microcycle export refused: no microcycle selected")
        raise ExportValidationError(MSG_SELECT_MICROCYCLE)

    selected = [e for e in entries if e.microcycle == microcycle]
    if not selected:
        logger.info("Microcycle export refused: no entries for microcycle %s", microcycle)
        raise ExportValidationError(MSG_NO_ENTRIES)

    totals = summarize_microcycle(selected)

    doc = builder_factory()
    doc.add_title(f"Training Microcycle {microcycle}")
    for entry in selected:
        doc.add_block(
            [
                f"Date: {entry.date}",
                f"Session Type: {entry.session_type}",
                f"Volume: {fmt(entry.volume)}",
                f"Intensity: {fmt(entry.intensity)}",
                f"Complexity: {fmt(entry.complexity)}",
                f"Objective 1: {entry.objective1}",
                f"Objective 2: {entry.objective2 or NOT_AVAILABLE}",
                "Exercises:",
            ],
            emphasize_first=True,
        )
        for ex in entry.exercises:
            doc.add_list(
                [
                    f"Goal: {ex.goal}",
                    f"Type: {ex.exercise_type}",
                    f"Focus: {ex.focus}",
                    f"Description: {ex.description}",
                    f"Duration: {fmt(ex.duration)} minutes",
                    f"Fitness Indicator: {ex.fitness_indicator}",
                ],
                level=1,
            )

    doc.add_heading(f"Summary for Microcycle {microcycle}", level=1, space_after=20)
    doc.add_paragraph(f"Total Volume: {fmt(totals.total_volume)} minutes")
    doc.add_paragraph(f"Total Intensity: {fmt(totals.total_intensity)}%")
    doc.add_paragraph(f"Total Complexity: {fmt(totals.total_complexity)}")

    filename = safe_filename(f"Training_Microcycle_{microcycle}.{doc.extension}")
    logger.info("Exported microcycle %s (%d entries) as %s", microcycle, len(selected), filename)
    return ExportedDocument(filename=filename, content=doc.to_bytes(), mimetype=doc.mimetype)
