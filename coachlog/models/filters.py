from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ._coerce import to_int
from .dates import parse_date

logger = logging.getLogger(__name__)

# Auswahlwerte (sessionType, microcycle), die "keine Einschränkung" bedeuten
_NO_CONSTRAINT = {"", "all"}


@dataclass(frozen=True)
class FilterCriteria:
    """Transient filter settings of the dashboard; None = no constraint."""

    session_type: Optional[str] = None
    microcycle: Optional[int] = None
    objective: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @property
    def is_empty(self) -> bool:
        return not any(
            v is not None
            for v in (self.session_type, self.microcycle, self.objective, self.start_date, self.end_date)
        )

    @classmethod
    def from_mapping(cls, args: Mapping[str, Any]) -> "FilterCriteria":
        """
        Liest die Filter aus Query-String/Formular (sessionType, microcycle,
        objective, startDate, endDate).

        Nicht-numerischer Mikrozyklus bzw. unlesbares Datum werden ignoriert
        (keine Einschränkung) und geloggt.
        """
        session_type = _clean(args.get("sessionType"))
        objective = _text(args.get("objective"))

        microcycle = None
        raw_micro = _clean(args.get("microcycle"))
        if raw_micro is not None:
            microcycle = to_int(raw_micro)
            if microcycle is None:
                logger.warning("Ignoring non-numeric microcycle filter %r", raw_micro)

        return cls(
            session_type=session_type,
            microcycle=microcycle,
            objective=objective,
            start_date=_bound(args.get("startDate"), "startDate"),
            end_date=_bound(args.get("endDate"), "endDate"),
        )

    def to_args(self) -> dict:
        """Inverse von from_mapping, z. B. für Redirects mit erhaltenen Filtern."""
        args = {}
        if self.session_type is not None:
            args["sessionType"] = self.session_type
        if self.microcycle is not None:
            args["microcycle"] = str(self.microcycle)
        if self.objective is not None:
            args["objective"] = self.objective
        if self.start_date is not None:
            args["startDate"] = self.start_date.isoformat()
        if self.end_date is not None:
            args["endDate"] = self.end_date.isoformat()
        return args


def _clean(v: Any) -> Optional[str]:
    if v is None:
        return None
    text = str(v).strip()
    if text.lower() in _NO_CONSTRAINT:
        return None
    return text


def _text(v: Any) -> Optional[str]:
    # Freitext: nur leere Eingabe bedeutet "keine Einschränkung"
    if v is None:
        return None
    text = str(v).strip()
    return text or None


def _bound(v: Any, name: str) -> Optional[date]:
    raw = _text(v)
    if raw is None:
        return None
    parsed = parse_date(raw)
    if parsed is None:
        logger.warning("Ignoring unparsable %s filter %r", name, raw)
    return parsed
