"""Kleine Konvertierungs-Helfer für Felder aus JSON/Formularen."""

from __future__ import annotations

import math
from typing import Any, Optional, Union

Number = Union[int, float]


def to_number(v: Any) -> Optional[Number]:
    """None/'' -> None, numerische Strings -> int/float, Unparsbares und NaN/inf -> None."""
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        return v if math.isfinite(v) else None
    raw = str(v).strip().replace(",", ".")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        num = float(raw)
    except ValueError:
        return None
    return num if math.isfinite(num) else None


def to_int(v: Any) -> Optional[int]:
    """Wie to_number, aber nur ganze Zahlen (z. B. Mikrozyklus)."""
    num = to_number(v)
    if num is None:
        return None
    if isinstance(num, float):
        return int(num) if num.is_integer() else None
    return num


def to_text(v: Any) -> str:
    return "" if v is None else str(v)


def to_optional_text(v: Any) -> Optional[str]:
    if v is None:
        return None
    text = str(v)
    return text if text.strip() else None
