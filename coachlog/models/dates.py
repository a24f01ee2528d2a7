from __future__ import annotations

from datetime import date, datetime
from typing import Optional

_FORMATS = ("%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S", "%d.%m.%Y", "%m/%d/%Y", "%Y/%m/%d")


def parse_date(val: Optional[str]) -> Optional[date]:
    """Kalenderdatum aus einem String; None, wenn kein bekanntes Format passt."""
    if not val:
        return None
    val = val.strip()
    try:
        return datetime.fromisoformat(val).date()
    except ValueError:
        pass
    for fmt in _FORMATS:
        try:
            return datetime.strptime(val, fmt).date()
        except ValueError:
            continue
    return None
