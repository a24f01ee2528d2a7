"""Client für den externen Daten-Service (GET/POST /api/entries)."""

from __future__ import annotations

import logging
from typing import Any, List

import requests

from ..errors import EntriesAPIError
from ..models import TrainingEntry
from ..models.entry import EntryId

logger = logging.getLogger(__name__)


class EntriesClient:
    """Thin wrapper around the backend's entries endpoints."""

    def __init__(self, base_url: str, timeout: float = 10, session: requests.Session | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = session or requests.Session()

    @property
    def entries_url(self) -> str:
        return f"{self.base_url}/api/entries"

    def fetch_entries(self) -> List[TrainingEntry]:
        """Alle Einträge laden (Bulk-Load beim Start)."""
        data = self._request("GET", self.entries_url)
        raw = data.get("entries") if isinstance(data, dict) else None
        if not isinstance(raw, list):
            raise EntriesAPIError("Unexpected entries response")
        try:
            entries = [TrainingEntry.from_dict(item) for item in raw]
        except (AttributeError, TypeError, ValueError) as exc:
            raise EntriesAPIError("Unexpected entries response") from exc
        logger.info("Fetched %d entries from %s", len(entries), self.entries_url)
        return entries

    def create_entry(self, entry: TrainingEntry) -> EntryId:
        """Neuen Eintrag anlegen; liefert die vom Backend vergebene ID."""
        data = self._request("POST", self.entries_url, json=entry.to_dict(include_id=False))
        entry_id = data.get("id") if isinstance(data, dict) else None
        if entry_id is None:
            raise EntriesAPIError("Unexpected create response: missing id")
        logger.info("Created entry id=%s", entry_id)
        return entry_id

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            resp = self._http.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise EntriesAPIError(f"{method} {url} failed: {exc}") from exc

        if not resp.ok:
            raise EntriesAPIError(_error_message(resp), status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as exc:
            raise EntriesAPIError("Backend returned invalid JSON", status_code=resp.status_code) from exc


def _error_message(resp: requests.Response) -> str:
    # Fehlerbody laut Backend: {"message": "..."}
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"Backend responded with HTTP {resp.status_code}"
