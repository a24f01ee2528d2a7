"""
Entry Store und Dashboard-Zustand.

DashboardState ist unveränderlich; Filter- und Anlage-Ereignisse laufen über
reine Reducer-Funktionen. EntryStore hält die geladenen Einträge für die
Lebensdauer des App-Prozesses.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .errors import DuplicateEntryError
from .models import FilterCriteria, TrainingEntry
from .services.api_client import EntriesClient
from .services.filters import apply_filters
from .services.metrics import DashboardMetrics, summarize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardState:
    entries: Tuple[TrainingEntry, ...] = ()
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    visible: Tuple[TrainingEntry, ...] = ()
    metrics: DashboardMetrics = field(default_factory=DashboardMetrics)


def _derive(entries: Tuple[TrainingEntry, ...], criteria: FilterCriteria) -> DashboardState:
    # Kennzahlen immer komplett aus der sichtbaren Menge neu berechnen
    visible = tuple(apply_filters(entries, criteria))
    return DashboardState(entries=entries, criteria=criteria, visible=visible, metrics=summarize(visible))


def initial_state(entries: Iterable[TrainingEntry]) -> DashboardState:
    return _derive(tuple(entries), FilterCriteria())


def filter_changed(state: DashboardState, criteria: FilterCriteria) -> DashboardState:
    return _derive(state.entries, criteria)


def entry_created(state: DashboardState, entry: TrainingEntry) -> DashboardState:
    """Append the new entry; the view resets to all entries, unfiltered."""
    return _derive(state.entries + (entry,), FilterCriteria())


class EntryStore:
    """In-memory collection of all entries, loaded once from the backend."""

    def __init__(self, client: EntriesClient) -> None:
        self.client = client
        self._state = initial_state(())
        self._loaded = False
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def entries(self) -> Tuple[TrainingEntry, ...]:
        return self._state.entries

    def ensure_loaded(self) -> None:
        """
        Lädt die Einträge einmalig. Bei Fehlern bleibt der bisherige Bestand
        erhalten (EntriesAPIError wird weitergereicht), der nächste Aufruf
        versucht es erneut.
        """
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            entries = _drop_duplicate_ids(self.client.fetch_entries())
            self._state = initial_state(entries)
            self._loaded = True
            logger.info("Entry store loaded with %d entries", len(entries))

    def get(self, entry_id) -> Optional[TrainingEntry]:
        key = str(entry_id)
        for entry in self._state.entries:
            if str(entry.id) == key:
                return entry
        return None

    def view(self, criteria: FilterCriteria) -> DashboardState:
        return filter_changed(self._state, criteria)

    def create(self, entry: TrainingEntry) -> TrainingEntry:
        """
        Legt den Eintrag im Backend an und übernimmt ihn mit vergebener ID.
        Anlagen laufen nacheinander; schlägt der Request fehl, bleibt der
        Bestand unverändert.
        """
        with self._lock:
            entry_id = self.client.create_entry(entry)
            if self.get(entry_id) is not None:
                raise DuplicateEntryError(f"Entry id {entry_id!r} already exists")
            created = entry.with_id(entry_id)
            self._state = entry_created(self._state, created)
        return created


def _drop_duplicate_ids(entries: Iterable[TrainingEntry]) -> List[TrainingEntry]:
    """Erster Eintrag je ID gewinnt; spätere Duplikate werden verworfen und geloggt."""
    seen = set()
    unique: List[TrainingEntry] = []
    for entry in entries:
        key = None if entry.id is None else str(entry.id)
        if key is not None and key in seen:
            logger.warning("Dropping entry with duplicate id %r from backend", entry.id)
            continue
        if key is not None:
            seen.add(key)
        unique.append(entry)
    return unique
