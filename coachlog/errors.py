"""Exception-Hierarchie für CoachLog."""

from __future__ import annotations


class CoachLogError(Exception):
    """Base exception for all coachlog errors."""


class EntriesAPIError(CoachLogError):
    """The backend data service failed or returned an error response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidEntryError(CoachLogError):
    """Submitted entry form is incomplete or malformed."""


class ExportValidationError(CoachLogError):
    """Export refused; the message is shown to the user as-is."""


class DuplicateEntryError(CoachLogError):
    """An entry with this id is already in the store."""
