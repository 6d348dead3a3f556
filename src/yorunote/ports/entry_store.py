"""Journal entry storage interface."""

from datetime import date, datetime
from typing import Protocol

from yorunote.core.entries import JournalEntry


class YorunoteError(Exception):
    """Base class for yorunote failures."""

    pass


class PersistenceError(YorunoteError):
    """Raised when the durable store cannot complete a commit or fetch."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"{operation} failed{detail}")


class EntryNotFoundError(YorunoteError, LookupError):
    """Raised when updating an entry the store does not own."""

    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__(f"No journal entry with id {entry_id}")


class EntryStore(Protocol):
    """Interface for the day-keyed journal entry collection."""

    def create(
        self,
        day: date | datetime,
        event_text: str,
        feeling_text: str,
        future_text: str,
    ) -> JournalEntry:
        """Persist a new entry for day and return it."""
        ...

    def update(
        self,
        entry: JournalEntry,
        event_text: str,
        feeling_text: str,
        future_text: str,
    ) -> None:
        """Overwrite the three texts of an existing entry."""
        ...

    def fetch_all(self) -> list[JournalEntry]:
        """All entries, most recent day first."""
        ...

    def find_for_day(self, day: date | datetime) -> JournalEntry | None:
        """The entry on the same calendar day, or None."""
        ...
