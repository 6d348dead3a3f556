"""Nightly ritual form state - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime

from .entries import JournalEntry, day_key

# Prompts for the three reflections, in form order.
QUESTIONS = (
    ("event_text", "What happened today?"),
    ("feeling_text", "How did it make you feel?"),
    ("future_text", "A note to tomorrow's self?"),
)


@dataclass
class RitualDraft:
    """
    Unsaved answers for one day's ritual.

    A draft seeded from an existing entry edits that entry on save; a blank
    draft creates a new entry for its day.
    """

    day: date | datetime
    event_text: str = ""
    feeling_text: str = ""
    future_text: str = ""
    entry: JournalEntry | None = None

    @classmethod
    def blank(cls, day: date | datetime) -> "RitualDraft":
        return cls(day=day)

    @classmethod
    def for_entry(cls, entry: JournalEntry) -> "RitualDraft":
        return cls(
            day=entry.day,
            event_text=entry.event_text,
            feeling_text=entry.feeling_text,
            future_text=entry.future_text,
            entry=entry,
        )

    @property
    def is_editing(self) -> bool:
        return self.entry is not None

    @property
    def can_save(self) -> bool:
        """Save is disabled only when every answer is empty; whitespace counts."""
        return bool(self.event_text or self.feeling_text or self.future_text)

    def texts(self) -> tuple[str, str, str]:
        return self.event_text, self.feeling_text, self.future_text

    def answer(self, field_name: str, value: str) -> None:
        if field_name not in {name for name, _ in QUESTIONS}:
            raise ValueError(f"Unknown ritual field: {field_name}")
        setattr(self, field_name, value)

    def cancel(self) -> None:
        """Throw the draft away; the stored entry, if any, is left alone."""
        self.event_text = ""
        self.feeling_text = ""
        self.future_text = ""
        self.entry = None


def can_begin_ritual(
    selected_day: date | datetime,
    existing: JournalEntry | None,
    today: date | None = None,
) -> bool:
    """A new ritual is offered only for today, and only once."""
    today = today or date.today()
    return existing is None and day_key(selected_day) == today
