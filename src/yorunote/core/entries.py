"""Pure journal entry domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta


def day_key(value: date | datetime) -> date:
    """Calendar date of a date or datetime, ignoring time of day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def is_same_day(a: date | datetime, b: date | datetime) -> bool:
    """True when both values fall on the same calendar day."""
    return day_key(a) == day_key(b)


def normalize_day(value: date | datetime) -> datetime:
    """
    Convert a day value to the naive datetime form kept in storage.

    Plain dates become midnight. Aware datetimes are converted to local time
    and stripped of their tzinfo.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    return datetime.combine(value, time.min)


def day_bounds(value: date | datetime) -> tuple[datetime, datetime]:
    """Half-open [start, end) range covering the calendar day of value."""
    start = datetime.combine(day_key(normalize_day(value)), time.min)
    return start, start + timedelta(days=1)


@dataclass
class JournalEntry:
    """One calendar day's reflection with three free-text answers."""

    id: str
    day: datetime
    timestamp: datetime
    event_text: str = ""
    feeling_text: str = ""
    future_text: str = ""

    @property
    def day_key(self) -> date:
        return day_key(self.day)

    @property
    def is_blank(self) -> bool:
        """All three answers are empty strings."""
        return not (self.event_text or self.feeling_text or self.future_text)

    def texts(self) -> tuple[str, str, str]:
        return self.event_text, self.feeling_text, self.future_text

    def preview(self, length: int = 20) -> str:
        """Short summary of what happened, for list and home views."""
        return f"{self.event_text[:length]}..."

