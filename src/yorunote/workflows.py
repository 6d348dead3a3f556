"""Shared workflow layer between the CLI and the entry store.

The ritual is where one-entry-per-day is enforced: a draft for a day that
already has an entry always edits that entry instead of creating another.
"""

import logging
from datetime import date, datetime
from pathlib import Path

from .adapters.sqlalchemy_store import SqlAlchemyEntryStore
from .config import DATA_DIR, Config
from .core.entries import JournalEntry, day_key
from .core.ritual import RitualDraft
from .ports.entry_store import EntryStore

logger = logging.getLogger(__name__)


class ErrorMessages:
    """User-facing failure notices. Technical detail goes to the log only."""

    SAVE_FAILURE = "Saving failed. Please try again."
    LOAD_FAILURE = "Could not load your journal."
    SYSTEM_ERROR = "Something unexpected went wrong."


def get_store(config: Config) -> SqlAlchemyEntryStore:
    """Resolve the journal database from config."""
    if config.database_path:
        return SqlAlchemyEntryStore.for_path(Path(config.database_path).expanduser())
    return SqlAlchemyEntryStore.for_path(DATA_DIR / "yorunote.db")


def open_ritual(store: EntryStore, day: date | datetime, today: date | None = None) -> RitualDraft:
    """
    Start a ritual draft for day.

    Seeds the draft from the day's entry when one exists. New entries can
    only be written for today or earlier.
    """
    today = today or date.today()
    existing = store.find_for_day(day)
    if existing is not None:
        return RitualDraft.for_entry(existing)
    if day_key(day) > today:
        raise ValueError(f"Cannot write a ritual for a future day ({day_key(day)})")
    return RitualDraft.blank(day)


def submit_ritual(store: EntryStore, draft: RitualDraft) -> JournalEntry:
    """
    Save a ritual draft and return the stored entry.

    PersistenceError propagates with the draft untouched so the caller can
    offer a retry without losing what was typed.
    """
    if not draft.can_save:
        raise ValueError("Nothing to save: all three answers are empty")

    if draft.entry is None:
        # Another path may have written this day since the draft was opened.
        draft.entry = store.find_for_day(draft.day)

    if draft.entry is not None:
        store.update(draft.entry, *draft.texts())
        logger.info(f"Ritual updated for {draft.entry.day_key}")
        return draft.entry

    entry = store.create(draft.day, *draft.texts())
    draft.entry = entry
    logger.info(f"Ritual saved for {entry.day_key}")
    return entry
