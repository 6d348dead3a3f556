"""Functional core - pure business logic with no I/O."""

from .entries import JournalEntry, day_key, is_same_day, normalize_day
from .ritual import QUESTIONS, RitualDraft, can_begin_ritual
from .shredder import Shredder, ShredderState

__all__ = [
    # Entries
    "JournalEntry",
    "day_key",
    "is_same_day",
    "normalize_day",
    # Ritual
    "QUESTIONS",
    "RitualDraft",
    "can_begin_ritual",
    # Shredder
    "Shredder",
    "ShredderState",
]
