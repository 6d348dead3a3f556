"""Ports - interfaces/protocols for external dependencies."""

from .entry_store import EntryNotFoundError, EntryStore, PersistenceError, YorunoteError

__all__ = [
    "EntryStore",
    "EntryNotFoundError",
    "PersistenceError",
    "YorunoteError",
]
