"""Adapters - I/O implementations of ports."""

from .sqlalchemy_store import SqlAlchemyEntryStore

__all__ = [
    "SqlAlchemyEntryStore",
]
