"""SQLAlchemy-backed journal entry storage adapter."""

import logging
import uuid
from datetime import date, datetime
from pathlib import Path

from sqlalchemy import DateTime, String, Text, create_engine, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

from yorunote.core.entries import JournalEntry, day_bounds, normalize_day
from yorunote.ports.entry_store import EntryNotFoundError, PersistenceError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class NightEntryRecord(Base):
    """Row in the night_entries table."""

    __tablename__ = "night_entries"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    # Lookup key only, one-per-day is enforced by the ritual workflow.
    day: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    event_text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    feeling_text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    future_text: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def to_entry(self) -> JournalEntry:
        return JournalEntry(
            id=self.id,
            day=self.day,
            timestamp=self.timestamp,
            event_text=self.event_text,
            feeling_text=self.feeling_text,
            future_text=self.future_text,
        )

    def __repr__(self):
        return f"<NightEntryRecord(id={self.id}, day={self.day:%Y-%m-%d})>"


class SqlAlchemyEntryStore:
    """
    Relational journal entry storage.

    Implements EntryStore protocol. Every operation runs in its own session
    and commits once. Database faults are logged and re-raised as
    PersistenceError; nothing is retried.
    """

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        self.engine = create_engine(url, **engine_kwargs)
        self._sessions = sessionmaker(self.engine, expire_on_commit=False)
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            logger.exception("Failed to initialise journal database at %s", url)
            raise PersistenceError("initialise", e) from e

    @classmethod
    def for_path(cls, path: Path | str) -> "SqlAlchemyEntryStore":
        """Open (or create) a SQLite database file."""
        db_path = Path(path).expanduser()
        try:
            db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.exception("Cannot create journal directory %s", db_path.parent)
            raise PersistenceError("initialise", e) from e
        return cls(f"sqlite:///{db_path}")

    @classmethod
    def in_memory(cls) -> "SqlAlchemyEntryStore":
        """Private in-memory database, discarded with the store."""
        return cls(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    def _fail(self, operation: str, error: SQLAlchemyError) -> PersistenceError:
        logger.error("Journal store %s failed: %s", operation, error)
        return PersistenceError(operation, error)

    def create(
        self,
        day: date | datetime,
        event_text: str,
        feeling_text: str,
        future_text: str,
    ) -> JournalEntry:
        """Persist a new entry for day and return it."""
        record = NightEntryRecord(
            id=str(uuid.uuid4()),
            day=normalize_day(day),
            timestamp=datetime.now(),
            event_text=event_text,
            feeling_text=feeling_text,
            future_text=future_text,
        )
        try:
            with self._sessions() as session, session.begin():
                session.add(record)
        except SQLAlchemyError as e:
            raise self._fail("create", e) from e

        logger.info("Created journal entry %s for %s", record.id, record.day.date())
        return record.to_entry()

    def update(
        self,
        entry: JournalEntry,
        event_text: str,
        feeling_text: str,
        future_text: str,
    ) -> None:
        """
        Overwrite the three texts of an existing entry.

        The caller's entry object is updated only after the commit succeeds.
        """
        try:
            with self._sessions() as session, session.begin():
                record = session.get(NightEntryRecord, entry.id)
                if record is None:
                    raise EntryNotFoundError(entry.id)
                record.event_text = event_text
                record.feeling_text = feeling_text
                record.future_text = future_text
        except EntryNotFoundError:
            logger.error("Journal store update failed: unknown entry %s", entry.id)
            raise
        except SQLAlchemyError as e:
            raise self._fail("update", e) from e

        entry.event_text = event_text
        entry.feeling_text = feeling_text
        entry.future_text = future_text
        logger.info("Updated journal entry %s", entry.id)

    def fetch_all(self) -> list[JournalEntry]:
        """All entries, most recent day first."""
        stmt = select(NightEntryRecord).order_by(NightEntryRecord.day.desc())
        try:
            with self._sessions() as session:
                return [r.to_entry() for r in session.scalars(stmt)]
        except SQLAlchemyError as e:
            raise self._fail("fetch_all", e) from e

    def count(self) -> int:
        """Number of stored entries."""
        try:
            with self._sessions() as session:
                return session.scalar(select(func.count()).select_from(NightEntryRecord))
        except SQLAlchemyError as e:
            raise self._fail("count", e) from e

    def find_for_day(self, day: date | datetime) -> JournalEntry | None:
        """
        The entry on the same calendar day, or None.

        Several entries on one day resolve to the first in fetch_all order.
        """
        start, end = day_bounds(day)
        stmt = (
            select(NightEntryRecord)
            .where(NightEntryRecord.day >= start, NightEntryRecord.day < end)
            .order_by(NightEntryRecord.day.desc())
            .limit(1)
        )
        try:
            with self._sessions() as session:
                record = session.scalars(stmt).first()
        except SQLAlchemyError as e:
            raise self._fail("find_for_day", e) from e

        logger.info(
            "Entry lookup for %s: %s", start.date(), "found" if record else "not found"
        )
        return record.to_entry() if record else None

    def close(self) -> None:
        self.engine.dispose()
