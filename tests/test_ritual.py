"""Tests for the nightly ritual draft."""

from datetime import date, datetime, timedelta

import pytest

from yorunote.core.entries import JournalEntry
from yorunote.core.ritual import QUESTIONS, RitualDraft, can_begin_ritual


@pytest.fixture
def today():
    return date(2026, 1, 18)


@pytest.fixture
def entry():
    return JournalEntry(
        id="e1",
        day=datetime(2026, 1, 18),
        timestamp=datetime(2026, 1, 18, 23, 0),
        event_text="Presented at work",
        feeling_text="Relieved",
        future_text="Sleep early",
    )


class TestRitualDraft:
    def test_blank_draft(self, today):
        draft = RitualDraft.blank(today)

        assert draft.day == today
        assert draft.texts() == ("", "", "")
        assert not draft.is_editing

    def test_seeded_from_entry(self, entry):
        draft = RitualDraft.for_entry(entry)

        assert draft.is_editing
        assert draft.entry is entry
        assert draft.day == entry.day
        assert draft.texts() == ("Presented at work", "Relieved", "Sleep early")

    def test_editing_draft_does_not_touch_entry(self, entry):
        draft = RitualDraft.for_entry(entry)
        draft.answer("event_text", "Changed my mind")

        assert entry.event_text == "Presented at work"

    def test_cannot_save_when_all_empty(self, today):
        assert not RitualDraft.blank(today).can_save

    @pytest.mark.parametrize("field_name", [name for name, _ in QUESTIONS])
    def test_any_single_answer_enables_save(self, today, field_name):
        draft = RitualDraft.blank(today)
        draft.answer(field_name, "something")
        assert draft.can_save

    def test_whitespace_only_is_savable(self, today):
        draft = RitualDraft(day=today, event_text=" ", feeling_text="\n", future_text="\t")
        assert draft.can_save

    def test_unknown_field(self, today):
        with pytest.raises(ValueError, match="Unknown ritual field"):
            RitualDraft.blank(today).answer("mood", "fine")

    def test_cancel_discards_draft(self, entry):
        draft = RitualDraft.for_entry(entry)
        draft.answer("future_text", "Run in the morning")

        draft.cancel()

        assert draft.texts() == ("", "", "")
        assert not draft.is_editing
        assert entry.future_text == "Sleep early"


class TestCanBeginRitual:
    def test_today_without_entry(self, today):
        assert can_begin_ritual(today, None, today=today)

    def test_today_with_entry(self, today, entry):
        assert not can_begin_ritual(today, entry, today=today)

    def test_past_day_without_entry(self, today):
        assert not can_begin_ritual(today - timedelta(days=1), None, today=today)

    def test_future_day(self, today):
        assert not can_begin_ritual(today + timedelta(days=1), None, today=today)

    def test_datetime_selection(self, today):
        assert can_begin_ritual(datetime(2026, 1, 18, 21, 30), None, today=today)
