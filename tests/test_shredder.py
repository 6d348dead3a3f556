"""Tests for the venting shredder."""

import pytest

from yorunote.core.shredder import DEFAULT_SECONDS, Shredder, ShredderState


@pytest.fixture
def shredder():
    return Shredder()


class TestCountdown:
    def test_initial_state(self, shredder):
        assert shredder.state == ShredderState.IDLE
        assert shredder.remaining == DEFAULT_SECONDS == 60
        assert shredder.text == ""
        assert not shredder.can_shred

    def test_does_not_start_without_text(self, shredder):
        shredder.tick()
        shredder.write("")
        shredder.tick()

        assert shredder.state == ShredderState.IDLE
        assert shredder.remaining == 60

    def test_starts_on_first_text(self, shredder):
        shredder.write("ugh")

        assert shredder.is_running
        shredder.tick()
        assert shredder.remaining == 59

    def test_keeps_running_if_text_cleared(self, shredder):
        shredder.write("ugh")
        shredder.write("")
        shredder.tick()

        assert shredder.is_running
        assert shredder.remaining == 59

    def test_reaching_zero_shreds(self, shredder):
        shredder.write("everything is annoying")

        for _ in range(59):
            assert not shredder.tick()
        assert shredder.tick()

        assert shredder.state == ShredderState.SHREDDED
        assert shredder.text == ""
        assert shredder.remaining == 0

    def test_large_tick_clamps_to_zero(self, shredder):
        shredder.write("x")
        assert shredder.tick(500)
        assert shredder.remaining == 0

    def test_fractional_ticks(self):
        shredder = Shredder(seconds=2)
        shredder.write("x")
        assert not shredder.tick(1.5)
        assert shredder.tick(0.5)

    def test_ticks_after_shred_are_ignored(self, shredder):
        shredder.write("x")
        shredder.shred()
        assert not shredder.tick()

    def test_custom_duration(self):
        assert Shredder(seconds=5).remaining == 5

    @pytest.mark.parametrize("seconds", [0, -1])
    def test_duration_must_be_positive(self, seconds):
        with pytest.raises(ValueError):
            Shredder(seconds=seconds)


class TestManualShred:
    def test_shred_discards_text(self, shredder):
        shredder.append("first line\n")
        shredder.append("second line\n")
        assert shredder.text == "first line\nsecond line\n"

        shredder.shred()

        assert shredder.text == ""
        assert shredder.state == ShredderState.SHREDDED

    def test_cannot_shred_empty(self, shredder):
        with pytest.raises(RuntimeError, match="Nothing to shred"):
            shredder.shred()

    def test_cannot_write_after_shred(self, shredder):
        shredder.write("x")
        shredder.shred()
        with pytest.raises(RuntimeError, match="reset"):
            shredder.write("more")

    def test_reset(self, shredder):
        shredder.write("x")
        shredder.tick(10)
        shredder.shred()

        shredder.reset()

        assert shredder.state == ShredderState.IDLE
        assert shredder.remaining == 60
        assert shredder.text == ""
