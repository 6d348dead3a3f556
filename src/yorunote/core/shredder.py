"""One-minute venting scratchpad - never persisted."""

from enum import Enum

DEFAULT_SECONDS = 60


class ShredderState(Enum):
    """Where the scratchpad is in its countdown."""

    IDLE = "idle"  # Waiting for the first non-empty text
    RUNNING = "running"  # Countdown active
    SHREDDED = "shredded"  # Buffer discarded, showing completion


class Shredder:
    """
    Timed free-writing buffer whose only outcome is being discarded.

    The countdown starts once non-empty text is written. Reaching zero, or
    calling shred() manually, empties the buffer. Time is advanced by the
    caller through tick(), so the owner decides what a second is.
    """

    def __init__(self, seconds: int = DEFAULT_SECONDS):
        if seconds <= 0:
            raise ValueError("Shredder duration must be positive")
        self.seconds = seconds
        self.text = ""
        self.remaining = seconds
        self.state = ShredderState.IDLE

    @property
    def is_running(self) -> bool:
        return self.state == ShredderState.RUNNING

    @property
    def can_shred(self) -> bool:
        """Manual shredding needs something to shred."""
        return self.state != ShredderState.SHREDDED and bool(self.text)

    def write(self, text: str) -> None:
        """Replace the buffer; the first non-empty text starts the countdown."""
        if self.state == ShredderState.SHREDDED:
            raise RuntimeError("Shredder must be reset before writing again")
        self.text = text
        if self.state == ShredderState.IDLE and text:
            self.state = ShredderState.RUNNING

    def append(self, text: str) -> None:
        self.write(self.text + text)

    def tick(self, seconds: float = 1) -> bool:
        """
        Advance the countdown.

        Returns True if this tick shredded the buffer.
        """
        if not self.is_running:
            return False
        self.remaining = max(0, self.remaining - seconds)
        if self.remaining == 0:
            self.shred()
            return True
        return False

    def shred(self) -> None:
        """Discard the buffer."""
        if not self.can_shred:
            raise RuntimeError("Nothing to shred")
        self.text = ""
        self.state = ShredderState.SHREDDED

    def reset(self) -> None:
        """Start over with a full countdown."""
        self.text = ""
        self.remaining = self.seconds
        self.state = ShredderState.IDLE
