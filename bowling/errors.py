"""Exceptions raised by the bowling engine and session."""


class BowlingError(Exception):
    """Base class for all bowling errors."""


class InvalidRollError(BowlingError, ValueError):
    """A roll value that cannot be applied to the frame in progress."""

    def __init__(self, pins, pins_standing: int):
        super().__init__(
            f"Invalid roll {pins!r}: expected an integer from 0 to {pins_standing}."
        )
        self.pins = pins
        self.pins_standing = pins_standing


class FrameStateError(BowlingError):
    """A frame holds rolls that no legal game can produce."""

    def __init__(self, frame_index: int, rolls):
        super().__init__(f"Frame {frame_index + 1} has an illegal roll sequence: {list(rolls)}.")
        self.frame_index = frame_index
        self.rolls = list(rolls)


class GameNotOverError(BowlingError):
    """Raised when asking for a winner before both tenth frames are done."""
