from __future__ import annotations

"""Ten-pin bowling rules: frames, pins standing, completion and scoring.

Everything here is a pure function of frame contents. The session module
owns the mutable game state and calls back into these helpers after every
roll.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .errors import FrameStateError


FRAME_COUNT = 10
PIN_COUNT = 10
LAST_FRAME = FRAME_COUNT - 1


@dataclass
class Frame:
    rolls: List[int] = field(default_factory=list)
    # Cumulative score through this frame, None until it can be known.
    score: Optional[int] = None

    def copy(self) -> Frame:
        return Frame(rolls=list(self.rolls), score=self.score)


@dataclass
class Player:
    name: str
    frames: List[Frame]
    is_bot: bool = False

    @classmethod
    def fresh(cls, name: str, is_bot: bool = False) -> Player:
        """Return a player with ten empty frames."""
        return cls(name=name, frames=[Frame() for _ in range(FRAME_COUNT)], is_bot=is_bot)


def max_rolls(frame_index: int) -> int:
    """Return how many rolls a frame can ever hold."""
    return 3 if frame_index == LAST_FRAME else 2


def is_frame_complete(frame: Frame, frame_index: int) -> bool:
    """Return True if the frame has received every roll it is entitled to.

    The tenth frame needs a third roll after a strike or a spare.
    """
    rolls = frame.rolls
    if frame_index == LAST_FRAME:
        if len(rolls) == 3:
            return True
        if len(rolls) == 2:
            return rolls[0] != PIN_COUNT and rolls[0] + rolls[1] != PIN_COUNT
        return False
    return (len(rolls) >= 1 and rolls[0] == PIN_COUNT) or len(rolls) == 2


def current_frame_index(frames: Sequence[Frame]) -> int:
    """Return the first frame still open, or the last frame when all are done."""
    for i, frame in enumerate(frames[:FRAME_COUNT]):
        if not is_frame_complete(frame, i):
            return i
    return LAST_FRAME


def pins_remaining(frame: Frame, frame_index: int) -> int:
    """Return the pins standing before the next roll in this frame.

    In the tenth frame the rack is reset after a strike and after a spare.
    """
    rolls = frame.rolls
    if not rolls:
        return PIN_COUNT

    if frame_index == LAST_FRAME:
        if len(rolls) == 1:
            return PIN_COUNT if rolls[0] == PIN_COUNT else PIN_COUNT - rolls[0]
        if len(rolls) == 2:
            if rolls[0] == PIN_COUNT:
                return PIN_COUNT if rolls[1] == PIN_COUNT else PIN_COUNT - rolls[1]
            # Only reachable after a spare; an open tenth frame is already over.
            return PIN_COUNT
        return 0

    if rolls[0] == PIN_COUNT or len(rolls) >= 2:
        return 0
    return PIN_COUNT - rolls[0]


def validate_frame(frame: Frame, frame_index: int) -> None:
    """Raise FrameStateError if the rolls could not come from a legal game."""
    rolls = frame.rolls
    bad = len(rolls) > max_rolls(frame_index) or any(
        isinstance(r, bool) or not isinstance(r, int) or not 0 <= r <= PIN_COUNT for r in rolls
    )
    if not bad and len(rolls) >= 2:
        first, second = rolls[0], rolls[1]
        if frame_index < LAST_FRAME:
            bad = first == PIN_COUNT or first + second > PIN_COUNT
        else:
            if first != PIN_COUNT and first + second > PIN_COUNT:
                bad = True
            elif len(rolls) == 3:
                third = rolls[2]
                if first != PIN_COUNT and first + second < PIN_COUNT:
                    # Open tenth frame gets no bonus roll
                    bad = True
                elif first == PIN_COUNT and second != PIN_COUNT and second + third > PIN_COUNT:
                    bad = True
    if bad:
        raise FrameStateError(frame_index, rolls)


def score_frames(frames: Sequence[Frame]) -> List[Frame]:
    """Return copies of the frames with cumulative scores filled in.

    Scoring runs forward from the first frame and stops at the first frame
    that has no rolls yet or whose strike or spare bonus is still unknown.
    Frames from that point on carry no score. The input is not modified, so
    the function can be re-run after every roll.
    """
    scored = [f.copy() for f in frames]
    for f in scored:
        f.score = None

    running = 0
    for i, frame in enumerate(scored[:FRAME_COUNT]):
        rolls = frame.rolls
        if not rolls:
            break
        validate_frame(frame, i)

        if i == LAST_FRAME:
            # No eleventh frame to look into; the tenth counts its own rolls.
            if is_frame_complete(frame, i):
                running += sum(rolls)
                frame.score = running
            break

        first = rolls[0]
        if first == PIN_COUNT:
            bonus = _strike_bonus(scored, i)
            if bonus is None:
                break
            running += PIN_COUNT + bonus
        elif len(rolls) == 2 and first + rolls[1] == PIN_COUNT:
            following = scored[i + 1].rolls
            if not following:
                break
            running += PIN_COUNT + following[0]
        elif len(rolls) == 2:
            running += first + rolls[1]
        else:
            # Frame in progress
            break
        frame.score = running

    return scored


def _strike_bonus(frames: Sequence[Frame], index: int) -> Optional[int]:
    """Return the next two rolls after a strike, or None if not yet rolled."""
    following = frames[index + 1].rolls
    if not following:
        return None
    bonus1 = following[0]
    if len(following) >= 2:
        return bonus1 + following[1]
    if bonus1 == PIN_COUNT and index + 2 < FRAME_COUNT:
        after = frames[index + 2].rolls
        if after:
            return bonus1 + after[0]
    return None


def frame_totals(frames: Sequence[Frame]) -> List[Optional[int]]:
    """Return the cumulative score column for a frame list."""
    return [f.score for f in score_frames(frames)]


def roll_label(pins: int, pins_before: int) -> str:
    """Return the banner text shown after a roll."""
    if pins == PIN_COUNT and pins_before == PIN_COUNT:
        return "STRIKE!"
    if pins == pins_before and 0 < pins_before < PIN_COUNT:
        return "SPARE!"
    if pins == 0:
        return "GUTTER!"
    return f"{pins} PINS"


def roll_marks(frame: Frame, frame_index: int) -> List[str]:
    """Return scoreboard symbols for each recorded roll.

    X marks a strike, / a spare and - a miss.
    """
    rolls = frame.rolls
    marks: List[str] = []
    for i, roll in enumerate(rolls):
        if i == 0:
            spare = False
            strike = roll == PIN_COUNT
        elif i == 1:
            if frame_index == LAST_FRAME:
                strike = roll == PIN_COUNT
                spare = not strike and rolls[0] != PIN_COUNT and rolls[0] + roll == PIN_COUNT
            else:
                strike = False
                spare = rolls[0] + roll == PIN_COUNT
        else:
            strike = roll == PIN_COUNT
            spare = not strike and rolls[1] != PIN_COUNT and rolls[1] + roll == PIN_COUNT

        if strike:
            marks.append("X")
        elif spare:
            marks.append("/")
        elif roll == 0:
            marks.append("-")
        else:
            marks.append(str(roll))
    return marks


def frame_line(player: Player) -> str:
    """Return a one line text scoreboard for a player.

    Each frame shows its marks and, once known, its cumulative score.
    """
    cells = []
    for i, frame in enumerate(player.frames):
        marks = " ".join(roll_marks(frame, i)) or "."
        score = "" if frame.score is None else f"={frame.score}"
        cells.append(f"{marks}{score}")
    return f"{player.name}: " + " | ".join(cells)
