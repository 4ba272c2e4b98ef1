from typing import List, Optional

import pytest

from bowling.engine import (
    Frame,
    Player,
    current_frame_index,
    frame_line,
    frame_totals,
    is_frame_complete,
    pins_remaining,
    roll_label,
    roll_marks,
    score_frames,
)
from bowling.errors import FrameStateError


def frames_from_rolls(rolls: List[int]) -> List[Frame]:
    """Split a flat roll list into ten frames the way a game would fill them."""
    frames = [Frame() for _ in range(10)]
    for pins in rolls:
        idx = current_frame_index(frames)
        frames[idx].rolls.append(pins)
    return frames


@pytest.mark.parametrize(
    "rolls, expected",
    [
        ([10] * 12, [30, 60, 90, 120, 150, 180, 210, 240, 270, 300]),
        ([0] * 20, [0] * 10),
        ([5] * 21, [15, 30, 45, 60, 75, 90, 105, 120, 135, 150]),
        (
            [9, 1] * 9 + [9, 1, 9],
            [19, 38, 57, 76, 95, 114, 133, 152, 171, 190],
        ),
        (
            [0, 0] * 9 + [10, 10, 10],
            [0, 0, 0, 0, 0, 0, 0, 0, 0, 30],
        ),
        (
            [0, 0] * 8 + [7, 3] + [10, 10, 10],
            [0, 0, 0, 0, 0, 0, 0, 0, 20, 50],
        ),
        (
            [7, 3, 5, 4] + [0, 0] * 8,
            [15, 24, 24, 24, 24, 24, 24, 24, 24, 24],
        ),
        (
            [10, 7, 3, 7, 2] + [0, 0] * 7,
            [20, 37, 46, 46, 46, 46, 46, 46, 46, 46],
        ),
        (
            [3, 4] * 9 + [2, 5],
            [7, 14, 21, 28, 35, 42, 49, 56, 63, 70],
        ),
    ],
)
def test_score_frames_complete_games(rolls: List[int], expected: List[Optional[int]]) -> None:
    assert frame_totals(frames_from_rolls(rolls)) == expected


@pytest.mark.parametrize(
    "rolls, expected",
    [
        ([3], [None] * 10),
        ([3, 4, 5], [7] + [None] * 9),
        ([10], [None] * 10),
        ([10, 3], [None] * 10),
        ([10, 3, 4], [17, 24] + [None] * 8),
        ([10, 10], [None] * 10),
        ([10, 10, 10], [30] + [None] * 9),
        ([7, 3], [None] * 10),
        ([7, 3, 4], [14] + [None] * 9),
        # An unscored strike holds back everything after it
        ([10, 5], [None] * 10),
        ([2, 3, 10, 5], [5] + [None] * 9),
    ],
)
def test_score_frames_waits_for_bonus_rolls(rolls, expected) -> None:
    assert frame_totals(frames_from_rolls(rolls)) == expected


def test_strike_in_ninth_frame_reads_into_tenth() -> None:
    base = [0, 0] * 8 + [10]
    assert frame_totals(frames_from_rolls(base + [10]))[8:] == [None, None]
    assert frame_totals(frames_from_rolls(base + [10, 10]))[8:] == [30, None]
    assert frame_totals(frames_from_rolls(base + [10, 10, 10]))[8:] == [30, 60]
    assert frame_totals(frames_from_rolls(base + [3, 4]))[8:] == [17, 24]


def test_double_strike_needs_the_frame_after() -> None:
    frames = frames_from_rolls([10, 10])
    # Frame 3 has nothing yet, so the first strike cannot be valued
    assert score_frames(frames)[0].score is None
    frames[2].rolls.append(4)
    assert score_frames(frames)[0].score == 24


def test_tenth_frame_scored_only_when_complete() -> None:
    base = [0, 0] * 9
    assert frame_totals(frames_from_rolls(base + [4, 3]))[9] == 7
    assert frame_totals(frames_from_rolls(base + [7, 3]))[9] is None
    assert frame_totals(frames_from_rolls(base + [7, 3, 6]))[9] == 16
    assert frame_totals(frames_from_rolls(base + [10, 3]))[9] is None
    assert frame_totals(frames_from_rolls(base + [10, 3, 7]))[9] == 20


def test_score_frames_is_pure_and_idempotent() -> None:
    frames = frames_from_rolls([10, 7, 3, 9, 0, 10, 0, 8, 8, 2, 0, 6])
    snapshot = [f.copy() for f in frames]

    once = score_frames(frames)
    twice = score_frames(frames)
    again = score_frames(once)

    assert once == twice == again
    assert frames == snapshot
    assert all(f.score is None for f in frames)
    assert [f.score for f in once[:6]] == [20, 39, 48, 66, 74, 84]


def test_score_frames_rejects_impossible_frames() -> None:
    frames = [Frame() for _ in range(10)]
    frames[0].rolls = [6, 5]
    with pytest.raises(FrameStateError):
        score_frames(frames)

    frames[0].rolls = [10, 0]
    with pytest.raises(FrameStateError):
        score_frames(frames)

    frames[0].rolls = [11]
    with pytest.raises(FrameStateError):
        score_frames(frames)

    frames = frames_from_rolls([0] * 18)
    frames[9].rolls = [3, 4, 5]
    with pytest.raises(FrameStateError):
        score_frames(frames)

    frames[9].rolls = [10, 4, 7]
    with pytest.raises(FrameStateError):
        score_frames(frames)


@pytest.mark.parametrize(
    "frame_index, rolls, complete",
    [
        (0, [], False),
        (0, [3], False),
        (0, [10], True),
        (0, [3, 4], True),
        (0, [0, 10], True),
        (9, [10], False),
        (9, [10, 3], False),
        (9, [7, 3], False),
        (9, [0, 10], False),
        (9, [4, 3], True),
        (9, [7, 3, 5], True),
        (9, [10, 10, 10], True),
    ],
)
def test_is_frame_complete(frame_index, rolls, complete) -> None:
    assert is_frame_complete(Frame(rolls=rolls), frame_index) is complete


@pytest.mark.parametrize(
    "frame_index, rolls, standing",
    [
        (0, [], 10),
        (0, [6], 4),
        (0, [0], 10),
        (0, [10], 0),
        (0, [3, 4], 0),
        (9, [], 10),
        (9, [4], 6),
        (9, [10], 10),
        (9, [10, 10], 10),
        (9, [10, 3], 7),
        (9, [7, 3], 10),
        (9, [10, 3, 7], 0),
    ],
)
def test_pins_remaining(frame_index, rolls, standing) -> None:
    assert pins_remaining(Frame(rolls=rolls), frame_index) == standing


def test_pins_remaining_agrees_with_completion() -> None:
    # A frame that still takes rolls always has pins to aim at, and a done
    # frame outside the tenth has none.
    for idx in (0, 9):
        for rolls in ([], [0], [5], [10], [5, 5], [3, 4], [10, 10], [10, 2]):
            frame = Frame(rolls=rolls)
            if not is_frame_complete(frame, idx):
                assert pins_remaining(frame, idx) > 0
            elif idx < 9:
                assert pins_remaining(frame, idx) == 0


def test_current_frame_index() -> None:
    assert current_frame_index(frames_from_rolls([])) == 0
    assert current_frame_index(frames_from_rolls([10])) == 1
    assert current_frame_index(frames_from_rolls([3])) == 0
    assert current_frame_index(frames_from_rolls([3, 4, 10, 2])) == 2
    assert current_frame_index(frames_from_rolls([10] * 12)) == 9


@pytest.mark.parametrize(
    "pins, before, label",
    [
        (10, 10, "STRIKE!"),
        (4, 4, "SPARE!"),
        (0, 10, "GUTTER!"),
        (0, 3, "GUTTER!"),
        (7, 10, "7 PINS"),
        (2, 4, "2 PINS"),
    ],
)
def test_roll_label(pins, before, label) -> None:
    assert roll_label(pins, before) == label


@pytest.mark.parametrize(
    "frame_index, rolls, marks",
    [
        (0, [10], ["X"]),
        (0, [7, 3], ["7", "/"]),
        (0, [0, 10], ["-", "/"]),
        (0, [0, 5], ["-", "5"]),
        (3, [8, 1], ["8", "1"]),
        (9, [10, 10, 10], ["X", "X", "X"]),
        (9, [10, 3, 7], ["X", "3", "/"]),
        (9, [7, 3, 10], ["7", "/", "X"]),
        (9, [10, 0, 0], ["X", "-", "-"]),
        (9, [4, 5], ["4", "5"]),
    ],
)
def test_roll_marks(frame_index, rolls, marks) -> None:
    assert roll_marks(Frame(rolls=rolls), frame_index) == marks


def test_frame_line_shows_marks_and_scores() -> None:
    player = Player.fresh("ANN")
    player.frames = score_frames(frames_from_rolls([10, 7, 3, 4]))
    line = frame_line(player)
    assert line.startswith("ANN: X=20 | 7 /=34 | 4 | .")


def test_fresh_player_has_ten_empty_frames() -> None:
    player = Player.fresh("BOT", is_bot=True)
    assert player.is_bot
    assert len(player.frames) == 10
    assert all(f.rolls == [] and f.score is None for f in player.frames)
    # Frames are independent objects
    player.frames[0].rolls.append(3)
    assert player.frames[1].rolls == []
