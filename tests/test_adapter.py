from typing import List, Optional

import pytest

from bowling.session import GameConfig, GameSession
from model.adapter import BotRollSource, RollStream, RollTimeline, ScriptedRollSource


class StandingStub:
    """Stands in for a session when only pins_remaining is needed."""

    def __init__(self, standing: int):
        self.standing = standing

    def pins_remaining(self) -> int:
        return self.standing


def reference_totals(rolls: List[int]) -> List[Optional[int]]:
    """Score a flat roll list by walking roll indices."""
    totals: List[Optional[int]] = [None] * 10
    total = 0
    i = 0
    for frame in range(10):
        if i >= len(rolls):
            break
        if rolls[i] == 10:
            if frame == 9 or i + 2 >= len(rolls):
                if i + 2 < len(rolls):
                    total += 10 + rolls[i + 1] + rolls[i + 2]
                    totals[frame] = total
                break
            total += 10 + rolls[i + 1] + rolls[i + 2]
            i += 1
        elif i + 1 < len(rolls) and rolls[i] + rolls[i + 1] == 10:
            if i + 2 >= len(rolls):
                break
            total += 10 + rolls[i + 2]
            i += 2
        elif i + 1 < len(rolls):
            total += rolls[i] + rolls[i + 1]
            i += 2
        else:
            break
        totals[frame] = total
    return totals


@pytest.mark.parametrize("standing", [0, 1, 4, 7, 10])
def test_bot_never_exceeds_standing_pins(standing):
    bot = BotRollSource(seed=11)
    stub = StandingStub(standing)
    for _ in range(500):
        assert 0 <= bot(stub) <= standing


def test_bot_is_reproducible_with_a_seed():
    stub = StandingStub(10)
    a = BotRollSource(seed=5)
    b = BotRollSource(seed=5)
    assert [a(stub) for _ in range(50)] == [b(stub) for _ in range(50)]


def test_scripted_source_runs_out():
    source = ScriptedRollSource([3, 4])
    stub = StandingStub(10)
    assert source(stub) == 3
    assert source(stub) == 4
    with pytest.raises(IndexError):
        source(stub)


@pytest.mark.parametrize("seed", range(25))
def test_bot_games_score_like_a_reference_scorer(seed):
    session = GameSession(GameConfig(autoplay=True))
    sources = [BotRollSource(seed), BotRollSource(seed + 1000)]
    results = list(RollStream(session, sources))

    assert session.is_game_over
    assert results[-1].game_over
    for idx, player in enumerate(session.players):
        rolls = [r.pins for r in results if r.player_index == idx]
        assert all(f.score is not None for f in player.frames)
        assert [f.score for f in player.frames] == reference_totals(rolls)


def test_stream_with_scripted_players():
    session = GameSession()
    human = ScriptedRollSource([10] * 12)
    bot = ScriptedRollSource([5] * 21)
    labels = [r.label for r in RollStream(session, [human, bot])]
    assert labels.count("STRIKE!") == 12
    assert labels.count("SPARE!") == 10
    assert session.total(0) == 300
    assert session.total(1) == 150


class TestTimeline:
    def make(self, bot_rolls=(3, 4)):
        session = GameSession()
        thrown = []
        timeline = RollTimeline(
            session,
            ScriptedRollSource(list(bot_rolls)),
            on_throw=lambda pins, before: thrown.append((pins, before)),
        )
        return session, timeline, thrown

    def test_roll_counts_after_reveal_delay(self):
        session, timeline, thrown = self.make()
        assert timeline.request_roll(7)
        assert thrown == [(7, 10)]
        assert timeline.state.shown_label == "7 PINS"
        assert session.is_rolling

        assert timeline.tick(1.0) is None
        assert session.players[0].frames[0].rolls == []
        landed = timeline.tick(0.6)
        assert landed is not None and landed.pins == 7
        assert session.players[0].frames[0].rolls == [7]
        assert not session.is_rolling

        # Banner stays up a little longer, then clears
        assert timeline.state.show_result
        timeline.tick(0.5)
        assert timeline.state.show_result
        timeline.tick(0.4)
        assert not timeline.state.show_result
        assert timeline.state.shown_label == ""

    def test_second_request_ignored_while_rolling(self):
        session, timeline, thrown = self.make()
        assert timeline.request_roll(5)
        assert not timeline.request_roll(2)
        assert thrown == [(5, 10)]
        timeline.tick(1.5)
        assert session.players[0].frames[0].rolls == [5]

    def test_bot_rolls_on_its_own_after_delay(self):
        session, timeline, thrown = self.make(bot_rolls=[3, 4])
        timeline.request_roll(10)
        timeline.tick(1.5)
        assert session.current_player_index == 1
        assert timeline.bot_thinking

        # Human input is ignored on the bot's turn
        assert not timeline.request_roll(5)

        timeline.tick(0.5)
        assert not session.is_rolling
        timeline.tick(0.5)
        assert session.is_rolling
        assert thrown[-1] == (3, 10)

        timeline.tick(1.5)
        assert session.players[1].frames[0].rolls == [3]
        # Bot keeps going on the same frame
        for _ in range(4):
            timeline.tick(0.5)
        timeline.tick(1.5)
        assert session.players[1].frames[0].rolls == [3, 4]
        assert session.current_player_index == 0
        assert not timeline.bot_thinking
        assert [r.pins for r in timeline.results] == [10, 3, 4]

    def test_restart_drops_pending_timers(self):
        session, timeline, thrown = self.make()
        timeline.request_roll(5)
        timeline.restart()
        assert timeline.tick(2.0) is None
        assert not session.is_rolling
        assert session.players[0].frames[0].rolls == []
        assert not timeline.state.show_result
        assert timeline.results == []
