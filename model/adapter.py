from __future__ import annotations

"""Thin adapters between `bowling.session` and the front ends.

Roll sources answer "how many pins does this player knock down next". The
session does not care whether a person or the bot picked the number; the
`is_bot` flag on each player only decides which source a front end asks.

`RollStream` plays a whole game from sources and yields one `RollResult`
per roll. `RollTimeline` adds the presentation delays the GUI needs (bot
thinking time, the reveal after the ball is thrown, clearing the banner)
driven by `tick(dt)` rather than real timers, so it can be stepped in tests.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence
import logging
import math
import random

from bowling.engine import roll_label
from bowling.session import GameSession, RollResult


logger = logging.getLogger(__name__)

RollSource = Callable[[GameSession], int]


class BotRollSource:
    """Pick a pins value the way the house bot bowls.

    About three rolls in ten clear the rack, four in ten take most of it and
    the rest are anywhere from a gutter ball up.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def __call__(self, session: GameSession) -> int:
        standing = session.pins_remaining()
        skill = self.rng.random()
        if skill > 0.7:
            return standing
        if skill > 0.3:
            return int(math.floor(standing * (0.6 + self.rng.random() * 0.4)))
        return self.rng.randint(0, standing)


class ScriptedRollSource:
    """Replay a fixed list of rolls in order."""

    def __init__(self, rolls: Sequence[int]):
        self.rolls = list(rolls)
        self.position = 0

    def __call__(self, session: GameSession) -> int:
        if self.position >= len(self.rolls):
            raise IndexError("Scripted rolls exhausted")
        pins = self.rolls[self.position]
        self.position += 1
        return pins


def RollStream(session: GameSession, sources: Sequence[RollSource]) -> Iterator[RollResult]:
    """Yield the result of every roll until the game ends.

    `sources` holds one roll source per player seat.
    """
    while not session.is_game_over:
        idx = session.current_player_index
        player = session.current_player
        pins = sources[idx](session)
        result = session.submit_roll(pins, by_bot=player.is_bot)
        if result is None:
            # Only happens if something else is driving the same session
            logger.warning("Roll from %s was not accepted; stopping stream", player.name)
            break
        yield result


@dataclass
class TimelineState:
    # Pins shown on screen while the ball is travelling and just after
    shown_pins: Optional[int] = None
    shown_label: str = ""
    show_result: bool = False
    last_result: Optional[RollResult] = None


class RollTimeline:
    def __init__(
        self,
        session: GameSession,
        bot_source: RollSource,
        bot_delay_s: float = 1.0,
        reveal_delay_s: float = 1.5,
        clear_delay_s: float = 0.8,
        on_throw: Optional[Callable[[int, int], None]] = None,
    ):
        """Schedule rolls against a session using elapsed time.

        Delays are in seconds of simulated time passed to `tick`. `on_throw`
        is called with (pins, pins_before) whenever a roll is accepted.
        """
        self.session = session
        self.bot_source = bot_source
        self.bot_delay_s = bot_delay_s
        self.reveal_delay_s = reveal_delay_s
        self.clear_delay_s = clear_delay_s
        self.on_throw = on_throw
        self.state = TimelineState()
        self.results: List[RollResult] = []
        self._bot_wait: Optional[float] = None
        self._reveal_wait: Optional[float] = None
        self._clear_wait: Optional[float] = None

    @property
    def busy(self) -> bool:
        return self.session.is_rolling

    @property
    def bot_thinking(self) -> bool:
        return self._bot_wait is not None

    def request_roll(self, pins: int, by_bot: bool = False) -> bool:
        """Throw the ball; the result counts after the reveal delay."""
        pins_before = self.session.pins_remaining()
        if not self.session.begin_roll(pins, by_bot=by_bot):
            return False
        self.state.shown_pins = pins
        self.state.shown_label = roll_label(pins, pins_before)
        self.state.show_result = True
        self._reveal_wait = self.reveal_delay_s
        self._clear_wait = None
        if self.on_throw is not None:
            self.on_throw(pins, pins_before)
        return True

    def restart(self) -> None:
        """Restart the game and drop every pending timer."""
        self.session.restart()
        self.state = TimelineState()
        self.results = []
        self._bot_wait = None
        self._reveal_wait = None
        self._clear_wait = None

    def tick(self, dt: float) -> Optional[RollResult]:
        """Advance time by dt seconds. Returns a roll result when one lands."""
        landed: Optional[RollResult] = None

        if self._reveal_wait is not None:
            self._reveal_wait -= dt
            if self._reveal_wait <= 0:
                self._reveal_wait = None
                landed = self.session.resolve_roll()
                if landed is not None:
                    self.results.append(landed)
                    self.state.last_result = landed
                self._clear_wait = self.clear_delay_s
        elif self._clear_wait is not None:
            self._clear_wait -= dt
            if self._clear_wait <= 0:
                self._clear_wait = None
                self.state.show_result = False
                self.state.shown_pins = None
                self.state.shown_label = ""

        session = self.session
        if session.is_game_over or session.is_rolling or not session.current_player.is_bot:
            self._bot_wait = None
        elif self._bot_wait is None:
            self._bot_wait = self.bot_delay_s
        else:
            self._bot_wait -= dt
            if self._bot_wait <= 0:
                self._bot_wait = None
                self.request_roll(self.bot_source(session), by_bot=True)

        return landed


__all__ = [
    "RollSource",
    "BotRollSource",
    "ScriptedRollSource",
    "RollStream",
    "RollTimeline",
    "TimelineState",
]
