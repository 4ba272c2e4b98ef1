from __future__ import annotations

"""Turn controller for a two player bowling game.

`GameSession` owns both players and decides whose turn it is. A roll goes
through two steps so a front end can show it before it counts:
`begin_roll` parks the pins value (phase "rolling") and `resolve_roll`
applies it, rescores, and either keeps the player on the frame, hands the
turn over, or ends the game. `submit_roll` does both at once.
"""

from dataclasses import dataclass
from typing import List, Literal, Optional
import logging

from .engine import (
    LAST_FRAME,
    Player,
    current_frame_index,
    is_frame_complete,
    pins_remaining,
    roll_label,
    score_frames,
)
from .errors import GameNotOverError, InvalidRollError


logger = logging.getLogger(__name__)

Phase = Literal["awaiting_roll", "rolling", "game_over"]


@dataclass
class GameConfig:
    player_name: str = "YOU"
    bot_name: str = "BOT"
    seed: Optional[int] = None
    # Both seats are bots, used for demos and probes.
    autoplay: bool = False


@dataclass
class RollResult:
    """What happened when a roll was applied."""

    player_index: int
    player_name: str
    frame_index: int
    pins: int
    pins_before: int
    label: str
    frame_complete: bool
    turn_switched: bool
    game_over: bool


class GameSession:
    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.players: List[Player] = []
        self.current_player_index = 0
        self.game_over = False
        self._pending: Optional[int] = None
        self.restart()

    def restart(self) -> None:
        """Throw away the current game, including a roll in flight."""
        cfg = self.config
        self.players = [
            Player.fresh(cfg.player_name, is_bot=cfg.autoplay),
            Player.fresh(cfg.bot_name, is_bot=True),
        ]
        self.current_player_index = 0
        self.game_over = False
        self._pending = None
        logger.debug("New game: %s vs %s", cfg.player_name, cfg.bot_name)

    # --- Queries ---
    @property
    def phase(self) -> Phase:
        if self.game_over:
            return "game_over"
        if self._pending is not None:
            return "rolling"
        return "awaiting_roll"

    @property
    def is_game_over(self) -> bool:
        return self.game_over

    @property
    def is_rolling(self) -> bool:
        return self._pending is not None

    @property
    def pending_pins(self) -> Optional[int]:
        return self._pending

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    def current_frame_index(self, player_index: Optional[int] = None) -> int:
        """Return the frame the player is on (the active player by default)."""
        player = self._player(player_index)
        return current_frame_index(player.frames)

    def pins_remaining(self, player_index: Optional[int] = None) -> int:
        """Return the pins standing for the player's next roll."""
        player = self._player(player_index)
        idx = current_frame_index(player.frames)
        return pins_remaining(player.frames[idx], idx)

    def total(self, player_index: int) -> int:
        """Return the latest known cumulative score for a player."""
        scores = [f.score for f in self.players[player_index].frames if f.score is not None]
        return scores[-1] if scores else 0

    def winner(self) -> Optional[Player]:
        """Return the player with the higher final score, or None on a tie."""
        if not self.game_over:
            raise GameNotOverError("The game is still in progress.")
        a, b = self.total(0), self.total(1)
        if a == b:
            return None
        return self.players[0] if a > b else self.players[1]

    def winner_text(self) -> str:
        """Return the end of game banner."""
        player = self.winner()
        if player is None:
            return "IT'S A TIE!"
        # "YOU WIN!" reads right for the human seat
        verb = "WIN!" if player.name.upper() == "YOU" else "WINS!"
        return f"{player.name.upper()} {verb}"

    def _player(self, player_index: Optional[int]) -> Player:
        if player_index is None:
            return self.current_player
        return self.players[player_index]

    # --- Transitions ---
    def begin_roll(self, pins: int, by_bot: bool = False) -> bool:
        """Hold a roll for display before it is applied.

        Returns False and changes nothing when the game is over, another roll
        is in flight, or the input comes from the wrong kind of player.
        Raises InvalidRollError for a pins value that cannot be bowled.
        """
        if self.game_over:
            logger.debug("Ignoring roll %r: game is over", pins)
            return False
        if self._pending is not None:
            logger.debug("Ignoring roll %r: a roll is already in flight", pins)
            return False
        if by_bot != self.current_player.is_bot:
            logger.debug(
                "Ignoring roll %r: it is %s's turn", pins, self.current_player.name
            )
            return False

        standing = self.pins_remaining()
        if isinstance(pins, bool) or not isinstance(pins, int) or not 0 <= pins <= standing:
            raise InvalidRollError(pins, standing)

        self._pending = pins
        return True

    def resolve_roll(self) -> Optional[RollResult]:
        """Apply the roll held by begin_roll and advance the game."""
        if self._pending is None or self.game_over:
            return None
        pins = self._pending
        self._pending = None

        idx = self.current_player_index
        player = self.players[idx]
        frame_index = current_frame_index(player.frames)
        pins_before = pins_remaining(player.frames[frame_index], frame_index)

        player.frames[frame_index].rolls.append(pins)
        player.frames = score_frames(player.frames)

        complete = is_frame_complete(player.frames[frame_index], frame_index)
        switched = False
        if complete:
            logger.info(
                "%s finished frame %d (score %s)",
                player.name,
                frame_index + 1,
                player.frames[frame_index].score,
            )
            if all(is_frame_complete(p.frames[LAST_FRAME], LAST_FRAME) for p in self.players):
                self.game_over = True
                logger.info("Game over: %d - %d", self.total(0), self.total(1))
            else:
                self.current_player_index = (idx + 1) % len(self.players)
                switched = True

        return RollResult(
            player_index=idx,
            player_name=player.name,
            frame_index=frame_index,
            pins=pins,
            pins_before=pins_before,
            label=roll_label(pins, pins_before),
            frame_complete=complete,
            turn_switched=switched,
            game_over=self.game_over,
        )

    def submit_roll(self, pins: int, by_bot: bool = False) -> Optional[RollResult]:
        """Apply a roll right away. Returns None if the roll was ignored."""
        if not self.begin_roll(pins, by_bot=by_bot):
            return None
        return self.resolve_roll()
