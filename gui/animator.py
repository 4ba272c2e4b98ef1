from __future__ import annotations

"""Ball run animation planner and player.

Generates a deterministic 2D path for one roll from the foul line to the pin
deck. A roll of zero drifts into a gutter; anything else hooks toward the
pocket. The path is a list of straight segments whose total duration matches
the reveal delay, so the ball reaches the pins right as the roll is scored.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple
import random

from .lane import Lane, standing_pins
from . import constants as C


Vec2 = Tuple[float, float]


@dataclass
class Segment:
    kind: str  # 'roll', 'hook', 'gutter', 'deck'
    start_px: Vec2
    end_px: Vec2
    duration_s: float


def knocked_pins(pins: int, pins_before: int) -> List[int]:
    """Return which pin indices fall, front pins first."""
    standing = [i for i, up in enumerate(standing_pins(pins_before)) if up]
    return standing[:pins]


class BallAnimator:
    def __init__(self, lane: Lane, seed: int | None = 0):
        """Build a planner and player for the ball run of a single roll.

        The seed is used only to keep visuals deterministic for a game.
        """
        self.lane = lane
        self.base_seed = seed
        self.target_total_s = C.REVEAL_DELAY_S
        self._segments: List[Segment] = []
        self._elapsed = 0.0
        self._total = 0.0
        self.hit_deck = False

    def plan(self, roll_idx: int, pins: int) -> List[Segment]:
        """Plan the ball path for a roll knocking down `pins`."""
        rng = random.Random() if self.base_seed is None else random.Random(self.base_seed * 10007 + roll_idx * 7919)
        lane = self.lane
        cx = lane.center_x_m
        deck_y = C.HEAD_PIN_FROM_FOUL_M
        segs: List[Segment] = []

        # Release point drifts a little each roll
        start_x = cx + (rng.random() - 0.5) * C.LANE_WIDTH_M * 0.4
        start_px = lane.to_px(start_x, 0.0)

        if pins == 0:
            # Slide into the near gutter and ride it past the deck
            side = -C.GUTTER_WIDTH_M / 2.0 if start_x < cx else C.LANE_WIDTH_M + C.GUTTER_WIDTH_M / 2.0
            drop_y = deck_y * (0.35 + 0.3 * rng.random())
            drop_px = lane.to_px(side, drop_y)
            end_px = lane.to_px(side, C.LANE_LENGTH_M)
            segs.append(Segment("roll", start_px, drop_px, 0.6))
            segs.append(Segment("gutter", drop_px, end_px, 0.9))
        else:
            # Straight run down the lane, then a hook toward the pocket
            hook_y = deck_y * 0.65
            edge_x = C.LANE_WIDTH_M * (0.15 if rng.random() < 0.5 else 0.85)
            hook_px = lane.to_px(edge_x, hook_y)
            # Full racks get hit in the pocket; light hits clip the side
            aim = 0.08 if pins >= 8 else 0.08 + (8 - pins) * 0.04
            pocket_x = cx + aim if edge_x > cx else cx - aim
            pocket_px = lane.to_px(pocket_x, deck_y)
            end_px = lane.to_px(pocket_x, C.LANE_LENGTH_M)
            segs.append(Segment("roll", start_px, hook_px, 0.7))
            segs.append(Segment("hook", hook_px, pocket_px, 0.5))
            segs.append(Segment("deck", pocket_px, end_px, 0.3))

        # Normalize total duration to the reveal delay
        total = sum(s.duration_s for s in segs)
        if total > 0:
            scale = self.target_total_s / total
            for s in segs:
                s.duration_s *= scale
        self._segments = segs
        self._elapsed = 0.0
        self._total = sum(s.duration_s for s in segs)
        self.hit_deck = False
        return segs

    def clear(self):
        """Drop the current plan (used on restart)."""
        self._segments = []
        self._elapsed = 0.0
        self._total = 0.0
        self.hit_deck = False

    def update(self, dt: float) -> Optional[Tuple[Vec2, Segment]]:
        """Advance time and return the ball position and its segment.

        Returns None once the run is finished or nothing is planned.
        """
        if not self._segments or self._elapsed >= self._total:
            return None
        self._elapsed += dt

        t = self._elapsed
        acc = 0.0
        for seg in self._segments:
            if t <= acc + seg.duration_s or seg is self._segments[-1]:
                local_t = max(0.0, min(1.0, (t - acc) / max(0.0001, seg.duration_s)))
                x = seg.start_px[0] + (seg.end_px[0] - seg.start_px[0]) * local_t
                y = seg.start_px[1] + (seg.end_px[1] - seg.start_px[1]) * local_t
                if seg.kind == "deck":
                    self.hit_deck = True
                return (x, y), seg
            acc += seg.duration_s
        return None
