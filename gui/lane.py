from __future__ import annotations

"""Lane geometry and drawing utilities.

The Lane computes a scaled rectangle for the lane, gutters and pin deck. The
logical lane is in meters with x across the lane (0 at the left edge of the
playing surface) and y along it (0 at the foul line). Drawing methods convert
to pixels with a consistent scale preserving aspect ratio; the lane runs from
left (foul line) to right (pins).
"""

from dataclasses import dataclass
import math
from typing import List, Tuple

import pygame

from bowling.engine import PIN_COUNT

from . import constants as C


Vec2 = Tuple[float, float]

# Back row first so the last pins standing sit at the back of the deck.
FILL_ORDER = [9, 8, 7, 6, 5, 4, 3, 2, 1, 0]


@dataclass
class LaneLayout:
    origin_px: Vec2  # top-left of the playing surface in window pixels
    scale: float  # pixels per meter
    size_px: Vec2  # width, height in pixels for the playing surface


def standing_pins(count: int) -> List[bool]:
    """Return which of the ten pins to draw standing for a pin count."""
    standing = [False] * PIN_COUNT
    for idx in FILL_ORDER[:max(0, min(PIN_COUNT, count))]:
        standing[idx] = True
    return standing


def pin_positions_m() -> List[Vec2]:
    """Return the ten pin spots (x across, y along) in standard numbering.

    Head pin is 1, then 2-3, 4-5-6 and 7-8-9-10, rows one triangle height apart.
    """
    s = C.PIN_SPACING_M
    g = s * math.sqrt(3) / 2.0
    cx = C.LANE_WIDTH_M / 2.0
    y0 = C.HEAD_PIN_FROM_FOUL_M
    rows = [[0.0], [-0.5, 0.5], [-1.0, 0.0, 1.0], [-1.5, -0.5, 0.5, 1.5]]
    spots: List[Vec2] = []
    for r, cols in enumerate(rows):
        for col in cols:
            spots.append((cx + col * s, y0 + r * g))
    return spots


class Lane:
    def __init__(self, area: pygame.Rect):
        # This sets up a lane model inside the given window area
        self.area = area
        self.layout: LaneLayout = self._compute_layout(area)

    def resize(self, area: pygame.Rect):
        # This recalculates the layout when the window changes
        self.area = area
        self.layout = self._compute_layout(area)

    def _compute_layout(self, area: pygame.Rect) -> LaneLayout:
        # Lane length spans screen X, lane width (plus gutters) spans screen Y
        pad = C.WINDOW_PADDING_PX
        avail_w = max(100, area.width - 2 * pad)
        avail_h = max(60, area.height - 2 * pad)
        total_w_m = C.LANE_WIDTH_M + 2 * C.GUTTER_WIDTH_M
        scale = min(avail_w / C.LANE_LENGTH_M, avail_h / total_w_m)
        size_px = (C.LANE_LENGTH_M * scale, C.LANE_WIDTH_M * scale)
        origin_px = (
            area.left + (area.width - size_px[0]) / 2.0,
            area.top + (area.height - size_px[1]) / 2.0,
        )
        return LaneLayout(origin_px=origin_px, scale=scale, size_px=size_px)

    # --- Coordinate transforms ---
    def to_px(self, x_m: float, y_m: float) -> Vec2:
        ox, oy = self.layout.origin_px
        s = self.layout.scale
        return (ox + y_m * s, oy + x_m * s)

    def from_px(self, x_px: float, y_px: float) -> Vec2:
        ox, oy = self.layout.origin_px
        s = self.layout.scale
        return ((y_px - oy) / s, (x_px - ox) / s)

    @property
    def center_x_m(self) -> float:
        return C.LANE_WIDTH_M / 2.0

    def pin_positions_px(self) -> List[Vec2]:
        return [self.to_px(x, y) for x, y in pin_positions_m()]

    def gutter_rects_px(self) -> Tuple[pygame.Rect, pygame.Rect]:
        s = self.layout.scale
        ox, oy = self.layout.origin_px
        w, h = self.layout.size_px
        g = C.GUTTER_WIDTH_M * s
        top = pygame.Rect(int(ox), int(oy - g), int(w), int(g))
        bottom = pygame.Rect(int(ox), int(oy + h), int(w), int(g))
        return top, bottom

    # --- Drawing ---
    def draw(self, surf: pygame.Surface):
        ox, oy = self.layout.origin_px
        w_px, h_px = self.layout.size_px
        for rect in self.gutter_rects_px():
            pygame.draw.rect(surf, C.GUTTER_COLOR, rect)
        pygame.draw.rect(surf, C.LANE_COLOR, pygame.Rect(ox, oy, w_px, h_px))

        # Board lines along the lane
        boards = 8
        for i in range(1, boards):
            y = oy + h_px * i / boards
            pygame.draw.line(surf, C.LANE_EDGE_COLOR, (ox, y), (ox + w_px, y), 1)

        # Foul line
        pygame.draw.line(surf, C.HUD_TEXT_COLOR, self.to_px(0.0, 0.0), self.to_px(C.LANE_WIDTH_M, 0.0), 3)

        # Target arrows
        s = self.layout.scale
        size = max(4, int(s * 0.06))
        for i in range(5):
            x_m = C.LANE_WIDTH_M * (i + 1) / 6.0
            y_m = C.ARROWS_FROM_FOUL_M + abs(i - 2) * 0.15
            tip = self.to_px(x_m, y_m + 0.12)
            back_l = self.to_px(x_m - 0.04, y_m)
            back_r = self.to_px(x_m + 0.04, y_m)
            pygame.draw.polygon(surf, C.ARROW_COLOR, [tip, back_l, back_r])
            pygame.draw.circle(surf, C.ARROW_COLOR, (int(tip[0]), int(tip[1])), size // 3)

        # Pin deck outline
        deck_top = self.to_px(0.0, C.HEAD_PIN_FROM_FOUL_M - 0.2)
        pygame.draw.line(surf, C.LANE_EDGE_COLOR, deck_top, (deck_top[0], oy + h_px), 2)
