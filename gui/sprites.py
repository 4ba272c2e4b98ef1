from __future__ import annotations

"""Simple drawable sprites for pins and the ball.

These are lightweight classes with explicit draw/update; no dependency on
pygame.sprite groups to keep things simple and efficient.
"""

from dataclasses import dataclass
from typing import Tuple
import pygame

from . import constants as C


Vec2 = Tuple[float, float]


@dataclass
class PinSprite:
    pos_px: Vec2
    radius_px: int
    standing: bool = True
    # 0 while upright, 1 once fully knocked over
    fall_t: float = 0.0

    def knock(self):
        # This starts the falling animation if the pin is up
        if self.standing:
            self.standing = False
            self.fall_t = 0.0

    def reset(self, standing: bool):
        # This puts the pin straight back on its spot (or clears it)
        self.standing = standing
        self.fall_t = 0.0 if standing else 1.0

    def update(self, dt: float):
        # This advances the fall animation
        if not self.standing and self.fall_t < 1.0:
            self.fall_t = min(1.0, self.fall_t + dt / C.PIN_FALL_S)

    def draw(self, surf: pygame.Surface):
        x = int(self.pos_px[0])
        y = int(self.pos_px[1])
        r = self.radius_px
        if self.standing:
            pygame.draw.circle(surf, (0, 0, 0), (x + 2, y + 2), r)
            pygame.draw.circle(surf, C.PIN_COLOR, (x, y), r)
            pygame.draw.circle(surf, C.PIN_STRIPE_COLOR, (x, y), max(1, r // 2), 2)
            return
        if self.fall_t >= 1.0:
            # Knocked pins leave a faint spot on the deck
            pygame.draw.circle(surf, C.LANE_EDGE_COLOR, (x, y), max(1, r // 2), 1)
            return
        # Falling: slide back and fade out
        alpha = int(255 * (1.0 - self.fall_t))
        dx = int(r * 3 * self.fall_t)
        dot = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
        pygame.draw.ellipse(dot, (*C.PIN_COLOR, alpha), dot.get_rect())
        surf.blit(dot, (x - r + dx, y - r))


@dataclass
class BallSprite:
    radius_px: int
    pos_px: Vec2
    visible: bool = False

    def move_to(self, pos_px: Vec2):
        # This updates the ball location for the current frame
        self.pos_px = pos_px

    def draw(self, surf: pygame.Surface):
        # This draws a soft shadow then the ball itself
        if not self.visible:
            return
        x = int(self.pos_px[0])
        y = int(self.pos_px[1])
        shadow_rect = pygame.Rect(0, 0, self.radius_px * 2, int(self.radius_px * 1.2))
        shadow_rect.center = (x + 2, y + 3)
        shadow_surf = pygame.Surface((shadow_rect.width, shadow_rect.height), pygame.SRCALPHA)
        pygame.draw.ellipse(shadow_surf, (0, 0, 0, 80), shadow_surf.get_rect())
        surf.blit(shadow_surf, shadow_rect.topleft)
        pygame.draw.circle(surf, C.BALL_COLOR, (x, y), self.radius_px)
        # Finger holes
        hole = max(1, self.radius_px // 5)
        pygame.draw.circle(surf, (20, 10, 40), (x - hole, y - hole), hole)
        pygame.draw.circle(surf, (20, 10, 40), (x + hole, y - hole), hole)
