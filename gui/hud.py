from __future__ import annotations

"""HUD for the game: turn banner, roll result, scoreboards and pin buttons."""

from dataclasses import dataclass
from typing import List, Optional, Tuple
import pygame

from bowling.engine import FRAME_COUNT, LAST_FRAME, Player, roll_marks
from bowling.session import GameSession

from . import constants as C


@dataclass
class HUDState:
    speed_mult: float = 1.0
    hint: str = "0-9 / click: roll | X: all pins | R: restart | S: speed | Esc: quit"
    result_text: str = ""
    bot_thinking: bool = False


class HUD:
    def __init__(self, surf: pygame.Surface):
        # This sets up fonts and a small state object for drawing
        self.surf = surf
        self.font_big = pygame.font.SysFont("arial", 30, bold=True)
        self.font = pygame.font.SysFont("arial", 20)
        self.font_small = pygame.font.SysFont("arial", 15)
        self.state = HUDState()
        self._buttons: List[Tuple[pygame.Rect, int]] = []

    def update(self, **kwargs):
        # This updates values that the HUD will present
        for k, v in kwargs.items():
            if hasattr(self.state, k):
                setattr(self.state, k, v)

    def button_at(self, pos: Tuple[int, int]) -> Optional[int]:
        """Return the pins value of the button under the mouse, if any."""
        for rect, pins in self._buttons:
            if rect.collidepoint(pos):
                return pins
        return None

    def draw(self, session: GameSession, lane_area: pygame.Rect):
        w, h = self.surf.get_size()
        player = session.current_player

        # Turn banner across the top
        if session.is_game_over:
            banner = session.winner_text()
        else:
            banner = f"{player.name}'S TURN    Frame {session.current_frame_index() + 1}"
        color = C.BOT_COLOR if player.is_bot else C.HUMAN_COLOR
        img = self.font_big.render(banner, True, C.HUD_TEXT_COLOR)
        box = pygame.Rect(0, 0, img.get_width() + 40, img.get_height() + 12)
        box.midtop = (w // 2, 8)
        bg = pygame.Surface(box.size, pygame.SRCALPHA)
        bg.fill((*color, 40))
        self.surf.blit(bg, box.topleft)
        pygame.draw.rect(self.surf, color, box, 2, border_radius=6)
        self.surf.blit(img, (box.left + 20, box.top + 6))

        # Roll result over the lane
        if self.state.result_text:
            label = self.font_big.render(self.state.result_text, True, C.STRIKE_COLOR)
            lx = lane_area.centerx - label.get_width() // 2
            ly = lane_area.bottom - label.get_height() - 4
            shade = pygame.Surface((label.get_width() + 16, label.get_height() + 6), pygame.SRCALPHA)
            shade.fill((0, 0, 0, 150))
            self.surf.blit(shade, (lx - 8, ly - 3))
            self.surf.blit(label, (lx, ly))

        y = lane_area.bottom + 8
        self._buttons = []
        if session.is_game_over:
            img = self.font.render("Game over - press R to play again", True, C.STRIKE_COLOR)
            self.surf.blit(img, ((w - img.get_width()) // 2, y))
            y += img.get_height() + 10
        elif player.is_bot:
            if self.state.bot_thinking:
                img = self.font.render("Bot is calculating...", True, C.BOT_COLOR)
                self.surf.blit(img, ((w - img.get_width()) // 2, y))
            y += self.font.get_height() + 10
        else:
            y = self._draw_buttons(session, y, disabled=session.is_rolling)

        # Scoreboards
        for idx, p in enumerate(session.players):
            active = idx == session.current_player_index and not session.is_game_over
            y = self._draw_scoreboard(p, session.current_frame_index(idx), active, y) + 10

        hint = f"{self.state.hint} | Speed: x{self.state.speed_mult:.2f}"
        img = self.font_small.render(hint, True, C.HUD_DIM_COLOR)
        self.surf.blit(img, (10, h - img.get_height() - 6))

    def _draw_buttons(self, session: GameSession, y: int, disabled: bool) -> int:
        # One button per possible pins count, like the on-lane controls
        standing = session.pins_remaining()
        size = 40
        gap = 8
        total = (standing + 1) * size + standing * gap
        x = (self.surf.get_width() - total) // 2
        for pins in range(standing + 1):
            rect = pygame.Rect(x, y, size, size)
            if pins == standing and standing == 10:
                fill = C.STRIKE_COLOR
            elif pins == standing and standing > 0:
                fill = C.SPARE_COLOR
            else:
                fill = C.CELL_COLOR
            if disabled:
                fill = tuple(c // 2 for c in fill)
            pygame.draw.rect(self.surf, fill, rect, border_radius=6)
            pygame.draw.rect(self.surf, C.CELL_BORDER_COLOR, rect, 1, border_radius=6)
            img = self.font.render(str(pins), True, C.HUD_TEXT_COLOR)
            self.surf.blit(img, img.get_rect(center=rect.center))
            if not disabled:
                self._buttons.append((rect, pins))
            x += size + gap
        return y + size + 12

    def _draw_scoreboard(self, player: Player, current: int, active: bool, y: int) -> int:
        w = self.surf.get_width()
        color = C.BOT_COLOR if player.is_bot else C.HUMAN_COLOR
        margin = 20
        name_w = 110
        cell_w = (w - 2 * margin - name_w) // FRAME_COUNT
        cell_h = 56

        border = color if active else C.CELL_BORDER_COLOR
        outer = pygame.Rect(margin, y, name_w + cell_w * FRAME_COUNT, cell_h)
        pygame.draw.rect(self.surf, C.GUTTER_COLOR, outer)
        pygame.draw.rect(self.surf, border, outer, 2)

        name = self.font.render(player.name, True, color)
        self.surf.blit(name, (margin + 8, y + 6))
        final = player.frames[LAST_FRAME].score
        total = self.font.render("--" if final is None else str(final), True, C.HUD_TEXT_COLOR)
        self.surf.blit(total, (margin + 8, y + cell_h - total.get_height() - 4))

        for i, frame in enumerate(player.frames):
            cell = pygame.Rect(margin + name_w + i * cell_w, y, cell_w, cell_h)
            if active and i == current:
                shade = pygame.Surface(cell.size, pygame.SRCALPHA)
                shade.fill((*color, 60))
                self.surf.blit(shade, cell.topleft)
            pygame.draw.rect(self.surf, C.CELL_BORDER_COLOR, cell, 1)
            num = self.font_small.render(str(i + 1), True, C.HUD_DIM_COLOR)
            self.surf.blit(num, (cell.left + 3, cell.top + 2))

            marks = roll_marks(frame, i)
            slots = 3 if i == LAST_FRAME else 2
            slot_w = min(18, cell_w // (slots + 1))
            for j in range(slots):
                sx = cell.right - (slots - j) * slot_w - 2
                if j < len(marks):
                    mark = marks[j]
                    mc = C.STRIKE_COLOR if mark == "X" else C.SPARE_COLOR if mark == "/" else C.HUD_TEXT_COLOR
                    img = self.font_small.render(mark, True, mc)
                    self.surf.blit(img, (sx + 3, cell.top + 2))
            if frame.score is not None:
                img = self.font.render(str(frame.score), True, C.HUD_TEXT_COLOR)
                self.surf.blit(img, img.get_rect(center=(cell.centerx, cell.bottom - 14)))
        return y + cell_h
