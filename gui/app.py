from __future__ import annotations

"""Pygame App for the bowling scorekeeper.

Run with: `python -m gui.app`.

Controls:
  - 0-9 or click a button: knock down that many pins
  - X: knock down every standing pin
  - R: restart the game
  - S: toggle speed (shows current multiplier)
  - Q/Esc: quit
"""

import argparse
import logging
import sys
from typing import List, Optional

try:
    import pygame
except Exception as e:  # pragma: no cover - runtime dependency hint
    print("Pygame is required for GUI. Install via: pip install pygame", file=sys.stderr)
    raise

from bowling.errors import InvalidRollError
from bowling.session import GameConfig, GameSession
from model.adapter import BotRollSource, RollTimeline

from . import constants as C
from .lane import Lane, standing_pins
from .sprites import PinSprite, BallSprite
from .animator import BallAnimator, knocked_pins
from .hud import HUD


logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line flags for the GUI app.

    This keeps values simple and safe for window size and performance.
    """
    p = argparse.ArgumentParser(description="Bowling GUI (Pygame)")
    p.add_argument("--name", default="YOU")
    p.add_argument("--bot-name", default="BOT")
    p.add_argument("--seed", type=int, default=None, help="Deterministic seed (optional)")
    p.add_argument("--auto", action="store_true", help="Let the bot bowl for both players")
    p.add_argument("--width", type=int, default=C.DEFAULT_WINDOW[0])
    p.add_argument("--height", type=int, default=C.DEFAULT_WINDOW[1])
    p.add_argument("--fps", type=int, default=C.TARGET_FPS)
    p.add_argument("--verbose", action="store_true", help="Show debug logging")
    return p.parse_args(argv)


def lane_area_for(size) -> pygame.Rect:
    """Return the part of the window the lane is drawn in."""
    w, h = size
    top = 60
    return pygame.Rect(0, top, w, int(h * C.LANE_AREA_FRACTION))


def run(argv=None) -> int:
    """Run the pygame bowling game.

    This sets up the window, lane, sprites, animator and HUD then loops until exit.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cfg = GameConfig(
        player_name=(args.name or "YOU").strip() or "YOU",
        bot_name=(args.bot_name or "BOT").strip() or "BOT",
        seed=args.seed,
        autoplay=args.auto,
    )
    session = GameSession(cfg)

    pygame.init()
    pygame.display.set_caption("Neon Bowl - Challenge the Machine")
    flags = pygame.RESIZABLE | pygame.DOUBLEBUF
    try:
        screen = pygame.display.set_mode((args.width, args.height), flags, vsync=1)
    except TypeError:
        screen = pygame.display.set_mode((args.width, args.height), flags)
    clock = pygame.time.Clock()

    lane = Lane(lane_area_for(screen.get_size()))
    hud = HUD(screen)
    animator = BallAnimator(lane, seed=args.seed)

    def make_pins() -> List[PinSprite]:
        """Create pin sprites on their spots, sized to the lane scale."""
        radius = max(4, int(lane.layout.scale * C.PIN_RADIUS_M))
        return [PinSprite(pos, radius) for pos in lane.pin_positions_px()]

    pins = make_pins()
    ball = BallSprite(max(5, int(lane.layout.scale * C.BALL_RADIUS_M)), lane.to_px(lane.center_x_m, 0.0))
    to_knock: List[int] = []
    throw_count = 0

    def on_throw(pins_down: int, pins_before: int):
        """Set the rack as it stood and plan the ball run."""
        nonlocal to_knock, throw_count
        for sprite, up in zip(pins, standing_pins(pins_before)):
            sprite.reset(up)
        to_knock = knocked_pins(pins_down, pins_before)
        throw_count += 1
        animator.plan(throw_count, pins_down)
        ball.visible = True

    timeline = RollTimeline(
        session,
        BotRollSource(args.seed),
        bot_delay_s=C.BOT_DELAY_S,
        reveal_delay_s=C.REVEAL_DELAY_S,
        clear_delay_s=C.CLEAR_DELAY_S,
        on_throw=on_throw,
    )

    speed_idx = C.SPEED_STEPS.index(1.0)
    hud.update(speed_mult=C.SPEED_STEPS[speed_idx])

    def human_roll(value: Optional[int]):
        """Send a human roll to the timeline, ignoring impossible counts."""
        if value is None:
            return
        try:
            timeline.request_roll(value)
        except InvalidRollError as e:
            logger.debug("%s", e)

    running = True
    while running:
        dt = clock.tick(args.fps) / 1000.0 * C.SPEED_STEPS[speed_idx]

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                try:
                    screen = pygame.display.set_mode((max(640, event.w), max(480, event.h)), flags, vsync=1)
                except TypeError:
                    screen = pygame.display.set_mode((max(640, event.w), max(480, event.h)), flags)
                hud.surf = screen
                lane.resize(lane_area_for(screen.get_size()))
                old = [p.standing for p in pins]
                pins = make_pins()
                for sprite, up in zip(pins, old):
                    sprite.reset(up)
                ball.radius_px = max(5, int(lane.layout.scale * C.BALL_RADIUS_M))
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    running = False
                elif event.key == pygame.K_r:
                    timeline.restart()
                    animator.clear()
                    ball.visible = False
                    to_knock = []
                elif event.key == pygame.K_s:
                    speed_idx = (speed_idx + 1) % len(C.SPEED_STEPS)
                    hud.update(speed_mult=C.SPEED_STEPS[speed_idx])
                elif event.key == pygame.K_x:
                    human_roll(session.pins_remaining())
                elif event.unicode and event.unicode.isdigit():
                    human_roll(int(event.unicode))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                human_roll(hud.button_at(event.pos))

        landed = timeline.tick(dt)
        if landed is not None:
            logger.debug("%s frame %d: %s", landed.player_name, landed.frame_index + 1, landed.label)

        # Ball run and pin action
        step = animator.update(dt)
        if step is None:
            ball.visible = False
        else:
            ball.move_to(step[0])
        if animator.hit_deck and to_knock:
            for idx in to_knock:
                pins[idx].knock()
            to_knock = []
        for sprite in pins:
            sprite.update(dt)

        # Re-rack once the result banner is gone
        if not session.is_rolling and not timeline.state.show_result and not to_knock:
            for sprite, up in zip(pins, standing_pins(session.pins_remaining())):
                if sprite.standing != up:
                    sprite.reset(up)

        hud.update(
            result_text=timeline.state.shown_label if timeline.state.show_result else "",
            bot_thinking=timeline.bot_thinking,
        )

        screen.fill(C.BG_COLOR)
        lane.draw(screen)
        for sprite in pins:
            sprite.draw(screen)
        ball.draw(screen)
        hud.draw(session, lane.area)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(run())
