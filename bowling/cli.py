from __future__ import annotations

import argparse
import logging
import sys
import re
from typing import Callable

from model.adapter import BotRollSource, RollStream

from .engine import frame_line
from .session import GameConfig, GameSession


def prompt_with_retries(prompt: str, validate: Callable[[str], bool], transform: Callable[[str], object] = lambda x: x, max_attempts: int = 10):
    """Ask for input with validation and a small retry budget.

    Returns the transformed value or exits on repeated invalid entries.
    """
    attempts = 0
    while attempts < max_attempts:
        try:
            raw = input(prompt).strip()
        except EOFError:
            print("Error: no input provided.")
            sys.exit(1)
        if validate(raw):
            try:
                return transform(raw)
            except ValueError:
                print("Invalid input. Please try again.")
                attempts += 1
                continue
        else:
            print("Invalid input. Please try again.")
            attempts += 1
    print("Multiple invalid attempts. Exiting.")
    sys.exit(1)


def is_valid_name(s: str) -> bool:
    """Return True if a player name has only letters and spaces."""
    s = s.strip()
    return bool(s) and re.fullmatch(r"[A-Za-z ]+", s) is not None


def parse_pins(s: str, standing: int) -> int:
    """Turn typed input into a pins count; X means every standing pin."""
    s = s.strip()
    if s.upper() == "X":
        return standing
    if not s.isdigit():
        raise ValueError(s)
    v = int(s)
    if v > standing:
        raise ValueError(s)
    return v


def human_source(session: GameSession) -> int:
    """Ask the person at the keyboard for the next roll."""
    standing = session.pins_remaining()
    frame_no = session.current_frame_index() + 1
    prompt = f"Frame {frame_no}, {standing} pins standing. Pins down (0..{standing}, X for all): "
    return prompt_with_retries(
        prompt,
        lambda raw: bool(raw),
        lambda raw: parse_pins(raw, standing),
    )


def main(argv=None) -> int:
    """Run the text mode interface for the bowling game.

    You bowl against the bot, typing a pins count for each of your rolls.
    With --auto the bot bowls both sides.
    """
    parser = argparse.ArgumentParser(description="Bowling match scorekeeper (CLI)")
    parser.add_argument("--name", dest="player_name", type=str, help="Your name", default="YOU")
    parser.add_argument("--bot-name", dest="bot_name", type=str, help="Bot name", default="BOT")
    parser.add_argument("--seed", dest="seed", type=int, help="Random seed for reproducibility", default=None)
    parser.add_argument("--auto", dest="autoplay", action="store_true", help="Let the bot bowl for both players")
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    player_name = args.player_name.strip()
    bot_name = args.bot_name.strip()
    if not (is_valid_name(player_name) and is_valid_name(bot_name)):
        print("Invalid input. Please try again.")
        return 2

    cfg = GameConfig(
        player_name=player_name,
        bot_name=bot_name,
        seed=args.seed,
        autoplay=args.autoplay,
    )
    session = GameSession(cfg)

    bot = BotRollSource(cfg.seed)
    if cfg.autoplay:
        first = BotRollSource(None if cfg.seed is None else cfg.seed + 1)
    else:
        first = human_source

    print(f"Start of play - {cfg.player_name} vs {cfg.bot_name} - 10 frames")
    for result in RollStream(session, [first, bot]):
        print(f"{result.player_name}, frame {result.frame_index + 1}: {result.label}")
        if result.frame_complete:
            print(frame_line(session.players[result.player_index]))

    print()
    for player in session.players:
        print(frame_line(player))
    print(
        f"Final Score: {cfg.player_name} vs {cfg.bot_name} {session.total(0)} - {session.total(1)}"
    )
    print(session.winner_text())
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
