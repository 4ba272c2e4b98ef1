"""Pygame GUI for the bowling scorekeeper.

Contains the lane geometry, pin and ball sprites, an animator for the ball
run, a HUD for scoreboards and pin buttons, and the application entry point
(`python -m gui.app`).
"""

__all__ = [
    "constants",
    "lane",
    "sprites",
    "animator",
    "hud",
    "app",
]
