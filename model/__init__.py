"""Model adapter package for the bowling scorekeeper.

This package provides thin adapters over `bowling.session` so that front-ends
(the text CLI and the Pygame GUI) can feed rolls from people or the bot and
pace them for display without re-implementing the scoring rules.
"""

__all__ = ["adapter"]
