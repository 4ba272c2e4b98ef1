"""Two player ten-pin bowling scorekeeper.

`bowling.engine` holds the frame model and scoring rules, `bowling.session`
the turn controller that front ends drive one roll at a time.
"""

__all__ = ["engine", "errors", "session", "cli"]
