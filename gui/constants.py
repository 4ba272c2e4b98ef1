from __future__ import annotations

"""Constants for GUI rendering and animation.

All distances are in meters (lane logical space) unless noted. The lane is
drawn shortened so the pin deck stays readable; rendering code scales these
to pixels at runtime to preserve aspect ratio regardless of the window size.
"""

# Lane geometry (display length, not regulation 18.29 m)
LANE_LENGTH_M = 6.0
LANE_WIDTH_M = 1.05
GUTTER_WIDTH_M = 0.24
PIN_SPACING_M = 0.305
HEAD_PIN_FROM_FOUL_M = 4.9
PIN_RADIUS_M = 0.06
BALL_RADIUS_M = 0.11
ARROWS_FROM_FOUL_M = 1.6

# Colors (R,G,B)
BG_COLOR = (10, 10, 18)
LANE_COLOR = (160, 82, 45)
LANE_EDGE_COLOR = (139, 69, 19)
GUTTER_COLOR = (26, 10, 46)
ARROW_COLOR = (255, 149, 0)
PIN_COLOR = (245, 245, 245)
PIN_STRIPE_COLOR = (255, 45, 149)
BALL_COLOR = (123, 45, 255)
HUMAN_COLOR = (0, 245, 255)  # cyan for the human seat
BOT_COLOR = (255, 45, 149)   # pink for the bot seat
STRIKE_COLOR = (255, 149, 0)
SPARE_COLOR = (0, 245, 255)
HUD_TEXT_COLOR = (245, 245, 245)
HUD_DIM_COLOR = (140, 140, 160)
CELL_COLOR = (45, 31, 74)
CELL_BORDER_COLOR = (61, 47, 90)

# Rendering
DEFAULT_WINDOW = (1024, 720)
TARGET_FPS = 60
# Fraction of the window height given to the lane (top); the rest is HUD
LANE_AREA_FRACTION = 0.38
WINDOW_PADDING_PX = 40

# Presentation timing (seconds at 1.0x)
BOT_DELAY_S = 1.0
REVEAL_DELAY_S = 1.5
CLEAR_DELAY_S = 0.8
PIN_FALL_S = 0.3

# GUI speed multipliers toggled by 'S'
SPEED_STEPS = [0.5, 1.0, 1.5, 2.0, 3.0]
