"""Constant values for the creature animation."""

from __future__ import annotations

import math

DEFAULTS = {
    "WINDOW_WIDTH": 1280,
    "WINDOW_HEIGHT": 800,
    "FPS": 60,
}

# Fraction of the remaining distance the head covers each frame.
HEAD_SMOOTHING = 0.1

# Appendage base sits a quarter turn off the spine heading.
APPENDAGE_BASE_OFFSET = math.pi / 4
RETARGET_MIN_FRACTION = 0.5

# Tentacle idle wave: 0.005 rad per millisecond of wall-clock time.
WAVE_FREQUENCY = 5.0
WAVE_AMPLITUDE = 5.0

EPSILON = 0.001

KEYBOARD_STEP = 20

DEFAULT_SPINE_SEGMENTS = 30
DEFAULT_LINK_LENGTH = 12.0

PRESET_NAMES = ("snake", "lizard", "squid")
