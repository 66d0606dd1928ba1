"""Colours used when drawing creatures."""

from __future__ import annotations

from typing import Tuple

Color = Tuple[int, int, int]

BODY_FILL: Color = (172, 57, 49)
OUTLINE: Color = (0, 0, 0)
OUTLINE_WIDTH = 4
EYE_COLOR: Color = (0, 0, 0)

DEBUG_SPINE_COLOR: Color = (0, 0, 0)
DEBUG_SEGMENT_COLORS: Tuple[Color, ...] = (
    (255, 0, 0),
    (0, 0, 255),
    (0, 128, 0),
    (255, 255, 0),
    (128, 0, 128),
    (255, 165, 0),
    (255, 192, 203),
    (165, 42, 42),
    (0, 0, 0),
    (255, 255, 255),
)


def debug_color(index: int) -> Color:
    """Colour for the ``index``-th appendage segment, cycling every ten."""

    return DEBUG_SEGMENT_COLORS[index % len(DEBUG_SEGMENT_COLORS)]


__all__ = [
    "BODY_FILL",
    "Color",
    "DEBUG_SEGMENT_COLORS",
    "DEBUG_SPINE_COLOR",
    "EYE_COLOR",
    "OUTLINE",
    "OUTLINE_WIDTH",
    "debug_color",
]
