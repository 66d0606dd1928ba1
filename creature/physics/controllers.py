"""Idle motion drivers layered on top of the positional solve."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pygame.math import Vector2

from ..config.constants import WAVE_AMPLITUDE, WAVE_FREQUENCY
from ..utils.math_utils import unit_from_angle


@dataclass(frozen=True)
class WaveController:
    """Travelling sine wave that ripples sideways along a tentacle.

    The phase comes from wall-clock seconds rather than a frame counter, so
    the ripple speed does not depend on the frame rate.
    """

    amplitude: float = WAVE_AMPLITUDE
    frequency: float = WAVE_FREQUENCY

    def phase(self, time_seconds: float, index: int, segment_count: int) -> float:
        return time_seconds * self.frequency + index * 5 * math.pi / segment_count

    def offset(self, time_seconds: float, index: int, segment_count: int) -> float:
        """Signed sideways displacement of segment ``index``."""

        return math.sin(self.phase(time_seconds, index, segment_count)) * self.amplitude

    def displacement(self, time_seconds: float, index: int, segment_count: int, heading: float) -> Vector2:
        """Offset vector perpendicular to ``heading``."""

        offset = self.offset(time_seconds, index, segment_count)
        normal = heading + math.pi / 2
        return Vector2(unit_from_angle(normal)) * offset
