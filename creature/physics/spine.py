"""Follow-the-leader spine solver."""

from __future__ import annotations

import math

from pygame.math import Vector2

from ..body.config import SpineConfig
from ..body.segment import Chain, ChainKind, Segment
from ..config.constants import HEAD_SMOOTHING
from ..utils.math_utils import constrain_angle, unit_from_angle


def build_spine(config: SpineConfig, origin_x: float, origin_y: float) -> Chain:
    """Lay the spine out straight down from the head at ``(origin_x, origin_y)``."""

    segments = [
        Segment(
            position=Vector2(origin_x, origin_y + i * config.link_length),
            radius=radius,
            angle=math.pi / 2,
        )
        for i, radius in enumerate(config.radii)
    ]
    return Chain(ChainKind.SPINE, segments)


def update_spine(spine: Chain, config: SpineConfig, target_x: float, target_y: float) -> None:
    """Ease the head toward the target and drag the body after it.

    The head covers :data:`HEAD_SMOOTHING` of the remaining distance and faces
    the eased target as seen from where it stood. Every trailing segment then
    sits exactly ``link_length`` behind its predecessor, bent no more than
    ``angle_constraint`` away from the predecessor's heading.
    """

    head = spine.head
    eased = head.position + (Vector2(target_x, target_y) - head.position) * HEAD_SMOOTHING
    head.angle = math.atan2(eased.y - head.y, eased.x - head.x)
    head.position = eased

    link = config.link_length
    for i in range(1, len(spine)):
        prev_segment = spine[i - 1]
        segment = spine[i]
        bearing = math.atan2(prev_segment.y - segment.y, prev_segment.x - segment.x)
        segment.angle = constrain_angle(bearing, prev_segment.angle, config.angle_constraint)
        segment.position = prev_segment.position - Vector2(unit_from_angle(segment.angle)) * link
