"""Anchoring and re-target policy shared by limbs and tentacles."""

from __future__ import annotations

import math
from typing import Tuple

from pygame.math import Vector2

from ..body.config import AppendageConfig
from ..body.segment import Chain, ChainKind, Segment
from ..config.constants import APPENDAGE_BASE_OFFSET, RETARGET_MIN_FRACTION
from ..utils.math_utils import distance, unit_from_angle


def build_appendage(config: AppendageConfig, spine: Chain, kind: ChainKind) -> Chain:
    """Seed an appendage beside its anchor, stretched sideways one link per segment."""

    anchor = spine[config.spawn_anchor_index]
    sign = config.spawn_direction.sign
    radii = config.radii
    base_x = anchor.x + sign * (anchor.radius + radii[0])
    base_y = anchor.y
    segments = [
        Segment(
            position=Vector2(base_x + sign * j * config.link_length, base_y),
            radius=radius,
            angle=math.pi / 2,
        )
        for j, radius in enumerate(radii)
    ]
    return Chain(
        kind,
        segments,
        spawn_anchor_index=config.spawn_anchor_index,
        spawn_direction=config.spawn_direction,
    )


def anchor_base(appendage: Chain, config: AppendageConfig, spine: Chain) -> Tuple[Vector2, float]:
    """Return the base position and heading for ``appendage`` this frame.

    The base points a quarter turn off the anchor's heading, toward the
    appendage's side, and sits inside the anchor's rim by the base radius.
    """

    anchor = spine[config.spawn_anchor_index]
    base_angle = anchor.angle + config.spawn_direction.sign * APPENDAGE_BASE_OFFSET
    inset = anchor.radius - appendage.head.radius
    base = anchor.position + Vector2(unit_from_angle(base_angle)) * inset
    return base, base_angle


def retarget_tip(
    tip: Segment,
    base: Vector2,
    base_angle: float,
    max_reach: float,
    min_fraction: float = RETARGET_MIN_FRACTION,
) -> bool:
    """Plant the tip again when it is stretched taut or folded too close.

    Inside the band ``[max_reach * min_fraction, max_reach]`` the tip holds
    where it is. Outside it, the tip jumps to full extension along
    ``base_angle``. Returns ``True`` when the tip moved.
    """

    reach = distance(base.x, base.y, tip.x, tip.y)
    if reach > max_reach or reach < max_reach * min_fraction:
        tip.position = base + Vector2(unit_from_angle(base_angle)) * max_reach
        return True
    return False


def straighten_interior(appendage: Chain, base: Vector2, link_length: float, *, clamp: bool = False) -> float:
    """Walk back from the tip laying interior segments on the base-to-tip line.

    With ``clamp`` set, a segment further than ``link_length`` from the one
    ahead of it is pulled back onto that distance. Returns the base-to-tip
    heading.
    """

    tip = appendage.tail
    heading = math.atan2(tip.y - base.y, tip.x - base.x)
    step = Vector2(unit_from_angle(heading)) * link_length
    for j in range(len(appendage) - 2, 0, -1):
        ahead = appendage[j + 1]
        segment = appendage[j]
        segment.position = ahead.position - step
        segment.angle = heading
        if clamp:
            offset = segment.position - ahead.position
            gap = offset.length()
            if gap > link_length:
                segment.position = ahead.position + offset * (link_length / gap)
    return heading


def pin_base(appendage: Chain, base: Vector2, base_angle: float) -> None:
    appendage.head.position = Vector2(base)
    appendage.head.angle = base_angle
