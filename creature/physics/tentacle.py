"""Tentacle solver: limb-style anchoring plus a rippling idle wave."""

from __future__ import annotations

import logging
from typing import Sequence

from pygame.math import Vector2

from ..body.config import AppendageConfig
from ..body.segment import Chain, Segment
from ..utils.math_utils import safe_length, unit_from_angle
from .appendage import anchor_base, pin_base, retarget_tip, straighten_interior
from .controllers import WaveController

logger = logging.getLogger("creature.physics")

DEFAULT_WAVE = WaveController()


def update_tentacle(
    tentacle: Chain,
    config: AppendageConfig,
    spine: Chain,
    time_seconds: float,
    wave: WaveController = DEFAULT_WAVE,
) -> None:
    """Anchor, re-target and straighten one tentacle, then ripple it.

    The wave moves interior segments ``1..n-2`` only; the tip stays exactly
    where re-targeting left it and the base stays pinned.
    """

    base, base_angle = anchor_base(tentacle, config, spine)
    retarget_tip(tentacle.tail, base, base_angle, config.max_reach)
    heading = straighten_interior(tentacle, base, config.link_length, clamp=True)

    # The back-walk leaves the first link off the base heading; re-seat it
    # from where the base stood before this frame's pin.
    if len(tentacle) > 1:
        first = tentacle[1]
        first.position = tentacle.head.position + Vector2(unit_from_angle(base_angle)) * config.link_length
        first.angle = base_angle

    count = len(tentacle)
    for j in range(1, count - 1):
        tentacle[j].position += wave.displacement(time_seconds, j, count, heading)

    pin_base(tentacle, base, base_angle)


def update_tentacles(
    tentacles: Sequence[Chain],
    configs: Sequence[AppendageConfig],
    spine: Chain,
    time_seconds: float,
    wave: WaveController = DEFAULT_WAVE,
) -> None:
    """Solve every tentacle against the already-solved spine."""

    for tentacle, config in zip(tentacles, configs):
        update_tentacle(tentacle, config, spine, time_seconds, wave)


def reach_toward(segments: Sequence[Segment], target_x: float, target_y: float, link_length: float) -> None:
    """Two-pass position solve that drags a chain's tip onto a target.

    The tip is placed on the target, a backward pass pulls every segment to
    ``link_length`` behind the one after it, then a forward pass re-spaces the
    chain from its (moved) first segment. Coincident segments never divide by
    zero.
    """

    if not segments:
        return
    segments[-1].position = Vector2(target_x, target_y)

    for i in range(len(segments) - 2, -1, -1):
        delta = segments[i + 1].position - segments[i].position
        scale = link_length / safe_length(delta.x, delta.y)
        segments[i].position = segments[i + 1].position - delta * scale

    for i in range(1, len(segments)):
        delta = segments[i].position - segments[i - 1].position
        scale = link_length / safe_length(delta.x, delta.y)
        segments[i].position = segments[i - 1].position + delta * scale

    logger.debug("Reached toward (%.1f, %.1f) with %d segments", target_x, target_y, len(segments))
