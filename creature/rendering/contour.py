"""Turn solved chains into filled silhouettes, or debug circles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from ..body.segment import Chain, Segment
from ..utils.math_utils import safe_length
from .palette import (
    BODY_FILL,
    DEBUG_SPINE_COLOR,
    EYE_COLOR,
    OUTLINE,
    OUTLINE_WIDTH,
    Color,
    debug_color,
)
from .surface import DrawingSurface

Point = Tuple[float, float]

EYE_RADIUS = 5
EYE_FORWARD = 12
EYE_SPREAD = 12


@dataclass(frozen=True)
class RailPoint:
    """Offset points either side of one segment centre."""

    right: Point
    left: Point


def offset_rails(segments: Sequence[Segment]) -> List[RailPoint]:
    """Offset every segment by its radius perpendicular to the chain direction.

    Each segment looks toward the next one; the last segment continues the
    direction of the link leading into it.
    """

    rails: List[RailPoint] = []
    last = len(segments) - 1
    for i, segment in enumerate(segments):
        if i < last:
            other = segments[i + 1]
            dx, dy = other.x - segment.x, other.y - segment.y
        else:
            other = segments[i - 1]
            dx, dy = segment.x - other.x, segment.y - other.y
        length = safe_length(dx, dy)
        nx, ny = dx / length, dy / length
        r = segment.radius
        rails.append(
            RailPoint(
                right=(segment.x + ny * r, segment.y - nx * r),
                left=(segment.x - ny * r, segment.y + nx * r),
            )
        )
    return rails


def _slope_angle(dx: float, dy: float) -> float:
    # atan(dy / dx) with IEEE semantics for a vertical rail: ±π/2, sign from both operands.
    if dx == 0:
        return math.copysign(math.pi / 2, dy) * math.copysign(1.0, dx)
    return math.atan(dy / dx)


def tail_arc_start(rail: RailPoint) -> float:
    """Start angle of the tail cap, which sweeps from the right rail to the left."""

    (x1, y1), (x2, y2) = rail.right, rail.left
    start = _slope_angle(x2 - x1, y2 - y1)
    if x1 < x2:
        start += math.pi
    return start


def head_arc_start(rail: RailPoint) -> float:
    """Start angle of the head cap, which sweeps from the left rail to the right."""

    (x1, y1), (x2, y2) = rail.right, rail.left
    start = _slope_angle(x2 - x1, y2 - y1)
    if x2 < x1:
        start += math.pi
    return start


def draw_chain_outline(
    surface: DrawingSurface,
    chain: Chain | Sequence[Segment],
    fill: Color = BODY_FILL,
    outline: Color = OUTLINE,
    width: int = OUTLINE_WIDTH,
) -> None:
    """Draw one chain as a tapered silhouette.

    The right rail runs head to tail, a half circle caps the tail, the left
    rail runs back to the head and a second half circle caps the head. Both
    caps derive their start angle from the slope between their rail points.
    """

    segments = list(chain)
    if not segments:
        return
    surface.begin_path()
    if len(segments) == 1:
        only = segments[0]
        surface.arc(only.x, only.y, only.radius, 0.0, 2 * math.pi)
        surface.fill(fill)
        surface.stroke(outline, width)
        return

    rails = offset_rails(segments)

    surface.move_to(*rails[0].right)
    for rail in rails:
        surface.quadratic_curve_to(*rail.right, *rail.right)

    tail = segments[-1]
    tail_rail = rails[-1]
    start = tail_arc_start(tail_rail)
    surface.arc(tail.x, tail.y, tail.radius, start, start + math.pi)

    surface.move_to(*tail_rail.left)
    for rail in reversed(rails[:-1]):
        surface.quadratic_curve_to(*rail.left, *rail.left)

    head = segments[0]
    start = head_arc_start(rails[0])
    surface.arc(head.x, head.y, head.radius, start, start + math.pi)

    surface.fill(fill)
    surface.stroke(outline, width)


def draw_chain_debug(surface: DrawingSurface, chain: Iterable[Segment], *, color_by_index: bool = True) -> None:
    """Outline every segment as its own circle."""

    for index, segment in enumerate(chain):
        surface.begin_path()
        surface.arc(segment.x, segment.y, segment.radius, 0.0, 2 * math.pi)
        surface.stroke(debug_color(index) if color_by_index else DEBUG_SPINE_COLOR, OUTLINE_WIDTH)


def eye_positions(head: Segment) -> Tuple[Point, Point]:
    forward = (math.cos(head.angle), math.sin(head.angle))
    lateral = (-forward[1], forward[0])
    eyes = []
    for side in (1, -1):
        eyes.append(
            (
                head.x + forward[0] * EYE_FORWARD + lateral[0] * EYE_SPREAD * side,
                head.y + forward[1] * EYE_FORWARD + lateral[1] * EYE_SPREAD * side,
            )
        )
    return eyes[0], eyes[1]


def draw_eyes(surface: DrawingSurface, head: Segment, color: Color = EYE_COLOR) -> None:
    surface.begin_path()
    for x, y in eye_positions(head):
        surface.move_to(x + EYE_RADIUS, y)
        surface.arc(x, y, EYE_RADIUS, 0.0, 2 * math.pi)
    surface.fill(color)


def render_chains(
    surface: DrawingSurface,
    spine: Chain,
    limbs: Sequence[Chain],
    tentacles: Sequence[Chain],
    debug_mode: bool = False,
) -> None:
    """Draw a whole creature.

    Outline mode paints appendages first so the spine and eyes sit on top;
    debug mode draws the spine in black and colour-codes appendage segments.
    """

    if debug_mode:
        draw_chain_debug(surface, spine, color_by_index=False)
        for limb in limbs:
            draw_chain_debug(surface, limb)
        for tentacle in tentacles:
            draw_chain_debug(surface, tentacle)
        return

    for limb in limbs:
        draw_chain_outline(surface, limb)
    for tentacle in tentacles:
        draw_chain_outline(surface, tentacle)
    draw_chain_outline(surface, spine)
    draw_eyes(surface, spine.head)


__all__ = [
    "RailPoint",
    "draw_chain_debug",
    "draw_chain_outline",
    "draw_eyes",
    "eye_positions",
    "head_arc_start",
    "offset_rails",
    "render_chains",
    "tail_arc_start",
]
