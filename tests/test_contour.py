"""Tests for the outline renderer, debug circles and eyes."""

from __future__ import annotations

import math

import pytest
from pygame.math import Vector2

from creature.body.segment import Chain, ChainKind, Segment
from creature.rendering.contour import (
    EYE_RADIUS,
    _slope_angle,
    draw_chain_debug,
    draw_chain_outline,
    eye_positions,
    offset_rails,
    render_chains,
)
from creature.rendering.palette import BODY_FILL, DEBUG_SPINE_COLOR, EYE_COLOR, OUTLINE, debug_color
from creature.rendering.surface import RecordingSurface


def _chain(points, radii, kind=ChainKind.SPINE) -> Chain:
    return Chain(kind, [Segment(Vector2(x, y), r) for (x, y), r in zip(points, radii)])


def _arc_point(call, which):
    cx, cy, radius, start, end = call.args
    angle = start if which == "start" else end
    return cx + math.cos(angle) * radius, cy + math.sin(angle) * radius


def test_offset_rails_are_perpendicular():
    chain = _chain([(100, 100), (80, 100)], [10, 8])
    rails = offset_rails(list(chain))
    assert rails[0].right == pytest.approx((100, 110))
    assert rails[0].left == pytest.approx((100, 90))
    assert rails[1].right == pytest.approx((80, 108))
    assert rails[1].left == pytest.approx((80, 92))


def test_outline_call_sequence():
    chain = _chain([(0, 0), (10, 10), (20, 25), (35, 30)], [12, 10, 8, 6])
    surface = RecordingSurface()
    draw_chain_outline(surface, chain)

    names = [call.name for call in surface.calls]
    assert names == (
        ["begin_path", "move_to"]
        + ["quadratic_curve_to"] * 4
        + ["arc", "move_to"]
        + ["quadratic_curve_to"] * 3
        + ["arc", "fill", "stroke"]
    )
    assert surface.named("fill")[0].args == (BODY_FILL,)
    assert surface.named("stroke")[0].args == (OUTLINE, 4)


def test_outline_path_is_closed():
    chain = _chain([(0, 0), (10, 10), (20, 25), (35, 30)], [12, 10, 8, 6])
    surface = RecordingSurface()
    draw_chain_outline(surface, chain)

    rails = offset_rails(list(chain))
    first_move = surface.named("move_to")[0]
    tail_arc, head_arc = surface.named("arc")

    for arc in (tail_arc, head_arc):
        assert arc.args[4] == pytest.approx(arc.args[3] + math.pi)

    assert _arc_point(tail_arc, "start") == pytest.approx(rails[-1].right)
    assert _arc_point(tail_arc, "end") == pytest.approx(rails[-1].left)
    assert _arc_point(head_arc, "start") == pytest.approx(rails[0].left)
    assert _arc_point(head_arc, "end") == pytest.approx(first_move.args)


def test_slope_angle_for_vertical_rail():
    assert _slope_angle(0.0, 5.0) == pytest.approx(math.pi / 2)
    assert _slope_angle(0.0, -5.0) == pytest.approx(-math.pi / 2)
    assert _slope_angle(2.0, 2.0) == pytest.approx(math.pi / 4)


def test_vertical_rail_does_not_raise():
    chain = _chain([(100, 100), (80, 100)], [10, 8])
    surface = RecordingSurface()
    draw_chain_outline(surface, chain)
    assert len(surface.named("arc")) == 2


def test_single_segment_draws_a_circle():
    chain = _chain([(5, 5)], [7])
    surface = RecordingSurface()
    draw_chain_outline(surface, chain)
    (arc,) = surface.named("arc")
    assert arc.args == (5, 5, 7, 0.0, 2 * math.pi)
    assert not surface.named("quadratic_curve_to")


def test_debug_circles_cycle_colours():
    chain = _chain([(i * 5, 0) for i in range(12)], [3] * 12, ChainKind.TENTACLE)
    surface = RecordingSurface()
    draw_chain_debug(surface, chain)

    strokes = surface.named("stroke")
    assert len(surface.named("arc")) == 12
    assert [stroke.args[0] for stroke in strokes] == [debug_color(i) for i in range(12)]
    assert strokes[10].args[0] == strokes[0].args[0]


def test_eye_positions_follow_head_angle():
    head = Segment(Vector2(0, 0), 10, 0.0)
    first, second = eye_positions(head)
    assert first == pytest.approx((12, 12))
    assert second == pytest.approx((12, -12))

    head.angle = math.pi / 2
    first, second = eye_positions(head)
    assert first == pytest.approx((-12, 12))
    assert second == pytest.approx((12, 12))


def test_render_order_outline_mode():
    spine = _chain([(0, 0), (0, 10), (0, 20)], [10, 9, 8])
    limb = _chain([(10, 20), (30, 20)], [4, 3], ChainKind.LIMB)
    tentacle = _chain([(-10, 5), (-25, 5), (-40, 8)], [4, 3, 2], ChainKind.TENTACLE)
    surface = RecordingSurface()

    render_chains(surface, spine, [limb], [tentacle])

    fills = surface.named("fill")
    assert [fill.args[0] for fill in fills] == [BODY_FILL, BODY_FILL, BODY_FILL, EYE_COLOR]
    eye_arcs = surface.named("arc")[-2:]
    assert all(arc.args[2] == EYE_RADIUS for arc in eye_arcs)
    # spine outline's first move_to comes after both appendage outlines
    move_targets = [call.args for call in surface.named("move_to")]
    spine_start = offset_rails(list(spine))[0].right
    assert move_targets.index(pytest.approx(spine_start)) == 4


def test_render_debug_mode():
    spine = _chain([(0, 0), (0, 10), (0, 20)], [10, 9, 8])
    limb = _chain([(10, 10), (30, 10)], [4, 3], ChainKind.LIMB)
    surface = RecordingSurface()

    render_chains(surface, spine, [limb], [], debug_mode=True)

    strokes = [call.args[0] for call in surface.named("stroke")]
    assert strokes == [DEBUG_SPINE_COLOR] * 3 + [debug_color(0), debug_color(1)]
    assert not surface.named("fill")
