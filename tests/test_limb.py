"""Tests for the limb solver and its re-target hysteresis."""

from __future__ import annotations

import math
from dataclasses import replace

import pytest
from pygame.math import Vector2

from creature.body.config import SpawnDirection
from creature.body.segment import ChainKind, Segment
from creature.physics.appendage import anchor_base, build_appendage, retarget_tip
from creature.physics.limb import update_limb


def test_build_appendage_seeds_beside_anchor(anchor_spine, limb_config):
    limb = build_appendage(limb_config, anchor_spine, ChainKind.LIMB)
    assert limb.kind is ChainKind.LIMB
    assert limb.spawn_anchor_index == 0
    assert [(s.x, s.y) for s in limb] == [(40 + 25 * j, 0) for j in range(5)]


def test_anchor_base_sits_inside_anchor_rim(anchor_spine, limb_config):
    limb = build_appendage(limb_config, anchor_spine, ChainKind.LIMB)
    base, base_angle = anchor_base(limb, limb_config, anchor_spine)
    assert base_angle == pytest.approx(math.pi / 4)
    assert base.length() == pytest.approx(20)


def test_retarget_tip_band():
    base = Vector2(0, 0)
    tip = Segment(Vector2(60, 0), 5.0)
    assert retarget_tip(tip, base, 0.0, 100) is False
    assert tuple(tip.position) == (60, 0)

    tip.position = Vector2(0, 40)
    assert retarget_tip(tip, base, 0.0, 100) is True
    assert tuple(tip.position) == pytest.approx((100, 0))


def test_limb_hysteresis(anchor_spine, limb_config):
    limb = build_appendage(limb_config, anchor_spine, ChainKind.LIMB)
    update_limb(limb, limb_config, anchor_spine)

    base, base_angle = anchor_base(limb, limb_config, anchor_spine)
    full = base + Vector2(math.cos(base_angle), math.sin(base_angle)) * 100

    # Inside the band: the foot stays planted.
    held = base + Vector2(60, 0)
    limb.tail.position = Vector2(held)
    update_limb(limb, limb_config, anchor_spine)
    assert tuple(limb.tail.position) == pytest.approx(tuple(held))

    # Folded below half reach: snaps out to full extension.
    limb.tail.position = base + Vector2(40, 0)
    update_limb(limb, limb_config, anchor_spine)
    assert tuple(limb.tail.position) == pytest.approx(tuple(full))

    # Stretched beyond reach: snaps as well.
    limb.tail.position = base + Vector2(110, 0)
    update_limb(limb, limb_config, anchor_spine)
    assert tuple(limb.tail.position) == pytest.approx(tuple(full))


def test_links_are_exact_after_a_snap(anchor_spine, limb_config):
    limb = build_appendage(limb_config, anchor_spine, ChainKind.LIMB)
    update_limb(limb, limb_config, anchor_spine)

    for distance in limb.link_distances():
        assert distance == pytest.approx(25, abs=1e-6)
    base, base_angle = anchor_base(limb, limb_config, anchor_spine)
    assert tuple(limb.head.position) == pytest.approx(tuple(base))
    assert limb.head.angle == pytest.approx(base_angle)


def test_left_limb_mirrors_right(anchor_spine, limb_config):
    left_config = replace(limb_config, spawn_direction=SpawnDirection.LEFT)
    limb = build_appendage(left_config, anchor_spine, ChainKind.LIMB)
    update_limb(limb, left_config, anchor_spine)
    _, base_angle = anchor_base(limb, left_config, anchor_spine)
    assert base_angle == pytest.approx(-math.pi / 4)
    assert limb.tail.y < 0
