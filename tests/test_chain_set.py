"""Tests for chain-set creation, validation and the per-frame entry point."""

from __future__ import annotations

import logging
import math
from dataclasses import replace

import pytest

from creature.body.config import AppendageConfig, CreatureConfig, SpawnDirection, SpineConfig
from creature.body.presets import build_preset
from creature.rendering.palette import BODY_FILL, EYE_COLOR
from creature.rendering.surface import RecordingSurface
from creature.simulation.chain_set import create_chain_set, solve_chain_set, step_and_render


def _spine(count: int = 3) -> SpineConfig:
    return SpineConfig(segment_count=count, segment_radii=[10] * count, link_length=10)


def _appendage(anchor: int) -> AppendageConfig:
    return AppendageConfig(
        segment_count=3,
        segment_radii=[4, 3, 2],
        link_length=8,
        spawn_anchor_index=anchor,
        spawn_direction=SpawnDirection.LEFT,
    )


def test_create_chain_set_for_lizard():
    config = build_preset("lizard")
    chain_set = create_chain_set(config, 400, 300)

    assert len(chain_set.spine) == 30
    assert len(chain_set.limbs) == 4
    assert chain_set.tentacles == []
    assert (chain_set.spine.head.x, chain_set.spine.head.y) == (400, 300)
    assert chain_set.matches(config)
    assert len(list(chain_set.chains())) == 5


def test_creation_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="creature.simulation")
    create_chain_set(CreatureConfig(spine=_spine()), 0, 0)
    assert "Created chain set" in caplog.text


def test_short_radii_rejected():
    config = CreatureConfig(spine=SpineConfig(segment_count=3, segment_radii=[10, 10], link_length=10))
    with pytest.raises(ValueError, match="segment_radii has 2 entries but segment_count is 3"):
        create_chain_set(config, 0, 0)


def test_longer_radii_list_is_accepted():
    config = CreatureConfig(spine=SpineConfig(segment_count=2, segment_radii=[10, 9, 8, 7], link_length=10))
    chain_set = create_chain_set(config, 0, 0)
    assert [segment.radius for segment in chain_set.spine] == [10, 9]


def test_out_of_range_anchor_rejected():
    config = CreatureConfig(spine=_spine(3), tentacles=[_appendage(3)])
    with pytest.raises(ValueError, match=r"tentacles\[0\]: spawn_anchor_index 3 is outside the spine"):
        create_chain_set(config, 0, 0)


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"link_length": 0}, "link_length must be positive"),
        ({"segment_radii": [10, -1, 10]}, r"segment_radii\[1\] must be positive"),
        ({"angle_constraint": -0.1}, "angle_constraint cannot be negative"),
        ({"segment_count": 0}, "segment_count must be at least 1"),
    ],
)
def test_invalid_spine_fields(kwargs, message):
    values = {"segment_count": 3, "segment_radii": [10, 10, 10], "link_length": 10}
    values.update(kwargs)
    with pytest.raises(ValueError, match=message):
        CreatureConfig(spine=SpineConfig(**values)).validate()


def test_unknown_spawn_direction_rejected():
    with pytest.raises(ValueError):
        AppendageConfig(segment_count=1, segment_radii=[1], link_length=1, spawn_direction="up")


def test_mismatched_config_raises():
    chain_set = create_chain_set(build_preset("snake"), 0, 0)
    with pytest.raises(ValueError, match="recreate"):
        step_and_render(chain_set, build_preset("lizard"), 10, 10, RecordingSurface(), time_seconds=0.0)


@pytest.mark.parametrize("anchor", [99, -1])
def test_same_shape_config_with_bad_anchor_rejected(anchor):
    config = CreatureConfig(spine=_spine(3), limbs=[_appendage(2)])
    chain_set = create_chain_set(config, 0, 0)
    broken = replace(config, limbs=[_appendage(anchor)])

    assert chain_set.matches(broken)
    before = [(segment.x, segment.y) for chain in chain_set.chains() for segment in chain]
    with pytest.raises(ValueError, match=rf"limbs\[0\]: spawn_anchor_index {anchor} is outside the spine"):
        step_and_render(chain_set, broken, 10, 10, RecordingSurface(), time_seconds=0.0)
    assert [(segment.x, segment.y) for chain in chain_set.chains() for segment in chain] == before


def test_anchor_change_refreshes_chain_metadata():
    config = CreatureConfig(spine=_spine(3), limbs=[_appendage(2)])
    chain_set = create_chain_set(config, 0, 0)
    moved = replace(config, limbs=[replace(_appendage(1), spawn_direction=SpawnDirection.RIGHT)])

    solve_chain_set(chain_set, moved, 10, 10, 0.0)

    limb = chain_set.limbs[0]
    assert limb.spawn_anchor_index == 1
    assert limb.spawn_direction is SpawnDirection.RIGHT


def test_step_and_render_outline_frame():
    config = build_preset("squid", segment_count=20)
    chain_set = create_chain_set(config, 300, 300)
    surface = RecordingSurface()

    step_and_render(chain_set, config, 320, 280, surface, time_seconds=1.5)

    fills = [call.args[0] for call in surface.named("fill")]
    assert fills == [BODY_FILL] * 5 + [EYE_COLOR]


def test_step_and_render_debug_frame():
    config = build_preset("lizard", segment_count=10)
    chain_set = create_chain_set(config, 300, 300)
    surface = RecordingSurface()

    step_and_render(chain_set, config, 320, 280, surface, debug_mode=True, time_seconds=0.0)

    assert len(surface.named("arc")) == 10 + 4 * 5
    assert not surface.named("fill")


def test_appendages_follow_the_spine():
    config = build_preset("lizard", segment_count=20)
    chain_set = create_chain_set(config, 300, 300)

    for frame in range(120):
        solve_chain_set(chain_set, config, 300 + frame * 4, 300, frame / 60)

    for limb, limb_config in zip(chain_set.limbs, config.limbs):
        anchor = chain_set.spine[limb_config.spawn_anchor_index]
        assert limb.head.distance_to(anchor) == pytest.approx(anchor.radius - limb.head.radius)
        assert math.isfinite(limb.tail.x) and math.isfinite(limb.tail.y)
