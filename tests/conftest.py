"""Shared fixtures for solver and renderer tests."""

from __future__ import annotations

import math
import os

import pytest
from pygame.math import Vector2

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from creature.body.config import AppendageConfig, SpawnDirection
from creature.body.segment import Chain, ChainKind, Segment


@pytest.fixture
def anchor_spine() -> Chain:
    """Single-segment spine at the origin facing +x, used as a fixed appendage anchor."""

    return Chain(ChainKind.SPINE, [Segment(Vector2(0.0, 0.0), 30.0, 0.0)])


@pytest.fixture
def limb_config() -> AppendageConfig:
    # max reach 4 * 25 = 100
    return AppendageConfig(
        segment_count=5,
        segment_radii=[10.0] * 5,
        link_length=25.0,
        angle_constraint=math.pi / 12,
        spawn_anchor_index=0,
        spawn_direction=SpawnDirection.RIGHT,
    )


@pytest.fixture
def tentacle_config() -> AppendageConfig:
    return AppendageConfig(
        segment_count=8,
        segment_radii=[10.0] * 8,
        link_length=16.0,
        angle_constraint=math.pi / 12,
        spawn_anchor_index=0,
        spawn_direction=SpawnDirection.RIGHT,
    )
