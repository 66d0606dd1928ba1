"""Built-in creature presets and the defaults they are derived from."""

from __future__ import annotations

import math
from typing import Callable, Dict, List

from ..config.constants import DEFAULT_LINK_LENGTH, DEFAULT_SPINE_SEGMENTS
from .config import AppendageConfig, CreatureConfig, SpawnDirection, SpineConfig

LIMB_SPAWN_PERCENTAGES = (30, 80)
TENTACLE_SPAWN_PERCENTAGES = (10, 20)


def default_spine_radii(segment_count: int) -> List[float]:
    """Radii taper by half a pixel per segment from 50 at the head."""

    return [50 - i / 2 for i in range(segment_count)]


def derive_angle_constraint(link_length: float) -> float:
    """Shorter links bend less per joint so the whole body keeps the same curl."""

    return math.pi / 12 / (30 / link_length)


def spawn_index(segment_count: int, percentage: float) -> int:
    return int(math.floor(segment_count * percentage / 100))


def default_spine(segment_count: int = DEFAULT_SPINE_SEGMENTS, link_length: float = DEFAULT_LINK_LENGTH) -> SpineConfig:
    return SpineConfig(
        segment_count=segment_count,
        segment_radii=default_spine_radii(segment_count),
        link_length=link_length,
        angle_constraint=derive_angle_constraint(link_length),
    )


def default_limbs(segment_count: int) -> List[AppendageConfig]:
    limbs: List[AppendageConfig] = []
    for percentage in LIMB_SPAWN_PERCENTAGES:
        for direction in (SpawnDirection.LEFT, SpawnDirection.RIGHT):
            limbs.append(
                AppendageConfig(
                    segment_count=5,
                    segment_radii=[20 - i / 2 for i in range(5)],
                    link_length=20,
                    angle_constraint=math.pi / 12,
                    spawn_anchor_index=spawn_index(segment_count, percentage),
                    spawn_direction=direction,
                )
            )
    return limbs


def default_tentacles(segment_count: int) -> List[AppendageConfig]:
    tentacles: List[AppendageConfig] = []
    for percentage in TENTACLE_SPAWN_PERCENTAGES:
        for direction in (SpawnDirection.LEFT, SpawnDirection.RIGHT):
            tentacles.append(
                AppendageConfig(
                    segment_count=8,
                    segment_radii=[14 - i * 1.2 for i in range(8)],
                    link_length=16,
                    angle_constraint=math.pi / 12,
                    spawn_anchor_index=spawn_index(segment_count, percentage),
                    spawn_direction=direction,
                )
            )
    return tentacles


def _snake(segment_count: int, link_length: float) -> CreatureConfig:
    return CreatureConfig(spine=default_spine(segment_count, link_length))


def _lizard(segment_count: int, link_length: float) -> CreatureConfig:
    return CreatureConfig(
        spine=default_spine(segment_count, link_length),
        limbs=default_limbs(segment_count),
    )


def _squid(segment_count: int, link_length: float) -> CreatureConfig:
    return CreatureConfig(
        spine=default_spine(segment_count, link_length),
        tentacles=default_tentacles(segment_count),
    )


PRESETS: Dict[str, Callable[[int, float], CreatureConfig]] = {
    "snake": _snake,
    "lizard": _lizard,
    "squid": _squid,
}


def build_preset(
    name: str,
    segment_count: int = DEFAULT_SPINE_SEGMENTS,
    link_length: float = DEFAULT_LINK_LENGTH,
) -> CreatureConfig:
    """Return the named preset sized to ``segment_count`` spine segments."""

    try:
        factory = PRESETS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown preset '{name}', expected one of {sorted(PRESETS)}") from None
    config = factory(segment_count, link_length)
    config.validate()
    return config


__all__ = [
    "PRESETS",
    "build_preset",
    "default_limbs",
    "default_spine",
    "default_spine_radii",
    "default_tentacles",
    "derive_angle_constraint",
    "spawn_index",
]
