"""Immutable configuration values describing a creature's chains."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple


class SpawnDirection(str, Enum):
    """Side of the spine an appendage grows from."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def sign(self) -> int:
        """-1 for the left side, +1 for the right side."""

        return -1 if self is SpawnDirection.LEFT else 1


@dataclass(frozen=True)
class ChainConfig:
    """Parameters shared by every chain type."""

    segment_count: int
    segment_radii: Tuple[float, ...]
    link_length: float
    angle_constraint: float = math.pi / 12

    def __post_init__(self) -> None:
        object.__setattr__(self, "segment_radii", tuple(float(radius) for radius in self.segment_radii))

    @property
    def radii(self) -> Tuple[float, ...]:
        """Radii of the segments actually built, head to tail."""

        return self.segment_radii[: self.segment_count]

    @property
    def max_reach(self) -> float:
        return self.link_length * (self.segment_count - 1)

    def validate(self, label: str = "chain") -> None:
        if isinstance(self.segment_count, bool) or not isinstance(self.segment_count, int):
            raise ValueError(f"{label}: segment_count must be an integer, got {self.segment_count!r}")
        if self.segment_count < 1:
            raise ValueError(f"{label}: segment_count must be at least 1, got {self.segment_count}")
        if len(self.segment_radii) < self.segment_count:
            raise ValueError(
                f"{label}: segment_radii has {len(self.segment_radii)} entries "
                f"but segment_count is {self.segment_count}"
            )
        for index, radius in enumerate(self.radii):
            if not radius > 0:
                raise ValueError(f"{label}: segment_radii[{index}] must be positive, got {radius}")
        if not self.link_length > 0:
            raise ValueError(f"{label}: link_length must be positive, got {self.link_length}")
        if not self.angle_constraint >= 0:
            raise ValueError(f"{label}: angle_constraint cannot be negative, got {self.angle_constraint}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "segment_count": self.segment_count,
            "segment_radii": list(self.segment_radii),
            "link_length": self.link_length,
            "angle_constraint": self.angle_constraint,
        }


@dataclass(frozen=True)
class SpineConfig(ChainConfig):
    """Spine chain: the free head leads, every trailing joint is angle limited."""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SpineConfig":
        return cls(
            segment_count=int(data["segment_count"]),
            segment_radii=tuple(data["segment_radii"]),
            link_length=float(data["link_length"]),
            angle_constraint=float(data.get("angle_constraint", math.pi / 12)),
        )


@dataclass(frozen=True)
class AppendageConfig(ChainConfig):
    """Limb or tentacle chain anchored to one spine segment."""

    spawn_anchor_index: int = 0
    spawn_direction: SpawnDirection = SpawnDirection.LEFT

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "spawn_direction", SpawnDirection(self.spawn_direction))

    def validate(self, label: str = "appendage", spine_length: int | None = None) -> None:
        super().validate(label)
        if isinstance(self.spawn_anchor_index, bool) or not isinstance(self.spawn_anchor_index, int):
            raise ValueError(f"{label}: spawn_anchor_index must be an integer, got {self.spawn_anchor_index!r}")
        if spine_length is not None and not 0 <= self.spawn_anchor_index < spine_length:
            raise ValueError(
                f"{label}: spawn_anchor_index {self.spawn_anchor_index} is outside the spine "
                f"(valid range 0..{spine_length - 1})"
            )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["spawn_anchor_index"] = self.spawn_anchor_index
        data["spawn_direction"] = self.spawn_direction.value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AppendageConfig":
        return cls(
            segment_count=int(data["segment_count"]),
            segment_radii=tuple(data["segment_radii"]),
            link_length=float(data["link_length"]),
            angle_constraint=float(data.get("angle_constraint", math.pi / 12)),
            spawn_anchor_index=int(data["spawn_anchor_index"]),
            spawn_direction=SpawnDirection(data.get("spawn_direction", "left")),
        )


@dataclass(frozen=True)
class CreatureConfig:
    """Whole-creature configuration: one spine plus any limbs and tentacles."""

    spine: SpineConfig
    limbs: Tuple[AppendageConfig, ...] = field(default_factory=tuple)
    tentacles: Tuple[AppendageConfig, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "limbs", tuple(self.limbs))
        object.__setattr__(self, "tentacles", tuple(self.tentacles))

    def validate(self) -> None:
        """Raise ``ValueError`` if any chain is malformed or mis-anchored."""

        self.spine.validate("spine")
        for index, limb in enumerate(self.limbs):
            limb.validate(f"limbs[{index}]", spine_length=self.spine.segment_count)
        for index, tentacle in enumerate(self.tentacles):
            tentacle.validate(f"tentacles[{index}]", spine_length=self.spine.segment_count)

    def shape_signature(self) -> Tuple[Any, ...]:
        """Everything the chain topology depends on.

        Two configurations with equal signatures can share solved chain state;
        anything else needs the chains rebuilt.
        """

        def _chain(config: ChainConfig) -> Tuple[int, Tuple[float, ...]]:
            return config.segment_count, config.radii

        return (
            _chain(self.spine),
            tuple(_chain(limb) for limb in self.limbs),
            tuple(_chain(tentacle) for tentacle in self.tentacles),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "spine": self.spine.to_dict(),
            "limbs": [limb.to_dict() for limb in self.limbs],
            "tentacles": [tentacle.to_dict() for tentacle in self.tentacles],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CreatureConfig":
        if "spine" not in data:
            raise ValueError("Creature config requires a 'spine' entry")
        config = cls(
            spine=SpineConfig.from_dict(data["spine"]),
            limbs=tuple(AppendageConfig.from_dict(entry) for entry in data.get("limbs") or ()),
            tentacles=tuple(AppendageConfig.from_dict(entry) for entry in data.get("tentacles") or ()),
        )
        config.validate()
        return config
