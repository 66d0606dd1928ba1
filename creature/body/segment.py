"""Segment and chain entities mutated in place by the solvers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from pygame.math import Vector2

from ..utils.math_utils import distance
from .config import SpawnDirection


class ChainKind(str, Enum):
    SPINE = "spine"
    LIMB = "limb"
    TENTACLE = "tentacle"


@dataclass(slots=True)
class Segment:
    """One rigid circular body piece.

    ``radius`` is fixed at creation. ``angle`` points from the segment toward
    its predecessor (spine) or along its appendage, and drives both the next
    segment's placement and the outline renderer.
    """

    position: Vector2
    radius: float
    angle: float = math.pi / 2

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def distance_to(self, other: "Segment") -> float:
        return distance(self.position.x, self.position.y, other.position.x, other.position.y)


@dataclass
class Chain:
    """Ordered segments: index 0 is the head or base, the last index the tail or tip.

    ``spawn_anchor_index`` and ``spawn_direction`` mirror the appendage config
    the chain was last solved with. The solvers read the config itself; these
    are refreshed every frame for inspection and debugging.
    """

    kind: ChainKind
    segments: List[Segment] = field(default_factory=list)
    spawn_anchor_index: Optional[int] = None
    spawn_direction: Optional[SpawnDirection] = None

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __getitem__(self, index: int) -> Segment:
        return self.segments[index]

    @property
    def head(self) -> Segment:
        return self.segments[0]

    @property
    def tail(self) -> Segment:
        return self.segments[-1]

    def link_distances(self) -> List[float]:
        """Centre-to-centre distance of every consecutive pair."""

        return [self.segments[i].distance_to(self.segments[i + 1]) for i in range(len(self.segments) - 1)]


__all__ = ["Chain", "ChainKind", "Segment"]
