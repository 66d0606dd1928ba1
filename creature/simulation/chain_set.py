"""Per-frame entry points: build a creature's chains, then solve and draw them."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Sequence, Tuple

from ..body.config import AppendageConfig, CreatureConfig
from ..body.segment import Chain, ChainKind
from ..physics.appendage import build_appendage
from ..physics.controllers import WaveController
from ..physics.limb import update_limbs
from ..physics.spine import build_spine, update_spine
from ..physics.tentacle import DEFAULT_WAVE, update_tentacles
from ..rendering.contour import render_chains
from ..rendering.surface import DrawingSurface

logger = logging.getLogger("creature.simulation")


@dataclass
class ChainSet:
    """All chains of one creature, plus the configuration shape they were built for."""

    spine: Chain
    limbs: List[Chain] = field(default_factory=list)
    tentacles: List[Chain] = field(default_factory=list)
    signature: Tuple[Any, ...] = ()

    def matches(self, config: CreatureConfig) -> bool:
        return self.signature == config.shape_signature()

    def chains(self) -> Iterator[Chain]:
        yield self.spine
        yield from self.limbs
        yield from self.tentacles


def create_chain_set(config: CreatureConfig, origin_x: float, origin_y: float) -> ChainSet:
    """Validate ``config`` and lay out fresh chains with the head at the origin."""

    config.validate()
    spine = build_spine(config.spine, origin_x, origin_y)
    limbs = [build_appendage(limb, spine, ChainKind.LIMB) for limb in config.limbs]
    tentacles = [build_appendage(tentacle, spine, ChainKind.TENTACLE) for tentacle in config.tentacles]
    logger.info(
        "Created chain set at (%.1f, %.1f): %d spine segments, %d limbs, %d tentacles",
        origin_x,
        origin_y,
        len(spine),
        len(limbs),
        len(tentacles),
    )
    return ChainSet(spine=spine, limbs=limbs, tentacles=tentacles, signature=config.shape_signature())


def _refresh_anchors(chains: List[Chain], configs: Sequence[AppendageConfig]) -> None:
    for chain, appendage in zip(chains, configs):
        chain.spawn_anchor_index = appendage.spawn_anchor_index
        chain.spawn_direction = appendage.spawn_direction


def solve_chain_set(
    chain_set: ChainSet,
    config: CreatureConfig,
    target_x: float,
    target_y: float,
    time_seconds: float,
    wave: WaveController = DEFAULT_WAVE,
) -> None:
    """Advance every chain one frame: spine first, appendages read its fresh state.

    ``config`` is validated on every call, so a same-shaped config with a bad
    anchor index fails with ``ValueError`` before any chain moves.
    """

    config.validate()
    if not chain_set.matches(config):
        raise ValueError("Chain set was built for a differently shaped configuration; recreate it first")
    _refresh_anchors(chain_set.limbs, config.limbs)
    _refresh_anchors(chain_set.tentacles, config.tentacles)
    update_spine(chain_set.spine, config.spine, target_x, target_y)
    update_limbs(chain_set.limbs, config.limbs, chain_set.spine)
    update_tentacles(chain_set.tentacles, config.tentacles, chain_set.spine, time_seconds, wave)
    logger.debug("Solved frame toward (%.1f, %.1f)", target_x, target_y)


def step_and_render(
    chain_set: ChainSet,
    config: CreatureConfig,
    target_x: float,
    target_y: float,
    surface: DrawingSurface,
    debug_mode: bool = False,
    *,
    time_seconds: Optional[float] = None,
    wave: WaveController = DEFAULT_WAVE,
) -> None:
    """Solve one frame and draw it onto ``surface``.

    ``time_seconds`` defaults to the wall clock and only feeds the tentacle
    idle wave.
    """

    now = time.time() if time_seconds is None else time_seconds
    solve_chain_set(chain_set, config, target_x, target_y, now, wave)
    render_chains(surface, chain_set.spine, chain_set.limbs, chain_set.tentacles, debug_mode)


__all__ = ["ChainSet", "create_chain_set", "solve_chain_set", "step_and_render"]
