"""Limb solver: a rigid rod between a spine anchor and a planted foot."""

from __future__ import annotations

from typing import Sequence

from ..body.config import AppendageConfig
from ..body.segment import Chain
from .appendage import anchor_base, pin_base, retarget_tip, straighten_interior


def update_limb(limb: Chain, config: AppendageConfig, spine: Chain) -> None:
    base, base_angle = anchor_base(limb, config, spine)
    retarget_tip(limb.tail, base, base_angle, config.max_reach)
    straighten_interior(limb, base, config.link_length)
    pin_base(limb, base, base_angle)


def update_limbs(limbs: Sequence[Chain], configs: Sequence[AppendageConfig], spine: Chain) -> None:
    """Solve every limb against the already-solved spine."""

    for limb, config in zip(limbs, configs):
        update_limb(limb, config, spine)
