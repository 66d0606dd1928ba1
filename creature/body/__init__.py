"""Creature body model: chain configuration values and segment state."""

from .config import AppendageConfig, ChainConfig, CreatureConfig, SpawnDirection, SpineConfig
from .segment import Chain, ChainKind, Segment

__all__ = [
    "AppendageConfig",
    "Chain",
    "ChainConfig",
    "ChainKind",
    "CreatureConfig",
    "Segment",
    "SpawnDirection",
    "SpineConfig",
]
