"""Orchestration of the per-frame solve and the pygame loop that drives it."""

from __future__ import annotations

from .chain_set import ChainSet, create_chain_set, solve_chain_set, step_and_render
from .input import TargetTracker

__all__ = [
    "ChainSet",
    "TargetTracker",
    "create_chain_set",
    "solve_chain_set",
    "step_and_render",
]
