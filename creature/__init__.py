"""Procedural creature animation: chain solvers and silhouette rendering."""

from __future__ import annotations

from .config import settings as settings
from .simulation.chain_set import ChainSet, create_chain_set, step_and_render

__all__ = ["ChainSet", "create_chain_set", "settings", "step_and_render"]
