"""Rendering helpers: the drawing-surface capability, backends and the contour renderer."""

from __future__ import annotations

from .contour import draw_chain_debug, draw_chain_outline, render_chains
from .surface import DrawCall, DrawingSurface, RecordingSurface

__all__ = [
    "DrawCall",
    "DrawingSurface",
    "RecordingSurface",
    "draw_chain_debug",
    "draw_chain_outline",
    "render_chains",
]
