"""Drawing surface that builds a matplotlib figure for image export."""

from __future__ import annotations

import math
from pathlib import Path
from typing import List, Optional, Tuple

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.patches import PathPatch
from matplotlib.path import Path as MplPath

from ..config import settings
from .contour import render_chains
from .palette import Color

Point = Tuple[float, float]


def _rgb(color: Color) -> Tuple[float, float, float]:
    return tuple(channel / 255.0 for channel in color)


class MatplotlibSurface:
    """Records paths as matplotlib ``Path`` patches on an Agg-backed figure.

    The axes use pixel coordinates with y pointing down so output lines up
    with the pygame window.
    """

    def __init__(self, width: int, height: int, *, dpi: int = 100, background: Color = settings.BACKGROUND) -> None:
        self.width = width
        self.height = height
        self.background = background
        self.figure = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.canvas = FigureCanvasAgg(self.figure)
        self.axes = self.figure.add_axes((0.0, 0.0, 1.0, 1.0))
        self.arc_step = math.radians(8)
        self._vertices: List[Point] = []
        self._codes: List[int] = []
        self.clear()

    def clear(self, color: Optional[Color] = None) -> None:
        self.axes.cla()
        self.axes.set_xlim(0, self.width)
        self.axes.set_ylim(self.height, 0)
        self.axes.set_axis_off()
        self.figure.set_facecolor(_rgb(color if color is not None else self.background))
        self.begin_path()

    def begin_path(self) -> None:
        self._vertices = []
        self._codes = []

    def move_to(self, x: float, y: float) -> None:
        self._vertices.append((x, y))
        self._codes.append(MplPath.MOVETO)

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        if not self._vertices:
            self.move_to(cx, cy)
        self._vertices.extend([(cx, cy), (x, y)])
        self._codes.extend([MplPath.CURVE3, MplPath.CURVE3])

    def arc(self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float) -> None:
        sweep = end_angle - start_angle
        if sweep >= 2 * math.pi:
            sweep = 2 * math.pi
        elif sweep < 0:
            sweep %= 2 * math.pi
        steps = max(2, math.ceil(sweep / self.arc_step))
        for i in range(steps + 1):
            angle = start_angle + sweep * i / steps
            point = (cx + math.cos(angle) * radius, cy + math.sin(angle) * radius)
            self._vertices.append(point)
            self._codes.append(MplPath.MOVETO if not self._codes else MplPath.LINETO)

    def _path(self) -> Optional[MplPath]:
        if len(self._vertices) < 2:
            return None
        return MplPath(list(self._vertices), list(self._codes))

    def fill(self, color: Color) -> None:
        path = self._path()
        if path is not None:
            self.axes.add_patch(PathPatch(path, facecolor=_rgb(color), edgecolor="none"))

    def stroke(self, color: Color, width: int = 1) -> None:
        path = self._path()
        if path is not None:
            self.axes.add_patch(
                PathPatch(path, fill=False, edgecolor=_rgb(color), linewidth=width * 0.75, capstyle="round")
            )

    def save(self, path: Path | str) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        self.figure.savefig(target, facecolor=self.figure.get_facecolor())
        return target


def export_chain_set_figure(
    chain_set,
    path: Path | str,
    *,
    width: int,
    height: int,
    debug_mode: bool = False,
) -> Path:
    """Render ``chain_set`` as it stands into an image file."""

    surface = MatplotlibSurface(width, height)
    render_chains(surface, chain_set.spine, chain_set.limbs, chain_set.tentacles, debug_mode)
    return surface.save(path)


__all__ = ["MatplotlibSurface", "export_chain_set_figure"]
