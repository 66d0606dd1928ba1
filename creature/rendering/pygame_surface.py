"""Drawing surface backed by a pygame ``Surface``."""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

import pygame

from ..config import settings
from .palette import Color

Point = Tuple[float, float]


class PygameSurface:
    """Flattens canvas-style paths into polylines and draws them with ``pygame.draw``."""

    def __init__(
        self,
        surface: pygame.Surface,
        *,
        background: Color = settings.BACKGROUND,
        curve_steps: int = 8,
        arc_step: float = math.radians(8),
    ) -> None:
        self.surface = surface
        self.background = background
        self.curve_steps = max(1, curve_steps)
        self.arc_step = arc_step
        self._subpaths: List[List[Point]] = []

    def _current(self) -> Optional[List[Point]]:
        return self._subpaths[-1] if self._subpaths else None

    def clear(self, color: Optional[Color] = None) -> None:
        self.surface.fill(color if color is not None else self.background)
        self._subpaths = []

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([(x, y)])

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        path = self._current()
        if path is None:
            self.move_to(cx, cy)
            path = self._current()
        x0, y0 = path[-1]
        for step in range(1, self.curve_steps + 1):
            t = step / self.curve_steps
            inv = 1.0 - t
            path.append(
                (
                    inv * inv * x0 + 2 * inv * t * cx + t * t * x,
                    inv * inv * y0 + 2 * inv * t * cy + t * t * y,
                )
            )

    def arc(self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float) -> None:
        sweep = end_angle - start_angle
        if sweep >= 2 * math.pi:
            sweep = 2 * math.pi
        elif sweep < 0:
            sweep %= 2 * math.pi
        steps = max(2, math.ceil(sweep / self.arc_step))
        points = [
            (
                cx + math.cos(start_angle + sweep * i / steps) * radius,
                cy + math.sin(start_angle + sweep * i / steps) * radius,
            )
            for i in range(steps + 1)
        ]
        path = self._current()
        if path is None:
            self._subpaths.append(points)
        else:
            path.extend(points)

    def fill(self, color: Color) -> None:
        for path in self._subpaths:
            if len(path) >= 3:
                pygame.draw.polygon(self.surface, color, path)

    def stroke(self, color: Color, width: int = 1) -> None:
        for path in self._subpaths:
            if len(path) < 2:
                continue
            pygame.draw.lines(self.surface, color, False, path, width)
            if width > 2:
                # round joins
                for point in path:
                    pygame.draw.circle(self.surface, color, point, width / 2)


__all__ = ["PygameSurface"]
