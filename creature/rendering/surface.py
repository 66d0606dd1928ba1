"""Drawing-surface capability the renderers emit primitives onto."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple

from .palette import Color


class DrawingSurface(Protocol):
    """Canvas-style path API.

    ``move_to`` opens a new sub-path, ``arc`` joins the current point to the
    arc start, and angles grow clockwise on screen (y points down).
    """

    def clear(self, color: Optional[Color] = None) -> None:
        """Wipe the drawable region."""

    def begin_path(self) -> None:
        """Discard the pending path."""

    def move_to(self, x: float, y: float) -> None:
        ...

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        ...

    def arc(self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float) -> None:
        ...

    def fill(self, color: Color) -> None:
        ...

    def stroke(self, color: Color, width: int = 1) -> None:
        ...


@dataclass(frozen=True)
class DrawCall:
    name: str
    args: Tuple


@dataclass
class RecordingSurface:
    """Surface that only remembers what was asked of it."""

    calls: List[DrawCall] = field(default_factory=list)

    def _record(self, name: str, *args) -> None:
        self.calls.append(DrawCall(name, tuple(args)))

    def clear(self, color: Optional[Color] = None) -> None:
        self._record("clear", color)

    def begin_path(self) -> None:
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._record("quadratic_curve_to", cx, cy, x, y)

    def arc(self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float) -> None:
        self._record("arc", cx, cy, radius, start_angle, end_angle)

    def fill(self, color: Color) -> None:
        self._record("fill", color)

    def stroke(self, color: Color, width: int = 1) -> None:
        self._record("stroke", color, width)

    def named(self, name: str) -> List[DrawCall]:
        return [call for call in self.calls if call.name == name]

    def reset(self) -> None:
        self.calls.clear()


__all__ = ["DrawCall", "DrawingSurface", "RecordingSurface"]
