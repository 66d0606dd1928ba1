"""Target tracking from pointer and keyboard events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pygame

from ..config.constants import KEYBOARD_STEP

_ARROW_STEPS = {
    pygame.K_UP: (0, -1),
    pygame.K_DOWN: (0, 1),
    pygame.K_LEFT: (-1, 0),
    pygame.K_RIGHT: (1, 0),
}


@dataclass
class TargetTracker:
    """Holds the point the creature chases.

    Pointer motion only moves the target while a button is held; arrow keys
    nudge it by ``keyboard_step`` pixels at any time.
    """

    target_x: float
    target_y: float
    pointer_active: bool = False
    keyboard_step: int = KEYBOARD_STEP

    @property
    def target(self) -> Tuple[float, float]:
        return self.target_x, self.target_y

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply ``event``; return ``True`` when it was an input this tracker uses."""

        if event.type == pygame.MOUSEBUTTONDOWN:
            self.pointer_active = True
            return True
        if event.type == pygame.MOUSEBUTTONUP:
            self.pointer_active = False
            return True
        if event.type == pygame.MOUSEMOTION:
            if self.pointer_active:
                self.target_x, self.target_y = event.pos
            return True
        if event.type == pygame.KEYDOWN and event.key in _ARROW_STEPS:
            dx, dy = _ARROW_STEPS[event.key]
            self.target_x += dx * self.keyboard_step
            self.target_y += dy * self.keyboard_step
            return True
        return False
