#!/usr/bin/env python3
"""Interactive viewer for the procedural creature presets.

Usage:
    python tools/creature_viewer.py
    python tools/creature_viewer.py --preset squid --frames 120 --screenshot squid.png

Controls:
    Mouse drag / arrow keys: Move the target
    1-3: Switch preset (snake, lizard, squid)
    D: Toggle debug circles
    SPACE: Pause the solver
    Q/ESC: Quit
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

import pygame

# Add parent directory to path to import the creature package
sys.path.insert(0, str(Path(__file__).parent.parent))

from creature.body.presets import build_preset
from creature.config.constants import PRESET_NAMES
from creature.rendering.contour import render_chains
from creature.rendering.pygame_surface import PygameSurface
from creature.simulation.loop import CreatureScene

FRAME_SECONDS = 1.0 / 60.0


class CreatureViewer:
    """Window plus scene, with a headless mode for screenshots."""

    def __init__(
        self,
        width: int = 1200,
        height: int = 800,
        headless: bool = False,
        preset: str = "lizard",
        debug_mode: bool = False,
    ):
        if headless:
            os.environ["SDL_VIDEODRIVER"] = "dummy"

        pygame.init()
        self.width = width
        self.height = height
        self.headless = headless
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Creature Viewer")

        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)

        self.preset = preset
        self.scene = CreatureScene(build_preset(preset), width, height, debug_mode=debug_mode)
        self.surface = PygameSurface(self.screen)
        self.elapsed = 0.0
        self.running = True
        self.paused = False

    def set_target(self, x: float, y: float) -> None:
        self.scene.tracker.target_x = x
        self.scene.tracker.target_y = y

    def step(self, dt: float = FRAME_SECONDS) -> None:
        """Advance the synthetic clock and draw one frame."""
        if not self.paused:
            self.elapsed += dt
            self.scene.frame(self.surface, self.elapsed)

    def simulate(self, frames: int, dt: float = FRAME_SECONDS) -> None:
        for _ in range(frames):
            self.step(dt)

    def render(self):
        if self.paused:
            chain_set = self.scene.chain_set
            self.surface.clear()
            render_chains(self.surface, chain_set.spine, chain_set.limbs, chain_set.tentacles, self.scene.debug_mode)
        self._render_ui()
        if not self.headless:
            pygame.display.flip()

    def _render_ui(self):
        mode = "debug" if self.scene.debug_mode else "outline"
        text = f"{self.preset} | {mode} | t={self.elapsed:.2f}s"
        label = self.font.render(text, True, (40, 40, 40))
        self.screen.blit(label, (10, 10))

    def handle_event(self, event: pygame.event.Event):
        if event.type == pygame.QUIT:
            self.running = False
            return
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_q, pygame.K_ESCAPE):
                self.running = False
                return
            if event.key == pygame.K_SPACE:
                self.paused = not self.paused
                return
            if event.key in (pygame.K_1, pygame.K_2, pygame.K_3):
                self.preset = PRESET_NAMES[event.key - pygame.K_1]
        self.scene.handle_event(event)

    def save_screenshot(self, filename: str):
        pygame.image.save(self.screen, filename)
        print(f"Screenshot saved to {filename}")

    def run(self):
        while self.running:
            dt = self.clock.tick(60) / 1000.0
            for event in pygame.event.get():
                self.handle_event(event)
            self.step(dt)
            self.render()

        pygame.quit()
        print("Creature Viewer closed")


def main():
    """Entry point for the creature viewer."""
    parser = argparse.ArgumentParser(description="Interactive viewer for procedural creatures")
    parser.add_argument(
        "--screenshot",
        type=str,
        help="Save a screenshot to the specified file and exit",
    )
    parser.add_argument("--width", type=int, default=1200, help="Window width (default: 1200)")
    parser.add_argument("--height", type=int, default=800, help="Window height (default: 800)")
    parser.add_argument("--preset", choices=PRESET_NAMES, default="lizard", help="Creature preset")
    parser.add_argument(
        "--frames",
        type=int,
        default=90,
        help="Frames to simulate before a screenshot (default: 90)",
    )
    parser.add_argument("--debug", action="store_true", help="Draw segment circles instead of the outline")

    args = parser.parse_args()

    if args.screenshot:
        viewer = CreatureViewer(
            width=args.width,
            height=args.height,
            headless=True,
            preset=args.preset,
            debug_mode=args.debug,
        )
        viewer.set_target(args.width * 0.75, args.height * 0.4)
        viewer.simulate(args.frames)
        viewer.render()
        viewer.save_screenshot(args.screenshot)
        pygame.quit()
        return

    viewer = CreatureViewer(width=args.width, height=args.height, preset=args.preset, debug_mode=args.debug)
    viewer.run()


if __name__ == "__main__":
    main()
