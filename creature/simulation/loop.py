"""Pygame render loop driving one creature toward the pointer."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

import pygame

from ..body.config import CreatureConfig
from ..body.presets import build_preset
from ..body.storage import load_template, read_template_file
from ..config import settings
from ..config.constants import DEFAULT_LINK_LENGTH, DEFAULT_SPINE_SEGMENTS, KEYBOARD_STEP
from ..config.settings import SimulationSettings
from ..rendering.pygame_surface import PygameSurface
from ..rendering.surface import DrawingSurface
from ..rendering.timers import FrameTimers
from .chain_set import create_chain_set, step_and_render
from .input import TargetTracker

_PRESET_KEYS = {
    pygame.K_1: "snake",
    pygame.K_2: "lizard",
    pygame.K_3: "squid",
}


def _initialise_logger(runtime: SimulationSettings) -> logging.Logger:
    log_dir = runtime.LOG_DIRECTORY
    if not isinstance(log_dir, Path):
        log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / runtime.DEBUG_LOG_FILE

    logger = logging.getLogger("creature")
    if logger.handlers:
        return logger

    level_name = str(runtime.DEBUG_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(level)

    file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    file_handler.setLevel(level)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    logger.propagate = False

    logger.info("Debug logging initialised at %s", log_path)
    return logger


logger = logging.getLogger("creature.simulation")


def build_creature_config(runtime: SimulationSettings) -> CreatureConfig:
    """Creature from a saved template when one is named, otherwise from the preset."""

    template = runtime.CREATURE_TEMPLATE
    if template:
        path = Path(template).expanduser()
        if path.suffix == ".json" and path.exists():
            return read_template_file(path)
        return load_template(template)
    return build_preset(runtime.PRESET, runtime.SPINE_SEGMENTS, runtime.LINK_LENGTH)


class CreatureScene:
    """One creature, its target and the debug flag, advanced once per tick."""

    def __init__(
        self,
        config: CreatureConfig,
        width: int,
        height: int,
        *,
        debug_mode: bool = False,
        keyboard_step: int = KEYBOARD_STEP,
        segment_count: int = DEFAULT_SPINE_SEGMENTS,
        link_length: float = DEFAULT_LINK_LENGTH,
    ) -> None:
        self.width = width
        self.height = height
        self.debug_mode = debug_mode
        self.segment_count = segment_count
        self.link_length = link_length
        self.config = config
        self.chain_set = create_chain_set(config, width / 2, height / 2)
        self.tracker = TargetTracker(width / 2, height / 2, keyboard_step=keyboard_step)

    def set_config(self, config: CreatureConfig) -> bool:
        """Swap configuration, rebuilding chains when their shape changed.

        Returns ``True`` when the chains were rebuilt.
        """

        config.validate()
        self.config = config
        if self.chain_set.matches(config):
            return False
        head = self.chain_set.spine.head
        self.chain_set = create_chain_set(config, head.x, head.y)
        logger.info("Configuration shape changed; chains rebuilt")
        return True

    def handle_event(self, event: pygame.event.Event) -> None:
        if self.tracker.handle_event(event):
            return
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_d:
            self.debug_mode = not self.debug_mode
            logger.info("Debug drawing %s", "on" if self.debug_mode else "off")
        elif event.key in _PRESET_KEYS:
            name = _PRESET_KEYS[event.key]
            self.set_config(build_preset(name, self.segment_count, self.link_length))
            logger.info("Switched to preset '%s'", name)

    def frame(self, surface: DrawingSurface, time_seconds: Optional[float] = None) -> None:
        surface.clear()
        target_x, target_y = self.tracker.target
        step_and_render(
            self.chain_set,
            self.config,
            target_x,
            target_y,
            surface,
            self.debug_mode,
            time_seconds=time_seconds,
        )


def run(runtime_settings: SimulationSettings | None = None) -> None:
    runtime = runtime_settings or settings.current_settings()
    log = _initialise_logger(runtime)

    pygame.init()
    screen = pygame.display.set_mode((runtime.WINDOW_WIDTH, runtime.WINDOW_HEIGHT))
    pygame.display.set_caption("Procedural creature")
    clock = pygame.time.Clock()

    scene = CreatureScene(
        build_creature_config(runtime),
        runtime.WINDOW_WIDTH,
        runtime.WINDOW_HEIGHT,
        debug_mode=runtime.DEBUG_MODE,
        keyboard_step=runtime.KEYBOARD_STEP,
        segment_count=runtime.SPINE_SEGMENTS,
        link_length=runtime.LINK_LENGTH,
    )
    surface = PygameSurface(screen)
    timers = FrameTimers(log)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q)
            ):
                running = False
            else:
                scene.handle_event(event)

        with timers.time("frame"):
            scene.frame(surface, time.time())
        pygame.display.flip()
        timers.end_frame()
        timers.maybe_log()
        clock.tick(runtime.FPS)

    log.info("Shutting down")
    pygame.quit()
