"""Tests for the pygame and matplotlib drawing surfaces."""

from __future__ import annotations

import math

import pygame

from creature.body.presets import build_preset
from creature.rendering.matplotlib_surface import MatplotlibSurface, export_chain_set_figure
from creature.rendering.pygame_surface import PygameSurface
from creature.simulation.chain_set import create_chain_set, step_and_render

BACKGROUND = (245, 241, 232)


def test_pygame_surface_fill_and_stroke():
    canvas = pygame.Surface((200, 200))
    surface = PygameSurface(canvas, background=BACKGROUND)
    surface.clear()
    assert tuple(canvas.get_at((5, 5)))[:3] == BACKGROUND

    surface.begin_path()
    surface.arc(100, 100, 30, 0.0, 2 * math.pi)
    surface.fill((255, 0, 0))
    assert tuple(canvas.get_at((100, 100)))[:3] == (255, 0, 0)

    surface.begin_path()
    surface.move_to(10, 180)
    surface.quadratic_curve_to(10, 180, 60, 180)
    surface.stroke((0, 0, 0), 4)
    assert tuple(canvas.get_at((35, 180)))[:3] == (0, 0, 0)


def test_pygame_surface_renders_a_frame():
    canvas = pygame.Surface((400, 400))
    surface = PygameSurface(canvas)
    config = build_preset("lizard", segment_count=16)
    chain_set = create_chain_set(config, 200, 200)

    surface.clear()
    step_and_render(chain_set, config, 220, 180, surface, time_seconds=0.0)

    head = chain_set.spine.head
    assert tuple(canvas.get_at((int(head.x), int(head.y))))[:3] != tuple(surface.background)


def test_matplotlib_surface_collects_patches():
    surface = MatplotlibSurface(200, 100)
    surface.begin_path()
    surface.move_to(10, 10)
    surface.quadratic_curve_to(50, 10, 90, 50)
    surface.fill((172, 57, 49))
    surface.stroke((0, 0, 0), 4)
    assert len(surface.axes.patches) == 2

    surface.clear()
    assert len(surface.axes.patches) == 0


def test_export_chain_set_figure(tmp_path):
    config = build_preset("squid", segment_count=12)
    chain_set = create_chain_set(config, 200, 150)
    target = export_chain_set_figure(chain_set, tmp_path / "out" / "squid.png", width=400, height=300)

    assert target.exists()
    assert target.stat().st_size > 0
