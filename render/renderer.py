"""
organism_sim module: render/renderer.py

Pygame rendering of the grid (one square per organism / pellet).
Reads world state only.
"""

from __future__ import annotations
import pygame

from render import colors
from world.coord import Coord
from world.world import World


def cell_rect(c: Coord, cell_w: float, cell_h: float, screen_h: int) -> pygame.Rect:
    # grid y grows north, screen y grows down
    x = int(c.x * cell_w)
    y = int(screen_h - (c.y + 1) * cell_h)
    return pygame.Rect(x, y, max(1, int(cell_w)), max(1, int(cell_h)))


def draw_world(screen: pygame.Surface, world: World) -> None:
    cw = world.params.cell_width
    ch = world.params.cell_height
    h = screen.get_height()

    for c in world.food.pellets:
        pygame.draw.rect(screen, colors.PELLET, cell_rect(c, cw, ch, h))

    for _, org, c in world.entities():
        col = colors.SPECIES[org.species % len(colors.SPECIES)]
        pygame.draw.rect(screen, col, cell_rect(c, cw, ch, h))


def draw_hud(screen: pygame.Surface, stats: dict, paused: bool = False) -> None:
    font = pygame.font.Font(None, 26)

    lines = [
        f"Energy: {stats.get('total_energy', 0.0):.2f}",
        f"Population: {stats.get('population', 0)}  Pellets: {stats.get('pellets', 0)}",
        f"Births: {stats.get('births', 0)}  Deaths: {stats.get('deaths', 0)}",
        f"Epoch: {stats.get('epoch', 0)}  Tick: {stats.get('tick', 0)}",
    ]

    y = 10
    for line in lines:
        txt = font.render(line, True, colors.HUD)
        screen.blit(txt, (12, y))
        y += 22

    if paused:
        txt = font.render("PAUSED", True, colors.PAUSED)
        screen.blit(txt, (12, y))
