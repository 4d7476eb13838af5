"""
Live grid simulation: organisms sense, move, eat, replicate and die while
the energy they burn is recycled into pellets.

Keys: SPACE pause, R reset, 1/2/3 slow/normal/fast.
"""

from __future__ import annotations
import argparse
import logging
import random

import pygame

import config
from render import colors
from render.renderer import draw_hud, draw_world
from world.control import SimState, run_frame
from world.step import step
from world.world import Parameters, World

log = logging.getLogger(__name__)

SPEED_KEYS = {pygame.K_1: 0, pygame.K_2: 1, pygame.K_3: 2}


def handle_input(e: pygame.event.Event, state: SimState) -> None:
    if e.type != pygame.KEYDOWN:
        return
    if e.key == pygame.K_SPACE:
        state.toggle_pause()
    elif e.key == pygame.K_r:
        state.request_reset()
    elif e.key in SPEED_KEYS:
        state.set_speed(SPEED_KEYS[e.key])


def run_headless(world: World, ticks: int) -> None:
    for _ in range(ticks):
        step(world)
        if not world.organisms:
            log.info("extinction at tick %d", world.tick)
            break
    log.info("finished: %s", world.stats())


def main(seed: int | None = None, headless: bool = False, ticks: int = 1000) -> None:
    rng = random.Random(seed)
    params = Parameters.from_config(config.SCREEN_W, config.SCREEN_H)
    world = World.create(params, rng)

    if headless:
        run_headless(world, ticks)
        return

    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
    pygame.display.set_caption("organism_sim (Grid Life)")
    clock = pygame.time.Clock()

    state = SimState()
    running = True

    while running:
        dt = clock.tick(config.FPS) / 1000.0

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            else:
                handle_input(e, state)

        run_frame(world, state, dt)

        screen.fill(colors.BG)
        draw_world(screen, world)
        draw_hud(screen, world.stats(), paused=state.paused)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the grid organism sandbox.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--headless", action="store_true", help="no window, just step and log")
    parser.add_argument("--ticks", type=int, default=1000, help="ticks to run when headless")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s: %(message)s")
    main(seed=args.seed, headless=args.headless, ticks=args.ticks)
