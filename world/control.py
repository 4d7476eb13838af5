"""
organism_sim module: world/control.py

Scheduling and the control surface shared with the host:
- the host only flips flags on SimState (pause, reset, speed)
- run_frame applies them between ticks, never in the middle of one
- the epoch timer runs independently of the tick timer
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

import config
from world.step import step
from world.world import World

log = logging.getLogger(__name__)


@dataclass
class Timer:
    duration: float
    elapsed: float = 0.0

    def __post_init__(self) -> None:
        self.set_duration(self.duration)

    def set_duration(self, duration: float) -> None:
        if duration <= 0.0:
            raise ValueError("timer duration must be positive")
        self.duration = duration

    def tick(self, dt: float) -> int:
        """Advance by ``dt`` seconds; return how many periods finished."""
        self.elapsed += dt
        n = int(self.elapsed // self.duration)
        self.elapsed -= n * self.duration
        return n


@dataclass
class SimState:
    paused: bool = False
    reset: bool = False
    tick_timer: Timer = field(default_factory=lambda: Timer(config.TICK_INTERVAL))
    epoch_timer: Timer = field(default_factory=lambda: Timer(config.EPOCH_INTERVAL))

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def request_reset(self) -> None:
        self.reset = True

    def set_speed(self, preset: int) -> None:
        """Select one of config.SPEED_PRESETS by index."""
        self.tick_timer.set_duration(config.SPEED_PRESETS[preset])


def run_frame(world: World, state: SimState, dt: float) -> int:
    """
    Called once per host frame. Returns the number of ticks stepped.
    """
    if state.reset:
        world.reset()
        state.reset = False
        state.tick_timer.elapsed = 0.0
        state.epoch_timer.elapsed = 0.0
        log.info("world reset")
        return 0
    if state.paused:
        return 0

    due = min(state.tick_timer.tick(dt), config.MAX_TICKS_PER_FRAME)
    for _ in range(due):
        step(world)

    for _ in range(state.epoch_timer.tick(dt)):
        world.advance_epoch()
    return due
