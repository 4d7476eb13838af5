"""
organism_sim module: world/step.py

One simulation tick:
  sense -> decide -> apply -> metabolism -> death, per organism in id order,
  then turn the energy the population burnt back into pellets.
"""

from __future__ import annotations
import logging
from typing import List

import config
from evolution.reproduction import try_replicate
from neural.action import Action
from world.food import Pellet
from world.physics import try_eat, try_move
from world.sensing import sense
from world.world import World

log = logging.getLogger(__name__)


def decide(world: World, org_id: int) -> Action:
    org = world.organisms[org_id]
    sensors = sense(world.grid, world.positions[org_id], org)
    return org.controller(world.params.ns_shape).decide(sensors)


def apply_action(world: World, org_id: int, action: Action) -> bool:
    """
    Returns True if the action had an effect. Infeasible actions are no-ops.
    """
    d = action.direction
    if d is not None:
        return try_move(world, org_id, d)
    if action == Action.EAT:
        return try_eat(world, org_id) > 0.0
    if action == Action.REPLICATE:
        return try_replicate(world, org_id) is not None
    return False


def metabolise(world: World, org_id: int) -> bool:
    """
    Charge upkeep and age the organism. Returns True if it died.
    """
    org = world.organisms[org_id]
    org.sub_energy(config.METABOLISM_COST)
    org.age += 1
    if not org.is_dead():
        return False
    world.remove_organism(org_id)
    world.deaths += 1
    log.debug("organism %d died (energy %.3f, age %d)", org_id, org.energy, org.age)
    return True


def reconcile_energy(world: World) -> List[Pellet]:
    deficit = world.target_energy - world.total_energy()
    return world.food.replenish(deficit, world.rng)


def step(world: World) -> None:
    # children born this tick act from the next one
    for org_id in sorted(world.organisms):
        action = decide(world, org_id)
        apply_action(world, org_id, action)
        metabolise(world, org_id)

    reconcile_energy(world)
    world.tick += 1
