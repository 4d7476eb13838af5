"""
Live reproduction: an organism splits off a mutated child into a free
neighbouring cell.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Optional

import config
from organism.organism import draw_lifespan
from world.coord import Coord
from world.dir import Dir, sample_direction

if TYPE_CHECKING:
    from world.world import World

log = logging.getLogger(__name__)


def find_free_neighbour(world: "World", c: Coord) -> Optional[Coord]:
    """
    Walk the 8-neighbour ring starting at a randomly sampled direction
    (NULL starts at the top of the ring) and return the first empty cell.
    """
    ring = Dir.neighbours()
    start = sample_direction(world.rng)
    offset = ring.index(start) if start != Dir.NULL else 0
    for i in range(len(ring)):
        n = c + ring[(offset + i) % len(ring)].delta
        if world.grid.is_empty(n):
            return n
    return None


def can_replicate(world: "World", parent_id: int) -> bool:
    parent = world.organisms[parent_id]
    if parent.energy < config.REPLICATION_THRESHOLD:
        return False
    return len(world.organisms) < world.params.n_max_entities


def try_replicate(world: "World", parent_id: int) -> Optional[int]:
    """
    Spawn a child next to ``parent_id``. Returns the child id, or None when
    the parent is too poor, the population is capped, or no neighbouring
    cell is free. A failed attempt costs nothing.
    """
    if not can_replicate(world, parent_id):
        return None
    site = find_free_neighbour(world, world.positions[parent_id])
    if site is None:
        return None

    p = world.params
    child = world.organisms[parent_id].replicate(
        p.mut_p,
        p.insert_p,
        world.rng,
        lifespan=draw_lifespan(world.rng, p.average_lifespan),
    )
    child_id = world.add_organism(child, site)
    world.births += 1
    log.debug("organism %d replicated into %d at (%d, %d)", parent_id, child_id, site.x, site.y)
    return child_id
