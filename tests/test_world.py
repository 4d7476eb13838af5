import random

import pytest

import config
from conftest import make_organism
from neural.action import N_ACTIONS
from neural.ns_shape import NsShape
from world.control import SimState, Timer, run_frame
from world.coord import Coord
from world.food import pellets_for_energy
from world.grid import CellType
from world.sensing import N_SENSORS, OUT_OF_BOUNDS, SENSOR_BIAS, sense
from world.step import step
from world.world import Parameters, World


def test_create_seeds_population_and_pellets():
    params = Parameters(grid_size=12, n_initial_entities=10)
    w = World.create(params, random.Random(0))
    assert len(w.organisms) == 10
    assert w.grid.count(CellType.ORGANISM) == 10
    assert len(w.food) == pellets_for_energy(10 * config.INITIAL_ENERGY)
    assert w.target_energy == pytest.approx(w.total_energy())
    assert w.params.ns_shape.sensor_count == N_SENSORS
    w.validate()


def test_create_on_tiny_grid_places_what_fits():
    w = World.create(Parameters(grid_size=2, n_initial_entities=10), random.Random(0))
    assert len(w.organisms) == 4
    assert len(w.food) == 0


def test_add_organism_to_occupied_cell(world):
    world.add_organism(make_organism(None), Coord(1, 1))
    with pytest.raises(ValueError):
        world.add_organism(make_organism(None), Coord(1, 1))


def test_remove_unknown_organism(world):
    with pytest.raises(KeyError):
        world.remove_organism(123)


def test_stats(world):
    world.add_organism(make_organism(None, energy=0.5), Coord(1, 1))
    world.food.add(Coord(2, 2))
    world.food.add(Coord(3, 3))
    s = world.stats()
    assert s["population"] == 1
    assert s["pellets"] == 2
    assert s["total_energy"] == pytest.approx(0.5 + 2 * config.PELLET_ENERGY)


def test_entities_in_id_order(world):
    a = world.add_organism(make_organism(None), Coord(4, 4))
    b = world.add_organism(make_organism(None), Coord(1, 1))
    assert [(i, c) for i, _, c in world.entities()] == [(a, Coord(4, 4)), (b, Coord(1, 1))]


def test_validate_catches_desync(world):
    world.add_organism(make_organism(None), Coord(1, 1))
    world.grid.set(Coord(1, 1), CellType.EMPTY)
    with pytest.raises(RuntimeError):
        world.validate()


def test_sense_layout(world):
    org = make_organism(None, energy=0.0, lifespan=10)
    org.age = 5
    world.add_organism(org, Coord(0, 0))
    world.add_organism(make_organism(None), Coord(1, 0))
    world.food.add(Coord(0, 1))

    s = sense(world.grid, Coord(0, 0), org)

    assert len(s) == N_SENSORS
    # N, S, E, W, NE, NW, SE, SW
    assert s[:8] == [1.0, OUT_OF_BOUNDS, -1.0, OUT_OF_BOUNDS, 0.0, OUT_OF_BOUNDS, OUT_OF_BOUNDS, OUT_OF_BOUNDS]
    assert s[8] == 0.0
    assert s[9] == pytest.approx(0.5)
    assert s[SENSOR_BIAS] == 1.0


def test_food_add_on_occupied_cell(world):
    world.add_organism(make_organism(None), Coord(1, 1))
    with pytest.raises(ValueError):
        world.food.add(Coord(1, 1))


def test_food_clear(world):
    world.food.spawn(5, random.Random(0))
    assert world.grid.count(CellType.CONSUMABLE) == 5
    world.food.clear()
    assert world.grid.count(CellType.CONSUMABLE) == 0


def test_pellets_for_energy():
    assert pellets_for_energy(-1.0) == 0
    assert pellets_for_energy(0.0) == 0
    assert pellets_for_energy(config.PELLET_ENERGY * 3) == 3
    assert pellets_for_energy(config.PELLET_ENERGY * 2.5) == 2


# ---- control surface ----

def test_timer_counts_periods():
    t = Timer(0.05)
    assert t.tick(0.02) == 0
    assert t.tick(0.1) == 2
    assert t.elapsed == pytest.approx(0.02)


def test_timer_rejects_bad_duration():
    with pytest.raises(ValueError):
        Timer(0.05).set_duration(0.0)


def test_paused_world_does_not_step():
    w = World.create(Parameters(grid_size=10, n_initial_entities=5), random.Random(0))
    state = SimState(paused=True)
    assert run_frame(w, state, 1.0) == 0
    assert w.tick == 0
    assert w.epoch == 0


def test_run_frame_steps_and_advances_epoch():
    w = World.create(Parameters(grid_size=10, n_initial_entities=5), random.Random(0))
    state = SimState()
    assert run_frame(w, state, config.TICK_INTERVAL) == 1
    assert w.tick == 1

    n = run_frame(w, state, config.EPOCH_INTERVAL)
    assert n == config.MAX_TICKS_PER_FRAME
    assert w.epoch == 1


def test_reset_reinitialises_and_clears_flag():
    w = World.create(Parameters(grid_size=10, n_initial_entities=5), random.Random(0))
    state = SimState()
    run_frame(w, state, config.EPOCH_INTERVAL)
    assert w.tick > 0

    state.request_reset()
    assert run_frame(w, state, 1.0) == 0
    assert state.reset is False
    assert w.tick == 0
    assert w.epoch == 0
    assert len(w.organisms) == 5
    w.validate()


def test_speed_presets():
    state = SimState()
    state.set_speed(2)
    assert state.tick_timer.duration == config.SPEED_PRESETS[2]
    state.toggle_pause()
    assert state.paused


def test_parameters_reject_mismatched_sensor_count():
    with pytest.raises(ValueError):
        Parameters(grid_size=10, ns_shape=NsShape(8, 5, N_ACTIONS))


def test_custom_hidden_and_action_counts_step():
    params = Parameters(grid_size=10, n_initial_entities=5, ns_shape=NsShape(N_SENSORS, 2, 4))
    w = World.create(params, random.Random(0))
    for _ in range(5):
        step(w)
    w.validate()


def test_timer_constructor_rejects_bad_duration():
    with pytest.raises(ValueError):
        Timer(0.0)
    with pytest.raises(ValueError):
        Timer(-0.1)
