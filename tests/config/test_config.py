"""Tests for `graphsolve.config` focusing on behavior and correctness."""

import math

from graphsolve.algorithms.bellman_ford import BellmanFord
from graphsolve.algorithms.dijkstra import Dijkstra
from graphsolve.config import DEFAULT_CONFIG, SolverConfig


def test_default_config_values() -> None:
    config = SolverConfig()
    assert config.infinity == math.inf
    assert config.default_capacity == 16
    assert config.bellman_ford_max_passes is None
    assert config.prim_root == 0
    assert DEFAULT_CONFIG == config


def test_resolve_infinity() -> None:
    config = SolverConfig(infinity=1000)
    assert config.resolve_infinity() == 1000
    assert config.resolve_infinity(5) == 5
    # Zero is a legitimate sentinel, not "unset"
    assert config.resolve_infinity(0) == 0


def test_resolve_max_passes() -> None:
    """Explicit value wins over config, config wins over V - 1."""
    assert SolverConfig().resolve_max_passes(10) == 9
    assert SolverConfig().resolve_max_passes(10, 3) == 3
    assert SolverConfig(bellman_ford_max_passes=4).resolve_max_passes(10) == 4
    assert SolverConfig(bellman_ford_max_passes=4).resolve_max_passes(10, 2) == 2
    # Never negative, even for an empty graph
    assert SolverConfig().resolve_max_passes(0) == 0


def test_solvers_pick_up_config() -> None:
    config = SolverConfig(infinity=10**9)
    dj = Dijkstra(config=config)
    dj.add_directed_edge(0, 1, 1)
    dj.add_directed_edge(2, 1, 1)
    assert dj.shortest_path(0, 2) == 10**9
    assert dj.shortest_path(0, 1) == 1

    # Explicit argument overrides the config
    bf = BellmanFord(infinity=77, config=config)
    assert bf.infinity == 77


def test_solvers_default_to_global_config() -> None:
    assert Dijkstra().config is DEFAULT_CONFIG
