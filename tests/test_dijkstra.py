"""Unit tests for the shortest-path engine and path reconstruction."""

import math

import pytest

from map_navigator.domain.errors import GraphError
from map_navigator.graph.dijkstra import DijkstraEngine, compute_shortest_paths
from map_navigator.graph.path import reconstruct_path
from map_navigator.graph.state import SearchState
from map_navigator.graph.store import Graph


def test_search_state_starts_reset():
    state = SearchState(3)

    assert state.distances == [math.inf] * 3
    assert state.visited == [False] * 3
    assert state.predecessors == [None] * 3


def test_search_state_reset_clears_previous_values():
    state = SearchState(2)
    state.distances[0] = 0
    state.visited[0] = True
    state.predecessors[1] = 0

    state.reset()

    assert state.distances == [math.inf, math.inf]
    assert state.visited == [False, False]
    assert state.predecessors == [None, None]


def test_distances_on_sample_map(sample_map):
    a = sample_map.find_by_name("A")
    state = compute_shortest_paths(sample_map, a)

    assert state.distances == [0, 1, 3, 4, 11]
    assert all(state.visited)


def test_predecessors_on_sample_map(sample_map):
    a = sample_map.find_by_name("A")
    state = compute_shortest_paths(sample_map, a)

    # A is the root; C is reached through B, D through C.
    assert state.predecessors == [None, 0, 1, 2, 3]


def test_dijkstra_chooses_shortest_path():
    # A can reach C directly, but A->B->C is shorter
    graph = Graph.from_edges([("A", "B", 3), ("A", "C", 10), ("B", "C", 4)])
    a = graph.find_by_name("A")
    c = graph.find_by_name("C")

    state = compute_shortest_paths(graph, a)

    assert state.distance(c) == 7
    assert [graph.node(i).name for i in reconstruct_path(state, c)] == ["A", "B", "C"]


def test_unreachable_node_keeps_initial_values():
    graph = Graph.from_edges([("A", "B", 2)], nodes=["A", "B", "C"])
    c = graph.find_by_name("C")

    state = compute_shortest_paths(graph, graph.find_by_name("A"))

    assert math.isinf(state.distance(c))
    assert not state.is_reachable(c)
    assert state.predecessor(c.id) is None
    assert state.visited[c.id] is False
    assert reconstruct_path(state, c) == [c.id]


def test_isolated_source_yields_trivial_result():
    graph = Graph()
    a = graph.add_node("A")

    state = compute_shortest_paths(graph, a)

    assert state.distances == [0]
    assert reconstruct_path(state, a) == [a.id]


def test_relaxation_updates_queued_node():
    # C is first queued at 10 via A, then improved to 2 via B.
    graph = Graph.from_edges(
        [("A", "C", 10), ("A", "B", 1), ("B", "C", 1), ("C", "D", 1)]
    )
    state = compute_shortest_paths(graph, graph.find_by_name("A"))

    assert state.distance(graph.find_by_name("C")) == 2
    assert state.distance(graph.find_by_name("D")) == 3


def test_zero_weight_cycle_terminates():
    graph = Graph.from_edges([("A", "B", 0), ("B", "A", 0), ("B", "C", 0)])
    state = compute_shortest_paths(graph, graph.find_by_name("A"))
    c = graph.find_by_name("C")

    assert state.distance(c) == 0
    assert [graph.node(i).name for i in reconstruct_path(state, c)] == ["A", "B", "C"]


def test_source_from_other_graph_is_rejected(sample_map):
    other = Graph()
    foreign = other.add_node("A")

    with pytest.raises(GraphError):
        compute_shortest_paths(sample_map, foreign)


def test_engine_records_counters(sample_map):
    engine = DijkstraEngine()
    state = engine.compute(sample_map, sample_map.find_by_name("A"))

    assert state.distances == [0, 1, 3, 4, 11]
    assert engine.last_edges_examined == 6
    assert engine.last_relaxed == 6
    # every push is eventually popped
    assert engine.last_heap_pops == engine.last_heap_pushes == 7


def test_engine_counters_reset_per_invocation(sample_map):
    engine = DijkstraEngine()
    engine.compute(sample_map, sample_map.find_by_name("A"))
    engine.compute(sample_map, sample_map.find_by_name("E"))

    assert engine.last_heap_pops == 1
    assert engine.last_edges_examined == 0
    assert engine.last_relaxed == 0
