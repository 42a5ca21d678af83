import math

import pytest

from greedytsp.disjoint_set import DisjointSet
from greedytsp.graph import (
    adjacency,
    costs_from_edges,
    degrees,
    edges_from_costs,
    haversine_costs,
    is_hamiltonian_cycle,
    node_ids,
)
from greedytsp.types import Edge, Node


def test_edges_from_costs_order():
    n = 6
    costs = [[i * 10 + j if i != j else 0 for j in range(n)] for i in range(n)]
    edges = edges_from_costs(costs)
    assert len(edges) == n * (n - 1) // 2
    assert [e.endpoints() for e in edges[:6]] == [(0, 1), (0, 2), (0, 3), (0, 4), (0, 5), (1, 2)]
    assert all(e.weight == costs[e.from_id][e.to_id] for e in edges)


def test_costs_from_edges(square4):
    costs = costs_from_edges(square4, 5)
    assert costs[1][3] == costs[3][1] == 25
    assert costs[2][2] == 0
    assert math.isinf(costs[4][0])


def test_haversine():
    nodes = [
        Node(0, "Ciudad de México", 19.4326, -99.1332),
        Node(1, "Guadalajara", 20.6597, -103.3496),
        Node(2, "Ciudad de México", 19.4326, -99.1332),
    ]
    costs = haversine_costs(nodes)
    assert costs[0][1] == costs[1][0]
    assert costs[0][1] == pytest.approx(461, abs=10)
    assert costs[0][2] == 0
    assert haversine_costs([]) == []


def test_degrees_and_adjacency(square4):
    assert degrees(square4) == {0: 3, 1: 3, 2: 3, 3: 3}
    assert adjacency(square4)[0] == [1, 2, 3]
    assert adjacency([Edge(0, 1, 1), Edge(1, 0, 1)]) == {0: [1, 1], 1: [0, 0]}
    assert node_ids([Edge(5, 2, 1)]) == [2, 5]


def test_is_hamiltonian_cycle():
    cycle = [Edge(0, 1, 1), Edge(1, 2, 1), Edge(2, 3, 1), Edge(3, 0, 1)]
    assert is_hamiltonian_cycle(cycle, 4)
    assert not is_hamiltonian_cycle(cycle[:3], 4)

    two_triangles = [Edge(0, 1, 1), Edge(1, 2, 1), Edge(2, 0, 1), Edge(3, 4, 1), Edge(4, 5, 1), Edge(5, 3, 1)]
    assert not is_hamiltonian_cycle(two_triangles, 6)

    outside = [Edge(0, 1, 1), Edge(1, 2, 1), Edge(2, 7, 1), Edge(7, 0, 1)]
    assert not is_hamiltonian_cycle(outside, 4)


def test_disjoint_set():
    ds = DisjointSet(range(5))
    assert ds.components == 5
    assert ds.union(0, 1)
    assert ds.union(2, 3)
    assert not ds.connected(1, 2)
    assert ds.union(1, 3)
    assert ds.connected(0, 2)
    assert not ds.union(0, 3)
    assert ds.components == 2
    assert len(ds) == 5


def test_disjoint_set_lazy_add():
    ds = DisjointSet()
    assert ds.find(42) == 42
    assert 42 in ds
    assert ds.components == 1
