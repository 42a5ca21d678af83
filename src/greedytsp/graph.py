from typing import Iterable, Sequence

import networkx as nx
import numpy as np

from greedytsp.types import Adjacency, Costs, Edge, Node

EARTH_RADIUS_KM = 6371.0


def edges_from_costs(costs: Costs) -> list[Edge]:
    """Complete edge list of a symmetric cost matrix, ordered by (i, j) with i < j."""
    n = len(costs)
    edges: list[Edge] = []
    for i in range(n):
        for j in range(i + 1, n):
            edges.append(Edge(i, j, costs[i][j]))

    return edges


def costs_from_edges(edges: Iterable[Edge], n: int) -> Costs:
    """Adjacency matrix from an edge list. Pairs without an edge cost inf."""
    costs: Costs = [[0.0 if i == j else float("inf") for j in range(n)] for i in range(n)]

    for e in edges:
        costs[e.from_id][e.to_id] = e.weight
        costs[e.to_id][e.from_id] = e.weight

    return costs


def haversine_costs(nodes: Sequence[Node], radius: float = EARTH_RADIUS_KM) -> Costs:
    """Great-circle distance (km) between every pair of nodes, rounded to 0.1 km.

    Row/column i corresponds to nodes[i].
    """
    if len(nodes) == 0:
        return []

    lat = np.radians(np.array([nd.lat for nd in nodes], dtype=float))
    lng = np.radians(np.array([nd.lng for nd in nodes], dtype=float))

    d_lat = lat[:, None] - lat[None, :]
    d_lng = lng[:, None] - lng[None, :]

    a = np.sin(d_lat / 2) ** 2 + np.cos(lat[:, None]) * np.cos(lat[None, :]) * np.sin(d_lng / 2) ** 2
    dist = 2 * radius * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))

    return np.round(dist, 1).tolist()


def node_ids(edges: Iterable[Edge]) -> list[int]:
    ids = set()
    for e in edges:
        ids.add(e.from_id)
        ids.add(e.to_id)
    return sorted(ids)


def degrees(edges: Iterable[Edge]) -> dict[int, int]:
    deg: dict[int, int] = {}
    for e in edges:
        deg[e.from_id] = deg.get(e.from_id, 0) + 1
        deg[e.to_id] = deg.get(e.to_id, 0) + 1
    return deg


def adjacency(edges: Iterable[Edge]) -> Adjacency:
    """Undirected adjacency. Neighbors keep the order of the edges, repeats included."""
    adj: Adjacency = {}
    for e in edges:
        adj.setdefault(e.from_id, []).append(e.to_id)
        adj.setdefault(e.to_id, []).append(e.from_id)
    return adj


def is_hamiltonian_cycle(edges: Sequence[Edge], n: int) -> bool:
    """Check that the edges form a single simple cycle through the nodes 0..n-1."""
    if n < 3 or len(edges) != n:
        return False

    graph = nx.MultiGraph()
    graph.add_nodes_from(range(n))
    for e in edges:
        graph.add_edge(e.from_id, e.to_id)

    if graph.number_of_nodes() != n:
        # an edge touched a node outside 0..n-1
        return False

    if any(deg != 2 for _, deg in graph.degree()):
        return False

    return nx.is_connected(graph)
