from typing import Optional, Sequence

from greedytsp.graph import adjacency
from greedytsp.types import Costs, Edge, NodeId, Tour

START_NODE = 0


def find_edge(edges: Sequence[Edge], node_a: NodeId, node_b: NodeId) -> Optional[Edge]:
    for e in edges:
        if e.connects(node_a, node_b):
            return e
    return None


def sequence_tour(edges: Sequence[Edge], start: NodeId = START_NODE) -> Tour:
    """Orders an unordered edge set into a walk beginning at start.

    The walk never steps straight back to the node it came from, so a simple cycle through start is traversed
    once and closed on the last step. The result is shorter than edges if the edges do not form such a
    cycle or path from start.
    """
    if len(edges) == 0:
        return []

    adj = adjacency(edges)

    tour: Tour = []
    current = start
    previous: Optional[NodeId] = None

    for step in range(len(edges)):
        neighbors = adj.get(current)
        if not neighbors:
            break

        nxt = next((nb for nb in neighbors if nb != previous), None)

        # closing step back to the start
        if nxt is None and step == len(edges) - 1 and start in neighbors:
            nxt = start

        if nxt is None:
            break

        edge = find_edge(edges, current, nxt)
        tour.append(Edge(current, nxt, edge.weight))

        previous = current
        current = nxt

    return tour


def tour_nodes(tour: Tour) -> list[NodeId]:
    """Visiting order of a walk. A closed tour ends with its start node again."""
    if len(tour) == 0:
        return []
    return [tour[0].from_id] + [e.to_id for e in tour]


def tour_length(tour: Tour) -> float:
    return sum(e.weight for e in tour)


def is_closed(tour: Tour) -> bool:
    return len(tour) > 0 and tour[-1].to_id == tour[0].from_id


def tour_cost(costs: Costs, nodes: list[NodeId]) -> float:
    """Cost of visiting nodes in order, looked up in a cost matrix. The walk is closed back to nodes[0] unless
    it already ends there."""
    if len(nodes) == 0:
        return 0

    closed = nodes if nodes[-1] == nodes[0] else nodes + [nodes[0]]
    return sum(costs[a][b] for a, b in zip(closed, closed[1:]))
