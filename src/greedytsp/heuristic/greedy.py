from typing import Optional, Sequence, Union

from greedytsp.disjoint_set import DisjointSet
from greedytsp.graph import node_ids
from greedytsp.types import Direction, Edge, Instance, Selection


def sort_edges(edges: Sequence[Edge], direction: Direction) -> list[Edge]:
    """Returns a sorted copy. The sort is stable, so equal weights keep their input order."""
    return sorted(edges, key=lambda e: e.weight, reverse=direction is Direction.MAX)


def select_edges(
    edges: Sequence[Edge],
    direction: Union[Direction, str] = Direction.MIN,
    node_count: Optional[int] = None,
) -> Selection:
    """Greedy edge selection for an approximate Hamiltonian cycle.

    Candidate edges are taken cheapest first (MIN) or most expensive first (MAX). An edge is accepted if
    neither endpoint already has two selected edges and it does not close a cycle, except for the final
    edge which closes the cycle through all n nodes.

    If node_count is not given, it is the number of distinct endpoints in edges. Fewer than node_count edges
    are returned if no full cycle can be built, see Selection.complete.
    """
    direction = Direction.parse(direction)

    n = len(node_ids(edges)) if node_count is None else node_count

    degree: dict[int, int] = {}
    components = DisjointSet()
    selected: list[Edge] = []

    for edge in sort_edges(edges, direction):
        if len(selected) >= n:
            break

        u, v = edge.from_id, edge.to_id

        # every node gets one predecessor and one successor
        if degree.get(u, 0) >= 2 or degree.get(v, 0) >= 2:
            continue

        forms_cycle = components.connected(u, v)
        # only the last edge may close the cycle
        if forms_cycle and len(selected) < n - 1:
            continue

        components.union(u, v)
        degree[u] = degree.get(u, 0) + 1
        degree[v] = degree.get(v, 0) + 1
        selected.append(edge)

    total = sum(e.weight for e in selected)
    routes = sorted(selected, key=lambda e: e.weight, reverse=True)

    return Selection(routes, total, n)


def solve_greedy_tsp(instance: Instance, direction: Union[Direction, str] = Direction.MIN) -> Selection:
    return select_edges(instance.edges, direction, instance.node_count)
