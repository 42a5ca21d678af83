from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from greedytsp.error import InvalidDirectionError

NodeId = int

# Adjacency matrix for all costs. costs[nd_a][nd_b] will give the cost of the edge (nd_a, nd_b). We assume the problem
# to be symmetric, so the cost matrix is also symmetric.
Costs = list[list[float]]

# (from_id, to_id)
EdgeIndex = tuple[int, int]

# adjacency[v] gives the neighbors of v, in the order the edges were seen
Adjacency = dict[int, list[int]]


@dataclass(frozen=True)
class Node:
    id: NodeId
    name: str
    lat: float = 0.0
    lng: float = 0.0


@dataclass(frozen=True)
class Edge:
    from_id: NodeId
    to_id: NodeId
    weight: float

    def endpoints(self) -> EdgeIndex:
        return self.from_id, self.to_id

    def connects(self, node_a: NodeId, node_b: NodeId) -> bool:
        """Unordered endpoint match."""
        return (self.from_id == node_a and self.to_id == node_b) or (
            self.from_id == node_b and self.to_id == node_a
        )


######### Tour

# ordered walk, each edge's to_id is the next edge's from_id
Tour = list[Edge]


class Direction(Enum):
    MIN = "min"
    MAX = "max"

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        if isinstance(value, Direction):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidDirectionError(
            f"Unknown direction {value!r}, expected one of {[d.value for d in cls]}"
        )


######### Selection


@dataclass(frozen=True)
class Selection:
    # descending by weight, for display
    routes: list[Edge]
    total_distance: float
    node_count: int

    @property
    def complete(self) -> bool:
        """True if the routes close a Hamiltonian cycle over all nodes."""
        return self.node_count > 0 and len(self.routes) == self.node_count

    def __len__(self):
        return len(self.routes)


######### Instance


@dataclass
class Instance:
    name: str
    nodes: list[Node]
    edges: list[Edge] = field(default_factory=list)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    def node(self, node_id: NodeId) -> Node:
        for nd in self.nodes:
            if nd.id == node_id:
                return nd
        raise KeyError(node_id)

    def node_name(self, node_id: NodeId) -> str:
        try:
            return self.node(node_id).name
        except KeyError:
            return str(node_id)
