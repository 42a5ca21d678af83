from typing import Iterator, Optional, Union

from greedytsp.graph import costs_from_edges
from greedytsp.heuristic import solve_greedy_tsp
from greedytsp.tour import START_NODE, sequence_tour, tour_cost, tour_nodes
from greedytsp.types import Direction, Edge, Instance, NodeId, Selection, Tour


class TourPlanner:
    """Holds the current mode and the last computed routes for an instance.

    routes is the selected edge set (for drawing, order does not matter), ordered_routes is the same set as a
    walk from the start node (for the itinerary).
    """

    def __init__(self, instance: Instance, mode: Union[Direction, str] = Direction.MIN, start: NodeId = START_NODE):
        self.instance = instance
        self.mode = Direction.parse(mode)
        self.start = start
        self.costs = costs_from_edges(instance.edges, instance.node_count)
        self._selection: Optional[Selection] = None
        self._ordered: Tour = []

    def set_mode(self, mode: Union[Direction, str]):
        """Switches the mode and drops the routes of the previous mode, so they are never shown under the new one."""
        self.mode = Direction.parse(mode)
        self.reset()

    def calculate(self) -> Selection:
        self._selection = solve_greedy_tsp(self.instance, self.mode)
        self._ordered = sequence_tour(self._selection.routes, self.start)
        return self._selection

    def reset(self):
        self._selection = None
        self._ordered = []

    @property
    def selection(self) -> Optional[Selection]:
        return self._selection

    @property
    def routes(self) -> list[Edge]:
        return [] if self._selection is None else list(self._selection.routes)

    @property
    def ordered_routes(self) -> Tour:
        return list(self._ordered)

    @property
    def total_distance(self) -> float:
        return 0 if self._selection is None else self._selection.total_distance

    @property
    def is_complete(self) -> bool:
        """Selection closes a full cycle and the walk covers all of it."""
        return (
            self._selection is not None
            and self._selection.complete
            and len(self._ordered) == len(self._selection.routes)
        )

    def itinerary_cost(self) -> float:
        """Cost of the ordered walk looked up in the instance distances. For a complete tour this equals
        total_distance."""
        return tour_cost(self.costs, tour_nodes(self._ordered))

    def itinerary(self) -> Iterator[tuple[int, str, str, float]]:
        for step, e in enumerate(self._ordered, start=1):
            yield step, self.instance.node_name(e.from_id), self.instance.node_name(e.to_id), e.weight
