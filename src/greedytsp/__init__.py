from greedytsp.error import GreedyTSPError, InstanceError, InvalidDirectionError
from greedytsp.heuristic import select_edges, solve_greedy_tsp
from greedytsp.parser import get_inst
from greedytsp.planner import TourPlanner
from greedytsp.tour import sequence_tour
from greedytsp.types import Direction, Edge, Instance, Node, Selection

__all__ = [
    "Direction",
    "Edge",
    "GreedyTSPError",
    "Instance",
    "InstanceError",
    "InvalidDirectionError",
    "Node",
    "Selection",
    "TourPlanner",
    "get_inst",
    "select_edges",
    "sequence_tour",
    "solve_greedy_tsp",
]
