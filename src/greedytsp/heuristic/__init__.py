from greedytsp.heuristic.greedy import select_edges, solve_greedy_tsp, sort_edges

__all__ = ["select_edges", "solve_greedy_tsp", "sort_edges"]
