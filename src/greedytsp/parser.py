import json
from pathlib import Path

from greedytsp.error import InstanceError
from greedytsp.graph import edges_from_costs, haversine_costs
from greedytsp.resources import res_path
from greedytsp.types import Costs, Edge, Instance, Node


def parse_line(ln: str) -> list[float]:
    return list(map(lambda i: float(i), ln.split()))


def get_path(inst_path: str):
    base_path = Path(inst_path)

    if base_path.exists():
        return base_path

    from_res_path = res_path.joinpath(inst_path)

    if from_res_path.exists():
        return from_res_path

    from_res_path_tsp = res_path.joinpath("tsp").joinpath(inst_path)

    if from_res_path_tsp.exists():
        return from_res_path_tsp

    raise FileNotFoundError(
        f"Could not find instance path. Looked at path {inst_path}, {from_res_path} and {from_res_path_tsp}"
    )


def get_inst(inst_path: str) -> Instance:
    path = get_path(inst_path)

    if path.suffix == ".json":
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise InstanceError(f"{path} is not valid JSON: {e}") from e
        return parse_cities(data, path.stem)

    lines = read_inst_to_lines(path)
    costs = parse_as_adj_matrix(lines)
    nodes = [Node(i, str(i)) for i in range(len(costs))]

    return Instance(path.stem, nodes, edges_from_costs(costs))


def read_inst_to_lines(inst_path: Path) -> list[str]:
    with open(inst_path, "r") as f:
        lines = f.readlines()

    return [ln for ln in lines if ln.strip()]


def parse_as_adj_matrix(lines: list[str]) -> Costs:
    """First line holds n, followed by the n rows of a symmetric, non-negative cost matrix."""
    if len(lines) == 0:
        raise InstanceError("Empty instance")

    try:
        n = int(lines[0].split()[0])
        cost_adj_matrix = list(map(lambda ln: parse_line(ln), lines[1:]))
    except (ValueError, IndexError) as e:
        raise InstanceError(f"Could not parse instance: {e}") from e

    if len(cost_adj_matrix) != n or any(len(row) != n for row in cost_adj_matrix):
        raise InstanceError(f"Expected a {n}x{n} cost matrix")

    for i in range(n):
        for j in range(i + 1, n):
            if cost_adj_matrix[i][j] != cost_adj_matrix[j][i]:
                raise InstanceError(f"Cost matrix is not symmetric at ({i}, {j})")
            if cost_adj_matrix[i][j] < 0:
                raise InstanceError(f"Negative cost at ({i}, {j})")

    return cost_adj_matrix


def parse_cities(data: dict, default_name: str = "instance") -> Instance:
    """Instance from a {"cities": [...], "edges": [...]} mapping. Without edges the complete graph of
    great-circle distances is used."""
    try:
        nodes = [
            Node(int(c["id"]), str(c.get("name", c["id"])), float(c.get("lat", 0.0)), float(c.get("lng", 0.0)))
            for c in data["cities"]
        ]
    except (KeyError, TypeError, ValueError) as e:
        raise InstanceError(f"Malformed city entry: {e}") from e

    nodes.sort(key=lambda nd: nd.id)
    if [nd.id for nd in nodes] != list(range(len(nodes))):
        raise InstanceError("City ids must be 0..n-1")

    name = str(data.get("name", default_name))

    if "edges" not in data:
        return Instance(name, nodes, edges_from_costs(haversine_costs(nodes)))

    edges: list[Edge] = []
    seen = set()
    try:
        for raw in data["edges"]:
            edge = Edge(int(raw["fromId"]), int(raw["toId"]), float(raw["weight"]))
            if edge.weight < 0:
                raise InstanceError(f"Negative weight on edge {edge.from_id}-{edge.to_id}")
            pair = frozenset(edge.endpoints())
            if len(pair) != 2 or pair in seen:
                raise InstanceError(f"Duplicate or self edge {edge.from_id}-{edge.to_id}")
            if not (0 <= edge.from_id < len(nodes) and 0 <= edge.to_id < len(nodes)):
                raise InstanceError(f"Edge {edge.from_id}-{edge.to_id} refers to an unknown city")
            seen.add(pair)
            edges.append(edge)
    except (KeyError, TypeError, ValueError) as e:
        raise InstanceError(f"Malformed edge entry: {e}") from e

    return Instance(name, nodes, edges)
