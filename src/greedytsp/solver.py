import argparse
from time import perf_counter_ns

from greedytsp.graph import is_hamiltonian_cycle
from greedytsp.parser import get_inst
from greedytsp.planner import TourPlanner
from greedytsp.tour import START_NODE
from greedytsp.types import Direction


def print_result(planner: TourPlanner, elapsed_ns: int):
    selection = planner.selection
    inst = planner.instance

    print(f"\nMode: {planner.mode.value} ({elapsed_ns / 1e6:.3f} ms)")
    print("Selected routes:")
    for e in selection.routes:
        print(f"  {inst.node_name(e.from_id)} - {inst.node_name(e.to_id)}: {e.weight:g}")

    print(f"Total distance: {selection.total_distance:g}")

    if not selection.complete:
        print(f"Incomplete tour: {len(selection)} of {selection.node_count} edges selected")
    elif not is_hamiltonian_cycle(selection.routes, inst.node_count):
        print("Selected routes do not form a single cycle")

    print("Itinerary:")
    for step, from_name, to_name, weight in planner.itinerary():
        print(f"  {step:>2}. {from_name} -> {to_name} ({weight:g})")

    if len(planner.ordered_routes) < len(selection):
        print(f"Could only order {len(planner.ordered_routes)} of {len(selection)} routes")
    elif planner.is_complete:
        cost = planner.itinerary_cost()
        print(f"Itinerary cost: {cost:g}")
        if abs(cost - selection.total_distance) > 1e-6:
            print("Itinerary cost differs from the total distance")


def cli(argv=None):
    default_inst = "mexico.json"

    parser = argparse.ArgumentParser(description="Greedy TSP tour builder.")

    parser.add_argument(
        "inst_path",
        help="Path to instance (.json cities or .dat cost matrix).",
        nargs="?",
        default=default_inst,
    )
    parser.add_argument(
        "--mode",
        choices=["min", "max", "both"],
        default="min",
        help="Build the shortest (min) or longest (max) greedy tour, or both.",
    )
    parser.add_argument(
        "--start",
        type=int,
        default=START_NODE,
        help="City the itinerary starts from.",
    )

    args = parser.parse_args(argv)

    print("Loading instance...")
    inst = get_inst(args.inst_path)
    print(f"Solving inst: {inst.name} ({inst.node_count} cities, {len(inst.edges)} edges)")

    modes = [Direction.MIN, Direction.MAX] if args.mode == "both" else [Direction.parse(args.mode)]

    planner = TourPlanner(inst, start=args.start)
    for mode in modes:
        planner.set_mode(mode)
        before = perf_counter_ns()
        planner.calculate()
        after = perf_counter_ns()
        print_result(planner, after - before)


def run():
    cli()


if __name__ == "__main__":
    run()
