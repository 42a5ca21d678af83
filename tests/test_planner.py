import pytest

from greedytsp.error import InvalidDirectionError
from greedytsp.parser import get_inst
from greedytsp.planner import TourPlanner
from greedytsp.solver import cli
from greedytsp.types import Direction, Instance, Node


@pytest.fixture
def square_inst(square4):
    return Instance("square", [Node(i, f"city {i}") for i in range(4)], square4)


def test_calculate_and_reset(square_inst):
    planner = TourPlanner(square_inst)
    assert planner.routes == []
    assert planner.total_distance == 0

    sel = planner.calculate()
    assert sel.total_distance == planner.total_distance == 80
    assert len(planner.routes) == 4
    assert len(planner.ordered_routes) == 4
    assert planner.ordered_routes[0].from_id == 0
    assert planner.is_complete

    planner.reset()
    assert planner.selection is None
    assert planner.routes == []
    assert planner.ordered_routes == []
    assert planner.total_distance == 0
    assert not planner.is_complete


def test_set_mode_clears(square_inst):
    planner = TourPlanner(square_inst, "min")
    planner.calculate()
    planner.set_mode("max")
    assert planner.mode is Direction.MAX
    assert planner.routes == []

    planner.calculate()
    assert planner.total_distance == 95

    with pytest.raises(InvalidDirectionError):
        planner.set_mode("sideways")


def test_itinerary_names(square_inst):
    planner = TourPlanner(square_inst)
    planner.calculate()
    rows = list(planner.itinerary())
    assert [r[0] for r in rows] == [1, 2, 3, 4]
    assert rows[0][1] == "city 0"
    assert rows[-1][2] == "city 0"
    assert sum(r[3] for r in rows) == 80


def test_mexico_tour_starts_in_capital():
    planner = TourPlanner(get_inst("mexico.json"))
    planner.calculate()
    rows = list(planner.itinerary())
    assert len(rows) == 10
    assert rows[0][1] == rows[-1][2] == "Ciudad de México"


def test_cli_both_modes(capsys):
    cli(["square4.dat", "--mode", "both"])
    out = capsys.readouterr().out
    assert "Solving inst: square4" in out
    assert "Total distance: 80" in out
    assert "Total distance: 95" in out
    assert "Itinerary cost: 80" in out
    assert "Itinerary cost: 95" in out
    assert "Incomplete tour" not in out
    assert "differs" not in out


def test_cli_default_instance(capsys):
    cli([])
    out = capsys.readouterr().out
    assert "Ciudad de México" in out
    assert "Mode: min" in out


def test_itinerary_cost_matches_total(square_inst):
    planner = TourPlanner(square_inst)
    assert planner.itinerary_cost() == 0
    for mode in Direction:
        planner.set_mode(mode)
        planner.calculate()
        assert planner.itinerary_cost() == planner.total_distance


def test_mexico_itinerary_cost():
    planner = TourPlanner(get_inst("mexico.json"), "max")
    planner.calculate()
    assert planner.itinerary_cost() == pytest.approx(planner.total_distance)
