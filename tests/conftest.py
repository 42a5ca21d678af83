from __future__ import annotations

import pytest

from hypothesis import HealthCheck, settings

from greedytsp.types import Edge

settings.register_profile(
    "ci",
    max_examples=60,
    deadline=None,
    derandomize=True,
    print_blob=True,
    suppress_health_check=(HealthCheck.too_slow,),
)
settings.load_profile("ci")


@pytest.fixture
def square4() -> list[Edge]:
    """Complete graph on 4 nodes: 0-1=10, 0-2=15, 0-3=20, 1-2=35, 1-3=25, 2-3=30."""
    return [
        Edge(0, 1, 10),
        Edge(0, 2, 15),
        Edge(0, 3, 20),
        Edge(1, 2, 35),
        Edge(1, 3, 25),
        Edge(2, 3, 30),
    ]
