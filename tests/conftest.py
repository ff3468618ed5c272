import numpy as np
import pytest

from models.point import Point
from models.segment import Segment
from utils.scenes import square_scene, parallel_scene, random_scene


@pytest.fixture
def square():
    return square_scene(100)


@pytest.fixture
def stacked():
    """Four horizontal segments at y = 0, 10, 20, 30."""
    return parallel_scene(count=4, spacing=10, length=10)


@pytest.fixture
def layered():
    """Near wall, splitter and far wall, all horizontal."""
    return [
        Segment(Point(-5, -10), Point(5, -10), "near"),
        Segment(Point(-10, 0), Point(10, 0), "splitter"),
        Segment(Point(-20, 10), Point(20, 10), "far"),
    ]


@pytest.fixture(params=[1, 7, 42, 2024])
def random_segments(request):
    rng = np.random.default_rng(request.param)
    return random_scene(count=15, extent=(100, 100), rng=rng).segments
