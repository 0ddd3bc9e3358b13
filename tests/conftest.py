import matplotlib

matplotlib.use("Agg")

import pytest

from config import ControllerConfig
from controller import IntersectionController
from pacing import InstantPacer


@pytest.fixture
def config():
    return ControllerConfig(min_green=5, max_green=40, yellow_time=3, all_red_time=1, cycles=1)


@pytest.fixture
def controller(config):
    return IntersectionController(config, pacer=InstantPacer())
