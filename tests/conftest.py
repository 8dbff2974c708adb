# tests/conftest.py

import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def scenario_d_source():
    return "grid 5,5\nrect at 0,0 width 5 height 5\nxor rect at 2,2 width 1 height 1\n"
