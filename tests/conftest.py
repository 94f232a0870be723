import random

import pytest

from borehole.schemas.reading import Reading


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def calm_reading() -> Reading:
    return Reading(water_level=50.0, temperature=20.0, ph=7.0, turbidity=100.0)
