import random

from borehole.schemas.reading import SENSOR_RANGES, Reading


def make_rng(seed: int | None = None) -> random.Random:
    return random.Random(seed)


def generate_reading(rng: random.Random | None = None) -> Reading:
    """Sample each sensor independently from its fixed uniform range."""
    source = rng if rng is not None else random
    values = {name: source.uniform(bounds.low, bounds.high) for name, bounds in SENSOR_RANGES.items()}
    return Reading(**values)
