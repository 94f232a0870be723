import random

from borehole.schemas.reading import SENSOR_RANGES, Reading
from borehole.services.generator import generate_reading, make_rng


def test_readings_stay_within_sensor_ranges(rng):
    for _ in range(2000):
        reading = generate_reading(rng)
        assert 0.0 <= reading.water_level <= 100.0
        assert 0.0 <= reading.temperature <= 50.0
        assert 5.0 <= reading.ph <= 9.0
        assert 0.0 <= reading.turbidity <= 300.0


def test_readings_cover_the_whole_range(rng):
    readings = [generate_reading(rng) for _ in range(2000)]
    for name, bounds in SENSOR_RANGES.items():
        values = [getattr(reading, name) for reading in readings]
        span = bounds.high - bounds.low
        assert min(values) < bounds.low + span * 0.05
        assert max(values) > bounds.high - span * 0.05


def test_seeded_rng_is_reproducible():
    first = [generate_reading(make_rng(7)) for _ in range(3)]
    second = [generate_reading(make_rng(7)) for _ in range(3)]
    assert first == second


def test_default_source_is_module_random():
    random.seed(99)
    first = generate_reading()
    random.seed(99)
    second = generate_reading()
    assert isinstance(first, Reading)
    assert first == second


def test_zero_reading():
    reading = Reading.zero()
    assert reading.model_dump() == {"water_level": 0.0, "temperature": 0.0, "ph": 0.0, "turbidity": 0.0}
