from borehole.schemas.alert import AlertOut
from borehole.schemas.reading import DEFAULT_THRESHOLDS, SENSOR_RANGES, Reading, SensorRange, Thresholds

__all__ = [
    "AlertOut",
    "DEFAULT_THRESHOLDS",
    "Reading",
    "SENSOR_RANGES",
    "SensorRange",
    "Thresholds",
]
