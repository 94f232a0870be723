from typing import NamedTuple

from pydantic import BaseModel, ConfigDict


class SensorRange(NamedTuple):
    low: float
    high: float


SENSOR_RANGES: dict[str, SensorRange] = {
    "water_level": SensorRange(0.0, 100.0),
    "temperature": SensorRange(0.0, 50.0),
    "ph": SensorRange(5.0, 9.0),
    "turbidity": SensorRange(0.0, 300.0),
}


class Reading(BaseModel):
    model_config = ConfigDict(frozen=True)

    water_level: float
    temperature: float
    ph: float
    turbidity: float

    @classmethod
    def zero(cls) -> "Reading":
        return cls(water_level=0.0, temperature=0.0, ph=0.0, turbidity=0.0)


class Thresholds(BaseModel):
    water_level_max: float = 80.0
    temperature_max: float = 40.0
    ph_min: float = 6.5
    ph_max: float = 8.5
    turbidity_max: float = 250.0


DEFAULT_THRESHOLDS = Thresholds()
