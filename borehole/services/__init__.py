from borehole.services.alert_engine import build_threshold_alerts, evaluate_alert
from borehole.services.generator import generate_reading, make_rng
from borehole.services.sampling import SamplingSession

__all__ = [
    "SamplingSession",
    "build_threshold_alerts",
    "evaluate_alert",
    "generate_reading",
    "make_rng",
]
