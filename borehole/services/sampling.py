import logging
import random
from typing import Callable

from borehole.core.config import settings
from borehole.schemas.reading import Reading
from borehole.services.alert_engine import evaluate_alert
from borehole.services.generator import generate_reading, make_rng

logger = logging.getLogger(__name__)


class SamplingSession:
    """View state for one dashboard session.

    The page timer reports a cumulative fire count; ``on_timer`` turns each
    new fire into exactly one ``tick``. Nothing is sampled while unmounted.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        interval_ms: int | None = None,
        generator: Callable[[random.Random], Reading] = generate_reading,
    ) -> None:
        self.rng = rng if rng is not None else make_rng(settings.random_seed)
        self.interval_ms = interval_ms if interval_ms is not None else settings.sample_interval_ms
        self.generator = generator
        self.current: Reading = Reading.zero()
        self.history: list[Reading] = []
        self.alert: str | None = None
        self.mounted = False
        self.generation = 0
        self._fires_seen = 0

    @property
    def timer_key(self) -> str:
        return f"borehole-sampling-{self.generation}"

    def mount(self) -> None:
        if self.mounted:
            return
        self.generation += 1
        self._fires_seen = 0
        self.mounted = True
        logger.info("Sampling started (every %d ms, timer %s)", self.interval_ms, self.timer_key)

    def unmount(self) -> None:
        if not self.mounted:
            return
        self.mounted = False
        logger.info("Sampling stopped after %d readings", len(self.history))

    def reset(self) -> None:
        self.current = Reading.zero()
        self.history = []
        self.alert = None
        logger.info("Session history cleared")

    def tick(self) -> Reading | None:
        if not self.mounted:
            return None

        reading = self.generator(self.rng)
        self.current = reading
        self.history.append(reading)

        alert = evaluate_alert(reading)
        if alert and alert != self.alert:
            logger.warning(alert)
        self.alert = alert

        logger.debug("Sample %d: %s", len(self.history), reading.model_dump())
        return reading

    def on_timer(self, fire_count: int) -> int:
        """Run one tick per timer fire not yet seen; return how many ran."""
        if not self.mounted:
            return 0

        if fire_count < self._fires_seen:
            # timer restarted under the same key
            self._fires_seen = 0

        pending = fire_count - self._fires_seen
        self._fires_seen = fire_count
        for _ in range(pending):
            self.tick()
        return pending
