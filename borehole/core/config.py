import os
from dataclasses import dataclass


def _int_from_env(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _optional_int_from_env(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    return _int_from_env(name, raw)


@dataclass(frozen=True)
class Settings:
    sample_interval_ms: int = 2000
    random_seed: int | None = None
    log_level: str = "INFO"
    log_file: str = "logs/dashboard.log"
    page_title: str = "Borehole Monitoring Dashboard"
    log_rows: int = 10

    def __post_init__(self) -> None:
        if self.sample_interval_ms <= 0:
            raise ValueError("SAMPLE_INTERVAL_MS must be a positive integer")
        if self.log_rows <= 0:
            raise ValueError("LOG_ROWS must be a positive integer")

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            sample_interval_ms=_int_from_env("SAMPLE_INTERVAL_MS", "2000"),
            random_seed=_optional_int_from_env("RANDOM_SEED"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE", "logs/dashboard.log"),
            page_title=os.getenv("PAGE_TITLE", "Borehole Monitoring Dashboard"),
            log_rows=_int_from_env("LOG_ROWS", "10"),
        )


settings = Settings.from_env()
