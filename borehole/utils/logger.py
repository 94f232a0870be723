import logging
import sys
from pathlib import Path

from borehole.core.config import Settings, settings


def setup_logging(config: Settings = settings) -> logging.Logger:
    """Setup application logging"""

    logger = logging.getLogger("borehole")
    logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))

    # Streamlit reruns the page script on every refresh
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
