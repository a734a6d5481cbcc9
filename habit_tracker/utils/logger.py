import logging
import logging.config

from habit_tracker.config import TrackerConfig

def setup_logging(config: TrackerConfig) -> logging.Logger:
    if config.logging.to_file:
        config.logging.log_dir.mkdir(exist_ok=True, parents=True)
    logging.config.dictConfig(config.get_logging_config())
    return logging.getLogger("habit_tracker")
