# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOGGER_NAME = "liquorstore"


def setup_logger(log_dir: str | Path = "data/logs", level: int = logging.INFO) -> logging.Logger:
    """
    Attach a midnight-rotating file (liquorstore.log, a week kept) and a
    console handler to the "liquorstore" logger. Service modules log through
    its children (liquorstore.checkout, liquorstore.reports) via get_logger.
    Calling it again returns the already configured logger.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "liquorstore.log"

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    handlers = [
        TimedRotatingFileHandler(log_file, when="midnight", backupCount=7, encoding="utf-8"),
        logging.StreamHandler(),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"logging to {log_file}")
    return logger


def get_logger(component: str) -> logging.Logger:
    # get_logger("checkout") -> "liquorstore.checkout"
    return logging.getLogger(f"{LOGGER_NAME}.{component}")
