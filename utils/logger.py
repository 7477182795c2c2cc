# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(log_dir="data/logs", level="INFO", keep_days=7, console=True):
    """
    Set up the "laundry" logger once per process and return it.

    The engine modules log under children of it (laundry.orders,
    laundry.prices, laundry.backup, ...), so orders saved, status changes,
    price edits and restores all end up in laundry.log. The file rolls over
    at midnight and keep_days old files are kept. Calling it again returns
    the same logger without adding handlers, only the level is updated.
    """
    logger = logging.getLogger("laundry")
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if logger.handlers:
        return logger

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers = [TimedRotatingFileHandler(
        filename=log_dir / "laundry.log",
        when="midnight",
        backupCount=keep_days,
        encoding="utf-8",
    )]
    # the till's terminal shows the same lines
    if console:
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging to %s", log_dir / "laundry.log")
    return logger
