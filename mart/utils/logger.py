# mart/utils/logger.py
import logging


def setup_logger(level: str = "INFO") -> logging.Logger:
    """
    Configure the "mart" logger with a single console handler.
    Calling it again only updates the level.
    """
    logger = logging.getLogger("mart")
    logger.setLevel(level.upper())

    # Avoid duplicate handlers if setup_logger() is called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logger.debug("Logger initialized")
    return logger
