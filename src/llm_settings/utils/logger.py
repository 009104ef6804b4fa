import logging
import sys

from llm_settings import config


def setup_logger(name: str = "llm_settings", level: str | None = None) -> logging.Logger:
    """Configure the package logger once and return it.

    Module loggers (``logging.getLogger(__name__)``) are children of this one,
    so configuring it is enough to route every record from the package.
    """
    # Reuse Uvicorn's error logger handlers so our output always appears in console
    base_logger = logging.getLogger("uvicorn.error")
    logger = logging.getLogger(name)
    logger.setLevel(level or config.log_level())
    if base_logger.handlers and not logger.handlers:
        for h in base_logger.handlers:
            logger.addHandler(h)
    logger.propagate = False
    if logger.handlers:
        return logger  # avoid duplicate handlers

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s: %(message)s")
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    return logger
