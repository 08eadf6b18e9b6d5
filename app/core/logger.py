import logging

from app.core.config import settings

CONSOLE_FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"


def configure_logging(name: str = "app") -> logging.Logger:
    """Give the ``app`` logger tree a console handler unless something else already logs.

    Under uvicorn the root logger is configured and records propagate there.
    """
    logger = logging.getLogger(name)
    logger.setLevel(settings.LOG_LEVEL.upper())
    if logger.handlers or logging.getLogger().handlers:
        return logger  # Already configured

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)
    return logger
