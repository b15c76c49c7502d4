"""Logger setup for the openapi_to_ts package and its CLI."""

import logging

ROOT_LOGGER = "openapi_to_ts"


def get_logger(module_name: str) -> logging.Logger:
    """Return the logger for a module inside the package."""
    return logging.getLogger(module_name)


def configure_logging(*, verbose: bool = False) -> None:
    """Send package log records to stderr, at DEBUG level when verbose."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    # one handler per process, even across repeated CLI invocations
    logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(f"[{ROOT_LOGGER}] %(levelname)s %(message)s"))
    logger.addHandler(handler)
