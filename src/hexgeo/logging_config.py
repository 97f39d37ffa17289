"""
Logging Configuration
Opt-in handler setup for the 'hexgeo' logger namespace.

On import the package only attaches a ``NullHandler`` to ``hexgeo``, so
rejected inputs reach the host application's handlers and nothing else.
Scripts that want hexgeo's diagnostics on the console call
:func:`setup_logging`.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "hexgeo"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    propagate: bool = False,
) -> logging.Logger:
    """
    Configures the 'hexgeo' namespace logger.

    Handlers from an earlier call are closed and replaced; the package's
    ``NullHandler`` stays.  With *propagate* left off, records are not
    printed a second time by a root handler the host already installed.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write logs to.
        propagate: Also pass records on to ancestor loggers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = propagate

    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            continue
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
