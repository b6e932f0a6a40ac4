"""
Dicephrase logging.

Library modules log through get_logger() at DEBUG level and never log
generated words. CLI output (cli.py) goes through print().
"""

import logging

_FORMAT = '%(asctime)s [%(name)s] %(levelname)s: %(message)s'


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under 'dicephrase'."""
    return logging.getLogger(f'dicephrase.{name}')


def setup_logging(level=logging.INFO, log_file=None):
    """
    Configure the dicephrase root logger.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        level: Logging level or level name (default INFO)
        log_file: Optional file path for file logging
    """
    logger = logging.getLogger('dicephrase')
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(_FORMAT)

    handler = logging.StreamHandler()
    handler.setFormatter(fmt)
    logger.addHandler(handler)

    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger
