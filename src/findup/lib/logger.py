"""Package logger."""

import logging

logger = logging.getLogger("findup")


def set_debug(enabled: bool) -> None:
    if enabled:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)
