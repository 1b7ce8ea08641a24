import logging
import sys


logger = logging.getLogger("mcversion")

_PLAIN_FORMAT = "%(message)s"
_DEBUG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(debug: bool):
    """
    Point the mcversion logger at stdout, verbose when debugging.

    Library modules log under ``mcversion.*`` and inherit this level.
    """
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if not logger.hasHandlers():
        logger.addHandler(logging.StreamHandler(sys.stdout))

    for handler in logger.handlers:
        handler.setFormatter(
            logging.Formatter(_DEBUG_FORMAT if debug else _PLAIN_FORMAT)
        )
