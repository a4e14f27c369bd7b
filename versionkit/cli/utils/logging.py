"""Console logging for the versionkit command line."""

import logging
import sys

logger = logging.getLogger("versionkit")


def configure_logging(debug: bool):
    """Send versionkit records to stdout, including DEBUG records when ``debug`` is set."""
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # handlers installed by the caller take precedence
    if logger.hasHandlers():
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
