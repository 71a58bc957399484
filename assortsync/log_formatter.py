##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""Console logging for the `assortsync` command."""

import logging
import sys

import coloredlogs


LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s (%(module)s:%(lineno)d) %(message)s"


def setup_logging(logger: logging.Logger, log_level: str = "INFO", colors: bool = True):
    """
    Attach a stdout handler to `logger` and stop records reaching the root logger.

    Args:
        logger: The logger to configure.
        log_level: Name of the level to log at.
        colors: If True, let coloredlogs colorize the output.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    logger.setLevel(log_level)
    logger.propagate = False

    if colors:
        coloredlogs.install(level=log_level, logger=logger, fmt=LOG_FORMAT)
