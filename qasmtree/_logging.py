# This code is part of qasmtree.
#
# (C) Copyright IBM 2017.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Console logging for the 'qasmtree' loggers."""

import copy
import logging
from logging.config import dictConfig

from qasmtree.user_config import get_config


class SimpleInfoFormatter(logging.Formatter):
    """Formatter that writes INFO records as the bare message.

    The parser logs failed parses at INFO, and those messages already name
    the source and the line.
    """

    def formatMessage(self, record):
        if record.levelno == logging.INFO:
            return record.message
        return super().formatMessage(record)


QASMTREE_LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "f": {
            "()": SimpleInfoFormatter,
            "format": "%(asctime)s:%(name)s:%(levelname)s: %(message)s",
        },
    },
    "handlers": {"h": {"class": "logging.StreamHandler", "formatter": "f"}},
    "loggers": {
        "qasmtree": {
            "handlers": ["h"],
            "level": logging.INFO,
        },
    },
}


def set_qasmtree_logger(level=None, stream=None):
    """Attach a console handler to the 'qasmtree' logger.

    The configuration is a copy of `QASMTREE_LOGGING_CONFIG` with the level
    and stream filled in. Parse failures show up at INFO, and the parser
    trace and include bookkeeping at DEBUG.

    Args:
        level (int): level of the 'qasmtree' logger. When omitted, DEBUG if
            the ``parse_debug`` user setting is on, otherwise INFO.
        stream (file): where the handler writes, ``sys.stderr`` if omitted.

    Warning:
        This function replaces the handlers of the 'qasmtree.*' loggers and
        may interfere with a logging configuration set up by the caller.
    """
    if level is None:
        level = logging.DEBUG if get_config().get("parse_debug") else logging.INFO
    config = copy.deepcopy(QASMTREE_LOGGING_CONFIG)
    config["loggers"]["qasmtree"]["level"] = level
    if stream is not None:
        config["handlers"]["h"]["stream"] = stream
    dictConfig(config)


def unset_qasmtree_logger():
    """Remove the handlers of the 'qasmtree' logger and reset its level."""
    qasmtree_logger = logging.getLogger("qasmtree")
    for handler in list(qasmtree_logger.handlers):
        qasmtree_logger.removeHandler(handler)
    qasmtree_logger.setLevel(logging.NOTSET)
