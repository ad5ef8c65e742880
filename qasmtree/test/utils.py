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

"""Utils for using with qasmtree unit tests."""

import logging
import os
from enum import Enum

from qasmtree import __path__ as qasmtree_path


class Path(Enum):
    """Helper with paths commonly used during the tests."""

    # Main package path:    qasmtree/
    SDK = qasmtree_path[0]
    # test.python path: test/python/
    TEST = os.path.normpath(os.path.join(SDK, "..", "test", "python"))
    # Sample QASMs path: test/python/qasm
    QASMS = os.path.normpath(os.path.join(TEST, "qasm"))
    # Bundled include files: qasmtree/qasm/libs
    LIBS = os.path.normpath(os.path.join(SDK, "qasm", "libs"))


def setup_test_logging(logger, log_level, filename):
    """Set logging to file and stdout for a logger.

    Args:
        logger (Logger): logger object to be updated.
        log_level (str): logging level.
        filename (str): name of the output file.
    """
    # Set up formatter.
    log_fmt = "{}.%(funcName)s:%(levelname)s:%(asctime)s: %(message)s".format(logger.name)
    formatter = logging.Formatter(log_fmt)

    # Set up the file handler.
    file_handler = logging.FileHandler(filename)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if os.getenv("STREAM_LOG"):
        # Set up the stream handler.
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    # Set the logging level from the environment variable, defaulting
    # to INFO if it is not a valid level.
    level = logging.getLevelName(log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logger.setLevel(level)


def tree_shape(node):
    """Return a nested tuple describing a syntax tree without its handles.

    Leaves are described by their type and value, or their name for
    identifiers, so that two trees built from the same source compare equal.
    """
    if node.type == "id":
        return ("id", node.name, node.line)
    if not node.children:
        return (node.type, getattr(node, "value", getattr(node, "file", None)))
    return (node.type, getattr(node, "value", None)) + tuple(
        tree_shape(child) for child in node.children
    )
