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

"""Main qasmtree public functionality."""

from qasmtree.exceptions import QasmTreeError
from qasmtree.qasm import Qasm, QasmError, parse
from qasmtree._logging import QASMTREE_LOGGING_CONFIG, set_qasmtree_logger, unset_qasmtree_logger

from .version import __version__

__all__ = [
    "QASMTREE_LOGGING_CONFIG",
    "Qasm",
    "QasmError",
    "QasmTreeError",
    "parse",
    "set_qasmtree_logger",
    "unset_qasmtree_logger",
    "__version__",
]
