# This code is part of qasmtree.
#
# (C) Copyright IBM 2017, 2020.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""
=================================================
Top-level exceptions (:mod:`qasmtree.exceptions`)
=================================================

All errors raised by qasmtree are subclasses of the base:

.. autoexception:: QasmTreeError

The parser has its own more granular errors in :mod:`qasmtree.qasm.exceptions`,
all deriving from :exc:`.QasmError`, which is in turn a :exc:`QasmTreeError`.

Failures reading the user settings file raise:

.. autoexception:: QasmTreeUserConfigError
"""


class QasmTreeError(Exception):
    """Base class for errors raised by qasmtree."""

    def __init__(self, *message):
        """Set the error message."""
        super().__init__(" ".join(message))
        self.message = " ".join(message)

    def __str__(self):
        """Return the message."""
        return repr(self.message)


class QasmTreeUserConfigError(QasmTreeError):
    """Raised when an error is encountered reading a user config file."""

    message = "User config invalid"
