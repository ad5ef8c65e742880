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

"""Exceptions for errors raised while parsing OPENQASM."""

from qasmtree.exceptions import QasmTreeError


class QasmError(QasmTreeError):
    """Base class for errors raised while parsing OPENQASM.

    ``line`` is the source line the error was detected on, or None when the
    error is not tied to a position in the input.
    """

    kind = "syntax"

    def __init__(self, *msg, line=None):
        """Set the error message and source line."""
        super().__init__(*msg)
        self.line = line


class QasmLexicalError(QasmError):
    """Raised when the input contains characters that form no token."""

    kind = "lexical"


class QasmSyntaxError(QasmError):
    """Raised when a token is not valid in the current parser state."""

    kind = "syntax"


class QasmIncludeError(QasmError):
    """Raised when the contents of an included file cannot be retrieved."""

    kind = "include"


class QasmResourceError(QasmError):
    """Raised when the parser exhausts its stack or the host runs out of memory."""

    kind = "resource"


class QasmBuilderError(QasmError):
    """Raised when a collaborator is handed a handle it never issued.

    This points at the wiring of the :class:`.ParseContext`, not at the source.
    """

    kind = "builder"


ERRORS_BY_KIND = {
    cls.kind: cls
    for cls in (
        QasmLexicalError,
        QasmSyntaxError,
        QasmIncludeError,
        QasmResourceError,
        QasmBuilderError,
    )
}


def error_from_failure(failure):
    """Return the exception matching a :class:`.Failure` outcome."""
    error_class = ERRORS_BY_KIND.get(failure.kind, QasmError)
    return error_class(failure.message, line=failure.line)
