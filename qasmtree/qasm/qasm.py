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

"""
OPENQASM circuit object.
"""
import os

from qasmtree.user_config import get_config

from .context import ParseContext
from .exceptions import QasmError, error_from_failure
from .include import FileIncludeResolver
from .qasmparser import QasmParser


class Qasm:
    """OPENQASM circuit object."""

    def __init__(self, filename=None, data=None):
        """Create an OPENQASM circuit object."""
        if filename is None and data is None:
            raise QasmError("Missing input file and/or data")
        if filename is not None and data is not None:
            raise QasmError("File and data must not both be specified initializing qasm")
        self._filename = filename
        self._data = data

    def return_filename(self):
        """Return the filename."""
        return self._filename

    def _read(self):
        if self._filename:
            with open(self._filename) as ifile:
                self._data = ifile.read()
        return self._data

    def default_context(self):
        """Return a context built from the user settings.

        Includes are also searched for next to the source file.
        """
        settings = get_config()
        search_paths = list(settings.get("include_path", []))
        if self._filename:
            search_paths.append(os.path.dirname(os.path.abspath(self._filename)))
        return ParseContext.from_config(
            settings, resolve_include=FileIncludeResolver(search_paths)
        )

    def generate_tokens(self):
        """Returns a generator of the tokens."""
        data = self._read()
        return QasmParser(self.default_context()).read_tokens(data, self._filename)

    def parse_outcome(self, context=None):
        """Parse the data through a context.

        Args:
            context (ParseContext): collaborators for the parse. Defaults to
                :meth:`default_context`.

        Returns:
            Success or Failure: the outcome of the parse.
        """
        data = self._read()
        if context is None:
            context = self.default_context()
        return QasmParser(context).parse(data, self._filename)

    def parse(self):
        """Parse the data.

        Returns:
            MainProgram: the root node of the syntax tree.

        Raises:
            QasmError: subclassed by kind, if the data is not valid OPENQASM.
        """
        context = self.default_context()
        outcome = self.parse_outcome(context)
        if not outcome.ok:
            raise error_from_failure(outcome)
        return context.builder.node(outcome.root)


def parse(data, context=None):
    """Parse OPENQASM source text into a syntax tree.

    Args:
        data (str): the OPENQASM source.
        context (ParseContext): collaborators for the parse. Must build
            with an :class:`.AstArena` if given.

    Returns:
        MainProgram: the root node of the syntax tree.

    Raises:
        QasmError: subclassed by kind, if the data is not valid OPENQASM.
    """
    qasm = Qasm(data=data)
    if context is None:
        context = qasm.default_context()
    outcome = qasm.parse_outcome(context)
    if not outcome.ok:
        raise error_from_failure(outcome)
    return context.builder.node(outcome.root)
