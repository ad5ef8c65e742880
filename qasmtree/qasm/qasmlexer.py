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
OPENQASM Lexer.

This is a wrapper around the PLY lexer to support the "include" statement
by creating a stack of lexers. The directive itself is still returned as
INCLUDE, STRING and ';' tokens; the text of the included file follows them
in the token stream.
"""

import logging

import ply.lex as lex

from .exceptions import QasmError, QasmIncludeError, QasmLexicalError
from .interner import StringInterner

logger = logging.getLogger(__name__)


class QasmLexer:
    """OPENQASM Lexer.

    Identifier, string and external function tokens carry the handle the
    interner issued for their text instead of the text itself.
    """

    # pylint: disable=invalid-name,missing-function-docstring

    def __init__(self, interner=None, resolve_include=None, max_include_depth=32):
        """Create the OPENQASM lexer.

        Args:
            interner (StringInterner): issues the token value handles.
            resolve_include (callable): returns the text of an included file.
            max_include_depth (int): limit on nested includes.
        """
        self.interner = interner if interner is not None else StringInterner()
        self.resolve_include = resolve_include
        self.max_include_depth = max_include_depth
        self.lexer = lex.lex(module=self, debug=False, errorlog=lex.NullLogger())
        self.stack = []
        self.filename = None
        self._include_state = 0
        self._include_line = None
        self._include_path = None

    def input(self, data, filename=None):
        """Set the input text data."""
        while self.stack:
            self.lexer = self.stack.pop()
        self.filename = filename
        self.lexer.qasm_file = filename
        self._include_state = 0
        self.lexer.input(data)
        self.lexer.lineno = 1

    def current_line(self):
        """Return the line the lexer has read up to."""
        return self.lexer.lineno

    def token(self):
        """Return the next token, or None at the end of the outermost input."""
        tok = self.lexer.token()
        while tok is None and self.stack:
            self.pop()
            tok = self.lexer.token()
        if tok is not None:
            tok.include_file = self.filename if self.stack else None
            self._follow_include(tok)
        return tok

    def __iter__(self):
        return self

    def __next__(self):
        tok = self.token()
        if tok is None:
            raise StopIteration
        return tok

    def _follow_include(self, tok):
        # INCLUDE STRING ';' switches to the included text once ';' is read.
        if tok.type == "INCLUDE":
            self._include_state = 1
            self._include_line = tok.lineno
        elif self._include_state == 1 and tok.type == "STRING":
            self._include_state = 2
            self._include_path = self.interner.lookup(tok.value)
        elif self._include_state == 2 and tok.type == ";":
            self._include_state = 0
            self.push(self._include_path, self._include_line)
        else:
            self._include_state = 0

    def locate(self, message):
        """Prefix message with the include file being read, if any."""
        if self.stack:
            return "%s: %s" % (self.filename, message)
        return message

    def pop(self):
        """Pop a PLY lexer off the stack."""
        logger.debug("Finished include file %s", self.filename)
        self.lexer = self.stack.pop()
        self.filename = self.lexer.qasm_file

    def push(self, path, line=None):
        """Push a PLY lexer on the stack to read the file included as path."""
        if len(self.stack) >= self.max_include_depth:
            raise QasmIncludeError(
                self.locate(
                    "Include depth exceeds %d while including %s" % (self.max_include_depth, path)
                ),
                line=line,
            )
        if self.resolve_include is None:
            raise QasmIncludeError(self.locate("No include resolver to read %s" % path), line=line)
        try:
            data = self.resolve_include(path)
        except QasmError as ex:
            raise QasmIncludeError(self.locate(ex.message), line=line) from ex
        except OSError as ex:
            raise QasmIncludeError(
                self.locate("Unable to read include file %s:" % path), str(ex), line=line
            ) from ex
        if data is None:
            raise QasmIncludeError(
                self.locate("Include file %s cannot be found" % path), line=line
            )
        if isinstance(data, bytes):
            try:
                data = data.decode("utf-8")
            except UnicodeDecodeError as ex:
                raise QasmIncludeError(
                    self.locate("Include file %s is not valid UTF-8:" % path), ex.reason, line=line
                ) from ex
        logger.debug("Including %s from line %s", path, line)
        self.stack.append(self.lexer)
        self.lexer = self.lexer.clone()
        self.lexer.input(data)
        self.lexer.lineno = 1
        self.lexer.qasm_file = path
        self.filename = path

    # ---- Beginning of the PLY lexer ----
    literals = r"=()[]{};,+-*/^"
    reserved = {
        "barrier": "BARRIER",
        "creg": "CREG",
        "gate": "GATE",
        "if": "IF",
        "measure": "MEASURE",
        "opaque": "OPAQUE",
        "qreg": "QREG",
        "pi": "PI",
        "reset": "RESET",
        "include": "INCLUDE",
        "sin": "SIN",
        "cos": "COS",
        "tan": "TAN",
        "exp": "EXP",
        "ln": "LN",
        "sqrt": "SQRT",
    }
    externals = ("SIN", "COS", "TAN", "EXP", "LN", "SQRT")
    tokens = [
        "OPENQASM",
        "NNINTEGER",
        "REAL",
        "CX",
        "U",
        "ASSIGN",
        "MATCHES",
        "ID",
        "STRING",
    ] + list(reserved.values())

    def t_OPENQASM(self, t):
        "OPENQASM"
        return t

    def t_REAL(self, t):
        r"(([0-9]+|([0-9]+)?\.[0-9]+|[0-9]+\.)[eE][+-]?[0-9]+)|(([0-9]+)?\.[0-9]+|[0-9]+\.)"
        t.value = float(t.value)
        return t

    def t_NNINTEGER(self, t):
        r"[1-9]+[0-9]*|0"
        t.value = int(t.value)
        return t

    def t_ASSIGN(self, t):
        "->"
        return t

    def t_MATCHES(self, t):
        "=="
        return t

    def t_STRING(self, t):
        r"\"([^\\\"\n]|\\.)*\""
        t.value = self.interner.intern(t.value[1:-1])
        return t

    def t_COMMENT(self, _):
        r"//.*"

    def t_CX(self, t):
        "CX"
        return t

    def t_U(self, t):
        "U"
        return t

    def t_ID(self, t):
        r"[a-z][a-zA-Z0-9_]*"
        t.type = self.reserved.get(t.value, "ID")
        if t.type == "ID" or t.type in self.externals:
            t.value = self.interner.intern(t.value)
        return t

    def t_newline(self, t):
        r"\n+"
        t.lexer.lineno += len(t.value)

    t_ignore = " \t\r"

    def t_error(self, t):
        raise QasmLexicalError(
            self.locate("Unable to match any token rule, got -->%s<--" % t.value[0]),
            line=t.lexer.lineno,
        )
