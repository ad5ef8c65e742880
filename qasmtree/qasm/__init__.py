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
=============================
Qasm (:mod:`qasmtree.qasm`)
=============================

.. currentmodule:: qasmtree.qasm

QASM Routines
=============

.. autoclass:: Qasm
.. autofunction:: parse

Parser and collaborators
========================

.. autoclass:: QasmParser
.. autoclass:: QasmLexer
.. autoclass:: ParseContext
.. autoclass:: AstBuilder
.. autoclass:: AstArena
.. autoclass:: StringInterner
.. autoclass:: FileIncludeResolver
.. autoclass:: Success
.. autoclass:: Failure

Exceptions
==========

.. autoexception:: QasmError
.. autoexception:: QasmLexicalError
.. autoexception:: QasmSyntaxError
.. autoexception:: QasmIncludeError
.. autoexception:: QasmResourceError
.. autoexception:: QasmBuilderError
"""

from .builder import AstArena, AstBuilder
from .context import ParseContext
from .exceptions import (
    QasmBuilderError,
    QasmError,
    QasmIncludeError,
    QasmLexicalError,
    QasmResourceError,
    QasmSyntaxError,
)
from .include import FileIncludeResolver
from .interner import StringInterner
from .outcome import Failure, Success
from .qasm import Qasm, parse
from .qasmlexer import QasmLexer
from .qasmparser import QasmParser
