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

"""Node for an OPENQASM prefix expression."""

import operator

from .node import Node
from .nodeexception import NodeException


VALID_OPERATORS = {
    "+": operator.pos,
    "-": operator.neg,
}


class Prefix(Node):
    """Node for an OPENQASM prefix expression.

    The unary operator is in the value field, ``+`` or ``-``.
    children[0] is an expression node.
    """

    def __init__(self, operation, children):
        """Create the prefix node."""
        super().__init__("prefix", children, None)
        self.value = operation
        self.expression = True

    def operation(self):
        """
        Return the operator as a function f(operand).
        """
        try:
            return VALID_OPERATORS[self.value]
        except KeyError as ex:
            raise NodeException(f"internal error: undefined prefix '{self.value}'") from ex

    def to_string(self, indent):
        """Print with indent."""
        ind = indent * " "
        print(ind, "prefix", self.value)
        self.children[0].to_string(indent + 3)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return self.value + "(" + self.children[0].qasm() + ")"

    def real(self, nested_scope=None):
        """Return the correspond floating point number."""
        operation = self.operation()
        expr = self.children[0].real(nested_scope)
        return operation(expr)
