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

"""Node for an OPENQASM binary operation expression."""

import operator

from .node import Node
from .nodeexception import NodeException


VALID_OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "^": operator.pow,
}


class BinaryOp(Node):
    """Node for an OPENQASM binary operation expression.

    The operator is in the value field, one of ``+ - * / ^``.
    children[0] is the left expression.
    children[1] is the right expression.
    """

    def __init__(self, operation, children):
        """Create the binaryop node."""
        super().__init__("binop", children, None)
        self.value = operation
        self.expression = True

    def operation(self):
        """
        Return the operator as a function f(left, right).
        """
        try:
            return VALID_OPERATORS[self.value]
        except KeyError as ex:
            raise NodeException(f"internal error: undefined operator '{self.value}'") from ex

    def to_string(self, indent):
        """Print with indent."""
        ind = indent * " "
        print(ind, "binop", self.value)
        for child in self.children:
            child.to_string(indent + 3)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "(" + self.children[0].qasm() + self.value + self.children[1].qasm() + ")"

    def real(self, nested_scope=None):
        """Return the correspond floating point number."""
        operation = self.operation()
        lhs = self.children[0].real(nested_scope)
        rhs = self.children[1].real(nested_scope)
        try:
            value = operation(lhs, rhs)
        except (ZeroDivisionError, OverflowError) as ex:
            raise NodeException("Cannot evaluate", self.qasm() + ":", str(ex)) from ex
        if isinstance(value, complex):
            raise NodeException("Cannot evaluate", self.qasm() + ":", "complex result")
        return value
