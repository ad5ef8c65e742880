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

"""Node for an OPENQASM external function."""

import numpy as np

from .node import Node
from .nodeexception import NodeException


DISPATCH = {
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
    "exp": np.exp,
    "ln": np.log,
    "sqrt": np.sqrt,
}


class External(Node):
    """Node for an OPENQASM external function.

    The function name is in the function field, one of sin, cos, tan, exp,
    ln or sqrt, and function_handle is its interned handle.
    children[0] is the operand, an expression node.
    """

    def __init__(self, function, children, function_handle=None):
        """Create the external node."""
        super().__init__("external", children, None)
        self.function = function
        self.function_handle = function_handle
        self.expression = True

    def to_string(self, indent):
        """Print with indent."""
        ind = indent * " "
        print(ind, "external", self.function)
        self.children[0].to_string(indent + 3)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return self.function + "(" + self.children[0].qasm() + ")"

    def real(self, nested_scope=None):
        """Return the correspond floating point number."""
        if self.function not in DISPATCH:
            raise NodeException("internal error: undefined external", self.function)
        arg = self.children[0].real(nested_scope)
        return float(DISPATCH[self.function](arg))
