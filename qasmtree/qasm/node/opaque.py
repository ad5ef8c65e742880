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

"""Node for an OPENQASM opaque gate declaration."""

from .node import Node


class Opaque(Node):
    """Node for an OPENQASM opaque gate declaration.

    children[0] is an id node. Its interned handle is kept as name_handle.
    If len(children) is 3, children[1] is an idlist node with the
    parameters, and children[2] is an idlist node.
    Otherwise, children[1] is an idlist node.
    """

    def __init__(self, children):
        """Create the opaque gate node."""
        super().__init__("opaque", children, None)
        self.id = children[0]  # pylint: disable=invalid-name
        self.name = self.id.name
        self.name_handle = self.id.string_handle
        self.line = self.id.line
        if len(children) == 3:
            self.arguments = children[1]
            self.bitlist = children[2]
        else:
            self.arguments = None
            self.bitlist = children[1]

    def n_args(self):
        """Return the number of parameter expressions."""
        if self.arguments:
            return self.arguments.size()
        return 0

    def n_bits(self):
        """Return the number of qubit arguments."""
        return self.bitlist.size()

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        string = "opaque %s" % self.name
        if self.arguments is not None:
            string += "(" + self.arguments.qasm() + ")"
        string += " " + self.bitlist.qasm() + ";"
        return string
