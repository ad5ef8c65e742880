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

"""Node for a call of a user-defined OPENQASM gate."""

from .node import Node


class CustomUnitary(Node):
    """Node for a call of a user-defined gate, ``name(args) bits;``.

    children[0] is an id node.
    If len(children) is 3, children[1] is an expressionlist node.
    The last child is a primarylist node, or an idlist inside a gate body.

    Has properties:
    .id = id node
    .name = called gate name string
    .name_handle = interned handle of the name, as issued to the builder
    .line = source line of the name
    .arguments = None or expressionlist node
    .bitlist = primarylist or idlist node
    """

    def __init__(self, children):
        """Create the custom gate call node."""
        super().__init__("custom_unitary", children, None)
        self.id = children[0]  # pylint: disable=invalid-name
        self.name = self.id.name
        self.name_handle = self.id.string_handle
        self.line = self.id.line
        self.arguments = children[1] if len(children) == 3 else None
        self.bitlist = children[-1]

    def n_args(self):
        """Return the number of argument expressions."""
        if self.arguments is None:
            return 0
        return self.arguments.size()

    def n_bits(self):
        """Return the number of qubit arguments."""
        return self.bitlist.size()

    def to_string(self, indent):
        """Print with indent."""
        ind = indent * " "
        print(ind, "custom_unitary", self.name)
        for child in self.children[1:]:
            child.to_string(indent + 3)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        string = self.name
        if self.arguments is not None:
            string += "(" + self.arguments.qasm() + ")"
        string += " " + self.bitlist.qasm() + ";"
        return string
