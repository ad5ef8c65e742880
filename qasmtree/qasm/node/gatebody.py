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

"""Node for an OPENQASM custom gate body."""

from .node import Node


class GateBody(Node):
    """Node for an OPENQASM custom gate body.

    children[0], if present, is a gate operation list node. An empty body
    has no children.
    """

    def __init__(self, children):
        """Create the gatebody node."""
        super().__init__("gate_body", children, None)

    def operations(self):
        """Return the gate operation nodes, in source order."""
        if not self.children:
            return []
        return self.children[0].children

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        string = ""
        for children in self.operations():
            string += "  " + children.qasm() + "\n"
        return string

    def calls(self):
        """Return a list of custom gate names in this gate body."""
        lst = []
        for children in self.operations():
            if children.type == "custom_unitary":
                lst.append(children.name)
        return lst
