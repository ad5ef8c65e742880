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

"""Node for an OPENQASM if statement."""

from .node import Node


class If(Node):
    """Node for an OPENQASM if statement.

    children[0] is an id node.
    children[1] is an integer node.
    children[2] is a quantum operation node. The grammar admits any quantum
    operation here, nested ifs and barriers included.
    """

    def __init__(self, children):
        """Create the if node."""
        super().__init__("if", children, None)
        self.id = children[0]  # pylint: disable=invalid-name
        self.value = children[1].value
        self.operation = children[2]

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return (
            "if("
            + self.children[0].qasm()
            + "=="
            + str(self.children[1].value)
            + ") "
            + self.children[2].qasm()
        )
