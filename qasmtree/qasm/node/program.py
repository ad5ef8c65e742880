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

"""Node for an OPENQASM program."""

from .listnode import ListNode


class Program(ListNode):
    """Node for an OPENQASM program.

    children is a list of nodes (statements). Include nodes are written
    out as comments, since the statements of the included file follow them.
    """

    def __init__(self, previous, element):
        """Create the program node."""
        super().__init__("program", previous, element)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        string = ""
        for children in self.children:
            if children.type == "include":
                string += children.spliced_qasm() + "\n"
            else:
                string += children.qasm() + "\n"
        return string
