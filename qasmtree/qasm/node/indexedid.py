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

"""Node for an OPENQASM indexed id."""

from .node import Node


class IndexedId(Node):
    """Node for an OPENQASM indexed id, ``name[index]``.

    children[0] is an id node.
    children[1] is an Int node.
    """

    def __init__(self, children):
        """Create the indexed id node."""
        super().__init__("indexed_id", children, None)
        self.id = children[0]  # pylint: disable=invalid-name
        self.name = self.id.name
        self.name_handle = self.id.string_handle
        self.line = self.id.line
        self.index = children[1].value

    def to_string(self, indent):
        """Print with indent."""
        ind = indent * " "
        print(ind, "indexed_id", self.name, self.index)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "%s[%d]" % (self.name, self.index)
