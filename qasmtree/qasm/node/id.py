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

"""Node for an OPENQASM id."""

from .node import Node
from .nodeexception import NodeException


class Id(Node):
    """Node for an OPENQASM id.

    The node has no children but has fields name, line and string_handle,
    the interned handle of the name.
    """

    def __init__(self, id, line, string_handle=None):
        """Create the id node."""
        # pylint: disable=redefined-builtin
        super().__init__("id", None, None)
        self.name = id
        self.line = line
        self.string_handle = string_handle

    def to_string(self, indent):
        """Print the node with indent."""
        ind = indent * " "
        print(ind, "id", self.name)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return self.name

    def real(self, nested_scope=None):
        """Return the correspond floating point number."""
        if not nested_scope or self.name not in nested_scope[-1]:
            raise NodeException(
                "Expected local parameter name: ", "name=%s, line=%s" % (self.name, self.line)
            )
        return nested_scope[-1][self.name].real(nested_scope[0:-1])
