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

"""Node for an OPENQASM include directive."""

from .node import Node


class Include(Node):
    """Node for an OPENQASM include directive.

    This node has no children. The file name is in the file field and
    string_handle is its interned handle.
    """

    def __init__(self, file, string_handle=None):
        """Create the include node."""
        super().__init__("include", None, None)
        self.file = file
        self.string_handle = string_handle

    def to_string(self, indent):
        """Print with indent."""
        ind = indent * " "
        print(ind, "include", self.file)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return 'include "%s";' % self.file

    def spliced_qasm(self):
        """Return the directive commented out.

        The statements of the included file follow the include node in the
        tree, so text regenerated from the tree already holds them.
        """
        return "// " + self.qasm()
