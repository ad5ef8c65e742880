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

"""Node for an OPENQASM file identifier/version statement."""

from .node import Node


class Magic(Node):
    """Node for an OPENQASM file identifier/version statement.

    children[0] is a real node holding the version number.
    """

    def __init__(self, children):
        """Create the version node."""
        super().__init__("magic", children, None)
        self.language = "OPENQASM"

    def version(self):
        """Return the version as a string."""
        return str(self.children[0].value)

    def qasm(self):
        """Return the corresponding format string."""
        return f"{self.language} {self.version()};"
