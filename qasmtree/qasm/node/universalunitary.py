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

"""Node for the builtin OPENQASM U gate."""

from .node import Node
from .nodeexception import NodeException


class UniversalUnitary(Node):
    """Node for an OPENQASM ``U(theta,phi,lambda) target;`` statement.

    children[0] is an expressionlist node.
    children[1] is the target, an id inside a gate body and a primary
    (id or indexedid) elsewhere.
    """

    name = "U"

    def __init__(self, children):
        """Create the U node."""
        super().__init__("universal_unitary", children, None)
        self.arguments = children[0]
        self.target = children[1]

    def n_args(self):
        """Return the number of angle expressions as written."""
        return self.arguments.size()

    def angles(self, nested_scope=None):
        """Return ``(theta, phi, lambda)`` as floats.

        Raises:
            NodeException: if the statement does not pass exactly three angles.
        """
        if self.n_args() != 3:
            raise NodeException("U takes 3 parameters, got %d" % self.n_args())
        return tuple(self.arguments.real(nested_scope))

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "U(%s) %s;" % (self.arguments.qasm(), self.target.qasm())
