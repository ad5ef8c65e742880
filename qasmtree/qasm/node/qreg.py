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

"""Nodes for the OPENQASM register declarations."""

from .node import Node


class RegisterDecl(Node):
    """Node for an OPENQASM register declaration, ``<keyword> name[size];``.

    children[0] is the indexedid node ``name[size]``.

    Has properties:
    .id = indexedid node
    .name = register name string
    .name_handle = interned handle of the name, as issued to the builder
    .line = source line of the name
    .size = number of bits in the register
    """

    keyword = None

    def __init__(self, children):
        """Create the register declaration node."""
        super().__init__(self.keyword, children, None)
        self.id = children[0]  # pylint: disable=invalid-name
        self.name = self.id.name
        self.name_handle = self.id.name_handle
        self.line = self.id.line
        self.size = self.id.index

    def bits(self):
        """Return the ``(name, index)`` pair of every bit, in index order."""
        return [(self.name, index) for index in range(self.size)]

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "%s %s;" % (self.keyword, self.id.qasm())


class Qreg(RegisterDecl):
    """Node for an OPENQASM qreg statement."""

    keyword = "qreg"
