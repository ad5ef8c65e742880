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

"""Node for an OPENQASM expression list."""

from .listnode import ListNode


class ExpressionList(ListNode):
    """Node for an OPENQASM expression list.

    children are expression nodes.
    """

    def __init__(self, previous, element):
        """Create the expression list node."""
        super().__init__("expression_list", previous, element)

    def real(self, nested_scope=None):
        """Return the list of floating point values of the expressions."""
        return [child.real(nested_scope) for child in self.children]
