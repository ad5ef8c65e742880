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

"""Node for the operations of an OPENQASM gate body."""

from .listnode import ListNode


class GateOpList(ListNode):
    """Node for the operations of an OPENQASM gate body.

    children is a list of gate operation nodes.
    These are one of barrier, custom_unitary, U, or CX.
    """

    separator = "\n"

    def __init__(self, previous, element):
        """Create the gate operation list node."""
        super().__init__("gate_op_list", previous, element)
