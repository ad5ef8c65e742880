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

"""Node for an OPENQASM idlist."""

from .listnode import ListNode


class IdList(ListNode):
    """Node for an OPENQASM idlist.

    children is a list of id nodes.
    """

    def __init__(self, previous, element):
        """Create the idlist node."""
        super().__init__("id_list", previous, element)
