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

"""Base node for the left-nested OPENQASM list constructs."""

from .node import Node


class ListNode(Node):
    """Base node for an OPENQASM list.

    Lists are built one element at a time, the way the grammar reduces them:
    each node holds the list it extends (``previous``, None for a one-element
    list) and the element it adds. ``children`` flattens the chain in source
    order without touching the earlier nodes.
    """

    separator = ","

    def __init__(self, type, previous, element):
        """Create the list node."""
        # pylint: disable=redefined-builtin
        super().__init__(type, None, None)
        self.previous = previous
        self.element = element
        self._size = 1 if previous is None else previous.size() + 1

    @property
    def children(self):
        """The list elements, in source order."""
        elements = []
        current = self
        while current is not None:
            elements.append(current.element)
            current = current.previous
        elements.reverse()
        return elements

    def size(self):
        """Return the number of elements."""
        return self._size

    def __len__(self):
        return self._size

    def __iter__(self):
        return iter(self.children)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return self.separator.join([child.qasm() for child in self.children])
