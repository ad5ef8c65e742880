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

"""Base node object for the OPENQASM syntax tree."""


class Node:
    """Base node object for the OPENQASM syntax tree.

    ``handle`` is the integer the builder issued for this node. Nodes are
    never modified once their handle has been returned to the parser.
    """

    def __init__(self, type, children=None, root=None):
        """Construct a new node object."""
        # pylint: disable=redefined-builtin
        self.type = type
        self.handle = None
        if children:
            self._children = list(children)
        else:
            self._children = []
        self.root = root
        # True if this node is an expression node, False otherwise
        self.expression = False

    @property
    def children(self):
        """The child nodes, in source order."""
        return self._children

    def is_expression(self):
        """Return True if this is an expression node."""
        return self.expression

    def to_string(self, indent):
        """Print with indent."""
        ind = indent * " "
        if self.root:
            print(ind, self.type, "---", self.root)
        else:
            print(ind, self.type)
        indent = indent + 3
        ind = indent * " "
        for children in self.children:
            if isinstance(children, str):
                print(ind, children)
            elif isinstance(children, (int, float)):
                print(ind, str(children))
            else:
                children.to_string(indent)

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        raise NotImplementedError

    def __repr__(self):
        return f"<{self.__class__.__name__} handle={self.handle}>"
