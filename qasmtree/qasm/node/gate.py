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

"""Node for an OPENQASM gate definition."""

from .node import Node
from .nodeexception import NodeException


class Gate(Node):
    """Node for an OPENQASM gate definition.

    children[0] is an id node.
    If len(children) is 4, children[1] is an idlist node with the parameter
    names. The last two children are the idlist node with the qubit names and
    the gatebody node.

    Has properties:
    .id = id node
    .name = gate name string
    .name_handle = interned handle of the name, as issued to the builder
    .line = source line of the name
    .arguments = None or idlist node of parameter names
    .bitlist = idlist node of qubit names
    .body = gatebody node
    """

    def __init__(self, children):
        """Create the gate node."""
        super().__init__("gate", children, None)
        self.id = children[0]  # pylint: disable=invalid-name
        self.name = self.id.name
        self.name_handle = self.id.string_handle
        self.line = self.id.line
        self.arguments = children[1] if len(children) == 4 else None
        self.bitlist = children[-2]
        self.body = children[-1]

    def param_names(self):
        """Return the parameter names, in declaration order."""
        if self.arguments is None:
            return []
        return [param.name for param in self.arguments]

    def bit_names(self):
        """Return the qubit argument names, in declaration order."""
        return [bit.name for bit in self.bitlist]

    def n_args(self):
        """Return the number of parameters."""
        return len(self.param_names())

    def n_bits(self):
        """Return the number of qubit arguments."""
        return self.bitlist.size()

    def bind(self, arguments):
        """Map each parameter name to the matching expression of a call.

        The result is one level of the ``nested_scope`` taken by ``real()``.

        Args:
            arguments (ExpressionList): the call's expressions, or None.

        Returns:
            dict: parameter name to expression node.

        Raises:
            NodeException: if the call passes the wrong number of expressions.
        """
        expressions = [] if arguments is None else arguments.children
        names = self.param_names()
        if len(expressions) != len(names):
            raise NodeException(
                "Gate %s takes %d parameters," % (self.name, len(names)),
                "got %d" % len(expressions),
            )
        return dict(zip(names, expressions))

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        string = "gate " + self.name
        if self.arguments is not None:
            string += "(" + self.arguments.qasm() + ")"
        string += " " + self.bitlist.qasm() + "\n"
        string += "{\n" + self.body.qasm() + "}"
        return string
