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

"""Construction of the OPENQASM syntax tree.

The grammar engine never holds nodes. Each reduction calls one creation
method of an :class:`AstBuilder` and keeps the integer handle it returns;
the handles of already created nodes are passed back in as children.
:class:`AstArena` is the default builder, storing :mod:`~qasmtree.qasm.node`
objects in creation order.
"""

from abc import ABC, abstractmethod

from . import node
from .exceptions import QasmBuilderError
from .interner import StringInterner


class AstBuilder(ABC):
    """Abstract node creation contract used by :class:`.QasmParser`.

    Every method returns a fresh integer handle. Arguments named after
    children are handles issued earlier by the same builder, or None where
    the production has no such child. ``name``, ``filename`` and
    ``function`` are interned string handles.

    The list methods take the handle of the list being extended as
    ``previous``, None for a one-element list, and the handle of the new
    ``element``.
    """

    @abstractmethod
    def create_include(self, filename):
        """Create an include directive for the interned ``filename``."""

    @abstractmethod
    def create_main_program(self, magic, include, program):
        """Create the root node. ``magic`` and ``include`` may be None."""

    @abstractmethod
    def create_magic(self, version):
        """Create the ``OPENQASM <version>`` header from a real node."""

    @abstractmethod
    def create_qreg(self, indexed_id):
        """Create a quantum register declaration."""

    @abstractmethod
    def create_creg(self, indexed_id):
        """Create a classical register declaration."""

    @abstractmethod
    def create_gate(self, identifier, params, qubits, body):
        """Create a gate definition. ``params`` is None without parameters."""

    @abstractmethod
    def create_gate_body(self, gate_ops):
        """Create a gate body. ``gate_ops`` is None for an empty body."""

    @abstractmethod
    def create_universal_unitary(self, args, target):
        """Create a ``U(args) target`` operation."""

    @abstractmethod
    def create_cx(self, control, target):
        """Create a ``CX control,target`` operation."""

    @abstractmethod
    def create_custom_unitary(self, identifier, args, bits):
        """Create a call of a user gate. ``args`` is None without arguments."""

    @abstractmethod
    def create_opaque(self, identifier, params, qubits):
        """Create an opaque gate declaration."""

    @abstractmethod
    def create_measure(self, source, target):
        """Create a measurement of ``source`` into ``target``."""

    @abstractmethod
    def create_reset(self, target):
        """Create a reset operation."""

    @abstractmethod
    def create_barrier(self, bits):
        """Create a barrier over a list of bits."""

    @abstractmethod
    def create_if(self, identifier, value, operation):
        """Create a conditional wrapping one quantum operation."""

    @abstractmethod
    def create_indexed_id(self, identifier, index):
        """Create ``identifier[index]`` from an id and an int node."""

    @abstractmethod
    def create_id(self, name, line):
        """Create an identifier for the interned ``name`` seen on ``line``."""

    @abstractmethod
    def create_binary_op(self, op, left, right):
        """Create a binary expression, ``op`` one of ``+ - * / ^``."""

    @abstractmethod
    def create_prefix_op(self, op, operand):
        """Create a signed expression, ``op`` one of ``+ -``."""

    @abstractmethod
    def create_int(self, value):
        """Create a non-negative integer literal."""

    @abstractmethod
    def create_real(self, value):
        """Create a real literal."""

    @abstractmethod
    def create_pi(self):
        """Create the constant pi."""

    @abstractmethod
    def create_external(self, operand, function):
        """Create a call of the interned external ``function``."""

    @abstractmethod
    def create_id_list(self, previous, element):
        """Extend an identifier list."""

    @abstractmethod
    def create_primary_list(self, previous, element):
        """Extend a list of ids and indexed ids."""

    @abstractmethod
    def create_expression_list(self, previous, element):
        """Extend an expression list."""

    @abstractmethod
    def create_gate_op_list(self, previous, element):
        """Extend the operation list of a gate body."""

    @abstractmethod
    def create_program(self, previous, element):
        """Extend the statement list of a program."""


class AstArena(AstBuilder):
    """Builder storing :class:`~qasmtree.qasm.node.Node` objects by handle.

    Handles are positions in creation order, so every child handle is
    smaller than its parent's.
    """

    def __init__(self, interner=None):
        """Create an empty arena.

        Args:
            interner (StringInterner): resolves the string handles passed to
                :meth:`create_id`, :meth:`create_include` and
                :meth:`create_external`. A new one is created if omitted.
        """
        self.interner = interner if interner is not None else StringInterner()
        self._nodes = []

    def node(self, handle):
        """Return the node for a handle issued by this arena.

        Raises:
            QasmBuilderError: if the handle was not issued by this arena.
        """
        if handle is None or not 0 <= handle < len(self._nodes):
            raise QasmBuilderError("Unknown node handle", str(handle))
        return self._nodes[handle]

    def _get(self, handle):
        if handle is None:
            return None
        return self.node(handle)

    def _add(self, new_node):
        new_node.handle = len(self._nodes)
        self._nodes.append(new_node)
        return new_node.handle

    def __len__(self):
        return len(self._nodes)

    def __iter__(self):
        return iter(self._nodes)

    def create_include(self, filename):
        return self._add(node.Include(self.interner.lookup(filename), filename))

    def create_main_program(self, magic, include, program):
        return self._add(
            node.MainProgram(self._get(magic), self._get(include), self.node(program))
        )

    def create_magic(self, version):
        return self._add(node.Magic([self.node(version)]))

    def create_qreg(self, indexed_id):
        return self._add(node.Qreg([self.node(indexed_id)]))

    def create_creg(self, indexed_id):
        return self._add(node.Creg([self.node(indexed_id)]))

    def create_gate(self, identifier, params, qubits, body):
        children = [self.node(identifier)]
        if params is not None:
            children.append(self.node(params))
        children += [self.node(qubits), self.node(body)]
        return self._add(node.Gate(children))

    def create_gate_body(self, gate_ops):
        if gate_ops is None:
            return self._add(node.GateBody(None))
        return self._add(node.GateBody([self.node(gate_ops)]))

    def create_universal_unitary(self, args, target):
        return self._add(node.UniversalUnitary([self.node(args), self.node(target)]))

    def create_cx(self, control, target):
        return self._add(node.Cnot([self.node(control), self.node(target)]))

    def create_custom_unitary(self, identifier, args, bits):
        children = [self.node(identifier)]
        if args is not None:
            children.append(self.node(args))
        children.append(self.node(bits))
        return self._add(node.CustomUnitary(children))

    def create_opaque(self, identifier, params, qubits):
        children = [self.node(identifier)]
        if params is not None:
            children.append(self.node(params))
        children.append(self.node(qubits))
        return self._add(node.Opaque(children))

    def create_measure(self, source, target):
        return self._add(node.Measure([self.node(source), self.node(target)]))

    def create_reset(self, target):
        return self._add(node.Reset([self.node(target)]))

    def create_barrier(self, bits):
        return self._add(node.Barrier([self.node(bits)]))

    def create_if(self, identifier, value, operation):
        return self._add(
            node.If([self.node(identifier), self.node(value), self.node(operation)])
        )

    def create_indexed_id(self, identifier, index):
        return self._add(node.IndexedId([self.node(identifier), self.node(index)]))

    def create_id(self, name, line):
        return self._add(node.Id(self.interner.lookup(name), line, name))

    def create_binary_op(self, op, left, right):
        return self._add(node.BinaryOp(op, [self.node(left), self.node(right)]))

    def create_prefix_op(self, op, operand):
        return self._add(node.Prefix(op, [self.node(operand)]))

    def create_int(self, value):
        return self._add(node.Int(value))

    def create_real(self, value):
        return self._add(node.Real(value))

    def create_pi(self):
        return self._add(node.Pi())

    def create_external(self, operand, function):
        return self._add(
            node.External(self.interner.lookup(function), [self.node(operand)], function)
        )

    def create_id_list(self, previous, element):
        return self._add(node.IdList(self._get(previous), self.node(element)))

    def create_primary_list(self, previous, element):
        return self._add(node.PrimaryList(self._get(previous), self.node(element)))

    def create_expression_list(self, previous, element):
        return self._add(node.ExpressionList(self._get(previous), self.node(element)))

    def create_gate_op_list(self, previous, element):
        return self._add(node.GateOpList(self._get(previous), self.node(element)))

    def create_program(self, previous, element):
        return self._add(node.Program(self._get(previous), self.node(element)))
