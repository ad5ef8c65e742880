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

"""Test for the node creation contract between the parser and its builder"""

import unittest

from qasmtree.qasm import AstArena, AstBuilder, ParseContext, QasmError, QasmParser, StringInterner
from qasmtree.qasm.node import Id, Int, MainProgram
from qasmtree.test import QasmTreeTestCase


def _recorder(name):
    def create(self, *args):
        self.calls.append((name,) + args)
        return len(self.calls) - 1

    create.__name__ = name
    return create


def _recording_init(self):
    self.calls = []


# A builder recording each call and returning the call index as the handle.
RecordingBuilder = type(
    "RecordingBuilder",
    (AstBuilder,),
    dict(
        {"__init__": _recording_init},
        **{name: _recorder(name) for name in AstBuilder.__abstractmethods__},
    ),
)


class TestBuilderContract(QasmTreeTestCase):
    """Calls made by the parser through the builder contract."""

    def setUp(self):
        super().setUp()
        self.interner = StringInterner()
        self.builder = RecordingBuilder()
        self.context = ParseContext(builder=self.builder, interner=self.interner)

    def parse(self, source):
        """Parse source with the recording builder."""
        return QasmParser(self.context).parse(source)

    def names(self):
        """Return the names of the recorded calls."""
        return [call[0] for call in self.builder.calls]

    def test_builder_must_be_complete(self):
        """The contract cannot be instantiated without every method."""
        self.assertRaises(TypeError, AstBuilder)

    def test_qreg_calls(self):
        """Each reduction makes one call, children first."""
        outcome = self.parse("qreg q[2];")
        handle_q = self.interner.intern("q")
        self.assertEqual(
            self.builder.calls,
            [
                ("create_id", handle_q, 1),
                ("create_int", 2),
                ("create_indexed_id", 0, 1),
                ("create_qreg", 2),
                ("create_program", None, 3),
                ("create_main_program", None, None, 4),
            ],
        )
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.root, 5)

    def test_header_calls(self):
        """The version header and leading include reach the main program."""
        self.context.resolve_include = {"g.inc": ""}.get
        outcome = self.parse('OPENQASM 2.0;\ninclude "g.inc";\nreset q;')
        self.assertTrue(outcome.ok)
        self.assertEqual(self.builder.calls[0], ("create_real", 2.0))
        self.assertEqual(self.builder.calls[1], ("create_magic", 0))
        self.assertEqual(self.builder.calls[2], ("create_include", self.interner.intern("g.inc")))
        self.assertEqual(self.builder.calls[-1], ("create_main_program", 1, 2, 5))

    def test_list_calls(self):
        """Lists are extended one element at a time."""
        self.parse("barrier a,b,c;")
        list_calls = [call for call in self.builder.calls if call[0] == "create_primary_list"]
        self.assertEqual(len(list_calls), 3)
        self.assertIsNone(list_calls[0][1])
        # Each call extends the handle returned by the previous one.
        handles = [self.builder.calls.index(call) for call in list_calls]
        self.assertEqual(list_calls[1][1], handles[0])
        self.assertEqual(list_calls[2][1], handles[1])

    def test_if_calls(self):
        """The conditional is created after the operation it wraps."""
        self.parse("if (c==1) cx q[0],q[1];")
        self.assertEqual(
            self.names()[-4:],
            ["create_custom_unitary", "create_if", "create_program", "create_main_program"],
        )
        if_call = self.builder.calls[-3]
        handle_c = self.interner.intern("c")
        self.assertEqual(self.builder.calls[if_call[1]], ("create_id", handle_c, 1))
        self.assertEqual(self.builder.calls[if_call[2]], ("create_int", 1))
        self.assertEqual(if_call[3], len(self.builder.calls) - 4)

    def test_external_calls(self):
        """External calls pass the operand and the interned function name."""
        self.parse("U(sin(0.5)) q;")
        (external,) = [call for call in self.builder.calls if call[0] == "create_external"]
        self.assertEqual(self.builder.calls[external[1]], ("create_real", 0.5))
        self.assertEqual(external[2], self.interner.intern("sin"))

    def test_operator_calls(self):
        """Binary and prefix operators pass their operator text."""
        self.parse("U(-1+2) q;")
        self.assertIn(("create_prefix_op", "-", 0), self.builder.calls)
        self.assertIn(("create_binary_op", "+", 1, 2), self.builder.calls)

    def test_gate_calls(self):
        """Gate definitions pass None for missing parameters and bodies."""
        self.parse("gate g a { }\ngate h(t) a { U(t,0,0) a; }")
        gates = [call for call in self.builder.calls if call[0] == "create_gate"]
        self.assertIsNone(gates[0][2])
        self.assertIsNotNone(gates[1][2])
        bodies = [call for call in self.builder.calls if call[0] == "create_gate_body"]
        self.assertEqual(bodies[0], ("create_gate_body", None))
        self.assertIsNotNone(bodies[1][1])

    def test_no_calls_after_failure(self):
        """The builder is not called once the failure is reported."""
        counts = []
        self.context.on_failure = lambda line, message: counts.append(len(self.builder.calls))
        outcome = self.parse("qreg q[2];\ncreg c[2]\nh q;")
        self.assertFalse(outcome.ok)
        self.assertEqual(counts, [len(self.builder.calls)])


class TestAstArena(QasmTreeTestCase):
    """The default builder."""

    def setUp(self):
        super().setUp()
        self.interner = StringInterner()
        self.arena = AstArena(self.interner)

    def test_handles_are_positions(self):
        """Handles count nodes in creation order."""
        first = self.arena.create_int(3)
        second = self.arena.create_id(self.interner.intern("q"), 1)
        self.assertEqual((first, second), (0, 1))
        self.assertEqual(len(self.arena), 2)
        self.assertEqual([node.handle for node in self.arena], [0, 1])
        self.assertIsInstance(self.arena.node(0), Int)
        self.assertIsInstance(self.arena.node(1), Id)
        self.assertEqual(self.arena.node(1).name, "q")

    def test_unknown_handle(self):
        """Handles not issued by the arena are rejected."""
        self.arena.create_int(3)
        self.assertRaises(QasmError, self.arena.node, 1)
        self.assertRaises(QasmError, self.arena.node, -1)
        self.assertRaises(QasmError, self.arena.node, None)
        self.assertRaises(QasmError, self.arena.create_qreg, 7)

    def test_unknown_string_handle(self):
        """String handles not issued by the interner are rejected."""
        self.assertRaises(QasmError, self.arena.create_id, 12, 1)

    def test_children_precede_parents(self):
        """Every child was created before its parent."""
        context = ParseContext(builder=self.arena, interner=self.interner)
        with open(self._get_resource_path("qasm/example.qasm")) as qasm_file:
            outcome = QasmParser(context).parse(qasm_file.read())
        self.assertTrue(outcome.ok)
        for node in self.arena:
            for child in node.children:
                self.assertLess(child.handle, node.handle)
        self.assertIsInstance(self.arena.node(outcome.root), MainProgram)
        self.assertEqual(outcome.root, len(self.arena) - 1)

    def test_lists_are_not_modified(self):
        """Extending a list leaves the shorter list as it was."""
        first = self.arena.create_id(self.interner.intern("a"), 1)
        second = self.arena.create_id(self.interner.intern("b"), 1)
        short = self.arena.create_id_list(None, first)
        longer = self.arena.create_id_list(short, second)
        self.assertEqual(self.arena.node(short).qasm(), "a")
        self.assertEqual(self.arena.node(longer).qasm(), "a,b")
        self.assertEqual(len(self.arena.node(short)), 1)

    def test_default_interner(self):
        """An arena creates its own interner if none is given."""
        arena = AstArena()
        handle = arena.create_id(arena.interner.intern("q"), 2)
        self.assertEqual(arena.node(handle).line, 2)


if __name__ == "__main__":
    unittest.main()
