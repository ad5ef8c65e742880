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

"""Test for the parsing and evaluation of QASM expressions"""

import unittest

import numpy as np
from ddt import ddt, data, unpack

from qasmtree import parse
from qasmtree.qasm.node import BinaryOp, External, NodeException, Prefix, Real
from qasmtree.test import QasmTreeTestCase


def expression(text):
    """Return the tree of the first argument of a U gate."""
    root = parse("qreg q[1];\nU(%s) q[0];" % text)
    return root.program.children[1].arguments.children[0]


@ddt
class TestExpressions(QasmTreeTestCase):
    """Expression grammar"""

    @data(
        ("2*3^2", "((2*3)^2)", 36.0),
        ("2*(3^2)", "(2*(3^2))", 18.0),
        ("1+2*3", "((1+2)*3)", 9.0),
        ("2^3^2", "((2^3)^2)", 64.0),
        ("8/2/2", "((8/2)/2)", 2.0),
        ("1-2-3", "((1-2)-3)", -4.0),
        ("6/2*3", "((6/2)*3)", 9.0),
        ("-2^2", "(-(2)^2)", 4.0),
        ("2*-3", "(2*-(3))", -6.0),
        ("--1", "-(-(1))", 1.0),
        ("+1.5", "+(1.5)", 1.5),
        ("(1+2)^(1+1)", "((1+2)^(1+1))", 9.0),
        ("1e1-0.5", "(10.0-0.5)", 9.5),
    )
    @unpack
    def test_precedence(self, text, qasm, value):
        """Operators bind as signs, then + -, then * /, then ^."""
        tree = expression(text)
        self.assertEqual(tree.qasm(), qasm)
        self.assertAlmostEqual(tree.real(), value)

    def test_power_is_outermost(self):
        """2*3^2 builds (2*3)^2."""
        tree = expression("2*3^2")
        self.assertIsInstance(tree, BinaryOp)
        self.assertEqual(tree.value, "^")
        self.assertEqual(tree.children[0].value, "*")
        self.assertEqual(tree.children[1].value, 2)

    def test_pi(self):
        """pi is a real constant."""
        tree = expression("pi/2")
        self.assertEqual(tree.qasm(), "(pi/2)")
        self.assertAlmostEqual(tree.real(), np.pi / 2)
        self.assertIsInstance(tree.children[0], Real)

    @data(
        ("sin", np.sin, 0.5),
        ("cos", np.cos, 0.5),
        ("tan", np.tan, 0.5),
        ("exp", np.exp, 0.5),
        ("ln", np.log, 2.0),
        ("sqrt", np.sqrt, 4.0),
    )
    @unpack
    def test_external_call(self, name, function, argument):
        """External functions apply to a parenthesised expression."""
        tree = expression("%s(%r)" % (name, argument))
        self.assertIsInstance(tree, External)
        self.assertEqual(tree.function, name)
        self.assertEqual(tree.qasm(), "%s(%r)" % (name, argument))
        self.assertAlmostEqual(tree.real(), function(argument))

    def test_external_of_expression(self):
        """The operand of an external function is a whole expression."""
        tree = expression("2*cos(pi-pi)")
        self.assertEqual(tree.qasm(), "(2*cos((pi-pi)))")
        self.assertAlmostEqual(tree.real(), 2.0)

    def test_external_applied_to_id(self):
        """The id '(' external ')' form builds the same external node."""
        root = parse("gate g(x) a { U(x(sin),0,0) a; }")
        gate = root.program.children[0]
        tree = gate.body.operations()[0].arguments.children[0]
        self.assertIsInstance(tree, External)
        self.assertEqual(tree.function, "sin")
        self.assertEqual(tree.qasm(), "sin(x)")
        self.assertAlmostEqual(tree.real([{"x": Real(0.5)}]), np.sin(0.5))

    def test_parameters_resolve_through_scope(self):
        """Gate parameters are evaluated from the innermost scope."""
        root = parse("gate g(theta,phi) a { U(theta*2,-phi,theta+phi) a; }")
        arguments = root.program.children[0].body.operations()[0].arguments
        scope = [{"theta": Real(0.25), "phi": Real(1.0)}]
        self.assertEqual(arguments.real(scope), [0.5, -1.0, 1.25])

    def test_unknown_parameter(self):
        """Evaluating an unbound id raises NodeException."""
        tree = expression("theta+1")
        self.assertRaises(NodeException, tree.real)
        self.assertRaises(NodeException, tree.real, [{"phi": Real(1.0)}])

    def test_prefix_node(self):
        """Signs build prefix nodes."""
        tree = expression("-pi")
        self.assertIsInstance(tree, Prefix)
        self.assertEqual(tree.value, "-")
        self.assertAlmostEqual(tree.real(), -np.pi)

    def test_expression_list(self):
        """Arguments keep their source order."""
        root = parse("qreg q[1];\nU(1,2.5,pi) q[0];")
        arguments = root.program.children[1].arguments
        self.assertEqual(arguments.size(), 3)
        self.assertEqual(arguments.qasm(), "1,2.5,pi")
        self.assertEqual(arguments.real(), [1.0, 2.5, np.pi])


if __name__ == "__main__":
    unittest.main()
