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

"""Node for a complete OPENQASM source unit."""

from .node import Node


class MainProgram(Node):
    """Node for a complete OPENQASM source unit.

    Has properties:
    .magic = None or the magic (version) node
    .include = None or the include node that follows the version
    .program = program node with the statements

    children holds whichever of these are present, in that order.
    """

    def __init__(self, magic, include, program):
        """Create the main program node."""
        children = [child for child in (magic, include, program) if child is not None]
        super().__init__("main_program", children, None)
        self.magic = magic
        self.include = include
        self.program = program

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        string = ""
        if self.magic is not None:
            string += self.magic.qasm() + "\n"
        if self.include is not None:
            string += self.include.spliced_qasm() + "\n"
        string += self.program.qasm()
        return string
