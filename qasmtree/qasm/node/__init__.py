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

"""OPENQASM nodes."""
from .barrier import Barrier
from .binaryop import BinaryOp
from .cnot import Cnot
from .creg import Creg
from .customunitary import CustomUnitary
from .expressionlist import ExpressionList
from .external import External
from .gate import Gate
from .gatebody import GateBody
from .gateoplist import GateOpList
from .id import Id
from .idlist import IdList
from .if_ import If
from .include import Include
from .indexedid import IndexedId
from .intnode import Int
from .listnode import ListNode
from .magic import Magic
from .mainprogram import MainProgram
from .measure import Measure
from .node import Node
from .opaque import Opaque
from .pi import Pi
from .prefix import Prefix
from .primarylist import PrimaryList
from .program import Program
from .qreg import Qreg, RegisterDecl
from .real import Real
from .reset import Reset
from .universalunitary import UniversalUnitary
from .nodeexception import NodeException
