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

"""Node for the OPENQASM constant pi."""

import numpy as np

from .real import Real


class Pi(Real):
    """Node for the OPENQASM constant pi."""

    def __init__(self):
        """Create the pi node."""
        super().__init__(np.pi)
        self.type = "pi"

    def qasm(self):
        """Return the corresponding OPENQASM string."""
        return "pi"
