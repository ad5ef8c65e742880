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

"""The result of one parse."""


class Success:
    """A parse that reduced the whole input to a main program.

    ``root`` is the builder handle of the main program node.
    """

    ok = True

    def __init__(self, root):
        self.root = root

    def __repr__(self):
        return f"Success(root={self.root})"

    def __eq__(self, other):
        return isinstance(other, Success) and self.root == other.root


class Failure:
    """A parse that stopped at its first error.

    ``line`` is the source line of the error, ``message`` a human readable
    description and ``kind`` one of ``lexical``, ``syntax``, ``include``,
    ``resource`` or ``builder``. A ``builder`` failure means the collaborators
    in the context disagree about a handle, whatever the source says.
    """

    ok = False

    def __init__(self, line, message, kind):
        self.line = line
        self.message = message
        self.kind = kind

    def __repr__(self):
        return f"Failure(line={self.line}, message={self.message!r}, kind={self.kind!r})"

    def __eq__(self, other):
        return isinstance(other, Failure) and (self.line, self.message, self.kind) == (
            other.line,
            other.message,
            other.kind,
        )
