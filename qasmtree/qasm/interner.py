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

"""String interning for identifiers, file names and external function names."""

from .exceptions import QasmBuilderError


class StringInterner:
    """Map strings to stable integer handles.

    Handles are issued in order of first appearance, starting at 0. Interning
    the same content twice returns the same handle.
    """

    def __init__(self):
        self._handles = {}
        self._strings = []

    def intern(self, text):
        """Return the handle for ``text``, issuing a new one on first use."""
        if isinstance(text, bytes):
            text = text.decode("utf-8")
        handle = self._handles.get(text)
        if handle is None:
            handle = len(self._strings)
            self._strings.append(text)
            self._handles[text] = handle
        return handle

    def lookup(self, handle):
        """Return the string for a handle issued by :meth:`intern`."""
        try:
            if handle < 0:
                raise IndexError(handle)
            return self._strings[handle]
        except (IndexError, TypeError) as ex:
            raise QasmBuilderError("Unknown string handle", str(handle)) from ex

    def __contains__(self, text):
        return text in self._handles

    def __len__(self):
        return len(self._strings)
