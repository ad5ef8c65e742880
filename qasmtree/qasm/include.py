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

"""Retrieval of the text of included OPENQASM files."""

import logging
import os

from .exceptions import QasmIncludeError

logger = logging.getLogger(__name__)

CORE_LIBS_PATH = os.path.join(os.path.dirname(__file__), "libs")


class FileIncludeResolver:
    """Include resolver reading files from disk.

    A name is looked up in the bundled ``libs`` directory (which ships
    ``qelib1.inc``), then in each of ``search_paths`` in order, then in the
    directories of the files this resolver has already returned, most recent
    first, so that an included file can include its neighbours. Absolute
    paths are read as given.

    Instances are callable, as expected by :class:`.ParseContext`.
    """

    def __init__(self, search_paths=None):
        """Create the resolver.

        Args:
            search_paths (list[str]): extra directories to search.
        """
        self.search_paths = list(search_paths or [])
        self._seen_dirs = []

    def find(self, path):
        """Return the file an include name refers to, or None."""
        if os.path.isabs(path):
            return path if os.path.isfile(path) else None
        candidates = [CORE_LIBS_PATH] + self.search_paths + self._seen_dirs[::-1]
        for directory in candidates:
            full_path = os.path.join(directory, path)
            if os.path.isfile(full_path):
                return full_path
        return None

    def __call__(self, path):
        """Return the text of the file included as ``path``.

        Raises:
            QasmIncludeError: if no file matches ``path``.
        """
        full_path = self.find(path)
        if full_path is None:
            raise QasmIncludeError("Include file %s cannot be found" % path)
        logger.debug("Resolved include '%s' to %s", path, full_path)
        with open(full_path) as ifile:
            data = ifile.read()
        directory = os.path.dirname(os.path.abspath(full_path))
        if directory not in self._seen_dirs:
            self._seen_dirs.append(directory)
        return data
