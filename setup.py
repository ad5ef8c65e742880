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

"The qasmtree setup file."

from setuptools import setup

# Most of this configuration is managed by `pyproject.toml`. This file only
# exists so that `python setup.py develop` keeps working for older tooling.

setup(
    package_data={"qasmtree.qasm": ["libs/*.inc"]},
)
