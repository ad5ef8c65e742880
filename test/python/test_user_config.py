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

# pylint: disable=missing-docstring

import os
import configparser as cp
import tempfile
from uuid import uuid4

from unittest import mock
from qasmtree import exceptions
from qasmtree.qasm import ParseContext
from qasmtree.test import QasmTreeTestCase
from qasmtree import user_config


class TestUserConfig(QasmTreeTestCase):
    def setUp(self):
        super().setUp()
        self.file_path = "test_%s.conf" % uuid4()
        self.include_dir = tempfile.mkdtemp()
        self.addCleanup(os.rmdir, self.include_dir)

    def write_config(self, test_config):
        self.addCleanup(os.remove, self.file_path)
        with open(self.file_path, "w") as file:
            file.write(test_config)
            file.flush()

    def test_empty_file_read(self):
        config = user_config.UserConfig(self.file_path)
        config.read_config_file()
        self.assertEqual({}, config.settings)

    def test_invalid_max_stack_depth(self):
        self.write_config(
            """
        [default]
        max_stack_depth = -3
        """
        )
        config = user_config.UserConfig(self.file_path)
        self.assertRaises(exceptions.QasmTreeUserConfigError, config.read_config_file)

    def test_non_integer_max_include_depth(self):
        self.write_config(
            """
        [default]
        max_include_depth = deep
        """
        )
        config = user_config.UserConfig(self.file_path)
        self.assertRaises(exceptions.QasmTreeUserConfigError, config.read_config_file)

    def test_invalid_parse_debug(self):
        self.write_config(
            """
        [default]
        parse_debug = sometimes
        """
        )
        config = user_config.UserConfig(self.file_path)
        self.assertRaises(exceptions.QasmTreeUserConfigError, config.read_config_file)

    def test_max_stack_depth_valid(self):
        self.write_config(
            """
        [default]
        max_stack_depth = 500
        """
        )
        config = user_config.UserConfig(self.file_path)
        config.read_config_file()
        self.assertEqual({"max_stack_depth": 500}, config.settings)

    def test_missing_include_dir_warns(self):
        missing = os.path.join(self.include_dir, "missing")
        self.write_config(
            """
        [default]
        include_path = %s
        """
            % missing
        )
        config = user_config.UserConfig(self.file_path)
        with self.assertWarns(UserWarning):
            config.read_config_file()
        self.assertEqual({"include_path": [missing]}, config.settings)

    def test_all_options_valid(self):
        self.write_config(
            """
        [default]
        include_path = %s:%s
        max_stack_depth = 2000
        max_include_depth = 4
        parse_debug = false
        """
            % (self.include_dir, os.curdir)
        )
        config = user_config.UserConfig(self.file_path)
        config.read_config_file()

        self.assertEqual(
            {
                "include_path": [self.include_dir, os.curdir],
                "max_stack_depth": 2000,
                "max_include_depth": 4,
                "parse_debug": False,
            },
            config.settings,
        )

    def test_set_config_all_options_valid(self):
        self.addCleanup(os.remove, self.file_path)

        user_config.set_config("include_path", self.include_dir, file_path=self.file_path)
        user_config.set_config("max_stack_depth", "64", file_path=self.file_path)
        user_config.set_config("max_include_depth", 2, file_path=self.file_path)
        user_config.set_config("parse_debug", True, file_path=self.file_path)

        config_settings = None
        with mock.patch.dict(os.environ, {"QASMTREE_SETTINGS": self.file_path}, clear=True):
            config_settings = user_config.get_config()

        self.assertEqual(
            {
                "include_path": [self.include_dir],
                "max_stack_depth": 64,
                "max_include_depth": 2,
                "parse_debug": True,
            },
            config_settings,
        )

    def test_set_config_multiple_sections(self):
        self.addCleanup(os.remove, self.file_path)

        user_config.set_config("max_stack_depth", "64", file_path=self.file_path)
        user_config.set_config("favourite_gate", "ccx", section="test", file_path=self.file_path)

        config = cp.ConfigParser()
        config.read(self.file_path)

        self.assertEqual(config.sections(), ["default", "test"])
        self.assertEqual({"max_stack_depth": "64"}, dict(config.items("default")))
        self.assertEqual({"favourite_gate": "ccx"}, dict(config.items("test")))

    def test_set_config_invalid_key(self):
        self.assertRaises(
            exceptions.QasmTreeUserConfigError,
            user_config.set_config,
            "favourite_gate",
            "ccx",
            file_path=self.file_path,
        )
        self.assertRaises(
            exceptions.QasmTreeUserConfigError,
            user_config.set_config,
            42,
            "ccx",
            file_path=self.file_path,
        )
        self.assertFalse(os.path.exists(self.file_path))

    def test_set_config_invalid_value(self):
        self.addCleanup(os.remove, self.file_path)
        self.assertRaises(
            exceptions.QasmTreeUserConfigError,
            user_config.set_config,
            "max_include_depth",
            0,
            file_path=self.file_path,
        )

    def test_context_from_settings_file(self):
        self.addCleanup(os.remove, self.file_path)
        user_config.set_config("max_stack_depth", 77, file_path=self.file_path)
        user_config.set_config("max_include_depth", 3, file_path=self.file_path)
        user_config.set_config("include_path", self.include_dir, file_path=self.file_path)

        with mock.patch.dict(os.environ, {"QASMTREE_SETTINGS": self.file_path}):
            context = ParseContext.from_config(max_include_depth=5)

        self.assertEqual(context.max_stack_depth, 77)
        self.assertEqual(context.max_include_depth, 5)
        self.assertFalse(context.debug)
        self.assertEqual(context.resolve_include.search_paths, [self.include_dir])

    def test_no_settings_file(self):
        with mock.patch.dict(os.environ, {"QASMTREE_SETTINGS": self.file_path}):
            self.assertEqual({}, user_config.get_config())
            context = ParseContext.from_config()
        self.assertEqual(context.max_stack_depth, 10000)
        self.assertEqual(context.max_include_depth, 32)
