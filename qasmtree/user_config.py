# This code is part of qasmtree.
#
# (C) Copyright IBM 2017, 2019.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Utils for reading a user preference config files."""

import configparser
import os
from warnings import warn

from qasmtree import exceptions

DEFAULT_FILENAME = os.path.join(os.path.expanduser("~"), ".qasmtree", "settings.conf")


class UserConfig:
    """Class representing a user config file

    The config file format should look like:

    [default]
    include_path = ~/qasm/include:/opt/qasm/include
    max_stack_depth = 10000
    max_include_depth = 32
    parse_debug = False

    """

    def __init__(self, filename=None):
        """Create a UserConfig

        Args:
            filename (str): The path to the user config file. If one isn't
                specified, ~/.qasmtree/settings.conf is used.
        """
        if filename is None:
            self.filename = DEFAULT_FILENAME
        else:
            self.filename = filename
        self.settings = {}
        self.config_parser = configparser.ConfigParser()

    def read_config_file(self):
        """Read config file and parse the contents into the settings attr."""
        if not os.path.isfile(self.filename):
            return
        self.config_parser.read(self.filename)
        if "default" in self.config_parser.sections():
            # Parse include_path
            include_path = self.config_parser.get("default", "include_path", fallback=None)
            if include_path:
                path_list = [os.path.expanduser(path) for path in include_path.split(":") if path]
                for path in path_list:
                    if not os.path.isdir(path):
                        warn(
                            f"{path} is not a valid include directory."
                            " Correct the path in ~/.qasmtree/settings.conf.",
                            UserWarning,
                            2,
                        )
                self.settings["include_path"] = path_list

            # Parse max_stack_depth
            max_stack_depth = self._get_positive_int("max_stack_depth")
            if max_stack_depth is not None:
                self.settings["max_stack_depth"] = max_stack_depth

            # Parse max_include_depth
            max_include_depth = self._get_positive_int("max_include_depth")
            if max_include_depth is not None:
                self.settings["max_include_depth"] = max_include_depth

            # Parse parse_debug
            try:
                parse_debug = self.config_parser.getboolean(
                    "default", "parse_debug", fallback=None
                )
            except ValueError as err:
                raise exceptions.QasmTreeUserConfigError(
                    f"Value assigned to parse_debug is not valid. {str(err)}"
                )
            if parse_debug is not None:
                self.settings["parse_debug"] = parse_debug

    def _get_positive_int(self, key):
        try:
            value = self.config_parser.getint("default", key, fallback=-1)
        except ValueError as err:
            raise exceptions.QasmTreeUserConfigError(
                f"Value assigned to {key} is not valid. {str(err)}"
            )
        if value == -1:
            return None
        if value <= 0:
            raise exceptions.QasmTreeUserConfigError(
                f"{value} is not a valid {key}. Must be greater than 0"
            )
        return value


def set_config(key, value, section=None, file_path=None):
    """Adds or modifies a user configuration

    It will add configuration to the currently configured location
    or the value of file argument.

    Only valid user config can be set in 'default' section. Custom
    user config can be added in any other sections.

    Args:
        key (str): name of the config
        value (obj): value of the config
        section (str, optional): if not specified, adds it to the
            `default` section of the config file.
        file_path (str, optional): the file to which config is added.
            If not specified, adds it to the default config file or
            if set, the value of `QASMTREE_SETTINGS` env variable.

    Raises:
        QasmTreeUserConfigError: if the config is invalid
    """
    filename = file_path or os.getenv("QASMTREE_SETTINGS", DEFAULT_FILENAME)
    section = "default" if section is None else section

    if not isinstance(key, str):
        raise exceptions.QasmTreeUserConfigError("Key must be string type")

    valid_config = {
        "include_path",
        "max_stack_depth",
        "max_include_depth",
        "parse_debug",
    }

    if section in [None, "default"]:
        if key not in valid_config:
            raise exceptions.QasmTreeUserConfigError(f"{key} is not a valid user config.")

    config = configparser.ConfigParser()
    config.read(filename)

    if section not in config.sections():
        config.add_section(section)

    config.set(section, key, str(value))

    try:
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(filename, "w") as cfgfile:
            config.write(cfgfile)
    except OSError as ex:
        raise exceptions.QasmTreeUserConfigError(
            f"Unable to load the config file {filename}. Error: '{str(ex)}'"
        )

    # validates config
    user_config = UserConfig(filename)
    user_config.read_config_file()


def get_config():
    """Read the config file from the default location or env var

    It will read a config file at either the default location
    ~/.qasmtree/settings.conf or if set the value of the QASMTREE_SETTINGS env var.

    It will return the parsed settings dict from the parsed config file.
    Returns:
        dict: The settings dict from the parsed config file.
    """
    filename = os.getenv("QASMTREE_SETTINGS", DEFAULT_FILENAME)
    if not os.path.isfile(filename):
        return {}
    user_config = UserConfig(filename)
    user_config.read_config_file()
    return user_config.settings
