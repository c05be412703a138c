# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import logging
import os
import sys

from dm_module.classes import plugin_status_types, driver_error_types, DriverError
from dm_module.classes.table import Table


class DriverData:

    cli_args = None
    driver_version = None
    output_file = None
    username = None
    password = None

    # turns this class into a Singleton
    def __new__(cls, cli_args=None, driver_version=None):
        it = cls.__dict__.get("__it__")
        if it is not None:
            return it
        cls.__it__ = it = object.__new__(cls)
        it.init(cli_args, driver_version)
        return it

    def init(self, cli_args=None, driver_version=None):

        if cli_args is None:
            raise Exception("No args passed to DriverData()")

        self.cli_args = cli_args
        self.driver_version = driver_version
        self._validate_output_file()

    @classmethod
    def reset(cls):
        """drop the current instance, a new one gets created on next call"""

        if cls.__dict__.get("__it__") is not None:
            delattr(cls, "__it__")

    def _validate_output_file(self):

        file_name = self.cli_args.output_file
        if file_name is None:
            return

        # normalize file path
        if not os.path.isabs(file_name):
            file_name = os.path.join(os.getcwd(), file_name)

        file_name = os.path.normpath(file_name)
        dir_name = os.path.dirname(file_name)

        # check if directory is a file
        if os.path.isfile(dir_name):
            self.exit_on_error(f"The output file destination '{dir_name}' seems to be file.")
        if os.path.isdir(file_name):
            self.exit_on_error(f"The output file destination '{file_name}' seems to be directory.")

        # check if directory exists
        if not os.path.exists(dir_name):
            # try to create directory
            try:
                os.makedirs(dir_name, 0o700)
            except OSError as e:
                self.exit_on_error(f"Unable to create output file directory {dir_name}: {e}")

        # check if directory is writable
        if not os.access(dir_name, os.X_OK | os.W_OK):
            self.exit_on_error(f"Error writing to output file directory: {dir_name}")

        if os.path.exists(file_name) and not os.access(file_name, os.W_OK):
            self.exit_on_error(f"Got no permission to write to existing output file: {file_name}")

        self.output_file = file_name

    def get_credentials(self):
        """
            Order of credential reading from highest to lowest priority
            1. cli_args username and password
            2. credentials from auth file
            3. credentials from environment
        """

        env_username_var = "DEVICE_MONITOR_USERNAME"
        env_password_var = "DEVICE_MONITOR_PASSWORD"

        if self.username is not None and self.password is not None:
            return self.username, self.password

        # 1. if credentials are set via arguments then use them and return
        if self.cli_args.username is not None and self.cli_args.password is not None:
            self.username = self.cli_args.username
            self.password = self.cli_args.password
            return self.username, self.password

        # 2. a authentication file is defined, lets try to parse it
        if self.cli_args.authfile is not None:

            try:
                with open(self.cli_args.authfile) as authfile:
                    for line in authfile:
                        name, var = line.partition("=")[::2]
                        if name.strip() == "username":
                            self.username = var.strip()
                        if name.strip() == "password":
                            self.password = var.strip()

            except FileNotFoundError:
                raise DriverError("GENERIC_ERROR",
                                  f"Provided authentication file not found: {self.cli_args.authfile}")
            except PermissionError:
                raise DriverError("GENERIC_ERROR",
                                  f"Error opening authentication file: {self.cli_args.authfile}")

            if self.username is None or self.password is None:
                raise DriverError("GENERIC_ERROR",
                                  f"Error parsing authentication file '{self.cli_args.authfile}'. "
                                  f"Make sure username and password are set properly.")

            return self.username, self.password

        # 3. try to read credentials from environment
        self.username = os.getenv(env_username_var)
        self.password = os.getenv(env_password_var)

        if self.username is None or self.password is None:
            raise DriverError("AUTHENTICATION_ERROR", "Username and Password needed to connect to this device")

        return self.username, self.password

    def create_table(self, name, columns):

        return Table(name, columns, driver_name=self.cli_args.driver, driver_version=self.driver_version)

    def exit_on_error(self, text, state="UNKNOWN"):

        print(f"[{state}]: {text}")
        sys.exit(plugin_status_types.get(state))

    def success(self, table=None):

        if table is None:
            print("[OK]: Validation successful")
            sys.exit(plugin_status_types.get("OK"))

        if self.cli_args.json is True or self.output_file is not None:
            output = table.to_json()
        else:
            output = table.to_text()

        if self.output_file is not None:
            try:
                with open(self.output_file, "w") as writer:
                    writer.write(output)
            except OSError as e:
                self.exit_on_error(f"Unable to write to output file: {e}")

            output = f"[OK]: Successfully written {len(table)} records of table '{table.name}' to output file"

        print(output)
        sys.exit(plugin_status_types.get("OK"))

    def failure(self, error_type="GENERIC_ERROR", text=None):

        if error_type not in driver_error_types.keys():
            error_type = "GENERIC_ERROR"

        state = driver_error_types.get(error_type)

        logging.debug(f"Driver '{self.cli_args.driver}' failed with {error_type}: {text}")

        return_text = error_type
        if text is not None:
            return_text += f": {text}"

        self.exit_on_error(return_text, state)

# EOF
