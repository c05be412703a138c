# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import logging
import socket
import sys
import threading

from dm_module.classes import DriverError
from dm_module.common import split_host_port

# import 3rd party modules
import paramiko

default_ssh_port = 22


class SSHConnection:

    client = None
    host = None
    port = None

    def __init__(self, driver_data=None):

        if driver_data is None:
            raise Exception("No driver data passed to SSHConnection()")

        if driver_data.cli_args.host is None:
            raise Exception("cli args host not set")

        self.driver_data = driver_data
        self.cli_args = driver_data.cli_args
        self.host, self.port = split_host_port(self.cli_args.host, default_ssh_port)
        self.__connect_lock = threading.Lock()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def init_connection(self):

        # commands might get executed in parallel, connect only once
        with self.__connect_lock:

            if self.client is not None:
                return

            username, password = self.driver_data.get_credentials()

            client = paramiko.SSHClient()
            client.set_missing_host_key_policy(paramiko.AutoAddPolicy())

            try:
                client.connect(self.host, port=self.port, username=username, password=password,
                               timeout=self.cli_args.timeout, banner_timeout=self.cli_args.timeout,
                               auth_timeout=self.cli_args.timeout, look_for_keys=False, allow_agent=False)
            except paramiko.AuthenticationException:
                client.close()
                raise DriverError("AUTHENTICATION_ERROR", "Username or password invalid.")
            except socket.timeout:
                client.close()
                raise DriverError("TIMEOUT_ERROR", f"Connection to Host '{self.host}' timed out")
            except paramiko.SSHException as e:
                client.close()
                raise DriverError("GENERIC_ERROR", f"SSH error while connecting to Host '{self.host}': {e}")
            except OSError as e:
                client.close()
                raise DriverError("RESOURCE_UNAVAILABLE", f"Host '{self.host}' down or unreachable: {e}")

            logging.debug(f"Connected to '{self.host}:{self.port}' via SSH")

            self.client = client

    def close(self):

        if self.client is not None:
            self.client.close()
            self.client = None

    def run(self, command):
        """
            execute a command on the remote host

            Each command uses its own channel, so it's safe to call this
            from different threads for the same connection.

            Parameters
            ----------
            command: str
                the command to execute

            Returns
            -------
            str
                the output (stdout) of the command
        """

        self.init_connection()

        logging.debug(f"Executing command: {command}")

        try:
            _, stdout, stderr = self.client.exec_command(command, timeout=self.cli_args.timeout)
            output = stdout.read().decode("utf-8", errors="replace")
            error_output = stderr.read().decode("utf-8", errors="replace")
            exit_status = stdout.channel.recv_exit_status()
        except socket.timeout:
            raise DriverError("TIMEOUT_ERROR", f"Command '{command}' timed out")
        except paramiko.SSHException as e:
            raise DriverError("GENERIC_ERROR", f"Error while executing command '{command}': {e}")

        if self.cli_args.verbose:
            print(output, file=sys.stderr)

        if exit_status != 0 and len(error_output.strip()) > 0:
            raise DriverError("GENERIC_ERROR",
                              f"Command '{command}' failed with exit status {exit_status}: {error_output.strip()}")

        return output

# EOF
