# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import logging
import pprint
import sys

from dm_module.classes import DriverError

# import 3rd party modules
import redfish

# defaults
default_conn_max_retries = 3
default_conn_timeout = 30


class RedfishConnection:

    connection = None
    host = None
    __cached_data = None

    def __init__(self, driver_data=None):

        if driver_data is None:
            raise Exception("No driver data passed to RedfishConnection()")

        if driver_data.cli_args.host is None:
            raise Exception("cli args host not set")

        self.driver_data = driver_data
        self.cli_args = driver_data.cli_args
        self.host = self.cli_args.host
        self.__cached_data = dict()

    def init_connection(self):

        # if we have a connection object then just return
        if self.connection is not None:
            return

        username, password = self.driver_data.get_credentials()

        # initialize connection
        try:
            self.connection = redfish.redfish_client(base_url=f"https://{self.host}",
                                                     max_retry=self.cli_args.retries, timeout=self.cli_args.timeout)
        except redfish.rest.v1.ServerDownOrUnreachableError:
            raise DriverError("RESOURCE_UNAVAILABLE", f"Host '{self.host}' down or unreachable.")
        except redfish.rest.v1.RetriesExhaustedError:
            raise DriverError("TIMEOUT_ERROR", f"Unable to connect to Host '{self.host}', max retries exhausted.")
        except Exception as e:
            raise DriverError("GENERIC_ERROR", f"Unable to connect to Host '{self.host}': {e}")

        if not self.connection:
            raise DriverError("GENERIC_ERROR", "Unable to establish connection.")

        try:
            self.connection.login(username=username, password=password, auth="session")
        except redfish.rest.v1.RetriesExhaustedError:
            raise DriverError("TIMEOUT_ERROR", f"Unable to connect to Host '{self.host}', max retries exhausted.")
        except (redfish.rest.v1.InvalidCredentialsError, redfish.rest.v1.SessionCreationError):
            raise DriverError("AUTHENTICATION_ERROR", "Username or password invalid.")
        except Exception as e:
            raise DriverError("GENERIC_ERROR", f"Unable to log in to Host '{self.host}': {e}")

        logging.debug(f"Created Redfish session on '{self.host}'")

        return

    def terminate_session(self):

        if self.connection is None:
            return

        try:
            self.connection.logout()
        except Exception as e:
            logging.debug(f"Unable to log out from Host '{self.host}': {e}")

        self.connection = None

    def _rf_get(self, redfish_path):

        try:
            return self.connection.get(redfish_path, None)
        except redfish.rest.v1.RetriesExhaustedError:
            raise DriverError("TIMEOUT_ERROR", f"Unable to connect to Host '{self.host}', max retries exhausted.")

    @staticmethod
    def check_response(redfish_response, redfish_path):
        """
            turn a failed response into a DriverError

            Some devices (i.e. Dell PowerVault) report problems in a
            'command-status' header instead of a proper HTTP status code.
        """

        command_status = redfish_response.getheader("command-status") or ""

        if "Command failed" in command_status:
            raise DriverError("AUTHENTICATION_ERROR", f"Session not valid for API path '{redfish_path}'")

        if "Invalid URL" in command_status:
            raise DriverError("RESOURCE_UNAVAILABLE", f"Invalid URL '{redfish_path}'")

        if redfish_response.status == 401:
            raise DriverError("AUTHENTICATION_ERROR", f"Not authorized to request API path '{redfish_path}'")

        if redfish_response.status != 200:
            raise DriverError("GENERIC_ERROR",
                              f"Got HTTP status {redfish_response.status} for API path '{redfish_path}'")

    def get(self, redfish_path):

        if self.connection is None:
            self.init_connection()

        if self.__cached_data.get(redfish_path) is None:

            redfish_response = self._rf_get(redfish_path)

            self.check_response(redfish_response, redfish_path)

            # test if response is valid json and can be decoded
            try:
                redfish_response_json_data = redfish_response.dict
            except (redfish.rest.v1.JsonDecodingError, ValueError):
                raise DriverError("PARSING_ERROR", f"Unable to decode data returned for API path '{redfish_path}'")

            if self.cli_args.verbose:
                pprint.pprint(redfish_response_json_data, stream=sys.stderr)

            self.__cached_data[redfish_path] = redfish_response_json_data

        return self.__cached_data.get(redfish_path)

    def get_members(self, redfish_path):
        """
        get a list of links to all members of a redfish collection
        i.e.:
            "/redfish/v1/Storage" -> [ "/redfish/v1/Storage/controller_a" ]

        Parameters
        ----------
        redfish_path: str
            path of the collection

        Returns
        -------
            list
                list of member links, empty if collection has no members
        """

        collection = self.get(redfish_path)

        return [x.get("@odata.id") for x in collection.get("Members") or list() if x.get("@odata.id") is not None]

# EOF
