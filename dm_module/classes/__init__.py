# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

# define valid return status types
plugin_status_types = {
    "OK": 0,
    "WARNING": 1,
    "CRITICAL": 2,
    "UNKNOWN": 3
}

# define valid driver error types and the status they are reported with
driver_error_types = {
    "GENERIC_ERROR": "UNKNOWN",
    "AUTHENTICATION_ERROR": "CRITICAL",
    "RESOURCE_UNAVAILABLE": "CRITICAL",
    "PARSING_ERROR": "UNKNOWN",
    "TIMEOUT_ERROR": "CRITICAL"
}

# define valid table column value types
table_value_types = ["STRING", "NUMBER"]


class DriverError(Exception):
    """
        raised by transports and drivers if the device
        can't be queried or the returned data can't be used
    """

    def __init__(self, error_type="GENERIC_ERROR", message=None):

        if error_type not in driver_error_types.keys():
            raise ValueError(f"Error type '{error_type}' is invalid, needs to be one of these: %s" %
                             list(driver_error_types.keys()))

        self.error_type = error_type
        self.message = message or error_type

        super().__init__(self.message)

    @property
    def status(self):
        return driver_error_types.get(self.error_type)
