#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

description = """
This is a collection of device monitoring drivers. Each driver logs into
a device (Redfish, SOAP or SSH), requests a fixed set of data and reports
it as a table.
"""

__version__ = "1.0.0"
__version_date__ = "2026-10-19"
__author__ = "Ricardo Bartels <ricardo@bitchbrothers.com>"
__description__ = "Device Monitor"
__license__ = "MIT"

import logging

from dm_module.classes import DriverError
from dm_module.classes.driver import DriverData
from dm_module.drivers import get_driver
from dm_module.args import parse_command_line


class DeviceMonitor:

    def __init__(self, args=None):
        self.args = parse_command_line(description, __version__, __version_date__, args)

    def main(self):
        if self.args.verbose:
            # initialize logger
            logging.basicConfig(level="DEBUG", format='%(asctime)s - %(levelname)s: %(message)s')

        # initialize driver object
        driver_data = DriverData(self.args, driver_version=__version__)

        driver = get_driver(self.args.driver)

        try:
            if self.args.validate is True:
                driver.validate(driver_data)
                driver_data.success()
            else:
                driver_data.success(driver.get_status(driver_data))
        except DriverError as e:
            driver_data.failure(e.error_type, e.message)


def main():
    DeviceMonitor().main()

if __name__ == "__main__":
    main()

# EOF
