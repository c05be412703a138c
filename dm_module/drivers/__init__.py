# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

from dm_module.drivers import powervault_drives, esxi_services, freebsd_route, windows_ip_latency

# all available drivers by name
drivers = {x.name: x for x in [powervault_drives, esxi_services, freebsd_route, windows_ip_latency]}


def get_driver(driver_name):

    if driver_name not in drivers.keys():
        raise ValueError(f"Driver '{driver_name}' is invalid, needs to be one of these: {list(drivers.keys())}")

    return drivers.get(driver_name)

# EOF
