# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

"""
Reports the IPv4 and IPv6 routing table of a FreeBSD host via SSH.
"""

import logging

from dm_module.classes.ssh import SSHConnection
from dm_module.classes.table import record_id_max_length
from dm_module.common import execute_all

name = "freebsd_route"
description = "FreeBSD routing table (SSH)"

validate_cmd = "netstat -r -n"

# skip netstat headers
route_commands = {
    "ip_v4": "netstat -4 -r -n | tail -n +5",
    "ip_v6": "netstat -6 -r -n | tail -n +5"
}

table_columns = ["Destination", "Gateway", "Flags", "Netif Expire"]


def parse_routes(output):
    """
        split netstat output into route rows

        # 0.0.0.0/0          192.168.1.1        UGS         em0
        -> ["0.0.0.0/0", "192.168.1.1", "UGS", "em0"]
    """

    routes = list()
    for line in output.split("\n"):

        route_data = line.split()
        if len(route_data) == 0:
            continue

        route_data = route_data[:len(table_columns)]
        route_data.extend([None] * (len(table_columns) - len(route_data)))

        routes.append(route_data)

    return routes


def validate(driver_data):

    with SSHConnection(driver_data) as ssh:
        ssh.run(validate_cmd)


def get_status(driver_data):

    table = driver_data.create_table("Routing table", table_columns)

    with SSHConnection(driver_data) as ssh:

        def route(command):
            return lambda: parse_routes(ssh.run(command))

        results = execute_all([route(x) for x in route_commands.values()])

    for version, routes in zip(route_commands.keys(), results):
        for route_data in routes:

            record_id = f"{version}>{route_data[0]}"[:record_id_max_length]
            if table.get(record_id) is not None:
                logging.debug(f"Route {route_data[0]} shares record id '{record_id}' with route {table.get(record_id)[0]}, replacing it")

            table.insert_record(record_id, route_data)

    return table

# EOF
