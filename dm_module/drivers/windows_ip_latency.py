# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

"""
Pings a list of IP addresses from a Windows host via SSH and reports the
average latency and packet loss of each address.

Tested on Windows 10 and Windows Server 2019 (PowerShell 5.1).
"""

import logging
import re

from dm_module.classes import DriverError
from dm_module.classes.ssh import SSHConnection
from dm_module.classes.table import hash_record_id
from dm_module.common import execute_all

name = "windows_ip_latency"
description = "Windows IP latency and packet loss (SSH)"

validate_cmd = "dir"

default_packets = 2
default_ip_addresses = ["8.8.8.8", "1.1.1.1", "192.168.0.1", "192.168.0.2", "192.168.0.3"]

table_columns = [
    {"label": "IP Address"},
    {"label": "Latency", "value_type": "NUMBER", "unit": "ms"},
    {"label": "Packet Loss", "value_type": "NUMBER", "unit": "%"}
]

# Minimum = 10ms, Maximum = 11ms, Average = 10ms
latency_expr = re.compile(r"Average = (\d+)ms")
# Packets: Sent = 2, Received = 1, Lost = 1 (50% loss),
loss_percent_expr = re.compile(r"\((\d+)% loss\)")
loss_count_expr = re.compile(r"Packets: Sent = (\d+), Received = \d+, Lost = (\d+)")


def parse_ping(output):
    """
        parse the output of a Windows ping command

        Parameters
        ----------
        output: str
            output of 'ping -n <packets> <ip>'

        Returns
        -------
        tuple
            average latency in ms (None if nothing was received) and packet loss in percent
    """

    match = loss_count_expr.search(output)
    if match is None:
        raise DriverError("PARSING_ERROR", "No packet statistics found in ping output")

    sent, lost = int(match.group(1)), int(match.group(2))

    match = loss_percent_expr.search(output)
    if match is not None:
        packet_loss = int(match.group(1))
    else:
        packet_loss = round(lost * 100 / sent) if sent > 0 else 100

    latency = None
    match = latency_expr.search(output)
    if match is not None:
        latency = int(match.group(1))

    return latency, packet_loss


def get_ip_addresses(driver_data):

    return driver_data.cli_args.ip_address or default_ip_addresses


def validate(driver_data):

    logging.info(f"Verifying credentials ... {validate_cmd}")

    with SSHConnection(driver_data) as ssh:
        ssh.run(validate_cmd)


def get_status(driver_data):

    table = driver_data.create_table("IP Latency", table_columns)

    packets = driver_data.cli_args.packets or default_packets
    ip_addresses = get_ip_addresses(driver_data)

    with SSHConnection(driver_data) as ssh:

        def ping(ip_address):
            def run_ping():
                logging.info(f"Pinging {ip_address} ...")
                return parse_ping(ssh.run(f"ping -n {packets} {ip_address}"))
            return run_ping

        results = execute_all([ping(x) for x in ip_addresses])

    for ip_address, (latency, packet_loss) in zip(ip_addresses, results):
        table.insert_record(hash_record_id(ip_address), [ip_address, latency, packet_loss])

    return table

# EOF
