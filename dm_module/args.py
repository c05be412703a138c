# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import ipaddress
import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter, ArgumentTypeError

from dm_module.classes.redfish import default_conn_max_retries, default_conn_timeout
from dm_module.drivers import drivers


def ip_address_type(value):

    try:
        return f"{ipaddress.ip_address(value.strip())}"
    except ValueError:
        raise ArgumentTypeError(f"'{value}' is not a valid IP address")


def positive_int_type(value):

    try:
        value = int(value)
    except ValueError:
        raise ArgumentTypeError(f"'{value}' is not a number")

    if value < 1:
        raise ArgumentTypeError(f"'{value}' needs to be greater then 0")

    return value


def parse_command_line(description: str, version: str, version_date: str, args=None):
    """parse command line arguments
    Also add current version and version date to description
    """

    driver_list = "\n".join([f"  {name:<20} {driver.description}" for name, driver in drivers.items()])

    # define command line options
    parser = ArgumentParser(
        description=f"{description}\nVersion: {version} ({version_date})\n\navailable drivers:\n{driver_list}",
        formatter_class=RawDescriptionHelpFormatter, add_help=False)

    group = parser.add_argument_group(title="mandatory arguments")
    group.add_argument("-H", "--host",
                       help="define the host to request. To change the port just add ':portnumber' to this parameter")
    group.add_argument("-D", "--driver", choices=list(drivers.keys()),
                       help="the driver to run against the host")

    group = parser.add_argument_group(title="authentication arguments")
    group.add_argument("-u", "--username", help="the login user name")
    group.add_argument("-p", "--password", help="the login password")
    group.add_argument("-f", "--authfile", help="authentication file with user name and password")

    group = parser.add_argument_group(title="optional arguments")
    group.add_argument("-h", "--help", action='store_true',
                       help="show this help message and exit")
    group.add_argument("--validate", action='store_true',
                       help="only validate that the driver can be used for this host and the credentials are valid")
    group.add_argument("-l", "--list", action='store_true',
                       help="list all available drivers and exit")
    group.add_argument("-v", "--verbose", action='store_true',
                       help="this will add all requests and responses to output")
    group.add_argument("-r", "--retries", type=int, default=default_conn_max_retries,
                       help=f"set number of maximum retries for Redfish requests (default: {default_conn_max_retries})")
    group.add_argument("-t", "--timeout", type=int, default=default_conn_timeout,
                       help=f"set number of request timeout per try/retry (default: {default_conn_timeout})")
    group.add_argument("-j", "--json", action='store_true',
                       help="return table in json format instead of plain text")
    group.add_argument("--output_file",
                       help="set file to write the table (json format) to. Otherwise stdout will be used.")

    group = parser.add_argument_group(title="windows_ip_latency driver arguments")
    group.add_argument("--ip_address", action='append', type=ip_address_type,
                       help="IP address to ping, can be used multiple times "
                            "(default: 8.8.8.8, 1.1.1.1, 192.168.0.1, 192.168.0.2, 192.168.0.3)")
    group.add_argument("--packets", type=positive_int_type, default=2,
                       help="number of packets to send to each IP address (default: 2)")

    result = parser.parse_args(args)

    if result.help:
        parser.print_help()
        print("")
        sys.exit(0)

    if result.list:
        print(driver_list)
        sys.exit(0)

    # need to check this our self otherwise it's not
    # possible to put the help command into an arguments group
    if result.host is None:
        parser.error("No remote host defined")

    if result.driver is None:
        parser.error("No driver defined")

    return result

# EOF
