# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import logging
from concurrent.futures import ThreadPoolExecutor, wait


def grab(structure=None, path=None, separator="."):
    """
        get data from a complex object/json structure with a
        "." separated path information. If a part of a path
        is not not present then this function returns "None".

        example structure:
            data_structure = {
              "PhysicalLocation": {
                "Placement": {
                  "Rack": "0",
                  "RackOffset": "12"
                }
              }
            }

        example path:
            "PhysicalLocation.Placement.RackOffset"

        example return value:
            "12"


        Parameters
        ----------
        structure: dict, list
            object structure to extract data from
        path: str
            nested path to extract
        separator: str
            path separator to use. Helpful if a path element
            contains the default (.) separator.

        Returns
        -------
        str, dict, list
            the desired path element if found, otherwise None

    """

    max_recursion_level = 100

    if structure is None or path is None:
        return None

    current_level = 0
    levels = len(path.split(separator))

    # noinspection PyBroadException
    def traverse(r_structure, r_path):
        nonlocal current_level
        current_level += 1

        if current_level > max_recursion_level:
            logging.debug(f"Max recursion level ({max_recursion_level}) reached. Returning None.")
            return None

        for attribute in r_path.split(separator):
            if isinstance(r_structure, dict):
                r_structure = {k.lower(): v for k, v in r_structure.items()}
            try:
                if isinstance(r_structure, list):
                    data = r_structure[int(attribute)]
                else:
                    data = r_structure.get(attribute.lower())
            except Exception:
                return None

            if current_level == levels:
                return data
            else:
                return traverse(data, separator.join(r_path.split(separator)[1:]))

    return traverse(structure, path)


def execute_all(functions, max_workers=None):
    """
        Run all functions at the same time and wait until every one of them
        has finished.

        Parameters
        ----------
        functions: list
            list of callables without arguments
        max_workers: int
            maximum number of functions running in parallel,
            defaults to the number of functions

        Returns
        -------
        list
            the return values of all functions in the same order as
            the functions were passed in
    """

    if len(functions) == 0:
        return list()

    with ThreadPoolExecutor(max_workers=max_workers or len(functions)) as executor:
        futures = [executor.submit(function) for function in functions]
        wait(futures)

    # raises the first exception in order of the passed functions
    return [future.result() for future in futures]


def split_host_port(host, default_port=None):
    """
        split a "host:port" string into host and port

        IPv6 addresses need to be put into brackets if a port is added: [fe80::1]:22
    """

    if host is None:
        return None, default_port

    if host.startswith("["):
        address, _, port = host[1:].partition("]")
        port = port.lstrip(":")
    elif host.count(":") == 1:
        address, _, port = host.partition(":")
    else:
        address, port = host, ""

    if len(port) == 0:
        return address, default_port

    if not port.isdigit():
        raise ValueError(f"Port '{port}' of host '{host}' is not a number")

    return address, int(port)

# EOF
