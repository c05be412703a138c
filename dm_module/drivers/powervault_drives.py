# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

"""
Retrieves information about the drives of a Dell PowerVault SAN system
using the Redfish API. Tested on Dell PowerVault ME5024.
"""

import logging

from dm_module.classes import DriverError
from dm_module.classes.redfish import RedfishConnection
from dm_module.classes.table import sanitize_record_id
from dm_module.common import grab

name = "powervault_drives"
description = "Dell PowerVault SAN drives (Redfish)"

storage_path = "/redfish/v1/Storage"

table_columns = [
    {"label": "Serial Number", "value_type": "STRING"},
    {"label": "Rack", "value_type": "NUMBER"},
    {"label": "Rack Offset", "value_type": "NUMBER"},
    {"label": "Health", "value_type": "STRING"}
]


def get_controllers(rf):
    """
        return the data of all storage controllers which list their drives
    """

    controllers = list()

    for controller_path in rf.get_members(storage_path):

        controller = rf.get(controller_path)

        if controller.get("Name") is None or controller.get("Drives") is None:
            logging.error(f"Controller name or drives not found for API path '{controller_path}'")
            continue

        controllers.append(controller)

    return controllers


def get_drives(rf, controller):

    drives = list()

    for drive_link in controller.get("Drives"):

        drive_path = drive_link.get("@odata.id")
        if drive_path is None:
            continue

        drive = rf.get(drive_path)

        if drive.get("Name") is None:
            logging.error(f"Drive name not found for API path '{drive_path}'")
            continue

        drives.append(drive)

    return drives


def get_drive_health(drive):

    if grab(drive, "Status.State") == "Enabled":
        return grab(drive, "Status.Health")

    return "N/A"


def validate(driver_data):

    rf = RedfishConnection(driver_data)

    try:
        controllers = get_controllers(rf)
    finally:
        rf.terminate_session()

    if len(controllers) == 0:
        raise DriverError("PARSING_ERROR", f"No storage controllers found at API path '{storage_path}'")

    logging.info("Validation successful")


def get_status(driver_data):

    table = driver_data.create_table("Drives", table_columns)

    rf = RedfishConnection(driver_data)

    try:
        for controller in get_controllers(rf):
            for drive in get_drives(rf, controller):

                record_id = sanitize_record_id(f"{controller.get('Name')} {drive.get('Name')}")

                table.insert_record(record_id, [
                    drive.get("SerialNumber"),
                    grab(drive, "PhysicalLocation.Placement.Rack"),
                    grab(drive, "PhysicalLocation.Placement.RackOffset"),
                    get_drive_health(drive)
                ])
    finally:
        rf.terminate_session()

    return table

# EOF
