# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import threading

import pytest

from dm_module.common import grab, execute_all, split_host_port


drive_data = {
    "Name": "Disk 0.1",
    "PhysicalLocation": {
        "Placement": {
            "Rack": 0,
            "RackOffset": 1
        }
    },
    "Links": {
        "Volumes": [{"@odata.id": "/redfish/v1/Storage/A/Volumes/1"}]
    }
}


def test_grab_nested_path():
    assert grab(drive_data, "PhysicalLocation.Placement.RackOffset") == 1


def test_grab_is_case_insensitive():
    assert grab(drive_data, "physicallocation.placement.rack") == 0


def test_grab_list_index():
    assert grab(drive_data, "Links.Volumes.0.@odata.id", separator=".") is None
    assert grab(drive_data, "Links/Volumes/0/@odata.id", separator="/") == "/redfish/v1/Storage/A/Volumes/1"


def test_grab_missing_path():
    assert grab(drive_data, "Status.Health") is None
    assert grab(None, "Name") is None
    assert grab(drive_data, None) is None


def test_execute_all_empty():
    assert execute_all([]) == []


def test_execute_all_keeps_order():
    results = execute_all([lambda x=x: x * 2 for x in range(10)])
    assert results == [x * 2 for x in range(10)]


def test_execute_all_runs_in_parallel():

    # every function waits for all others, this only finishes if all run at the same time
    barrier = threading.Barrier(3, timeout=5)

    def wait_for_others():
        return barrier.wait()

    results = execute_all([wait_for_others] * 3)

    assert sorted(results) == [0, 1, 2]


def test_execute_all_waits_for_all_before_raising():

    finished = list()

    def fail():
        raise ValueError("first")

    def succeed():
        finished.append(True)
        return True

    with pytest.raises(ValueError, match="first"):
        execute_all([fail, succeed, succeed])

    assert len(finished) == 2


@pytest.mark.parametrize("host, expected", [
    ("10.0.0.1", ("10.0.0.1", 22)),
    ("10.0.0.1:2222", ("10.0.0.1", 2222)),
    ("switch.example.com", ("switch.example.com", 22)),
    ("fe80::1", ("fe80::1", 22)),
    ("[fe80::1]:2200", ("fe80::1", 2200)),
])
def test_split_host_port(host, expected):
    assert split_host_port(host, 22) == expected


def test_split_host_port_invalid_port():
    with pytest.raises(ValueError):
        split_host_port("10.0.0.1:ssh", 22)
