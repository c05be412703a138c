# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import pytest

import device_monitor
from dm_module.args import parse_command_line
from dm_module.classes import DriverError
from dm_module.drivers import drivers, get_driver, freebsd_route


def parse(args):
    return parse_command_line(device_monitor.description, "1.0.0", "2026-10-19", args)


def test_drivers_registered():
    assert sorted(drivers.keys()) == ["esxi_services", "freebsd_route", "powervault_drives", "windows_ip_latency"]
    assert get_driver("freebsd_route") is freebsd_route

    with pytest.raises(ValueError):
        get_driver("no_such_driver")


def test_parse_command_line():
    args = parse(["-H", "win01:2222", "-D", "windows_ip_latency", "--ip_address", "8.8.8.8",
                  "--ip_address", "10.0.0.1", "--packets", "4", "-u", "monitor", "-p", "secret"])

    assert args.host == "win01:2222"
    assert args.driver == "windows_ip_latency"
    assert args.ip_address == ["8.8.8.8", "10.0.0.1"]
    assert args.packets == 4
    assert args.timeout == 30
    assert args.validate is False


@pytest.mark.parametrize("args", [
    ["-D", "freebsd_route"],
    ["-H", "10.0.0.1"],
    ["-H", "10.0.0.1", "-D", "no_such_driver"],
    ["-H", "10.0.0.1", "-D", "windows_ip_latency", "--ip_address", "8.8.8.8; shutdown /s"],
    ["-H", "10.0.0.1", "-D", "windows_ip_latency", "--packets", "0"],
])
def test_parse_command_line_errors(args):
    with pytest.raises(SystemExit) as exit_info:
        parse(args)

    assert exit_info.value.code == 2


def test_list_drivers(capsys):
    with pytest.raises(SystemExit) as exit_info:
        parse(["--list"])

    assert exit_info.value.code == 0
    assert "powervault_drives" in capsys.readouterr().out


def test_main_success(monkeypatch, capsys):
    table_data = dict()

    def get_status(driver_data):
        table = driver_data.create_table("Routing table", freebsd_route.table_columns)
        table.insert_record("ip_v4>default", ["default", "10.0.0.1", "UGS", "em0"])
        table_data["table"] = table
        return table

    monkeypatch.setattr(freebsd_route, "get_status", get_status)

    with pytest.raises(SystemExit) as exit_info:
        device_monitor.DeviceMonitor(["-H", "10.0.0.1", "-D", "freebsd_route", "-u", "a", "-p", "b"]).main()

    assert exit_info.value.code == 0
    assert "ip_v4>default" in capsys.readouterr().out


def test_main_validate(monkeypatch, capsys):
    monkeypatch.setattr(freebsd_route, "validate", lambda driver_data: None)

    with pytest.raises(SystemExit) as exit_info:
        device_monitor.DeviceMonitor(["-H", "10.0.0.1", "-D", "freebsd_route", "--validate"]).main()

    assert exit_info.value.code == 0
    assert capsys.readouterr().out.startswith("[OK]")


def test_main_failure(monkeypatch, capsys):
    def validate(driver_data):
        raise DriverError("AUTHENTICATION_ERROR", "Username or password invalid.")

    monkeypatch.setattr(freebsd_route, "validate", validate)

    with pytest.raises(SystemExit) as exit_info:
        device_monitor.DeviceMonitor(["-H", "10.0.0.1", "-D", "freebsd_route", "--validate"]).main()

    assert exit_info.value.code == 2
    assert capsys.readouterr().out.strip() == "[CRITICAL]: AUTHENTICATION_ERROR: Username or password invalid."
