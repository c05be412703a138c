# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

from argparse import Namespace

import pytest

from dm_module.classes.driver import DriverData


def make_args(**kwargs):

    args = dict(
        host="device.example.com",
        driver="freebsd_route",
        username="monitor",
        password="secret",
        authfile=None,
        validate=False,
        list=False,
        verbose=False,
        retries=3,
        timeout=30,
        json=False,
        output_file=None,
        ip_address=None,
        packets=2
    )
    args.update(kwargs)

    return Namespace(**args)


@pytest.fixture(autouse=True)
def reset_driver_data():
    DriverData.reset()
    yield
    DriverData.reset()


@pytest.fixture
def driver_data_factory():

    def factory(**kwargs):
        DriverData.reset()
        return DriverData(make_args(**kwargs), driver_version="1.0.0")

    return factory


@pytest.fixture
def driver_data(driver_data_factory):
    return driver_data_factory()
