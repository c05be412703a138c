# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

"""
Monitors the services of an ESXi host through the vSphere SOAP API (/sdk).
Tested on ESXi 8.0.0.
"""

import logging

from dm_module.classes import DriverError
from dm_module.classes.soap import SoapConnection, parse_xml, xml_value

name = "esxi_services"
description = "ESXi host services (SOAP)"

table_columns = ["Name", "Is Required", "Is Uninstallable", "Is Running", "Policy"]

service_fields = ["label", "required", "uninstallable", "running", "policy"]


def first_text(soup, selector):

    element = soup.select_one(selector)
    if element is None:
        return ""

    return element.get_text(strip=True)


def get_session_key(soap_response):

    return first_text(parse_xml(soap_response), "returnval key")


def get_container_id(soap_response):

    return first_text(parse_xml(soap_response), "returnval")


def get_host_ref(soap_response):

    return first_text(parse_xml(soap_response), "returnval ManagedObjectReference")


def get_services(soap_response):
    """
        extract the service details of the 'config.service' property

        Parameters
        ----------
        soap_response: str
            RetrieveProperties response

        Returns
        -------
        list
            one dict per service with the keys 'key' and all 'service_fields',
            missing values are set to 'N/A'
    """

    soup = parse_xml(soap_response)

    services = list()
    for service in soup.select('propSet:has(> name:-soup-contains("config.service")) > val > service'):

        service_data = {"key": first_text(service, "key")}
        for field in service_fields:
            service_data[field] = first_text(service, field) or "N/A"

        services.append(service_data)

    return services


def login(soap):

    username, password = soap.driver_data.get_credentials()

    return get_session_key(soap.post(
        '<vim25:Login>'
        '<_this type="SessionManager">ha-sessionmgr</_this>'
        f'<userName>{xml_value(username)}</userName>'
        f'<password>{xml_value(password)}</password>'
        '</vim25:Login>'
    ))


def create_all_host_container(soap):

    return get_container_id(soap.post(
        '<CreateContainerView xmlns="urn:vim25">'
        '<_this type="ViewManager">ViewManager</_this>'
        '<container type="Folder">ha-folder-root</container>'
        '<type>HostSystem</type>'
        '<recursive>true</recursive>'
        '</CreateContainerView>'
    ))


def fetch_container(soap, container_id):

    return get_host_ref(soap.post(
        '<Fetch xmlns="urn:vim25">'
        f'<_this type="ContainerView">{xml_value(container_id)}</_this>'
        '<prop>view</prop>'
        '</Fetch>'
    ))


def retrieve_properties(soap, host_ref):

    return get_services(soap.post(
        '<RetrieveProperties xmlns="urn:vim25">'
        '<_this type="PropertyCollector">ha-property-collector</_this>'
        '<specSet>'
        '<propSet>'
        '<type>HostSystem</type>'
        '<pathSet>config.service</pathSet>'
        '</propSet>'
        '<objectSet>'
        f'<obj type="HostSystem">{xml_value(host_ref)}</obj>'
        '</objectSet>'
        '</specSet>'
        '</RetrieveProperties>'
    ))


def validate(driver_data):

    with SoapConnection(driver_data) as soap:
        session_key = login(soap)

    if len(session_key) == 0:
        raise DriverError("AUTHENTICATION_ERROR", "Login returned no session key")

    logging.info("Validation successful")


def get_status(driver_data):

    table = driver_data.create_table("Services Details", table_columns)

    with SoapConnection(driver_data) as soap:

        if len(login(soap)) == 0:
            raise DriverError("AUTHENTICATION_ERROR", "Login returned no session key")

        container_id = create_all_host_container(soap)
        if len(container_id) == 0:
            raise DriverError("PARSING_ERROR", "No container view id returned")

        host_ref = fetch_container(soap, container_id)
        if len(host_ref) == 0:
            raise DriverError("PARSING_ERROR", f"No host found in container view '{container_id}'")

        services = retrieve_properties(soap, host_ref)

    for service in services:
        if len(service.get("key")) == 0:
            logging.warning(f"Skipping service without key: {service}")
            continue

        table.insert_record(service.get("key"), [service.get(x) for x in service_fields])

    return table

# EOF
