# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import logging
import sys
from xml.sax.saxutils import escape

from dm_module.classes import DriverError

# import 3rd party modules
import requests
import urllib3
from bs4 import BeautifulSoup

default_soap_path = "/sdk"

soap_envelope_start = '<?xml version="1.0" encoding="UTF-8"?>' \
                      '<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/" ' \
                      'xmlns:vim25="urn:vim25"><soapenv:Body>'
soap_envelope_end = '</soapenv:Body></soapenv:Envelope>'


def create_soap_payload(soap_body):

    return f"{soap_envelope_start}{soap_body}{soap_envelope_end}"


def xml_value(value):
    """escape a user supplied value before it gets added to a SOAP body"""

    return escape(f"{value}")


def parse_xml(soap_response):

    return BeautifulSoup(soap_response, "xml")


class SoapConnection:

    session = None
    url = None

    def __init__(self, driver_data=None, path=default_soap_path):

        if driver_data is None:
            raise Exception("No driver data passed to SoapConnection()")

        if driver_data.cli_args.host is None:
            raise Exception("cli args host not set")

        self.driver_data = driver_data
        self.cli_args = driver_data.cli_args
        self.url = f"https://{self.cli_args.host}{path}"

        # the session keeps the session cookie returned after login
        self.session = requests.Session()
        self.session.verify = False
        self.session.headers.update({"Content-Type": "text/xml; charset=utf-8"})

        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):

        self.session.close()

    def post(self, soap_body):
        """
            send a SOAP request and return the response body

            Parameters
            ----------
            soap_body: str
                the content of the SOAP body, will be wrapped into an envelope

            Returns
            -------
            str
                the SOAP response as text
        """

        payload = create_soap_payload(soap_body)

        try:
            response = self.session.post(self.url, data=payload.encode("utf-8"), timeout=self.cli_args.timeout)
        except requests.exceptions.Timeout:
            raise DriverError("TIMEOUT_ERROR", f"Request to '{self.url}' timed out")
        except requests.exceptions.ConnectionError as e:
            raise DriverError("RESOURCE_UNAVAILABLE", f"Unable to connect to '{self.url}': {e}")
        except requests.exceptions.RequestException as e:
            raise DriverError("GENERIC_ERROR", f"Request to '{self.url}' failed: {e}")

        if response is None:
            raise DriverError("RESOURCE_UNAVAILABLE", f"Got no response from '{self.url}'")

        if response.status_code == 400:
            raise DriverError("AUTHENTICATION_ERROR", f"Request to '{self.url}' was rejected")

        # vSphere answers a failed login with a SOAP fault
        if response.status_code == 500 and "InvalidLogin" in response.text:
            raise DriverError("AUTHENTICATION_ERROR", "Username or password invalid.")

        if response.status_code != 200:
            raise DriverError("GENERIC_ERROR", f"Got HTTP status {response.status_code} from '{self.url}'")

        if self.cli_args.verbose:
            print(response.text, file=sys.stderr)

        logging.debug(f"Got {len(response.text)} bytes SOAP response from '{self.url}'")

        return response.text

# EOF
