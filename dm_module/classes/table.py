# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  device_monitor.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import datetime
import hashlib
import json
import logging
import re

from dm_module.classes import table_value_types

from socket import gethostname


# table output definition
table_layout_version_string = "1.0.0"

record_id_max_length = 50
record_id_reserved_words = [r"\?", r"\*", r"\%", "table", "column", "history"]


def sanitize_record_id(text):
    """
        turn a free text into a valid record id

        reserved words and characters are removed, the result is cut to
        the max record id length, all white space is replaced by "-"
        and everything is lower case.

        Parameters
        ----------
        text: str
            the text to turn into a record id

        Returns
        -------
        str
            the sanitized record id
    """

    sanitize_regex = re.compile("|".join(record_id_reserved_words))

    text = sanitize_regex.sub("", f"{text}")[:record_id_max_length]

    return re.sub(r"\s+", "-", text).lower()


def hash_record_id(text):

    return hashlib.sha256(f"{text}".encode("utf-8")).hexdigest()[:record_id_max_length]


class TableColumn:

    label = None
    value_type = "STRING"
    unit = None

    def __init__(self, label, value_type="STRING", unit=None):

        if value_type not in table_value_types:
            raise ValueError(f"Value type '{value_type}' is invalid, needs to be one of these: {table_value_types}")

        self.label = label
        self.value_type = value_type
        self.unit = unit

    def header(self):

        if self.unit is not None:
            return f"{self.label} [{self.unit}]"

        return self.label

    def cast(self, value):

        if value is None:
            return None

        value = f"{value}".strip() if not isinstance(value, (int, float)) else value

        if value == "":
            return None

        if self.value_type != "NUMBER" or isinstance(value, (int, float)):
            return value

        def is_int(v):
            return v.lstrip("-+").isdigit()

        def is_float(v):
            try:
                _ = float(v)
            except ValueError:
                return False
            return True

        if is_int(value):
            return int(value)
        if is_float(value):
            return float(value)

        return value


class Table:
    """
        A table of records a driver reports back.

        Each record is identified by a record id and holds one value per column.
    """

    name = None
    columns = None
    records = None
    table_start = None
    driver_name = None
    driver_version = None

    def __init__(self, name, columns, driver_name=None, driver_version=None):

        self.name = name
        self.columns = list()
        self.records = dict()

        for column in columns:
            if isinstance(column, TableColumn):
                self.columns.append(column)
            elif isinstance(column, dict):
                self.columns.append(TableColumn(**column))
            else:
                self.columns.append(TableColumn(f"{column}"))

        # set metadata
        self.table_start = datetime.datetime.now(datetime.timezone.utc)
        self.driver_name = driver_name
        self.driver_version = driver_version

    def insert_record(self, record_id, values):

        if record_id is None or len(f"{record_id}") == 0:
            raise ValueError("Record id must not be empty")

        record_id = f"{record_id}"

        if len(record_id) > record_id_max_length:
            raise ValueError(f"Record id '{record_id}' exceeds max length of {record_id_max_length} characters")

        if len(values) != len(self.columns):
            raise ValueError(f"Record '{record_id}' has {len(values)} values but table '{self.name}' "
                             f"has {len(self.columns)} columns")

        if record_id in self.records:
            logging.debug(f"Record id '{record_id}' already present in table '{self.name}', replacing it")

        self.records[record_id] = [column.cast(value) for column, value in zip(self.columns, values)]

    def get(self, record_id):

        return self.records.get(record_id)

    def __len__(self):
        return len(self.records)

    def to_text(self):

        header = ["Id"] + [x.header() for x in self.columns]

        rows = [[record_id] + ["" if x is None else f"{x}" for x in values]
                for record_id, values in self.records.items()]

        widths = [len(x) for x in header]
        for row in rows:
            widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

        def format_row(row):
            return "  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()

        return_text = [f"{self.name}:", format_row(header), format_row(["-" * x for x in widths])]
        return_text.extend([format_row(row) for row in rows])

        return "\n".join(return_text)

    def to_json(self):

        start_date = self.table_start.astimezone().replace(microsecond=0).isoformat()

        table_content = {
            "name": self.name,
            "columns": [x.__dict__ for x in self.columns],
            "records": self.records
        }

        # add metadata
        meta_data = {
            "start_of_data_collection": start_date,
            "duration_of_data_collection_in_seconds":
                (datetime.datetime.now(datetime.timezone.utc) - self.table_start).total_seconds(),
            "table_layout_version": table_layout_version_string,
            "host_that_collected_data": gethostname(),
            "driver_name": self.driver_name,
            "script_version": self.driver_version
        }

        output = {"table": table_content, "meta": meta_data}

        return json.dumps(output, sort_keys=True, indent=4)

# EOF
