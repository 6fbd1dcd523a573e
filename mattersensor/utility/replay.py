# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

"""Feed a captured device description and attribute log through the driver.

The device file is JSON::

    {"id": "sensor1",
     "capabilities": ["motionSensor"],
     "endpoints": [{"id": 1, "clusters": {"0x0406": 0, "0x002f": 2}}]}

Each line of the log is a JSON array, either
``["report", endpoint, cluster, attribute, value]`` with an optional trailing
status code, or ``["info_changed", old_profile, new_profile]``.
"""

import json

from mattersensor.device import Endpoint
from mattersensor.interaction_model import AttributeReport


def load_device(matter, device_file):
    with open(device_file, "r") as f:
        description = json.load(f)
    endpoints = [Endpoint.from_json(e) for e in description.get("endpoints", [])]
    return matter.add_device(
        description["id"], endpoints, description.get("capabilities", [])
    )


def read_log(log_file):
    entries = []
    with open(log_file, "r") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            entries.append(json.loads(line))
    return entries


def replay(matter, device, entries):
    """Replay ``entries`` against ``device`` and return the events produced."""
    events = []
    for entry in entries:
        kind = entry[0]
        if kind == "report":
            report = AttributeReport(*entry[1:])
            event = matter.attribute_report(device, report)
            if event is not None:
                events.append(event)
        elif kind == "info_changed":
            _, old_profile, new_profile = entry
            matter.info_changed(device, old_profile, new_profile)
        else:
            raise RuntimeError(f"Unknown replay entry {kind!r}")
    return events
