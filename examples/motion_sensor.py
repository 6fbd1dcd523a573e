# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

"""Battery powered motion sensor: profile it, then feed it a few reports."""

import logging

import mattersensor as ms
from mattersensor import capabilities
from mattersensor.clusters.device_management.power_source import (
    PowerSource,
    PowerSourceFeature,
)
from mattersensor.clusters.measurement.occupancy_sensing import OccupancySensing

logging.basicConfig(level=logging.INFO)

matter = ms.MatterSensor(state_filename="sensor_state.json")
sensor = matter.add_device(
    "motion1",
    [ms.Endpoint(1, [OccupancySensing(), PowerSource(PowerSourceFeature.BATTERY)])],
    [capabilities.MOTION_SENSOR],
)
print("profile:", sensor.profile)

for report in (
    ms.AttributeReport(1, OccupancySensing.CLUSTER_ID, 0x0000, 0x01),
    ms.AttributeReport(1, PowerSource.CLUSTER_ID, 0x000C, 180),
    ms.AttributeReport(1, OccupancySensing.CLUSTER_ID, 0x0000, 0x00),
):
    matter.attribute_report(sensor, report)
