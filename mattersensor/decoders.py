# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

"""Translate raw attribute values into capability events."""

import logging
import math
from typing import Optional

from . import capabilities
from .capabilities import CapabilityEvent
from .clusters.device_management.power_source import PowerSource
from .clusters.general.boolean_state import BooleanState
from .clusters.measurement.illuminance_measurement import IlluminanceMeasurement
from .clusters.measurement.occupancy_sensing import OccupancyBitmap, OccupancySensing
from .clusters.measurement.relative_humidity_measurement import (
    RelativeHumidityMeasurement,
)
from .clusters.measurement.temperature_measurement import TemperatureMeasurement

_LOGGER = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def lux_from_measured_value(measured_value: int) -> int:
    # MeasuredValue = 10,000 x log10(lux) + 1
    return math.floor(10 ** ((measured_value - 1) / 10000))


def illuminance_attr_handler(value):
    return capabilities.illuminance(lux_from_measured_value(value))


def temperature_attr_handler(value):
    return capabilities.temperature(value / 100.0, unit="C")


def humidity_attr_handler(value):
    return capabilities.humidity(round_half_up(value / 100.0))


def boolean_attr_handler(value):
    return capabilities.contact(closed=bool(value))


def battery_percent_remaining_attr_handler(value):
    return capabilities.battery(round_half_up(value / 2.0))


def occupancy_attr_handler(value):
    return capabilities.motion(active=value == OccupancyBitmap.OCCUPIED)


# Attribute, handler and whether the event belongs to the reporting endpoint.
# Battery and occupancy describe the whole device.
_HANDLERS = (
    (IlluminanceMeasurement.MeasuredValue, illuminance_attr_handler, True),
    (TemperatureMeasurement.MeasuredValue, temperature_attr_handler, True),
    (RelativeHumidityMeasurement.MeasuredValue, humidity_attr_handler, True),
    (BooleanState.StateValue, boolean_attr_handler, True),
    (PowerSource.BatPercentRemaining, battery_percent_remaining_attr_handler, False),
    (OccupancySensing.Occupancy, occupancy_attr_handler, False),
)

ATTRIBUTE_HANDLERS = {
    attribute.key: (attribute, handler, endpoint_scoped)
    for attribute, handler, endpoint_scoped in _HANDLERS
}


def decode(
    cluster_id, attribute_id, endpoint_id, raw_value
) -> Optional[CapabilityEvent]:
    """Return the event for one attribute value, or None when there is nothing to report.

    Attributes without a handler are ignored. So are null values of nullable
    attributes, which mean the device has no current reading.
    """
    entry = ATTRIBUTE_HANDLERS.get((cluster_id, attribute_id))
    if entry is None:
        _LOGGER.debug(
            "No handler for EP%s cluster 0x%04x attribute 0x%04x",
            endpoint_id,
            cluster_id,
            attribute_id,
        )
        return None
    attribute, handler, endpoint_scoped = entry
    if raw_value is None and attribute.nullable:
        _LOGGER.debug("EP%s %r is null", endpoint_id, attribute)
        return None
    event = handler(attribute.from_raw(raw_value))
    if endpoint_scoped:
        event = event.for_endpoint(endpoint_id)
    return event
