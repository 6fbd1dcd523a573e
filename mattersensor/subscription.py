# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

import logging

from . import capabilities
from .clusters.device_management.power_source import PowerSource
from .clusters.general.boolean_state import BooleanState
from .clusters.measurement.illuminance_measurement import IlluminanceMeasurement
from .clusters.measurement.occupancy_sensing import OccupancySensing
from .clusters.measurement.relative_humidity_measurement import (
    RelativeHumidityMeasurement,
)
from .clusters.measurement.temperature_measurement import TemperatureMeasurement
from .errors import ConfigurationError

_LOGGER = logging.getLogger(__name__)

SUBSCRIBED_ATTRIBUTES = {
    capabilities.RELATIVE_HUMIDITY_MEASUREMENT: [
        RelativeHumidityMeasurement.MeasuredValue
    ],
    capabilities.TEMPERATURE_MEASUREMENT: [TemperatureMeasurement.MeasuredValue],
    capabilities.ILLUMINANCE_MEASUREMENT: [IlluminanceMeasurement.MeasuredValue],
    capabilities.MOTION_SENSOR: [OccupancySensing.Occupancy],
    capabilities.CONTACT_SENSOR: [BooleanState.StateValue],
    capabilities.BATTERY: [PowerSource.BatPercentRemaining],
}


def attributes_for(supported_capabilities):
    """Union of the attributes backing each capability, in table order without repeats."""
    supported = set(supported_capabilities)
    attributes = []
    for capability, backing in SUBSCRIBED_ATTRIBUTES.items():
        if capability not in supported:
            continue
        for attribute in backing:
            if attribute not in attributes:
                attributes.append(attribute)
    return attributes


class Subscription:
    """The attribute paths a device should report, across all of its endpoints."""

    def __init__(self, attributes):
        self.attributes = list(attributes)
        for attribute in self.attributes:
            if not attribute.reportable:
                raise ConfigurationError(f"{attribute!r} is not reportable")
        self.paths = [attribute.path() for attribute in self.attributes]

    @classmethod
    def for_capabilities(cls, supported_capabilities):
        return cls(attributes_for(supported_capabilities))

    def __contains__(self, attribute):
        return attribute in self.attributes

    def __len__(self):
        return len(self.attributes)

    def __iter__(self):
        return iter(self.attributes)

    def __repr__(self):
        return f"Subscription({', '.join(str(path) for path in self.paths)})"


class LoggingSubscriptionManager:
    """Stands in for the host's subscription transport."""

    def subscribe(self, device_id, subscription):
        _LOGGER.info("Subscribe %s to %r", device_id, subscription)
