# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

"""Semantic capabilities and the events that report their state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

MOTION_SENSOR = "motionSensor"
CONTACT_SENSOR = "contactSensor"
ILLUMINANCE_MEASUREMENT = "illuminanceMeasurement"
TEMPERATURE_MEASUREMENT = "temperatureMeasurement"
RELATIVE_HUMIDITY_MEASUREMENT = "relativeHumidityMeasurement"
BATTERY = "battery"


@dataclass(frozen=True)
class CapabilityEvent:
    capability: str
    attribute: str
    value: Any
    unit: Optional[str] = None
    endpoint: Optional[int] = None
    """None for events that describe the whole device."""

    def for_endpoint(self, endpoint_id: int) -> CapabilityEvent:
        return CapabilityEvent(
            self.capability, self.attribute, self.value, self.unit, endpoint_id
        )

    def to_json(self) -> dict:
        entry = {
            "capability": self.capability,
            "attribute": self.attribute,
            "value": self.value,
        }
        if self.unit is not None:
            entry["unit"] = self.unit
        if self.endpoint is not None:
            entry["endpoint"] = self.endpoint
        return entry

    def __str__(self):
        scope = "device" if self.endpoint is None else f"EP{self.endpoint}"
        unit = "" if self.unit is None else f" {self.unit}"
        return f"{scope} {self.capability}.{self.attribute} = {self.value}{unit}"


def illuminance(lux: int) -> CapabilityEvent:
    return CapabilityEvent(ILLUMINANCE_MEASUREMENT, "illuminance", lux, unit="lux")


def temperature(value: float, unit: str = "C") -> CapabilityEvent:
    return CapabilityEvent(TEMPERATURE_MEASUREMENT, "temperature", value, unit=unit)


def humidity(percent: int) -> CapabilityEvent:
    return CapabilityEvent(RELATIVE_HUMIDITY_MEASUREMENT, "humidity", percent, unit="%")


def contact(closed: bool) -> CapabilityEvent:
    return CapabilityEvent(CONTACT_SENSOR, "contact", "closed" if closed else "open")


def battery(percent: int) -> CapabilityEvent:
    return CapabilityEvent(BATTERY, "battery", percent, unit="%")


def motion(active: bool) -> CapabilityEvent:
    return CapabilityEvent(MOTION_SENSOR, "motion", "active" if active else "inactive")
