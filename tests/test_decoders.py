# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mattersensor import capabilities
from mattersensor.capabilities import CapabilityEvent
from mattersensor.clusters.device_management.power_source import PowerSource
from mattersensor.clusters.general.boolean_state import BooleanState
from mattersensor.clusters.measurement.illuminance_measurement import (
    IlluminanceMeasurement,
)
from mattersensor.clusters.measurement.occupancy_sensing import OccupancySensing
from mattersensor.clusters.measurement.relative_humidity_measurement import (
    RelativeHumidityMeasurement,
)
from mattersensor.clusters.measurement.temperature_measurement import (
    TemperatureMeasurement,
)
from mattersensor.decoders import ATTRIBUTE_HANDLERS, decode, round_half_up


def decode_attribute(attribute, value, endpoint=1):
    return decode(attribute.cluster_id, attribute.id, endpoint, value)


class TestIlluminance:
    def test_10000_lux(self):
        event = decode_attribute(IlluminanceMeasurement.MeasuredValue, 40001)
        assert event == CapabilityEvent(
            capabilities.ILLUMINANCE_MEASUREMENT, "illuminance", 10000, "lux", 1
        )

    def test_1_lux(self):
        assert decode_attribute(IlluminanceMeasurement.MeasuredValue, 1).value == 1

    def test_below_1_lux(self):
        assert decode_attribute(IlluminanceMeasurement.MeasuredValue, 0).value == 0

    def test_fraction_is_floored(self):
        # 10 ** 1.5 = 31.62
        assert decode_attribute(IlluminanceMeasurement.MeasuredValue, 15001).value == 31

    def test_null(self):
        assert decode_attribute(IlluminanceMeasurement.MeasuredValue, None) is None


class TestTemperature:
    def test_positive(self):
        event = decode_attribute(TemperatureMeasurement.MeasuredValue, 2350, endpoint=2)
        assert event.capability == capabilities.TEMPERATURE_MEASUREMENT
        assert event.attribute == "temperature"
        assert event.value == 23.5
        assert event.unit == "C"
        assert event.endpoint == 2

    def test_negative(self):
        assert decode_attribute(TemperatureMeasurement.MeasuredValue, -1025).value == -10.25

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            decode_attribute(TemperatureMeasurement.MeasuredValue, 40000)


class TestHumidity:
    def test_rounds_up(self):
        event = decode_attribute(RelativeHumidityMeasurement.MeasuredValue, 4567)
        assert event.value == 46
        assert event.capability == capabilities.RELATIVE_HUMIDITY_MEASUREMENT
        assert event.endpoint == 1

    def test_rounds_down(self):
        assert decode_attribute(RelativeHumidityMeasurement.MeasuredValue, 4549).value == 45

    def test_half_rounds_up(self):
        # Python's round() would give 42 here.
        assert decode_attribute(RelativeHumidityMeasurement.MeasuredValue, 4250).value == 43


class TestContact:
    def test_closed(self):
        event = decode_attribute(BooleanState.StateValue, True, endpoint=3)
        assert event == CapabilityEvent(
            capabilities.CONTACT_SENSOR, "contact", "closed", endpoint=3
        )

    def test_open(self):
        event = decode_attribute(BooleanState.StateValue, False, endpoint=3)
        assert event == CapabilityEvent(
            capabilities.CONTACT_SENSOR, "contact", "open", endpoint=3
        )


class TestBattery:
    def test_half_percent_units(self):
        assert decode_attribute(PowerSource.BatPercentRemaining, 150).value == 75

    def test_odd_value_rounds_up(self):
        assert decode_attribute(PowerSource.BatPercentRemaining, 151).value == 76

    def test_full(self):
        assert decode_attribute(PowerSource.BatPercentRemaining, 200).value == 100

    def test_missing_value(self):
        assert decode_attribute(PowerSource.BatPercentRemaining, None) is None

    def test_device_scoped(self):
        event = decode_attribute(PowerSource.BatPercentRemaining, 100, endpoint=5)
        assert event == CapabilityEvent(capabilities.BATTERY, "battery", 50, "%")
        assert event.endpoint is None


class TestMotion:
    def test_occupied(self):
        event = decode_attribute(OccupancySensing.Occupancy, 0x01)
        assert event == CapabilityEvent(capabilities.MOTION_SENSOR, "motion", "active")

    def test_unoccupied(self):
        assert decode_attribute(OccupancySensing.Occupancy, 0x00).value == "inactive"

    def test_other_bits(self):
        assert decode_attribute(OccupancySensing.Occupancy, 0x02).value == "inactive"

    def test_device_scoped(self):
        assert decode_attribute(OccupancySensing.Occupancy, 0x01, endpoint=7).endpoint is None


def test_unmapped_cluster():
    assert decode(9999, 1, 1, 42) is None


def test_unmapped_attribute():
    # MinMeasuredValue isn't translated.
    assert decode(TemperatureMeasurement.CLUSTER_ID, 0x0001, 1, 42) is None


def test_table_is_keyed_by_cluster_and_attribute():
    assert set(ATTRIBUTE_HANDLERS) == {
        (0x0400, 0x0000),
        (0x0402, 0x0000),
        (0x0405, 0x0000),
        (0x0045, 0x0000),
        (0x002F, 0x000C),
        (0x0406, 0x0000),
    }


@given(st.integers(min_value=0, max_value=200))
def test_battery_is_a_percentage(raw):
    percent = decode_attribute(PowerSource.BatPercentRemaining, raw).value
    assert 0 <= percent <= 100
    assert percent == (raw + 1) // 2


@given(st.integers(min_value=0, max_value=10**6))
def test_round_half_up(hundredths):
    value = hundredths / 100
    assert round_half_up(value) - value <= 0.5
    assert value - round_half_up(value) < 0.5
