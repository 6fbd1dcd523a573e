# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

"""Matter sensor driver: profile inference and attribute to capability translation."""

import enum
import logging

from . import decoders
from . import nonvolatile
from .device import Device, Endpoint
from .interaction_model import AttributeReport
from .profile import PROFILE_TOKENS, infer_profile
from .subscription import Subscription

__version__ = "0.1.0"

_LOGGER = logging.getLogger(__name__)

PROFILE_INFERRED = "__profile_inferred"
DEVICES_KEY = "devices"


class DeviceState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    PROFILED = "profiled"


class MatterSensor:
    def __init__(
        self,
        state_filename=None,
        event_sink=None,
        subscription_manager=None,
    ):
        if state_filename is None:
            self.nonvolatile = nonvolatile.PersistentDictionary(state={})
        else:
            self.nonvolatile = nonvolatile.PersistentDictionary.open(state_filename)
        self.event_sink = event_sink
        self.subscription_manager = subscription_manager
        self.devices = {}

    def add_device(self, device_id, endpoints, capabilities=()) -> Device:
        """Create the device, restoring any state persisted for it, and run init."""
        devices = self.nonvolatile.setdefault(DEVICES_KEY, {})
        # JSON object keys are always strings.
        store = devices.setdefault(str(device_id), {})
        device = Device(
            device_id,
            endpoints,
            capabilities,
            store=store,
            event_sink=self.event_sink,
            subscription_manager=self.subscription_manager,
        )
        self.devices[device_id] = device
        self.init(device)
        return device

    @staticmethod
    def state(device) -> DeviceState:
        if device.get_field(PROFILE_INFERRED):
            return DeviceState.PROFILED
        return DeviceState.UNINITIALIZED

    def init(self, device):
        _LOGGER.info("device init %s", device.id)
        if self.state(device) is DeviceState.UNINITIALIZED:
            self.infer_profile(device)
        self.subscribe(device)
        device.commit()

    def infer_profile(self, device):
        supported = [
            capability
            for capability, _ in PROFILE_TOKENS
            if device.supports_capability(capability)
        ]
        profile_name = infer_profile(supported, device.endpoints)
        _LOGGER.info("%s: inferred profile %r", device.id, profile_name)
        device.try_update_metadata(profile=profile_name)
        device.set_field(PROFILE_INFERRED, True, persist=True)

    def subscribe(self, device):
        subscription = Subscription.for_capabilities(device.capabilities)
        _LOGGER.debug("%s: subscribing to %r", device.id, subscription)
        device.subscribe(subscription)

    def info_changed(self, device, old_profile, new_profile):
        if new_profile != old_profile:
            self.subscribe(device)

    def attribute_report(self, device, report: AttributeReport):
        if not report.ok:
            _LOGGER.debug("%s: dropping %r", device.id, report)
            return None
        path = report.path
        event = decoders.decode(
            path.Cluster, path.Attribute, path.Endpoint, report.value
        )
        if event is None:
            return None
        if event.endpoint is None:
            device.emit_event(event)
        else:
            device.emit_event_for_endpoint(event.endpoint, event)
        return event


__all__ = [
    "AttributeReport",
    "Device",
    "DeviceState",
    "Endpoint",
    "MatterSensor",
    "PROFILE_INFERRED",
]
