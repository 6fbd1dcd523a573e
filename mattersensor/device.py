# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

"""The device as seen by the driver: endpoints, fields, events and subscriptions."""

import logging

from . import data_model
from . import nonvolatile
from .profile import endpoints_with_feature, profile_capabilities
from .clusters.device_management.power_source import PowerSource
from .clusters.general.boolean_state import BooleanState
from .clusters.measurement.illuminance_measurement import IlluminanceMeasurement
from .clusters.measurement.occupancy_sensing import OccupancySensing
from .clusters.measurement.relative_humidity_measurement import (
    RelativeHumidityMeasurement,
)
from .clusters.measurement.temperature_measurement import TemperatureMeasurement
from .subscription import LoggingSubscriptionManager

_LOGGER = logging.getLogger(__name__)

KNOWN_CLUSTERS = {
    cluster.CLUSTER_ID: cluster
    for cluster in (
        BooleanState,
        IlluminanceMeasurement,
        OccupancySensing,
        PowerSource,
        RelativeHumidityMeasurement,
        TemperatureMeasurement,
    )
}

FIELDS_KEY = "fields"
PROFILE_KEY = "profile"


class Endpoint:
    def __init__(self, _id, clusters=()):
        self.id = _id
        self.clusters = {cluster.CLUSTER_ID: cluster for cluster in clusters}

    @classmethod
    def from_json(cls, value):
        """Build from ``{"id": 1, "clusters": {"0x2f": 2}}``, mapping cluster id to feature map."""
        clusters = []
        for cluster_id, feature_map in value.get("clusters", {}).items():
            if isinstance(cluster_id, str):
                cluster_id = int(cluster_id, 0)
            cluster_type = KNOWN_CLUSTERS.get(cluster_id)
            if cluster_type is None:
                cluster = data_model.Cluster(feature_map)
                cluster.CLUSTER_ID = cluster_id
            else:
                cluster = cluster_type(feature_map)
            clusters.append(cluster)
        return cls(value["id"], clusters)

    def __repr__(self):
        cluster_ids = ", ".join(f"0x{cluster_id:04x}" for cluster_id in self.clusters)
        return f"Endpoint({self.id}, [{cluster_ids}])"


class LoggingEventSink:
    def emit(self, device_id, event):
        _LOGGER.info("%s: %s", device_id, event)


class Device:
    """A paired device and the per-device state the driver keeps for it.

    ``store`` is this device's slice of a ``PersistentDictionary``. Fields set
    with ``persist=True`` and the applied profile live there and survive
    restarts once committed. Other fields only last as long as this object.
    """

    def __init__(
        self,
        _id,
        endpoints,
        capabilities=(),
        store=None,
        event_sink=None,
        subscription_manager=None,
    ):
        self.id = _id
        self.endpoints = list(endpoints)
        if store is None:
            store = nonvolatile.PersistentDictionary(state={})
        self._store = store
        if event_sink is None:
            event_sink = LoggingEventSink()
        self.event_sink = event_sink
        if subscription_manager is None:
            subscription_manager = LoggingSubscriptionManager()
        self.subscription_manager = subscription_manager
        self._fields = {}

        if self.profile is None:
            self._capabilities = set(capabilities)
        else:
            self._capabilities = set(profile_capabilities(self.profile))

    @property
    def profile(self):
        return self._store.get(PROFILE_KEY)

    @property
    def capabilities(self):
        return frozenset(self._capabilities)

    def supports_capability(self, capability_id) -> bool:
        return capability_id in self._capabilities

    def get_endpoints(self, cluster_id, feature_bitmap=None) -> list[int]:
        return endpoints_with_feature(self.endpoints, cluster_id, feature_bitmap)

    def get_field(self, key):
        if key in self._fields:
            return self._fields[key]
        fields = self._store.get(FIELDS_KEY)
        if fields is None:
            return None
        return fields.get(key)

    def set_field(self, key, value, persist=False):
        if not persist:
            self._fields[key] = value
            return
        self._fields.pop(key, None)
        self._store.setdefault(FIELDS_KEY, {})[key] = value

    def try_update_metadata(self, profile=None):
        if profile is None:
            return
        supported = profile_capabilities(profile)
        _LOGGER.info("%s: profile %r -> %r", self.id, self.profile, profile)
        self._store[PROFILE_KEY] = profile
        self._capabilities = set(supported)

    def emit_event(self, event):
        self.event_sink.emit(self.id, event)

    def emit_event_for_endpoint(self, endpoint_id, event):
        self.event_sink.emit(self.id, event.for_endpoint(endpoint_id))

    def subscribe(self, subscription):
        self.subscription_manager.subscribe(self.id, subscription)

    def commit(self):
        self._store.commit()

    def __repr__(self):
        return f"Device({self.id!r}, profile={self.profile!r})"
