# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

"""Derive a device's profile from the capabilities and power sources it advertises.

A profile is the ``-`` separated list of capability tokens a device exposes,
always in the order of ``PROFILE_TOKENS`` with ``battery`` last. For example a
battery powered motion and temperature sensor is ``motion-temperature-battery``.
"""

from . import capabilities
from .clusters.device_management.power_source import PowerSource, PowerSourceFeature
from .errors import ConfigurationError

SEPARATOR = "-"

PROFILE_TOKENS = (
    (capabilities.MOTION_SENSOR, "motion"),
    (capabilities.CONTACT_SENSOR, "contact"),
    (capabilities.ILLUMINANCE_MEASUREMENT, "illuminance"),
    (capabilities.TEMPERATURE_MEASUREMENT, "temperature"),
    (capabilities.RELATIVE_HUMIDITY_MEASUREMENT, "humidity"),
)

BATTERY_TOKEN = "battery"


def endpoints_with_feature(endpoints, cluster_id, feature_bitmap=None) -> list[int]:
    """Ids of the endpoints that host ``cluster_id`` with every bit of ``feature_bitmap`` set."""
    matches = []
    for endpoint in endpoints:
        cluster = endpoint.clusters.get(cluster_id)
        if cluster is None:
            continue
        if feature_bitmap and (cluster.feature_map & feature_bitmap) != feature_bitmap:
            continue
        matches.append(endpoint.id)
    return matches


def battery_endpoints(endpoints) -> list[int]:
    return endpoints_with_feature(
        endpoints, PowerSource.CLUSTER_ID, PowerSourceFeature.BATTERY
    )


def infer_profile(declared_capabilities, endpoints) -> str:
    """Return the canonical profile for a device.

    ``declared_capabilities`` is an iterable of capability ids. Battery is not
    taken from it; a device is battery powered when one of its ``endpoints``
    has a PowerSource cluster with the battery feature.
    """
    if isinstance(declared_capabilities, (str, bytes)):
        raise ConfigurationError(
            f"Expected a collection of capabilities, not {declared_capabilities!r}"
        )
    try:
        declared = set(declared_capabilities)
    except TypeError as e:
        raise ConfigurationError(f"Invalid capability declaration: {e}") from e
    for capability in declared:
        if not isinstance(capability, str):
            raise ConfigurationError(f"Invalid capability id {capability!r}")

    profile_name = ""
    for capability, token in PROFILE_TOKENS:
        if capability in declared:
            profile_name += SEPARATOR + token
    if battery_endpoints(endpoints):
        profile_name += SEPARATOR + BATTERY_TOKEN

    # Remove the leading separator.
    return profile_name[len(SEPARATOR) :]


def profile_capabilities(profile_name) -> list[str]:
    """The capabilities a device exposes once ``profile_name`` is applied."""
    if not profile_name:
        return []
    known = {token: capability for capability, token in PROFILE_TOKENS}
    known[BATTERY_TOKEN] = capabilities.BATTERY
    supported = []
    for token in profile_name.split(SEPARATOR):
        if token not in known:
            raise ConfigurationError(
                f"Unknown token {token!r} in profile {profile_name!r}"
            )
        supported.append(known[token])
    return supported
