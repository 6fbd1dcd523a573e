# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

from mattersensor import data_model


class PowerSourceFeature(data_model.Map32):
    WIRED = 1 << 0
    BATTERY = 1 << 1
    RECHARGEABLE = 1 << 2
    REPLACEABLE = 1 << 3


class PowerSourceStatusEnum(data_model.Enum8):
    UNSPECIFIED = 0
    ACTIVE = 1
    STANDBY = 2
    UNAVAILABLE = 3


class BatChargeLevelEnum(data_model.Enum8):
    OK = 0
    WARNING = 1
    CRITICAL = 2


class PowerSource(data_model.Cluster):
    CLUSTER_ID = 0x002F
    REVISION = 2

    Status = data_model.NumberAttribute(
        0x0000, signed=False, bits=8, default=PowerSourceStatusEnum.UNSPECIFIED
    )
    Order = data_model.NumberAttribute(0x0001, signed=False, bits=8, default=0)
    BatVoltage = data_model.NumberAttribute(
        0x000B, signed=False, bits=32, X_nullable=True
    )
    BatPercentRemaining = data_model.NumberAttribute(
        0x000C,
        signed=False,
        bits=8,
        X_nullable=True,
        P_reportable=True,
    )
    """Half percent units, 0 to 200."""
    BatTimeRemaining = data_model.NumberAttribute(
        0x000D, signed=False, bits=32, X_nullable=True
    )
    BatChargeLevel = data_model.NumberAttribute(
        0x000E, signed=False, bits=8, default=BatChargeLevelEnum.OK
    )
