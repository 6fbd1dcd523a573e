# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

from mattersensor import data_model


class OccupancyBitmap(data_model.Map8):
    OCCUPIED = 1 << 0


class OccupancySensorTypeEnum(data_model.Enum8):
    PIR = 0
    ULTRASONIC = 1
    PIR_AND_ULTRASONIC = 2
    PHYSICAL_CONTACT = 3


class OccupancySensing(data_model.Cluster):
    CLUSTER_ID = 0x0406
    REVISION = 4

    Occupancy = data_model.BitmapAttribute(
        0x0000, OccupancyBitmap, default=0, P_reportable=True
    )
    OccupancySensorType = data_model.NumberAttribute(
        0x0001, signed=False, bits=8, default=OccupancySensorTypeEnum.PIR
    )
    OccupancySensorTypeBitmap = data_model.NumberAttribute(
        0x0002, signed=False, bits=8, default=1
    )
