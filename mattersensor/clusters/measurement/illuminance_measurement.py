# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

from mattersensor import data_model


class IlluminanceMeasurement(data_model.Cluster):
    CLUSTER_ID = 0x0400
    REVISION = 3

    MeasuredValue = data_model.NumberAttribute(
        0x0000, signed=False, bits=16, default=0, X_nullable=True, P_reportable=True
    )
    """10,000 x log10(illuminance) + 1, where illuminance is in lux."""
    MinMeasuredValue = data_model.NumberAttribute(
        0x0001, signed=False, bits=16, default=1, X_nullable=True
    )
    MaxMeasuredValue = data_model.NumberAttribute(
        0x0002, signed=False, bits=16, default=0xFFFE, X_nullable=True
    )
    Tolerance = data_model.NumberAttribute(0x0003, signed=False, bits=16)
    LightSensorType = data_model.NumberAttribute(
        0x0004, signed=False, bits=8, X_nullable=True
    )
