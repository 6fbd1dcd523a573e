# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

from mattersensor import data_model


class RelativeHumidityMeasurement(data_model.Cluster):
    CLUSTER_ID = 0x0405
    REVISION = 3

    MeasuredValue = data_model.NumberAttribute(
        0x0000, signed=False, bits=16, default=0, X_nullable=True, P_reportable=True
    )
    """Hundredths of a percent, 0 to 10000."""
    MinMeasuredValue = data_model.NumberAttribute(
        0x0001, signed=False, bits=16, default=0, X_nullable=True
    )
    MaxMeasuredValue = data_model.NumberAttribute(
        0x0002, signed=False, bits=16, default=10000, X_nullable=True
    )
