# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

from mattersensor import data_model


class BooleanState(data_model.Cluster):
    CLUSTER_ID = 0x0045
    REVISION = 1

    StateValue = data_model.BoolAttribute(0x0000, default=False, P_reportable=True)
