# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

"""Errors raised by mattersensor."""


class MatterSensorError(Exception):
    """Base error for mattersensor."""


class ConfigurationError(MatterSensorError, ValueError):
    """Raised when device metadata cannot describe a valid profile."""
