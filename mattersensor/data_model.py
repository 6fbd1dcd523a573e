# SPDX-FileCopyrightText: Copyright (c) 2026 mattersensor contributors
#
# SPDX-License-Identifier: MIT

import enum

from .interaction_model import AttributePath


class Enum8(enum.IntEnum):
    pass


class Map8(enum.IntFlag):
    pass


class Map16(enum.IntFlag):
    pass


class Map32(enum.IntFlag):
    pass


class Attribute:
    def __init__(
        self,
        _id,
        default=None,
        P_reportable=False,
        X_nullable=False,
    ):
        self.id = _id
        self.default = default
        self.reportable = P_reportable
        self.nullable = X_nullable
        self.name = None
        self.cluster = None

    def __set_name__(self, owner, name):
        self.name = name
        self.cluster = owner

    def __get__(self, instance, cls):
        if instance is None:
            return self
        return instance._attribute_values.get(self.id, self.default)

    def __set__(self, instance, value):
        if value is None and not self.nullable:
            raise ValueError(f"{self.name} is not nullable")
        instance._attribute_values[self.id] = self.from_raw(value)

    def __repr__(self):
        if self.cluster is None:
            return f"<Attribute 0x{self.id:04x}>"
        return f"<{self.cluster.__name__}.{self.name}>"

    @property
    def cluster_id(self) -> int:
        return self.cluster.CLUSTER_ID

    @property
    def key(self) -> tuple[int, int]:
        """The (cluster id, attribute id) pair that identifies this attribute on any endpoint."""
        return (self.cluster_id, self.id)

    def path(self, endpoint=None) -> AttributePath:
        return AttributePath(endpoint, self.cluster_id, self.id)

    def from_raw(self, value):
        return value


class NumberAttribute(Attribute):
    def __init__(self, _id, *, signed, bits, **kwargs):
        self.signed = signed
        self.bits = bits
        super().__init__(_id, **kwargs)

    @property
    def minimum(self) -> int:
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def maximum(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def from_raw(self, value):
        if value is None:
            return None
        value = int(value)
        if not self.minimum <= value <= self.maximum:
            raise ValueError(
                f"{value} out of range for {self.bits} bit {'signed' if self.signed else 'unsigned'} {self.name}"
            )
        return value


class BoolAttribute(Attribute):
    def from_raw(self, value):
        if value is None:
            return None
        return bool(value)


class BitmapAttribute(NumberAttribute):
    def __init__(self, _id, enum_type, **kwargs):
        self.enum_type = enum_type
        if issubclass(enum_type, Map8):
            bits = 8
        elif issubclass(enum_type, Map16):
            bits = 16
        else:
            bits = 32
        super().__init__(_id, signed=False, bits=bits, **kwargs)

    def from_raw(self, value):
        value = super().from_raw(value)
        if value is None:
            return None
        return self.enum_type(value)


class Cluster:
    feature_map = NumberAttribute(0xFFFC, signed=False, bits=32, default=0)

    def __init__(self, feature_map=0):
        self._attribute_values = {}
        self.feature_map = feature_map
