# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import math
import struct
from typing import ClassVar

from typing_extensions import Self, override

from shared_types.serialization import Deserializer, Serializer
from shared_types.serialization.encoding.float import decode_float, encode_float
from shared_types.utils.typing import is_subclass
from shared_types.wire_types.wire_type import WireType

# largest finite f32
_F32_MAX = 3.4028234663852886e+38


class _FloatWireType(WireType[float]):
    """ Base class for IEEE-754 floats, written in little-endian.

    NaN is a valid value, but like in Python a record holding NaN is not equal to itself.
    """

    _is_hashable = True
    # XXX: subclass must define this value:
    _byte_size: ClassVar[int]

    @override
    @classmethod
    def _from_type(cls, type_: type[float], /, *, type_map: WireType.TypeMap) -> Self:
        if not is_subclass(type_, float):
            raise TypeError('expected float type')
        return cls()

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        if not isinstance(value, float):
            raise TypeError('expected float')

    @override
    def _serialize(self, serializer: Serializer, value: float, /) -> None:
        encode_float(serializer, value, length=self._byte_size)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> float:
        return decode_float(deserializer, length=self._byte_size)

    @override
    def _json_to_value(self, json_value: WireType.Json, /) -> float:
        if isinstance(json_value, bool) or not isinstance(json_value, (int, float)):
            raise ValueError('expected number')
        return float(json_value)

    @override
    def _value_to_json(self, value: float, /) -> WireType.Json:
        return value


class Float32WireType(_FloatWireType):
    """ A 4-byte float, only values that f32 represents exactly are accepted, so a value never changes on the wire.

    >>> Float32WireType().check_value(0.5)
    >>> try:
    ...     Float32WireType().check_value(0.1)
    ... except ValueError as e:
    ...     print(*e.args)
    0.1 is not exactly representable as f32
    """

    _byte_size = 4

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        super()._check_value(value, deep=deep)
        if math.isnan(value) or math.isinf(value):
            return
        if abs(value) > _F32_MAX:
            raise ValueError('out of range for f32')
        narrowed, = struct.unpack('<f', struct.pack('<f', value))
        if narrowed != value:
            raise ValueError(f'{value!r} is not exactly representable as f32')


class Float64WireType(_FloatWireType):
    _byte_size = 8
