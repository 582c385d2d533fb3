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

from typing import ClassVar

from typing_extensions import Self, override

from shared_types.serialization import Deserializer, Serializer
from shared_types.serialization.encoding.int import decode_int, encode_int
from shared_types.utils.typing import is_subclass
from shared_types.wire_types.wire_type import WireType


class _SizedIntWireType(WireType[int]):
    """ Base class for classes that represent `int` values with a fixed size and signedness.

    Values are written in little-endian two's complement using exactly `_byte_size` bytes.
    """

    _is_hashable = True
    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    _byte_size: ClassVar[int]

    @classmethod
    def _upper_bound_value(cls) -> int:
        if cls._signed:
            return 2**(cls._byte_size * 8 - 1) - 1
        else:
            return 2**(cls._byte_size * 8) - 1

    @classmethod
    def _lower_bound_value(cls) -> int:
        if cls._signed:
            return -(2**(cls._byte_size * 8 - 1))
        else:
            return 0

    @override
    @classmethod
    def _from_type(cls, type_: type[int], /, *, type_map: WireType.TypeMap) -> Self:
        if not is_subclass(type_, int):
            raise TypeError('expected int type')
        return cls()

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        # bool is a subclass of int, but it's never a valid number here
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('expected integer')
        self._check_range(value)

    def _check_range(self, value: int) -> None:
        if value > self._upper_bound_value():
            raise ValueError('above upper bound')
        if value < self._lower_bound_value():
            raise ValueError('below lower bound')

    @override
    def _serialize(self, serializer: Serializer, value: int, /) -> None:
        encode_int(serializer, value, length=self._byte_size, signed=self._signed)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> int:
        return decode_int(deserializer, length=self._byte_size, signed=self._signed)

    @override
    def _json_to_value(self, json_value: WireType.Json, /) -> int:
        if not isinstance(json_value, int) or isinstance(json_value, bool):
            raise ValueError('expected int')
        return json_value

    @override
    def _value_to_json(self, value: int, /) -> WireType.Json:
        return value


class Uint8WireType(_SizedIntWireType):
    _signed = False
    _byte_size = 1


class Uint16WireType(_SizedIntWireType):
    _signed = False
    _byte_size = 2


class Uint32WireType(_SizedIntWireType):
    _signed = False
    _byte_size = 4


class Uint64WireType(_SizedIntWireType):
    _signed = False
    _byte_size = 8


class Uint128WireType(_SizedIntWireType):
    _signed = False
    _byte_size = 16


class Int8WireType(_SizedIntWireType):
    _signed = True
    _byte_size = 1


class Int16WireType(_SizedIntWireType):
    _signed = True
    _byte_size = 2


class Int32WireType(_SizedIntWireType):
    _signed = True
    _byte_size = 4


class Int64WireType(_SizedIntWireType):
    _signed = True
    _byte_size = 8


class Int128WireType(_SizedIntWireType):
    _signed = True
    _byte_size = 16
