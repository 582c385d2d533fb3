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

from enum import Enum
from typing import Any, TypeVar

from typing_extensions import Self, override

from shared_types.serialization import Deserializer, Serializer
from shared_types.serialization.compound_encoding import Decoder
from shared_types.serialization.compound_encoding.variant import decode_variant, encode_variant
from shared_types.utils.typing import is_subclass
from shared_types.wire_types.wire_type import WireType

E = TypeVar('E', bound=Enum)


def _write_nothing(serializer: Serializer, value: Any, /) -> None:
    pass


def _constant(member: E) -> Decoder[E]:
    def decoder(deserializer: Deserializer, /) -> E:
        return member
    return decoder


class EnumWireType(WireType[E]):
    """ Represents `enum.Enum` subclasses as variants without content.

    Only the position of the member in the class matters, member values are never written. JSON uses member names.
    """

    __slots__ = ('enum_class', '_members', '_decoders')

    _is_hashable = True

    def __init__(self, enum_class: type[E]) -> None:
        self.enum_class = enum_class
        self._members: tuple[E, ...] = tuple(enum_class)
        self._decoders = tuple(_constant(member) for member in self._members)

    @override
    @classmethod
    def _from_type(cls, type_: type[E], /, *, type_map: WireType.TypeMap) -> Self:
        if not is_subclass(type_, Enum):
            raise TypeError('expected Enum subclass')
        return cls(type_)

    @override
    def _check_value(self, value: E, /, *, deep: bool) -> None:
        if not isinstance(value, self.enum_class):
            raise TypeError(f'expected {self.enum_class.__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: E, /) -> None:
        encode_variant(serializer, self._members.index(value), None, _write_nothing)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> E:
        return decode_variant(deserializer, self._decoders)

    @override
    def _json_to_value(self, json_value: WireType.Json, /) -> E:
        if not isinstance(json_value, str):
            raise ValueError(f'expected a {self.enum_class.__name__} member name')
        try:
            return self.enum_class[json_value]
        except KeyError:
            raise ValueError(f'invalid {self.enum_class.__name__} name: {json_value}') from None

    @override
    def _value_to_json(self, value: E, /) -> WireType.Json:
        return value.name
