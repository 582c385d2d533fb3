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

from types import NoneType, UnionType
# XXX: ignore attr-defined because mypy doesn't recognize it, even though it exists in every supported version
from typing import TypeVar, _UnionGenericAlias as UnionGenericAlias  # type: ignore[attr-defined]

from typing_extensions import Self, override

from shared_types.serialization import Deserializer, Serializer
from shared_types.serialization.compound_encoding.optional import decode_optional, encode_optional
from shared_types.utils.typing import get_args
from shared_types.wire_types.wire_type import WireType

V = TypeVar('V')


class OptionalWireType(WireType[V | None]):
    """ Represents a value that is either `V` or `None`, the only kind of field that may hold `None`.
    """

    __slots__ = ('_is_hashable', '_value')

    _value: WireType[V]

    def __init__(self, wire_type: WireType[V]) -> None:
        self._value = wire_type
        self._is_hashable = wire_type.is_hashable()

    @override
    @classmethod
    def _from_type(cls, type_: type[V | None], /, *, type_map: WireType.TypeMap) -> Self:
        if not isinstance(type_, (UnionType, UnionGenericAlias)):
            raise TypeError('expected type union')
        args = get_args(type_)
        assert args, 'union always has args'
        if len(args) != 2 or NoneType not in args:
            raise TypeError('type must be either `None | T` or `T | None`')
        not_none_type, = tuple(arg for arg in args if arg is not NoneType)
        return cls(WireType.from_type(not_none_type, type_map=type_map))

    @override
    def _check_value(self, value: V | None, /, *, deep: bool) -> None:
        if value is None:
            return
        if deep:
            self._value._check_value(value, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: V | None, /) -> None:
        encode_optional(serializer, value, self._value.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> V | None:
        return decode_optional(deserializer, self._value.deserialize)

    @override
    def _json_to_value(self, json_value: WireType.Json, /) -> V | None:
        if json_value is None:
            return None
        else:
            return self._value.json_to_value(json_value)

    @override
    def _value_to_json(self, value: V | None, /) -> WireType.Json:
        if value is None:
            return None
        else:
            return self._value.value_to_json(value)
