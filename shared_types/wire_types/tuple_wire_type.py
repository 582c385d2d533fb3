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

from collections.abc import Iterable

from typing_extensions import Self, override

from shared_types.serialization import Deserializer, Serializer
from shared_types.serialization.compound_encoding.collection import decode_collection, encode_collection
from shared_types.serialization.compound_encoding.tuple import decode_tuple, encode_tuple
from shared_types.utils.typing import get_args, get_origin
from shared_types.wire_types.utils import check_sized_items
from shared_types.wire_types.wire_type import WireType


# XXX: we can't usefully describe the tuple type
class TupleWireType(WireType[tuple]):
    """ Represents tuple values, which can either be homogeneous-type variable size or heterogeneous-type fixed size.

    `tuple[T, ...]` is laid out like a list (length prefix and items), `tuple[A, B, C]` has no prefix at all, which is
    also how fixed-size arrays are represented.
    """

    __slots__ = ('_is_hashable', '_varsize', '_args')

    _varsize: bool
    _args: tuple[WireType, ...]

    def __init__(self, args: WireType | Iterable[WireType]) -> None:
        if isinstance(args, WireType):
            check_sized_items('tuple', args)
            self._varsize = True
            self._args = (args,)
            self._is_hashable = args.is_hashable()
        else:
            self._varsize = False
            self._args = tuple(args)
            self._is_hashable = all(arg_wire_type.is_hashable() for arg_wire_type in self._args)

    @override
    def is_zero_sized(self) -> bool:
        return not self._varsize and all(arg_wire_type.is_zero_sized() for arg_wire_type in self._args)

    @override
    @classmethod
    def _from_type(cls, type_: type[tuple], /, *, type_map: WireType.TypeMap) -> Self:
        origin_type: type = get_origin(type_) or type_
        if not issubclass(origin_type, tuple):
            raise TypeError('expected tuple type')
        args = get_args(type_)
        if not args and not hasattr(type_, '__args__'):
            raise TypeError('expected tuple[<args...>]')
        if args and args[-1] is Ellipsis:
            if len(args) != 2:
                raise TypeError('ellipsis only allowed with one type: tuple[T, ...]')
            arg, _ellipsis = args
            return cls(WireType.from_type(arg, type_map=type_map))
        else:
            return cls([WireType.from_type(arg, type_map=type_map) for arg in args])

    @override
    def _check_value(self, value: tuple, /, *, deep: bool) -> None:
        if not isinstance(value, tuple):
            raise TypeError('expected tuple')
        if not self._varsize and len(value) != len(self._args):
            raise TypeError(f'expected a tuple of size {len(self._args)}, got {len(value)}')
        if deep:
            if self._varsize:
                arg_wire_type, = self._args
                for i in value:
                    arg_wire_type._check_value(i, deep=True)
            else:
                for i, arg_wire_type in zip(value, self._args):
                    arg_wire_type._check_value(i, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: tuple, /) -> None:
        if self._varsize:
            encode_collection(serializer, value, self._args[0].serialize)
        else:
            encode_tuple(serializer, value, tuple(i.serialize for i in self._args))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> tuple:
        if self._varsize:
            return decode_collection(deserializer, self._args[0].deserialize, tuple)
        else:
            return decode_tuple(deserializer, tuple(i.deserialize for i in self._args))

    @override
    def _json_to_value(self, json_value: WireType.Json, /) -> tuple:
        if not isinstance(json_value, list):
            raise ValueError('expected list')
        if self._varsize:
            return tuple(self._args[0].json_to_value(i) for i in json_value)
        if len(json_value) != len(self._args):
            raise ValueError(f'expected a list of size {len(self._args)}')
        return tuple(v.json_to_value(i) for (i, v) in zip(json_value, self._args))

    @override
    def _value_to_json(self, value: tuple, /) -> WireType.Json:
        if self._varsize:
            return [self._args[0].value_to_json(i) for i in value]
        else:
            return [v.value_to_json(i) for (i, v) in zip(value, self._args)]
