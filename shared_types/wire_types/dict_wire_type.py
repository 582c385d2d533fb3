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

from collections.abc import Hashable, Iterable
from typing import TypeVar

from typing_extensions import Self, override

from shared_types.serialization import Deserializer, Serializer
from shared_types.serialization.compound_encoding.mapping import decode_mapping, encode_mapping
from shared_types.utils.typing import get_args, get_origin
from shared_types.wire_types.utils import check_sized_items, is_origin_hashable, pretty_type
from shared_types.wire_types.wire_type import WireType

T = TypeVar('T')
H = TypeVar('H', bound=Hashable)


class DictWireType(WireType[dict[H, T]]):
    """ Represents builtin `dict` values.

    Entries are written in iteration order, unless the wire format requires them sorted by their encoded keys.
    """

    __slots__ = ('_key', '_value')

    _key: WireType[H]
    _value: WireType[T]
    _is_hashable = False

    def __init__(self, key: WireType[H], value: WireType[T]) -> None:
        check_sized_items('dict', key, value)
        self._key = key
        self._value = value

    @override
    @classmethod
    def _from_type(cls, type_: type[dict[H, T]], /, *, type_map: WireType.TypeMap) -> Self:
        origin_type: type = get_origin(type_) or type_
        if not issubclass(origin_type, dict):
            raise TypeError('expected dict type')
        args = get_args(type_)
        if len(args) != 2:
            raise TypeError('expected dict[<key type>, <value type>]')
        key_type, value_type = args
        if not is_origin_hashable(key_type):
            raise TypeError(f'{pretty_type(key_type)} is not hashable')
        return cls(WireType.from_type(key_type, type_map=type_map), WireType.from_type(value_type, type_map=type_map))

    def _build(self, items: Iterable[tuple[H, T]]) -> dict[H, T]:
        return dict(items)

    @override
    def _check_value(self, value: dict[H, T], /, *, deep: bool) -> None:
        if not isinstance(value, dict):
            raise TypeError('expected dict')
        if deep:
            for k, v in value.items():
                self._key._check_value(k, deep=True)
                self._value._check_value(v, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: dict[H, T], /) -> None:
        encode_mapping(serializer, value, self._key.serialize, self._value.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> dict[H, T]:
        return decode_mapping(
            deserializer,
            self._key.deserialize,
            self._value.deserialize,
            self._build,
        )

    @override
    def _json_to_value(self, json_value: WireType.Json, /) -> dict[H, T]:
        # XXX: JSON objects only have string keys, so maps are represented as a list of [key, value] pairs
        if not isinstance(json_value, list):
            raise ValueError('expected list of [key, value] pairs')
        items = []
        for pair in json_value:
            if not isinstance(pair, list) or len(pair) != 2:
                raise ValueError('expected [key, value] pair')
            key, value = pair
            items.append((self._key.json_to_value(key), self._value.json_to_value(value)))
        return self._build(items)

    @override
    def _value_to_json(self, value: dict[H, T], /) -> WireType.Json:
        return [[self._key.value_to_json(k), self._value.value_to_json(v)] for k, v in value.items()]
