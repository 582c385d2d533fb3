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
from typing import TypeVar

from typing_extensions import Self, override

from shared_types.serialization import Deserializer, Serializer
from shared_types.serialization.compound_encoding.collection import decode_collection, encode_collection
from shared_types.utils.typing import get_args, get_origin
from shared_types.wire_types.utils import check_sized_items
from shared_types.wire_types.wire_type import WireType

T = TypeVar('T')


class ListWireType(WireType[list[T]]):
    """ Represents builtin `list` values: a length prefix followed by each item.
    """

    __slots__ = ('_item',)

    _is_hashable = False
    _item: WireType[T]

    def __init__(self, item_wire_type: WireType[T], /) -> None:
        check_sized_items('list', item_wire_type)
        self._item = item_wire_type

    @override
    @classmethod
    def _from_type(cls, type_: type[list[T]], /, *, type_map: WireType.TypeMap) -> Self:
        origin_type: type = get_origin(type_) or type_
        if not issubclass(origin_type, list):
            raise TypeError('expected list type')
        args = get_args(type_)
        if len(args) != 1:
            raise TypeError('expected list[<type>]')
        return cls(WireType.from_type(args[0], type_map=type_map))

    def _build(self, items: Iterable[T]) -> list[T]:
        return list(items)

    @override
    def _check_value(self, value: list[T], /, *, deep: bool) -> None:
        if not isinstance(value, list):
            raise TypeError('expected list')
        if deep:
            for i in value:
                self._item._check_value(i, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: list[T], /) -> None:
        encode_collection(serializer, value, self._item.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> list[T]:
        return decode_collection(deserializer, self._item.deserialize, self._build)

    @override
    def _json_to_value(self, json_value: WireType.Json, /) -> list[T]:
        if not isinstance(json_value, list):
            raise ValueError('expected list')
        return self._build(self._item.json_to_value(i) for i in json_value)

    @override
    def _value_to_json(self, value: list[T], /) -> WireType.Json:
        return [self._item.value_to_json(i) for i in value]
