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

from typing import TypeVar

from typing_extensions import Self, override

from shared_types.serialization import Deserializer, Serializer
from shared_types.serialization.encoding.utf8 import decode_utf8, encode_utf8
from shared_types.utils.typing import is_subclass
from shared_types.wire_types.wire_type import WireType

S = TypeVar('S', bound=str)


class StrWireType(WireType[S]):
    """ Represents `str` values, and `NewType`s of `str`.

    Layout: the length of the utf-8 encoding, then the utf-8 bytes. There is no terminator and no padding.
    """

    _is_hashable = True

    @override
    @classmethod
    def _from_type(cls, type_: type[S], /, *, type_map: WireType.TypeMap) -> Self:
        if not is_subclass(type_, str):
            raise TypeError('expected str type')
        return cls()

    @override
    def _check_value(self, value: S, /, *, deep: bool) -> None:
        if not isinstance(value, str):
            raise TypeError('expected str')

    @override
    def _serialize(self, serializer: Serializer, value: S, /) -> None:
        encode_utf8(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> S:
        return decode_utf8(deserializer)  # type: ignore[return-value]

    @override
    def _json_to_value(self, json_value: WireType.Json, /) -> S:
        if not isinstance(json_value, str):
            raise ValueError('expected str')
        return json_value  # type: ignore[return-value]

    @override
    def _value_to_json(self, value: S, /) -> WireType.Json:
        return value
