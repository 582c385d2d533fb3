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
from shared_types.serialization.encoding.bytes import decode_bytes, encode_bytes
from shared_types.utils.typing import is_subclass
from shared_types.wire_types.wire_type import WireType

B = TypeVar('B', bound=bytes)


class BytesWireType(WireType[B]):
    """ Represents `bytes` values, and `NewType`s of `bytes`.

    JSON conversion uses hex strings.
    """

    _is_hashable = True

    @override
    @classmethod
    def _from_type(cls, type_: type[B], /, *, type_map: WireType.TypeMap) -> Self:
        if not is_subclass(type_, bytes):
            raise TypeError('expected bytes-like type')
        return cls()

    @override
    def _check_value(self, value: B, /, *, deep: bool) -> None:
        if not isinstance(value, bytes):
            raise TypeError('expected bytes')

    @override
    def _serialize(self, serializer: Serializer, value: B, /) -> None:
        encode_bytes(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> B:
        return decode_bytes(deserializer)  # type: ignore[return-value]

    @override
    def _json_to_value(self, json_value: WireType.Json, /) -> B:
        if not isinstance(json_value, str):
            raise ValueError('expected str')
        return bytes.fromhex(json_value)  # type: ignore[return-value]

    @override
    def _value_to_json(self, value: B, /) -> WireType.Json:
        return value.hex()
