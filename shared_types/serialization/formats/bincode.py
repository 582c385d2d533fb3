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

"""
Bincode layout: lengths are u64 little-endian and variant indexes are u32 little-endian.

>>> from shared_types.serialization import Deserializer, Serializer
>>> se = Serializer.build_bytes_serializer(BincodeFormat())
>>> se.write_length(3)
>>> se.write_variant_index(1)
>>> bytes(se.finalize()).hex()
'030000000000000001000000'

Lengths above 2^63-1 are refused on both sides:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ffffffffffffffff'), BincodeFormat())
>>> try:
...     de.read_length()
... except MalformedDataError as e:
...     print(*e.args)
incorrect length value
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shared_types.serialization.consts import BINCODE_MAX_LENGTH
from shared_types.serialization.encoding.int import decode_int, encode_int
from shared_types.serialization.exceptions import MalformedDataError, TooLongError

from .base import WireFormat

if TYPE_CHECKING:
    from shared_types.serialization import Deserializer, Serializer


class BincodeFormat(WireFormat):
    name = 'bincode'

    def encode_length(self, serializer: Serializer, length: int) -> None:
        if length > BINCODE_MAX_LENGTH:
            raise TooLongError(f'length {length} exceeds the maximum of {BINCODE_MAX_LENGTH}')
        encode_int(serializer, length, length=8, signed=False)

    def decode_length(self, deserializer: Deserializer) -> int:
        length = decode_int(deserializer, length=8, signed=False)
        if length > BINCODE_MAX_LENGTH:
            raise MalformedDataError('incorrect length value')
        return length

    def encode_variant_index(self, serializer: Serializer, index: int) -> None:
        encode_int(serializer, index, length=4, signed=False)

    def decode_variant_index(self, deserializer: Deserializer) -> int:
        return decode_int(deserializer, length=4, signed=False)

