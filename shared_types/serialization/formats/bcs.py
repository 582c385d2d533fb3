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
BCS layout: lengths and variant indexes are canonical ULEB128 values that fit in a u32, lengths are further limited to
2^31-1, and map entries are ordered by the bytes of their encoded keys.

>>> from shared_types.serialization import Deserializer, Serializer
>>> se = Serializer.build_bytes_serializer(BcsFormat())
>>> se.write_length(300)
>>> se.write_variant_index(1)
>>> bytes(se.finalize()).hex()
'ac0201'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ac0201'), BcsFormat())
>>> de.read_length()
300
>>> de.read_variant_index()
1
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('8180808008'), BcsFormat())
>>> try:
...     de.read_length()
... except MalformedDataError as e:
...     print(*e.args)
incorrect length value
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shared_types.serialization.consts import BCS_MAX_LENGTH, MAX_U32
from shared_types.serialization.encoding.leb128 import decode_canonical_uleb128, encode_leb128
from shared_types.serialization.exceptions import MalformedDataError, NonCanonicalError, TooLongError

from .base import WireFormat

if TYPE_CHECKING:
    from shared_types.serialization import Deserializer, Serializer


class BcsFormat(WireFormat):
    name = 'bcs'
    sorted_map_entries = True

    def encode_length(self, serializer: Serializer, length: int) -> None:
        if length > BCS_MAX_LENGTH:
            raise TooLongError(f'length {length} exceeds the maximum of {BCS_MAX_LENGTH}')
        encode_leb128(serializer, length, signed=False)

    def decode_length(self, deserializer: Deserializer) -> int:
        length = decode_canonical_uleb128(deserializer, max_value=MAX_U32)
        if length > BCS_MAX_LENGTH:
            raise MalformedDataError('incorrect length value')
        return length

    def encode_variant_index(self, serializer: Serializer, index: int) -> None:
        if index > MAX_U32:
            raise ValueError('too big to encode')
        encode_leb128(serializer, index, signed=False)

    def decode_variant_index(self, deserializer: Deserializer) -> int:
        return decode_canonical_uleb128(deserializer, max_value=MAX_U32)

    def check_map_key_order(self, previous_key: bytes, key: bytes) -> None:
        if previous_key >= key:
            raise NonCanonicalError('map keys are not in strictly increasing order')
