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

r"""
A variant is one alternative out of a closed set: its index followed by its content.

Layout: [index][content]

How the index is written depends on the wire format (u32 for bincode, ULEB128 for BCS). Like a record, a variant is
one container level, which covers both the index and the content.

>>> from shared_types.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from shared_types.serialization.formats import BINCODE
>>> se = Serializer.build_bytes_serializer(BINCODE)
>>> encode_variant(se, 1, 'foo', encode_utf8)
>>> bytes(se.finalize()).hex()
'010000000300000000000000666f6f'

>>> decode_nothing = lambda de: None
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('010000000300000000000000666f6f'), BINCODE)
>>> decode_variant(de, [decode_nothing, decode_utf8])
'foo'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('02000000'), BINCODE)
>>> try:
...     decode_variant(de, [decode_nothing, decode_utf8])
... except ValueError as e:
...     print(*e.args)
unknown variant index 2
"""

from collections.abc import Sequence
from typing import TypeVar

from shared_types.serialization import Deserializer, Serializer, UnknownVariantError

from . import Decoder, Encoder

T = TypeVar('T')


def encode_variant(serializer: Serializer, index: int, value: T, encoder: Encoder[T]) -> None:
    serializer.increase_container_depth()
    serializer.write_variant_index(index)
    encoder(serializer, value)
    serializer.decrease_container_depth()


def decode_variant(deserializer: Deserializer, decoders: Sequence[Decoder[T]]) -> T:
    deserializer.increase_container_depth()
    index = deserializer.read_variant_index()
    if index >= len(decoders):
        raise UnknownVariantError(f'unknown variant index {index}')
    value = decoders[index](deserializer)
    deserializer.decrease_container_depth()
    return value
