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
Encoding a mapping is equivalent to encoding a collection of 2-tuples.

Layout: [N: length][key_0][value_0]...[key_N-1][value_N-1]

Formats with canonical map ordering (BCS) write the entries sorted by the bytes of their encoded keys, and reject input
whose keys are not strictly increasing:

>>> from shared_types.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from shared_types.serialization.encoding.bool import encode_bool, decode_bool
>>> from shared_types.serialization.formats import BCS
>>> se = Serializer.build_bytes_serializer(BCS)
>>> encode_mapping(se, {'foo': False, 'bar': True, 'baz': False}, encode_utf8, encode_bool)
>>> bytes(se.finalize()).hex()
'0303626172010362617a0003666f6f00'

Breakdown of the result:

    03: 3 entries
    0362617201: 'bar' -> True
    0362617a00: 'baz' -> False
    03666f6f00: 'foo' -> False

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0303626172010362617a0003666f6f00'), BCS)
>>> decode_mapping(de, decode_utf8, decode_bool, dict)
{'bar': True, 'baz': False, 'foo': False}
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0203666f6f000362617201'), BCS)
>>> try:
...     decode_mapping(de, decode_utf8, decode_bool, dict)
... except ValueError as e:
...     print(*e.args)
map keys are not in strictly increasing order
"""

from collections.abc import Iterable, Mapping
from typing import Callable, Optional, TypeVar

from shared_types.serialization import Deserializer, Serializer

from . import Decoder, Encoder

KT = TypeVar('KT')
VT = TypeVar('VT')
R = TypeVar('R', bound=Mapping)


def encode_mapping(
    serializer: Serializer,
    values_mapping: Mapping[KT, VT],
    key_encoder: Encoder[KT],
    value_encoder: Encoder[VT],
) -> None:
    serializer.write_length(len(values_mapping))
    offsets: list[int] = []
    for key, value in values_mapping.items():
        offsets.append(serializer.cur_pos())
        key_encoder(serializer, key)
        value_encoder(serializer, value)
    if offsets and serializer.wire_format.sorted_map_entries:
        serializer.sort_map_entries(offsets)


def decode_mapping(
    deserializer: Deserializer,
    key_decoder: Decoder[KT],
    value_decoder: Decoder[VT],
    mapping_builder: Callable[[Iterable[tuple[KT, VT]]], R],
) -> R:
    size = deserializer.read_length()
    wire_format = deserializer.wire_format
    items: list[tuple[KT, VT]] = []
    previous_key: Optional[bytes] = None
    for _ in range(size):
        key_start = deserializer.cur_pos()
        key = key_decoder(deserializer)
        if wire_format.sorted_map_entries:
            key_bytes = bytes(deserializer.consumed_since(key_start))
            if previous_key is not None:
                deserializer.check_map_key_order(previous_key, key_bytes)
            previous_key = key_bytes
        items.append((key, value_decoder(deserializer)))
    return mapping_builder(items)
