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
A collection is any value that has a known size and is iterable.

Layout: [N: length][value_0]...[value_N-1]

How the length is written depends on the wire format, with the default format it's an unsigned leb128:

>>> from shared_types.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_collection(se, ['foobar', 'π', 'test'], encode_utf8)
>>> bytes(se.finalize()).hex()
'0306666f6f62617202cf800474657374'

When decoding, the builder can be any compatible collection, it only matters that it can be initialized with an
`Iterable[T]`:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0306666f6f62617202cf800474657374'))
>>> decode_collection(de, decode_utf8, tuple)
('foobar', 'π', 'test')
>>> de.finalize()
"""

from collections.abc import Collection, Iterable
from typing import Callable, TypeVar

from shared_types.serialization import Deserializer, Serializer

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


def encode_collection(serializer: Serializer, values: Collection[T], encoder: Encoder[T]) -> None:
    serializer.write_length(len(values))
    for value in values:
        encoder(serializer, value)


def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
) -> R:
    length = deserializer.read_length()
    return builder(decoder(deserializer) for _ in range(length))
