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
An optional value is a tag byte followed by the value when there is one.

Layout:

    [0x00] when None
    [0x01][value] when not None

>>> from shared_types.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_optional(se, 'foobar', encode_utf8)
>>> encode_optional(se, None, encode_utf8)
>>> bytes(se.finalize()).hex()
'0106666f6f62617200'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0106666f6f62617200'))
>>> decode_optional(de, decode_utf8)
'foobar'
>>> print(decode_optional(de, decode_utf8))
None
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('02'))
>>> try:
...     decode_optional(de, decode_utf8)
... except ValueError as e:
...     print(*e.args)
b'\x02' is not a valid option tag
"""

from typing import Optional, TypeVar

from shared_types.serialization import Deserializer, MalformedDataError, Serializer

from . import Decoder, Encoder

T = TypeVar('T')


def encode_optional(serializer: Serializer, value: Optional[T], encoder: Encoder[T]) -> None:
    if value is None:
        serializer.write_byte(0x00)
    else:
        serializer.write_byte(0x01)
        encoder(serializer, value)


def decode_optional(deserializer: Deserializer, decoder: Decoder[T]) -> Optional[T]:
    tag = deserializer.read_byte()
    if tag == 0:
        return None
    elif tag == 1:
        return decoder(deserializer)
    else:
        raw = bytes([tag])
        raise MalformedDataError(f'{raw!r} is not a valid option tag')
