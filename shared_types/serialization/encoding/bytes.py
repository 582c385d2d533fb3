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
This module implements encoding a byte sequence by prefixing it with its length.

How the length is written depends on the wire format of the serializer: LEB128 for the plain format, u64 for bincode
and canonical ULEB128 for BCS.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test')  # writes 04 74657374
>>> bytes(se.finalize()).hex()
'0474657374'

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, bytes(128))  # the length takes 2 bytes: 8001
>>> bytes(se.finalize()).hex()[:6]
'800100'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0474657374'))
>>> decode_bytes(de)
b'test'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0474657374616263'))
>>> decode_bytes(de)
b'test'
>>> try:
...     de.finalize()
... except ValueError as e:
...     print(*e.args)
trailing data: 3 bytes were not read
"""

from shared_types.serialization import Deserializer, Serializer
from shared_types.serialization.types import Buffer


def encode_bytes(serializer: Serializer, data: Buffer) -> None:
    """ Encodes a byte-sequence prefixed by its length.
    """
    serializer.write_length(len(data))
    serializer.write_bytes(data)


def decode_bytes(deserializer: Deserializer) -> bytes:
    """ Decodes a byte-sequence prefixed by its length.
    """
    size = deserializer.read_length()
    return bytes(deserializer.read_bytes(size))
