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
This module implements utf-8 string encoding: the utf-8 bytes of the string, prefixed by their length.

The length counts bytes, not characters:

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'foobar')  # writes 06 666f6f626172
>>> encode_utf8(se, 'π')  # writes 02 cf80
>>> encode_utf8(se, '😎')  # writes 04 f09f988e
>>> bytes(se.finalize()).hex()
'06666f6f62617202cf8004f09f988e'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('06666f6f62617202cf8004f09f988e'))
>>> decode_utf8(de)
'foobar'
>>> decode_utf8(de)
'π'
>>> decode_utf8(de)
'😎'
>>> de.finalize()

Invalid utf-8 is rejected:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('02c328'))
>>> try:
...     decode_utf8(de)
... except InvalidUtf8Error as e:
...     print(*e.args)
invalid utf-8 string
"""

from shared_types.serialization import Deserializer, InvalidUtf8Error, Serializer

from .bytes import decode_bytes, encode_bytes


def encode_utf8(serializer: Serializer, value: str) -> None:
    """ Encodes a string as length-prefixed utf-8 bytes.
    """
    data = value.encode('utf-8')
    encode_bytes(serializer, data)


def decode_utf8(deserializer: Deserializer) -> str:
    """ Decodes a string from length-prefixed utf-8 bytes.
    """
    data = decode_bytes(deserializer)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise InvalidUtf8Error('invalid utf-8 string') from e
