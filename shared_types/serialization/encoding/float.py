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
This module implements IEEE-754 floats in little-endian, either 4 bytes (f32) or 8 bytes (f64).

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.5, length=4)  # writes 0000c03f
>>> encode_float(se, 1.5, length=8)  # writes 000000000000f83f
>>> bytes(se.finalize()).hex()
'0000c03f000000000000f83f'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000c03f000000000000f83f'))
>>> decode_float(de, length=4)
1.5
>>> decode_float(de, length=8)
1.5
>>> de.finalize()
"""

from shared_types.serialization import Deserializer, Serializer

_FORMATS = {
    4: '<f',
    8: '<d',
}


def _get_format(length: int) -> str:
    try:
        return _FORMATS[length]
    except KeyError:
        raise ValueError(f'unsupported float length: {length}') from None


def encode_float(serializer: Serializer, value: float, *, length: int) -> None:
    """ Encodes a float using 4 or 8 bytes.
    """
    fmt = _get_format(length)
    try:
        serializer.write_struct((value,), fmt)
    except OverflowError:
        raise ValueError('too big to encode')


def decode_float(deserializer: Deserializer, *, length: int) -> float:
    """ Decodes a float from 4 or 8 bytes.
    """
    fmt = _get_format(length)
    value, = deserializer.read_struct(fmt)
    return value
