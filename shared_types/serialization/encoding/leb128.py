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
This module implements LEB128 for signed and unsigned integers.

LEB128 or Little Endian Base 128 is a variable-length code used to store arbitrarily large integers in a small number
of bytes, using 1-byte blocks split into 1 bit for continuation and 7 bits for data.

References:
- https://en.wikipedia.org/wiki/LEB128

Two decoders are provided: `decode_leb128` accepts any well-formed input, while `decode_canonical_uleb128` only
accepts the shortest possible encoding of an unsigned value that does not exceed a given maximum. The canonical form
is what BCS uses for lengths and variant indexes.

>>> se = Serializer.build_bytes_serializer()
>>> encode_leb128(se, 0, signed=False)  # writes 00
>>> encode_leb128(se, 624485, signed=False)  # writes e58e26
>>> encode_leb128(se, -123456, signed=True)  # writes c0bb78
>>> bytes(se.finalize()).hex()
'00e58e26c0bb78'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00e58e26c0bb78'))
>>> decode_leb128(de, signed=False)
0
>>> decode_leb128(de, signed=False)
624485
>>> decode_leb128(de, signed=True)
-123456
>>> de.finalize()

The canonical decoder rejects padding and values that do not fit:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ffffffff0f'))
>>> decode_canonical_uleb128(de, max_value=0xffff_ffff)
4294967295

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('8000'))
>>> try:
...     decode_canonical_uleb128(de, max_value=0xffff_ffff)
... except NonCanonicalError as e:
...     print(*e.args)
non-canonical ULEB128: unexpected trailing zero digit

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('8080808010'))
>>> try:
...     decode_canonical_uleb128(de, max_value=0xffff_ffff)
... except MalformedDataError as e:
...     print(*e.args)
overflow while decoding ULEB128, maximum is 4294967295
"""

from shared_types.serialization import Deserializer, MalformedDataError, NonCanonicalError, Serializer


def encode_leb128(serializer: Serializer, value: int, *, signed: bool) -> None:
    """ Encodes an integer using LEB128.

    Caller must explicitly choose `signed=True` or `signed=False`.
    """
    if not signed and value < 0:
        raise ValueError('cannot encode value <0 as unsigned')
    while True:
        byte = value & 0b0111_1111
        value >>= 7
        if signed:
            last = (value == 0 and (byte & 0b0100_0000) == 0) or (value == -1 and (byte & 0b0100_0000) != 0)
        else:
            last = value == 0
        if last:
            serializer.write_byte(byte)
            break
        serializer.write_byte(byte | 0b1000_0000)


def decode_leb128(deserializer: Deserializer, *, signed: bool) -> int:
    """ Decodes a LEB128-encoded integer.

    Caller must explicitly choose `signed=True` or `signed=False`.
    """
    result = 0
    shift = 0
    while True:
        byte = deserializer.read_byte()
        result |= (byte & 0b0111_1111) << shift
        shift += 7
        if (byte & 0b1000_0000) == 0:
            if signed and (byte & 0b0100_0000) != 0:
                return result | -(1 << shift)
            return result


def decode_canonical_uleb128(deserializer: Deserializer, *, max_value: int) -> int:
    """ Decodes an unsigned LEB128 integer, only accepting its shortest encoding.

    Raises `NonCanonicalError` when the last digit is a redundant zero, and `MalformedDataError` when the value would
    exceed `max_value`.
    """
    max_shift = max(max_value.bit_length(), 1)
    result = 0
    shift = 0
    while True:
        byte = deserializer.read_byte()
        digit = byte & 0b0111_1111
        result |= digit << shift
        if result > max_value:
            raise MalformedDataError(f'overflow while decoding ULEB128, maximum is {max_value}')
        if (byte & 0b1000_0000) == 0:
            if shift > 0 and digit == 0:
                raise NonCanonicalError('non-canonical ULEB128: unexpected trailing zero digit')
            return result
        shift += 7
        if shift >= max_shift:
            raise MalformedDataError(f'overflow while decoding ULEB128, maximum is {max_value}')
