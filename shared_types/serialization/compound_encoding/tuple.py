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
Encoding of fixed-length heterogeneous tuples, `tuple[A, B, C]`. Variable length tuples, `tuple[X, ...]`, are
collections.

There is no framing at all: the encoding of `tuple[A, B, C]` is the encoding of A followed by B followed by C.

>>> from shared_types.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from shared_types.serialization.encoding.bool import encode_bool, decode_bool
>>> from shared_types.serialization.encoding.int import encode_int, decode_int
>>> encode_u16 = lambda se, v: encode_int(se, v, length=2, signed=False)
>>> decode_u16 = lambda de: decode_int(de, length=2, signed=False)
>>> se = Serializer.build_bytes_serializer()
>>> encode_tuple(se, ('cat', True, 513), (encode_utf8, encode_bool, encode_u16))
>>> bytes(se.finalize()).hex()
'03636174010102'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('03636174010102'))
>>> decode_tuple(de, (decode_utf8, decode_bool, decode_u16))
('cat', True, 513)
>>> de.finalize()
"""

from typing import Any

from typing_extensions import TypeVarTuple, Unpack

from shared_types.serialization import Deserializer, Serializer

from . import Decoder, Encoder

Ts = TypeVarTuple('Ts')


def encode_tuple(serializer: Serializer, values: tuple[Unpack[Ts]], encoders: tuple[Encoder[Any], ...]) -> None:
    assert len(values) == len(encoders)
    for value, encoder in zip(values, encoders):  # type: ignore
        encoder(serializer, value)


def decode_tuple(deserializer: Deserializer, decoders: tuple[Decoder[Any], ...]) -> tuple[Unpack[Ts]]:
    return tuple(decoder(deserializer) for decoder in decoders)
