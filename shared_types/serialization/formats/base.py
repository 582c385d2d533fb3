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

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from shared_types.serialization.encoding.leb128 import decode_leb128, encode_leb128

if TYPE_CHECKING:
    from shared_types.serialization import Deserializer, Serializer


class WireFormat(ABC):
    """ The parts of the byte layout that are not fixed by the value's shape.

    Every supported format agrees on how to write primitives (little-endian integers and floats, 0/1 booleans and
    option tags), they differ on how sequence lengths and variant indexes are written and on whether map entries have a
    canonical order. Serializers and deserializers carry one instance of this class and delegate those decisions to it.
    """

    name: ClassVar[str]

    # when set, map entries are written sorted by their encoded bytes and read back only if keys are strictly
    # increasing
    sorted_map_entries: ClassVar[bool] = False

    @abstractmethod
    def encode_length(self, serializer: Serializer, length: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def decode_length(self, deserializer: Deserializer) -> int:
        raise NotImplementedError

    @abstractmethod
    def encode_variant_index(self, serializer: Serializer, index: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def decode_variant_index(self, deserializer: Deserializer) -> int:
        raise NotImplementedError

    def check_map_key_order(self, previous_key: bytes, key: bytes) -> None:
        """Called with the encoded bytes of consecutive map keys, only when `sorted_map_entries` is set."""

    def __repr__(self) -> str:
        return f'<{type(self).__name__} {self.name!r}>'


class PlainFormat(WireFormat):
    """ Unbounded LEB128 lengths and variant indexes, no ordering rules.

    This is the format used when a serializer is built without choosing one, it is convenient for tests and for
    standalone use of the encoders.
    """

    name = 'plain'

    def encode_length(self, serializer: Serializer, length: int) -> None:
        encode_leb128(serializer, length, signed=False)

    def decode_length(self, deserializer: Deserializer) -> int:
        return decode_leb128(deserializer, signed=False)

    def encode_variant_index(self, serializer: Serializer, index: int) -> None:
        encode_leb128(serializer, index, signed=False)

    def decode_variant_index(self, deserializer: Deserializer) -> int:
        return decode_leb128(deserializer, signed=False)
