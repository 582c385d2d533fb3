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

import struct
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, overload

from typing_extensions import Self

from .types import Buffer

if TYPE_CHECKING:
    from .adapters import MaxBytesSerializer
    from .bytes_serializer import BytesSerializer
    from .formats import WireFormat


class Serializer(ABC):
    def finalize(self) -> Buffer:
        """Get the resulting byte sequence, the serializer cannot be reused after this."""
        raise TypeError('this serializer does not support finalization')

    @abstractmethod
    def cur_pos(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def write_byte(self, data: int) -> None:
        """Write a single byte."""
        raise NotImplementedError

    @abstractmethod
    def write_bytes(self, data: Buffer) -> None:
        # XXX: it is recommended that implementors of Serializer specialize this implementation
        for byte in bytes(memoryview(data)):
            self.write_byte(byte)

    def write_struct(self, data: tuple[Any, ...], format: str) -> None:
        data_bytes = struct.pack(format, *data)
        self.write_bytes(data_bytes)

    @abstractmethod
    def increase_container_depth(self) -> None:
        """Called when entering a record or enum, fails when the maximum depth would be exceeded."""
        raise NotImplementedError

    @abstractmethod
    def decrease_container_depth(self) -> None:
        """Called when leaving a record or enum, must mirror a previous `increase_container_depth`."""
        raise NotImplementedError

    @property
    def wire_format(self) -> WireFormat:
        """The rules for lengths, variant indexes and map ordering, by default plain unsigned LEB128."""
        from .formats import PLAIN
        return PLAIN

    def write_length(self, length: int) -> None:
        """Write the length prefix of a sequence, map, string or byte-string."""
        self.wire_format.encode_length(self, length)

    def write_variant_index(self, index: int) -> None:
        """Write the index that selects the variant of an enum."""
        self.wire_format.encode_variant_index(self, index)

    def sort_map_entries(self, offsets: list[int]) -> None:
        """Reorder the entries of the map that was just written, `offsets` has the starting position of each entry.

        Only called when the wire format requires sorted map entries.
        """
        raise TypeError('this serializer cannot reorder written data')

    def with_max_bytes(self, max_bytes: int) -> MaxBytesSerializer[Self]:
        """Helper method to wrap the current serializer with MaxBytesSerializer."""
        from .adapters import MaxBytesSerializer
        return MaxBytesSerializer(self, max_bytes)

    @overload
    def with_optional_max_bytes(self, max_bytes: None) -> Self:
        ...

    @overload
    def with_optional_max_bytes(self, max_bytes: int) -> MaxBytesSerializer[Self]:
        ...

    def with_optional_max_bytes(self, max_bytes: int | None) -> Self | MaxBytesSerializer[Self]:
        """Helper method to optionally wrap the current serializer."""
        if max_bytes is None:
            return self
        return self.with_max_bytes(max_bytes)

    @staticmethod
    def build_bytes_serializer(
        wire_format: WireFormat | None = None,
        *,
        max_container_depth: int | None = None,
    ) -> BytesSerializer:
        from .bytes_serializer import BytesSerializer
        return BytesSerializer(wire_format, max_container_depth=max_container_depth)
