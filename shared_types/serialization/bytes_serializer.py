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

from typing import TYPE_CHECKING

from typing_extensions import override

from .depth import ContainerDepthGuard
from .exceptions import SerializationDepthError
from .serializer import Serializer
from .types import Buffer

if TYPE_CHECKING:
    from .formats import WireFormat


class BytesSerializer(Serializer):
    """Simple implementation of Serializer to write to memory.

    This implementation defers joining everything until finalize is called, before that every write is stored as a
    memoryview in a list.
    """

    def __init__(self, wire_format: WireFormat | None = None, *, max_container_depth: int | None = None) -> None:
        self._parts: list[memoryview] = []
        self._pos: int = 0
        self._wire_format = wire_format
        self._depth = ContainerDepthGuard(max_container_depth, SerializationDepthError)

    @override
    def finalize(self) -> memoryview:
        assert self._depth.depth == 0, 'finalized inside a container'
        result = memoryview(b''.join(self._parts))
        del self._parts
        del self._pos
        return result

    @property
    @override
    def wire_format(self) -> WireFormat:
        if self._wire_format is None:
            return super().wire_format
        return self._wire_format

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        # int.to_bytes checks for correct range
        self._parts.append(memoryview(int.to_bytes(data, length=1, byteorder='little')))
        self._pos += 1

    @override
    def write_bytes(self, data: Buffer) -> None:
        part = memoryview(data)
        self._parts.append(part)
        self._pos += len(part)

    @override
    def increase_container_depth(self) -> None:
        self._depth.increase()

    @override
    def decrease_container_depth(self) -> None:
        self._depth.decrease()

    @override
    def sort_map_entries(self, offsets: list[int]) -> None:
        # XXX: entries are compared by their raw bytes, since keys are self-delimiting this is the same as comparing
        #      only the encoded keys
        if len(offsets) < 2:
            return
        data = b''.join(self._parts)
        bounds = [*offsets, self._pos]
        entries = sorted(data[start:end] for start, end in zip(bounds, bounds[1:]))
        self._parts = [memoryview(data[:offsets[0]]), *(memoryview(entry) for entry in entries)]
