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
from .deserializer import Deserializer
from .exceptions import DeserializationDepthError, OutOfDataError, TrailingDataError
from .types import Buffer

if TYPE_CHECKING:
    from .formats import WireFormat

_EMPTY_VIEW = memoryview(b'')


class BytesDeserializer(Deserializer):
    """Simple implementation of a Deserializer to parse values from a byte sequence.

    This implementation maintains a memoryview that is shortened as the bytes are read, the original view is kept so
    that already consumed ranges can be inspected.
    """

    def __init__(
        self,
        data: Buffer,
        wire_format: WireFormat | None = None,
        *,
        max_container_depth: int | None = None,
    ) -> None:
        self._data = memoryview(data)
        self._view = self._data
        self._wire_format = wire_format
        self._depth = ContainerDepthGuard(max_container_depth, DeserializationDepthError)

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise TrailingDataError(f'trailing data: {len(self._view)} bytes were not read')
        del self._view

    @property
    @override
    def wire_format(self) -> WireFormat:
        if self._wire_format is None:
            return super().wire_format
        return self._wire_format

    @override
    def is_empty(self) -> bool:
        # XXX: least amount of OPs, "not" converts to bool with the correct semantics of "is empty"
        return not self._view

    @override
    def cur_pos(self) -> int:
        return len(self._data) - len(self._view)

    @override
    def consumed_since(self, pos: int) -> memoryview:
        return self._data[pos:self.cur_pos()]

    @override
    def peek_byte(self) -> int:
        if not len(self._view):
            raise OutOfDataError('not enough bytes to read')
        return self._view[0]

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> memoryview:
        if n < 0:
            raise ValueError('value cannot be negative')
        if exact and len(self._view) < n:
            raise OutOfDataError(f'not enough bytes to read: {n} requested, {len(self._view)} left')
        return self._view[:n]

    @override
    def read_byte(self) -> int:
        b = self.peek_byte()
        self._view = self._view[1:]
        return b

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> memoryview:
        b = self.peek_bytes(n, exact=exact)
        self._view = self._view[len(b):]
        return b

    @override
    def read_all(self) -> memoryview:
        b = self._view
        self._view = _EMPTY_VIEW
        return b

    @override
    def increase_container_depth(self) -> None:
        self._depth.increase()

    @override
    def decrease_container_depth(self) -> None:
        self._depth.decrease()
