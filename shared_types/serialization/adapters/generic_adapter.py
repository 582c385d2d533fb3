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

from types import TracebackType
from typing import TYPE_CHECKING, Generic, TypeVar, Union

from typing_extensions import Self, override

from shared_types.serialization.deserializer import Deserializer
from shared_types.serialization.serializer import Serializer

from ..types import Buffer

if TYPE_CHECKING:
    from ..formats import WireFormat

S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


class GenericSerializerAdapter(Serializer, Generic[S]):
    """Forwards everything to the inner serializer, including the wire-format specific methods."""

    inner: S

    def __init__(self, serializer: S) -> None:
        self.inner = serializer

    @override
    def finalize(self) -> Buffer:
        return self.inner.finalize()

    @override
    def cur_pos(self) -> int:
        return self.inner.cur_pos()

    @override
    def write_byte(self, data: int) -> None:
        self.inner.write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        self.inner.write_bytes(data)

    @override
    def increase_container_depth(self) -> None:
        self.inner.increase_container_depth()

    @override
    def decrease_container_depth(self) -> None:
        self.inner.decrease_container_depth()

    @property
    @override
    def wire_format(self) -> WireFormat:
        return self.inner.wire_format

    @override
    def sort_map_entries(self, offsets: list[int]) -> None:
        self.inner.sort_map_entries(offsets)

    # allow using this adapter as a context manager:

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: Union[type[BaseException], None],
        exc_value: Union[BaseException, None],
        traceback: Union[TracebackType, None],
    ) -> None:
        pass


class GenericDeserializerAdapter(Deserializer, Generic[D]):
    """Forwards everything to the inner deserializer, including the wire-format specific methods."""

    inner: D

    def __init__(self, deserializer: D) -> None:
        self.inner = deserializer

    @override
    def finalize(self) -> None:
        return self.inner.finalize()

    @override
    def is_empty(self) -> bool:
        return self.inner.is_empty()

    @override
    def cur_pos(self) -> int:
        return self.inner.cur_pos()

    @override
    def consumed_since(self, pos: int) -> Buffer:
        return self.inner.consumed_since(pos)

    @override
    def peek_byte(self) -> int:
        return self.inner.peek_byte()

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        return self.inner.peek_bytes(n, exact=exact)

    @override
    def read_byte(self) -> int:
        return self.inner.read_byte()

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        return self.inner.read_bytes(n, exact=exact)

    @override
    def read_all(self) -> Buffer:
        return self.inner.read_all()

    @override
    def increase_container_depth(self) -> None:
        self.inner.increase_container_depth()

    @override
    def decrease_container_depth(self) -> None:
        self.inner.decrease_container_depth()

    @property
    @override
    def wire_format(self) -> WireFormat:
        return self.inner.wire_format

    # allow using this adapter as a context manager:

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: Union[type[BaseException], None],
        exc_value: Union[BaseException, None],
        traceback: Union[TracebackType, None],
    ) -> None:
        pass
