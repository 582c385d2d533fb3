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
Explicit nesting counter used by serializers and deserializers.

Every record or enum value increases the depth on entry and decreases it on exit, the walk fails deterministically as
soon as the maximum is exceeded, regardless of how deep the Python call stack can go.

>>> guard = ContainerDepthGuard(2, SerializationDepthError)
>>> guard.increase()
>>> guard.increase()
>>> guard.depth
2
>>> try:
...     guard.increase()
... except SerializationDepthError as e:
...     print(*e.args)
exceeded maximum container depth of 2
>>> guard.decrease()
>>> guard.depth
1
"""

from .exceptions import ContainerDepthError, DeserializationDepthError, SerializationDepthError

__all__ = ['ContainerDepthGuard', 'DeserializationDepthError', 'SerializationDepthError']


class ContainerDepthGuard:
    __slots__ = ('_depth', '_max_depth', '_error_class')

    def __init__(self, max_depth: int | None, error_class: type[ContainerDepthError]) -> None:
        if max_depth is not None and max_depth < 0:
            raise ValueError('max_depth cannot be negative')
        self._depth = 0
        self._max_depth = max_depth
        self._error_class = error_class

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def max_depth(self) -> int | None:
        return self._max_depth

    def increase(self) -> None:
        if self._max_depth is not None and self._depth >= self._max_depth:
            raise self._error_class(f'exceeded maximum container depth of {self._max_depth}')
        self._depth += 1

    def decrease(self) -> None:
        # XXX: an unbalanced decrease is a bug in the encoder/decoder, not a problem with the data
        assert self._depth > 0, 'container depth underflow'
        self._depth -= 1
