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

from types import UnionType
from typing import get_args as _typing_get_args, get_origin as _typing_get_origin


def get_origin(t: type | UnionType, /) -> type | None:
    """Like typing.get_origin, but NewTypes are resolved to their supertype first.

    >>> from typing import NewType
    >>> N = NewType('N', list[int])
    >>> get_origin(N)
    <class 'list'>
    >>> get_origin(int) is None
    True
    """
    return _typing_get_origin(_resolve_newtype(t))


def get_args(t: type | UnionType, /) -> tuple[type, ...]:
    """Like typing.get_args, but NewTypes are resolved to their supertype first.

    >>> get_args(dict[str, int])
    (<class 'str'>, <class 'int'>)
    """
    return _typing_get_args(_resolve_newtype(t))


def _resolve_newtype(t: type | UnionType) -> type | UnionType:
    while (super_type := getattr(t, '__supertype__', None)) is not None:
        t = super_type
    return t


def is_subclass(cls: type, class_or_tuple: type | tuple[type, ...] | UnionType, /) -> bool:
    """ Reimplements issubclass() with support for recursive NewType classes.

    Normal behavior from `issubclass`:

    >>> is_subclass(bool, int)
    True
    >>> is_subclass(bool, (int, str))
    True
    >>> is_subclass(str, int)
    False

    But `is_subclass` also works when a NewType is given as arg 1:

    >>> from typing import NewType
    >>> N = NewType('N', int)
    >>> is_subclass(N, int)
    True
    >>> is_subclass(N, str)
    False
    >>> M = NewType('M', N)
    >>> is_subclass(M, int)
    True

    Anything that isn't a class after resolving fails the same way as `issubclass`:

    >>> try:
    ...     is_subclass(list[int], list)
    ... except TypeError as e:
    ...     print(*e.args)
    issubclass() arg 1 must be a class
    """
    resolved = _resolve_newtype(cls)
    return issubclass(resolved, class_or_tuple)  # type: ignore[arg-type]
