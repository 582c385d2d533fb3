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

from collections.abc import Hashable, Mapping
from enum import Enum
from types import MappingProxyType as mappingproxy, NoneType, UnionType
from typing import TYPE_CHECKING, Iterator, TypeAlias, TypeVar, Union

from structlog import get_logger

from shared_types.exception import InvalidShapeError
from shared_types.utils.typing import get_args, get_origin, is_subclass

if TYPE_CHECKING:
    from shared_types.wire_types import WireType


logger = get_logger()

T = TypeVar('T')
TypeAliasMap: TypeAlias = Mapping[type | UnionType, type]
TypeToWireTypeMap: TypeAlias = Mapping[type | UnionType, type['WireType']]


def get_origin_classes(type_: type) -> Iterator[type]:
    """ Generalizes over a type T and unions A | B.

    A simple type T is yielded directly, and an union will yield each type in it. Only origin types are yielded,
    arguments are discarded.

    >>> list(get_origin_classes(int))
    [<class 'int'>]
    >>> list(get_origin_classes(int | str))
    [<class 'int'>, <class 'str'>]
    >>> list(get_origin_classes(list[int] | dict[int, str]))
    [<class 'list'>, <class 'dict'>]
    """
    origin_type: type = get_origin(type_) or type_
    if origin_type is UnionType or origin_type is Union:
        for arg_type in get_args(type_):
            yield get_origin(arg_type) or arg_type
    else:
        yield origin_type


def is_origin_hashable(type_: type) -> bool:
    """ Checks whether the given type signature satisfies `collections.abc.Hashable`.

    This check ignores type arguments, but takes into account all types of an union.

    >>> is_origin_hashable(str)
    True
    >>> is_origin_hashable(bytes | None)
    True
    >>> is_origin_hashable(list[int])
    False
    >>> is_origin_hashable(dict)
    False
    >>> is_origin_hashable(tuple)
    True

    Callers should recurse on their own if they need to deal with type arguments.
    """
    return all(_is_origin_hashable(origin_class) for origin_class in get_origin_classes(type_))


def _is_origin_hashable(origin_class: type) -> bool:
    # XXX: hash(mappingproxy(...)) fails even when the mappingproxy type looks hashable
    if origin_class is mappingproxy:
        return False
    return is_subclass(origin_class, Hashable)


def pretty_type(type_: type | UnionType) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(None)
    'None'
    >>> pretty_type(str)
    'str'
    >>> pretty_type(list[str])
    'list[str]'
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__'):
        return str(type_)
    else:
        return getattr(type_, '__name__', repr(type_))


def get_aliased_type(type_: type | UnionType, alias_map: TypeAliasMap) -> type:
    """ Map the origin of a type to its alias, keeping the type's arguments.

    Only the outermost origin is replaced, nested arguments are aliased when their own wire type is built.

    >>> from typing import Optional
    >>> get_aliased_type(Optional[int], {Union: UnionType})
    int | None
    """
    origin_type = get_origin(type_) or type_
    if origin_type not in alias_map:
        return type_  # type: ignore[return-value]
    aliased_origin = alias_map[origin_type]
    logger.debug('type replaced', old=pretty_type(type_), new=pretty_type(aliased_origin))
    if aliased_origin is UnionType:
        # XXX: UnionType can't be subscripted, `A | B | ...` is the way to build one
        args = get_args(type_)
        result = args[0]
        for arg in args[1:]:
            result = result | arg  # type: ignore[assignment]
        return result
    args = get_args(type_)
    if args:
        return aliased_origin[args]  # type: ignore[index]
    return aliased_origin


def get_usable_origin_type(type_: type[T] | UnionType, /, *, type_map: 'WireType.TypeMap') -> type:
    """ Map a given type into a key that exists in `type_map.wire_types_map`.

    The lookup is made, in order, on the type itself (this is how `NewType` markers like `u8` are found), on its
    origin after aliasing (`list[str]` is found as `list`) and finally on the classes of its MRO, which is how records,
    variants and enums are found through their base class. A `TypeError` is raised when nothing matches:

    >>> from shared_types.wire_types import DEFAULT_TYPE_MAP
    >>> get_usable_origin_type(list[str], type_map=DEFAULT_TYPE_MAP)
    <class 'list'>
    >>> try:
    ...     get_usable_origin_type(int, type_map=DEFAULT_TYPE_MAP)
    ... except TypeError as e:
    ...     print(*e.args)
    type int is not supported, use one of the sized markers from shared_types.primitives
    """
    if isinstance(type_, str):
        raise InvalidShapeError(f'unresolved string annotation {type_!r}')

    wire_types_map = type_map.wire_types_map
    if _is_map_key(type_) and type_ in wire_types_map:
        return type_  # type: ignore[return-value]

    aliased_type = get_aliased_type(type_, type_map.alias_map)
    origin: type = get_origin(aliased_type) or aliased_type
    # XXX: `A | None` is a typing.Union and not a types.UnionType when A is not a class, which is the case for NewTypes
    if origin is Union:
        origin = UnionType  # type: ignore[assignment]
    if _is_map_key(origin) and origin in wire_types_map:
        return origin

    super_type = getattr(origin, '__supertype__', None)
    if super_type is not None:
        return get_usable_origin_type(super_type, type_map=type_map)

    # XXX: enums with a mixin (like StrEnum) also have the mixin in their MRO, but they are still enums
    if isinstance(origin, type) and issubclass(origin, Enum) and Enum in wire_types_map:
        return Enum

    for base in getattr(origin, '__mro__', ())[1:]:
        if base in wire_types_map:
            return base

    if type_ is int:
        raise InvalidShapeError('type int is not supported, use one of the sized markers from shared_types.primitives')
    raise InvalidShapeError(f'type {pretty_type(type_)} is not supported by any WireType class')


def _is_map_key(type_: object) -> bool:
    try:
        hash(type_)
    except TypeError:
        return False
    return True


def check_sized_items(container: str, *item_wire_types: 'WireType') -> None:
    """ Raises `InvalidShapeError` when every item of a length-prefixed container would be written with zero bytes.

    A length read from the input must be backed by at least one byte per item, or a few bytes could claim any number
    of items:

    >>> from shared_types.wire_types import make_wire_type
    >>> check_sized_items('list', make_wire_type(bytes))
    >>> try:
    ...     check_sized_items('list', make_wire_type(None))
    ... except InvalidShapeError as e:
    ...     print(*e.args)
    list items cannot be zero-sized
    """
    if all(wire_type.is_zero_sized() for wire_type in item_wire_types):
        raise InvalidShapeError(f'{container} items cannot be zero-sized')
