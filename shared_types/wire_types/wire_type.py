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
from typing import TYPE_CHECKING, Generic, NamedTuple, TypeAlias, TypeVar, final

from typing_extensions import Self

from shared_types.serialization import Deserializer, Serializer
from shared_types.wire_types.utils import TypeAliasMap, TypeToWireTypeMap, get_aliased_type, get_usable_origin_type

if TYPE_CHECKING:
    from shared_types.serialization.formats import WireFormat

T = TypeVar('T')


class WireType(ABC, Generic[T]):
    """ Models a type with a known type signature and how its values are laid out on the wire.

    Instances are built from annotations through a `TypeMap` (see `make_wire_type`), compound wire types hold the wire
    types of their arguments, so a `WireType` instance is a tree that mirrors the annotation.

    A wire type never embeds tags or field names: the reader must use the same annotation as the writer.
    """

    # These are all the values that can be observed when parsing a JSON with the builtin json module
    Json: TypeAlias = dict | list | str | int | float | bool | None

    class TypeMap(NamedTuple):
        alias_map: TypeAliasMap
        wire_types_map: TypeToWireTypeMap

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    # XXX: subclasses must initialize this property
    _is_hashable: bool

    @final
    @staticmethod
    def from_type(type_: type[T], /, *, type_map: TypeMap) -> WireType[T]:
        """ Instantiate a WireType from a type signature using the given maps.
        """
        usable_origin = get_usable_origin_type(type_, type_map=type_map)
        wire_type = type_map.wire_types_map[usable_origin]
        aliased_type = get_aliased_type(type_, type_map.alias_map)
        return wire_type._from_type(aliased_type, type_map=type_map)

    @classmethod
    def _from_type(cls, type_: type[T], /, *, type_map: TypeMap) -> Self:
        """ Instantiate a WireType instance from a type signature.

        The implementation is expected to inspect the given type's origin and args to check for compatibility and use
        `WireType.from_type` with the given `type_map` for its arguments.
        """
        raise TypeError(f'{cls} is not compatible with use in a WireType.TypeMap')

    @final
    def is_hashable(self) -> bool:
        """ Indicates whether the type being abstracted over is expected to be hashable, used to vet map keys."""
        return self._is_hashable

    def is_zero_sized(self) -> bool:
        """ Whether every value of this type is written with zero bytes, like `None` or a record without fields.

        Length-prefixed containers reject such items, see `check_sized_items`.
        """
        return False

    @final
    def check_value(self, value: T, /) -> None:
        """ Raises a TypeError (or ValueError for out of range values) if the value is not compatible.

        The check is deep: for compound types (like lists/maps) each value is checked too.
        """
        # XXX: subclasses must implement WireType._check_value, not WireType.check_value
        self._check_value(value, deep=True)

    @final
    def serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Serialize a value according to the signature that was abstracted.

        A shallow check is made while serializing, every inner value is checked when its own wire type serializes it.
        """
        # XXX: subclasses must implement WireType._serialize, not WireType.serialize
        self._check_value(value, deep=False)
        self._serialize(serializer, value)

    @final
    def deserialize(self, deserializer: Deserializer, /) -> T:
        """ Deserialize a value according to the signature that was abstracted.

        Decoders are expected to produce valid values, the shallow check made afterwards is only a double check.
        """
        # XXX: subclasses must implement WireType._deserialize, not WireType.deserialize
        value = self._deserialize(deserializer)
        self._check_value(value, deep=False)
        return value

    @final
    def to_bytes(self, value: T, /, wire_format: WireFormat | None = None) -> bytes:
        """ Shortcut to convert a value to `bytes` without limits other than the format's own.
        """
        serializer = Serializer.build_bytes_serializer(wire_format)
        self.serialize(serializer, value)
        return bytes(serializer.finalize())

    @final
    def from_bytes(self, data: bytes, /, wire_format: WireFormat | None = None) -> T:
        """ Shortcut to parse a value from `bytes`, all of the input must be consumed.
        """
        deserializer = Deserializer.build_bytes_deserializer(data, wire_format)
        value = self.deserialize(deserializer)
        deserializer.finalize()
        return value

    @final
    def json_to_value(self, json_value: Json, /) -> T:
        """ Convert a value that comes out from `json.load` into the value that this class expects.

        Will raise a ValueError if the given `json_value` is not compatible.
        """
        value = self._json_to_value(json_value)
        self._check_value(value, deep=False)
        return value

    @final
    def value_to_json(self, value: T, /) -> Json:
        """ Convert a value to an object compatible with `json.dump`.
        """
        self._check_value(value, deep=False)
        return self._value_to_json(value)

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `WireType.check_value`.

        Compound values should use `WireType._check_value` on the inner type(s) and pass the `deep` argument along.
        """
        raise NotImplementedError

    @abstractmethod
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Inner implementation of `serialize`, the given value has been "shallow checked".

        Compound encoders should be given `WireType.serialize` of the inner types, not `WireType._serialize`.
        """
        raise NotImplementedError

    @abstractmethod
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        """ Inner implementation of `deserialize`.
        """
        raise NotImplementedError

    def _json_to_value(self, json_value: Json, /) -> T:
        raise ValueError('this class does not support JSON conversion')

    def _value_to_json(self, value: T, /) -> Json:
        raise ValueError('this class does not support JSON conversion')
