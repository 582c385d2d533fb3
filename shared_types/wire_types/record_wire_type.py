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

import dataclasses
from typing import TYPE_CHECKING, Any, TypeVar, get_type_hints

from typing_extensions import Self, override

from shared_types.exception import ConstructionError, InvalidShapeError, MissingFieldError
from shared_types.serialization import Deserializer, Serializer
from shared_types.serialization.compound_encoding import Decoder, Encoder
from shared_types.serialization.compound_encoding.record import (
    decode_fields,
    decode_record,
    encode_fields,
    encode_record,
)
from shared_types.wire_types.optional_wire_type import OptionalWireType
from shared_types.wire_types.unit_wire_type import UnitWireType
from shared_types.wire_types.wire_type import WireType

if TYPE_CHECKING:
    from shared_types.record import Record

R = TypeVar('R', bound='Record')


class RecordWireType(WireType[R]):
    """ Represents `Record` subclasses: every field in declaration order, inside one container level.

    Field types are only resolved on first use, at that point every name used in the annotations must be defined.
    """

    __slots__ = ('_class', '_type_map', '_fields', '_zero_sized', '_in_progress')

    # XXX: records are frozen, but a record holding a list still fails to hash at runtime, like a tuple would
    _is_hashable = True

    _class: type[R]
    _fields: list[tuple[str, WireType[Any]]] | None
    _zero_sized: bool | None
    _in_progress: bool

    def __init__(self, class_: type[R], /, *, type_map: WireType.TypeMap) -> None:
        self._class = class_
        self._type_map = type_map
        self._fields = None
        self._zero_sized = None
        self._in_progress = False

    @classmethod
    def for_class(cls, class_: type[R], /, *, type_map: WireType.TypeMap) -> RecordWireType[R]:
        """ One instance per record class, so self-referential records share it instead of expanding forever.
        """
        # XXX: looked up in the class __dict__ only, a subclass must not reuse its parent's instance
        cached = class_.__dict__.get('__wire_type__')
        if cached is not None and cached._type_map is type_map:
            return cached
        wire_type = cls(class_, type_map=type_map)
        setattr(class_, '__wire_type__', wire_type)
        return wire_type

    @override
    @classmethod
    def _from_type(cls, type_: type[R], /, *, type_map: WireType.TypeMap) -> Self:
        from shared_types.record import Record, Variant
        if not isinstance(type_, type) or not issubclass(type_, Record):
            raise TypeError('expected Record subclass')
        if issubclass(type_, Variant):
            raise TypeError('variants are represented by VariantWireType')
        return cls.for_class(type_, type_map=type_map)  # type: ignore[return-value]

    @property
    def fields(self) -> list[tuple[str, WireType[Any]]]:
        if self._fields is None:
            self._in_progress = True
            try:
                self._fields = self._resolve_fields()
            finally:
                self._in_progress = False
        return self._fields

    @override
    def is_zero_sized(self) -> bool:
        if self._zero_sized is None:
            # XXX: a record reached again while it is resolved or sized holds a container of itself, or is infinite
            if self._in_progress:
                return False
            fields = self.fields
            self._in_progress = True
            try:
                self._zero_sized = all(wire_type.is_zero_sized() for _, wire_type in fields)
            finally:
                self._in_progress = False
        return self._zero_sized

    def _resolve_fields(self) -> list[tuple[str, WireType[Any]]]:
        try:
            hints = get_type_hints(self._class)
        except NameError as e:
            raise InvalidShapeError(f'cannot resolve the annotations of {self._class.__name__}: {e}') from e
        return [
            (field.name, WireType.from_type(hints[field.name], type_map=self._type_map))
            for field in dataclasses.fields(self._class)  # type: ignore[arg-type]
        ]

    def _encoders(self) -> list[tuple[str, Encoder[Any]]]:
        return [(name, wire_type.serialize) for name, wire_type in self.fields]

    def _decoders(self) -> list[tuple[str, Decoder[Any]]]:
        return [(name, wire_type.deserialize) for name, wire_type in self.fields]

    def check_fields(self, value: R) -> None:
        """ Used when a record is constructed, every field is deep checked against its declared type.
        """
        name = self._class.__name__
        for field_name, wire_type in self.fields:
            field_value = getattr(value, field_name)
            if field_value is None and not isinstance(wire_type, (OptionalWireType, UnitWireType)):
                raise MissingFieldError(f'{name}.{field_name} cannot be None')
            try:
                wire_type.check_value(field_value)
            except (TypeError, ValueError) as e:
                raise ConstructionError(f'{name}.{field_name}: {e}') from e

    def serialize_fields(self, serializer: Serializer, value: R, /) -> None:
        """ Write the fields without counting a container level, used for the content of a variant.
        """
        encode_fields(serializer, value, self._encoders())

    def deserialize_fields(self, deserializer: Deserializer, /) -> R:
        """ Read the fields without counting a container level, used for the content of a variant.
        """
        return decode_fields(deserializer, self._decoders(), self._class.builder())

    @override
    def _check_value(self, value: R, /, *, deep: bool) -> None:
        # XXX: records check their own fields when they are constructed
        if not isinstance(value, self._class):
            raise TypeError(f'expected {self._class.__name__} instance')

    @override
    def _serialize(self, serializer: Serializer, value: R, /) -> None:
        encode_record(serializer, value, self._encoders())

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> R:
        return decode_record(deserializer, self._decoders(), self._class.builder())

    @override
    def _json_to_value(self, json_value: WireType.Json, /) -> R:
        if not isinstance(json_value, dict):
            raise ValueError('expected dict')
        known = {name for name, _ in self.fields}
        unknown = set(json_value) - known
        if unknown:
            raise ValueError(f'unknown fields for {self._class.__name__}: {", ".join(sorted(unknown))}')
        builder = self._class.builder()
        for name, wire_type in self.fields:
            if name in json_value:
                builder.set_field(name, wire_type.json_to_value(json_value[name]))
        return builder.build()

    @override
    def _value_to_json(self, value: R, /) -> WireType.Json:
        return {name: wire_type.value_to_json(getattr(value, name)) for name, wire_type in self.fields}
