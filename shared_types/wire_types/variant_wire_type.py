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

from typing import TYPE_CHECKING, TypeVar

from typing_extensions import Self, override

from shared_types.serialization import Deserializer, MalformedDataError, Serializer
from shared_types.serialization.compound_encoding.variant import decode_variant, encode_variant
from shared_types.wire_types.record_wire_type import RecordWireType
from shared_types.wire_types.wire_type import WireType

if TYPE_CHECKING:
    from shared_types.record import Variant

V = TypeVar('V', bound='Variant')


class VariantWireType(WireType[V]):
    """ Represents the variants of an enum root: the variant index, then the variant's fields.

    Annotating a field with the root accepts any of its variants, annotating it with a single variant writes exactly
    the same bytes but only accepts (and only reads back) that variant.
    """

    __slots__ = ('_root', '_expected', '_type_map')

    _is_hashable = True

    _root: type[Variant]
    _expected: type[V]

    def __init__(self, expected: type[V], /, *, type_map: WireType.TypeMap) -> None:
        self._root = expected.variant_root()
        self._expected = expected
        self._type_map = type_map

    @override
    @classmethod
    def _from_type(cls, type_: type[V], /, *, type_map: WireType.TypeMap) -> Self:
        from shared_types.record import Variant
        if not isinstance(type_, type) or not issubclass(type_, Variant) or type_ is Variant:
            raise TypeError('expected an enum root or one of its variants')
        return cls(type_, type_map=type_map)

    def _variant_wire_type(self, variant_class: type[Variant]) -> RecordWireType:
        return RecordWireType.for_class(variant_class, type_map=self._type_map)

    @override
    def _check_value(self, value: V, /, *, deep: bool) -> None:
        if not isinstance(value, self._expected):
            raise TypeError(f'expected {self._expected.__name__} instance')

    @override
    def _serialize(self, serializer: Serializer, value: V, /) -> None:
        variant_class = type(value)
        encode_variant(
            serializer,
            variant_class.VARIANT_INDEX,
            value,
            self._variant_wire_type(variant_class).serialize_fields,
        )

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> V:
        decoders = [self._variant_wire_type(variant).deserialize_fields for variant in self._root.VARIANTS]
        value = decode_variant(deserializer, decoders)
        if not isinstance(value, self._expected):
            raise MalformedDataError(f'expected variant {self._expected.__name__}, got {type(value).__name__}')
        return value

    @override
    def _json_to_value(self, json_value: WireType.Json, /) -> V:
        # XXX: a variant is represented as a single-key object, {"VariantName": {...fields...}}
        if not isinstance(json_value, dict) or len(json_value) != 1:
            raise ValueError('expected an object with a single key')
        (name, fields), = json_value.items()
        for variant_class in self._root.VARIANTS:
            if variant_class.__name__ == name:
                return self._variant_wire_type(variant_class).json_to_value(fields)
        raise ValueError(f'unknown variant {name!r} for {self._root.__name__}')

    @override
    def _value_to_json(self, value: V, /) -> WireType.Json:
        variant_class = type(value)
        return {variant_class.__name__: self._variant_wire_type(variant_class).value_to_json(value)}
