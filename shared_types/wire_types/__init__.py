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

from types import NoneType, UnionType
from typing import TYPE_CHECKING, TypeVar, Union

from shared_types.primitives import f32, f64, i8, i16, i32, i64, i128, u8, u16, u32, u64, u128
from shared_types.wire_types.bool_wire_type import BoolWireType
from shared_types.wire_types.bytes_wire_type import BytesWireType
from shared_types.wire_types.dict_wire_type import DictWireType
from shared_types.wire_types.enum_wire_type import EnumWireType
from shared_types.wire_types.float_wire_type import Float32WireType, Float64WireType
from shared_types.wire_types.list_wire_type import ListWireType
from shared_types.wire_types.optional_wire_type import OptionalWireType
from shared_types.wire_types.record_wire_type import RecordWireType
from shared_types.wire_types.sized_int_wire_type import (
    Int8WireType,
    Int16WireType,
    Int32WireType,
    Int64WireType,
    Int128WireType,
    Uint8WireType,
    Uint16WireType,
    Uint32WireType,
    Uint64WireType,
    Uint128WireType,
)
from shared_types.wire_types.str_wire_type import StrWireType
from shared_types.wire_types.tuple_wire_type import TupleWireType
from shared_types.wire_types.unit_wire_type import UnitWireType
from shared_types.wire_types.utils import TypeAliasMap, TypeToWireTypeMap
from shared_types.wire_types.variant_wire_type import VariantWireType
from shared_types.wire_types.wire_type import WireType

if TYPE_CHECKING:
    from shared_types.record import Record

__all__ = [
    'DEFAULT_TYPE_ALIAS_MAP',
    'DEFAULT_TYPE_MAP',
    'DEFAULT_TYPE_TO_WIRE_TYPE_MAP',
    'BoolWireType',
    'BytesWireType',
    'DictWireType',
    'EnumWireType',
    'Float32WireType',
    'Float64WireType',
    'Int8WireType',
    'Int16WireType',
    'Int32WireType',
    'Int64WireType',
    'Int128WireType',
    'ListWireType',
    'OptionalWireType',
    'RecordWireType',
    'StrWireType',
    'TupleWireType',
    'TypeAliasMap',
    'TypeToWireTypeMap',
    'Uint8WireType',
    'Uint16WireType',
    'Uint32WireType',
    'Uint64WireType',
    'Uint128WireType',
    'UnitWireType',
    'VariantWireType',
    'WireType',
    'make_record_wire_type',
    'make_wire_type',
]

T = TypeVar('T')
R = TypeVar('R', bound='Record')


def _build_type_to_wire_type_map() -> TypeToWireTypeMap:
    from enum import Enum

    from shared_types.record import Record, Variant

    return {
        # builtin types:
        bool: BoolWireType,
        bytes: BytesWireType,
        dict: DictWireType,
        float: Float64WireType,
        list: ListWireType,
        str: StrWireType,
        tuple: TupleWireType,
        # XXX: technically None is not a type, type[None]/NoneType is, but both can show up in annotations
        None: UnitWireType,  # type: ignore[dict-item]
        NoneType: UnitWireType,
        UnionType: OptionalWireType,
        # sized primitives:
        u8: Uint8WireType,
        u16: Uint16WireType,
        u32: Uint32WireType,
        u64: Uint64WireType,
        u128: Uint128WireType,
        i8: Int8WireType,
        i16: Int16WireType,
        i32: Int32WireType,
        i64: Int64WireType,
        i128: Int128WireType,
        f32: Float32WireType,
        f64: Float64WireType,
        # matched through the MRO, Variant must be found before Record:
        Enum: EnumWireType,
        Variant: VariantWireType,
        Record: RecordWireType,
    }


# the minimum type-alias-map needed for everything to work as intended
DEFAULT_TYPE_ALIAS_MAP: TypeAliasMap = {
    # XXX: technically typing.Union is not a type, so mypy complains, but for our purposes it is a type
    Union: UnionType,  # type: ignore[dict-item]
}

DEFAULT_TYPE_TO_WIRE_TYPE_MAP: TypeToWireTypeMap = _build_type_to_wire_type_map()

DEFAULT_TYPE_MAP = WireType.TypeMap(DEFAULT_TYPE_ALIAS_MAP, DEFAULT_TYPE_TO_WIRE_TYPE_MAP)


def make_wire_type(type_: type[T], /) -> WireType[T]:
    """ Like WireType.from_type, but with the default maps.

    If you need to customize the mapping use `WireType.from_type` instead.

    >>> make_wire_type(dict[str, list[u8]]).to_bytes({'a': [1, 2]}).hex()
    '0161020102'
    """
    return WireType.from_type(type_, type_map=DEFAULT_TYPE_MAP)


def make_record_wire_type(record_class: type[R], /) -> RecordWireType[R]:
    """ The wire type with the fields of a record class, also used for each variant class of an enum.
    """
    return RecordWireType.for_class(record_class, type_map=DEFAULT_TYPE_MAP)
