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

import math
import struct
from enum import Enum, StrEnum
from typing import Any, Optional

import pytest

from shared_types.exception import InvalidShapeError
from shared_types.primitives import f32, f64, i8, i16, i32, i64, i128, u8, u16, u32, u64, u128
from shared_types.serialization import MalformedDataError, OutOfDataError, TrailingDataError
from shared_types.serialization.formats import BCS, BINCODE
from shared_types.wire_types import (
    EnumWireType,
    Float64WireType,
    OptionalWireType,
    TupleWireType,
    Uint8WireType,
    UnitWireType,
    make_wire_type,
)


class Color(Enum):
    RED = 'r'
    GREEN = 'g'
    BLUE = 'b'


class Mood(StrEnum):
    HAPPY = 'happy'
    GRUMPY = 'grumpy'


@pytest.mark.parametrize('type_,value,hex_data', [
    (u8, 255, 'ff'),
    (u16, 0x1234, '3412'),
    (u32, 1, '01000000'),
    (u64, 2**64 - 1, 'ffffffffffffffff'),
    (u128, 1, '01' + '00' * 15),
    (i8, -1, 'ff'),
    (i16, -2, 'feff'),
    (i32, -(2**31), '00000080'),
    (i64, 5, '0500000000000000'),
    (i128, -1, 'ff' * 16),
    (f32, 0.5, '0000003f'),
    (f64, 1.0, '000000000000f03f'),
    (float, -2.0, '00000000000000c0'),
    (bool, True, '01'),
    (None, None, ''),
])
def test_scalar_layout(type_: Any, value: Any, hex_data: str) -> None:
    wire_type = make_wire_type(type_)
    for wire_format in (BINCODE, BCS):
        assert wire_type.to_bytes(value, wire_format).hex() == hex_data
        assert wire_type.from_bytes(bytes.fromhex(hex_data), wire_format) == value


@pytest.mark.parametrize('type_,value', [
    (u8, 256),
    (u8, -1),
    (i8, 128),
    (i8, -129),
    (u64, 2**64),
    (i128, 2**127),
])
def test_int_out_of_range(type_: Any, value: int) -> None:
    wire_type = make_wire_type(type_)
    with pytest.raises(ValueError):
        wire_type.check_value(value)
    with pytest.raises(ValueError):
        wire_type.to_bytes(value, BINCODE)


def test_int_rejects_bool_and_float() -> None:
    wire_type = make_wire_type(u32)
    with pytest.raises(TypeError):
        wire_type.check_value(True)
    with pytest.raises(TypeError):
        wire_type.check_value(1.0)


def test_plain_int_is_not_supported() -> None:
    with pytest.raises(InvalidShapeError, match='use one of the sized markers'):
        make_wire_type(int)
    with pytest.raises(TypeError):
        make_wire_type(list[int])


def test_unsupported_type() -> None:
    with pytest.raises(InvalidShapeError, match='not supported'):
        make_wire_type(set[str])


def test_f32_range() -> None:
    wire_type = make_wire_type(f32)
    with pytest.raises(ValueError):
        wire_type.check_value(1e39)
    wire_type.check_value(math.inf)
    assert math.isnan(wire_type.from_bytes(wire_type.to_bytes(math.nan)))


@pytest.mark.parametrize('value', [0.1, 1 / 3, 16777217.0, 1e-50])
def test_f32_rejects_inexact_values(value: float) -> None:
    wire_type = make_wire_type(f32)
    with pytest.raises(ValueError, match='not exactly representable'):
        wire_type.check_value(value)


@pytest.mark.parametrize('value', [0.1, 1 / 3, 2.0**-149, -65504.0, 16777216.0])
def test_f32_accepts_and_keeps_exact_values(value: float) -> None:
    wire_type = make_wire_type(f32)
    exact, = struct.unpack('<f', struct.pack('<f', value))
    wire_type.check_value(exact)
    assert wire_type.from_bytes(wire_type.to_bytes(exact, BINCODE), BINCODE) == exact


def test_float_is_f64() -> None:
    assert isinstance(make_wire_type(float), Float64WireType)
    assert isinstance(make_wire_type(f64), Float64WireType)


def test_unit() -> None:
    assert isinstance(make_wire_type(None), UnitWireType)
    assert isinstance(make_wire_type(type(None)), UnitWireType)


@pytest.mark.parametrize('type_', [Optional[u8], u8 | None, None | u8])
def test_optional(type_: Any) -> None:
    wire_type = make_wire_type(type_)
    assert isinstance(wire_type, OptionalWireType)
    assert wire_type.to_bytes(None, BINCODE) == b'\x00'
    assert wire_type.to_bytes(7, BINCODE) == b'\x01\x07'
    assert wire_type.from_bytes(b'\x00', BINCODE) is None
    assert wire_type.from_bytes(b'\x01\x07', BINCODE) == 7
    with pytest.raises(MalformedDataError):
        wire_type.from_bytes(b'\x02\x07', BINCODE)


def test_optional_of_two_types_is_not_supported() -> None:
    with pytest.raises(TypeError):
        make_wire_type(str | bytes)
    with pytest.raises(TypeError):
        make_wire_type(str | bytes | None)


def test_str_and_bytes() -> None:
    str_wire_type = make_wire_type(str)
    assert str_wire_type.to_bytes('', BINCODE).hex() == '0000000000000000'
    assert str_wire_type.to_bytes('ção', BCS).hex() == '05c3a7c3a36f'
    assert str_wire_type.from_bytes(bytes.fromhex('05c3a7c3a36f'), BCS) == 'ção'

    bytes_wire_type = make_wire_type(bytes)
    assert bytes_wire_type.to_bytes(b'\x00\x01', BCS).hex() == '020001'
    assert bytes_wire_type.from_bytes(bytes.fromhex('020001'), BCS) == b'\x00\x01'
    with pytest.raises(TypeError):
        bytes_wire_type.check_value('0001')


def test_list() -> None:
    wire_type = make_wire_type(list[u16])
    assert wire_type.to_bytes([1, 2], BINCODE).hex() == '020000000000000001000200'
    assert wire_type.to_bytes([1, 2], BCS).hex() == '0201000200'
    assert wire_type.from_bytes(bytes.fromhex('0201000200'), BCS) == [1, 2]
    with pytest.raises(ValueError):
        wire_type.check_value([1, 2**16])


def test_list_truncated_and_trailing() -> None:
    wire_type = make_wire_type(list[u16])
    with pytest.raises(OutOfDataError):
        wire_type.from_bytes(bytes.fromhex('03010002'), BCS)
    with pytest.raises(TrailingDataError):
        wire_type.from_bytes(bytes.fromhex('0001'), BCS)


def test_fixed_size_tuple() -> None:
    wire_type = make_wire_type(tuple[u8, str, bool])
    assert isinstance(wire_type, TupleWireType)
    data = wire_type.to_bytes((1, 'a', False), BCS)
    assert data.hex() == '01' '0161' '00'
    assert wire_type.from_bytes(data, BCS) == (1, 'a', False)
    with pytest.raises(TypeError):
        wire_type.check_value((1, 'a'))


def test_fixed_array() -> None:
    wire_type = make_wire_type(tuple[u8, u8, u8, u8])
    assert wire_type.to_bytes((1, 2, 3, 4), BINCODE).hex() == '01020304'


def test_variable_size_tuple() -> None:
    wire_type = make_wire_type(tuple[u8, ...])
    assert wire_type.to_bytes((1, 2, 3), BCS).hex() == '03010203'
    assert wire_type.from_bytes(bytes.fromhex('03010203'), BCS) == (1, 2, 3)


def test_dict() -> None:
    wire_type = make_wire_type(dict[str, u8])
    assert wire_type.to_bytes({'b': 1, 'a': 2}, BCS).hex() == '02' '016102' '016201'
    assert wire_type.from_bytes(bytes.fromhex('02016102016201'), BCS) == {'a': 2, 'b': 1}


def test_dict_key_must_be_hashable() -> None:
    with pytest.raises(TypeError, match='not hashable'):
        make_wire_type(dict[list[u8], u8])


def test_enum() -> None:
    wire_type = make_wire_type(Color)
    assert isinstance(wire_type, EnumWireType)
    assert wire_type.to_bytes(Color.BLUE, BINCODE).hex() == '02000000'
    assert wire_type.to_bytes(Color.BLUE, BCS).hex() == '02'
    assert wire_type.from_bytes(b'\x01', BCS) is Color.GREEN
    with pytest.raises(MalformedDataError, match='unknown variant index 3'):
        wire_type.from_bytes(b'\x03', BCS)


def test_str_enum_is_an_enum() -> None:
    wire_type = make_wire_type(Mood)
    assert isinstance(wire_type, EnumWireType)
    assert wire_type.to_bytes(Mood.GRUMPY, BCS) == b'\x01'
    with pytest.raises(TypeError):
        wire_type.check_value('grumpy')


def test_nested_containers() -> None:
    wire_type = make_wire_type(dict[u8, list[Optional[str]]])
    value = {1: ['a', None]}
    data = wire_type.to_bytes(value, BCS)
    assert data.hex() == '01' '01' '02' '010161' '00'
    assert wire_type.from_bytes(data, BCS) == value


def test_deep_check() -> None:
    wire_type = make_wire_type(list[list[u8]])
    wire_type.check_value([[1], []])
    with pytest.raises(TypeError):
        wire_type.check_value([[1], ['a']])


def test_direct_instantiation() -> None:
    wire_type = Uint8WireType()
    assert wire_type.to_bytes(3) == b'\x03'
    assert wire_type.is_hashable()
    assert not make_wire_type(list[u8]).is_hashable()
