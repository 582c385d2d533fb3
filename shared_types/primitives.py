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

"""
Markers for primitive widths that Python types don't carry.

Plain `int` and `float` have no size, so record fields that hold numbers must be annotated with one of these markers.
They are `NewType`s: at runtime a `u8` is just an `int`, only the annotation decides how it's written.

>>> from shared_types.record import Record
>>> class Pixel(Record):
...     x: u16
...     y: u16
...     alpha: f32
>>> Pixel(x=u16(3), y=u16(4), alpha=f32(0.5)).bincode_serialize().hex()
'030004000000003f'

A plain `float` annotation is accepted as `f64`, a plain `int` is not accepted at all.
"""

from typing import NewType

u8 = NewType('u8', int)
u16 = NewType('u16', int)
u32 = NewType('u32', int)
u64 = NewType('u64', int)
u128 = NewType('u128', int)

i8 = NewType('i8', int)
i16 = NewType('i16', int)
i32 = NewType('i32', int)
i64 = NewType('i64', int)
i128 = NewType('i128', int)

f32 = NewType('f32', float)
f64 = NewType('f64', float)

__all__ = [
    'f32',
    'f64',
    'i8',
    'i16',
    'i32',
    'i64',
    'i128',
    'u8',
    'u16',
    'u32',
    'u64',
    'u128',
]
