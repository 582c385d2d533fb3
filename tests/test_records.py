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

import sys
from collections.abc import Iterator
from enum import Enum
from typing import Optional

import pytest

from shared_types import (
    BCS,
    BINCODE,
    ConstructionError,
    DeserializationDepthError,
    InvalidShapeError,
    MalformedDataError,
    MissingFieldError,
    Record,
    SerializationDepthError,
    Variant,
    deserialize,
    serialize,
)
from shared_types.conf.settings import SerdeSettings
from shared_types.primitives import f32, i16, u8, u32, u64
from shared_types.serialization import UnknownVariantError


class Size(Enum):
    SMALL = 1
    LARGE = 2


class Thumbnail(Record):
    width: u32
    height: u32


class Gallery(Record):
    title: str
    size: Size
    thumbnail: Optional[Thumbnail]
    tags: list[str]
    likes: dict[str, u64]
    rating: f32


class Shape(Variant):
    pass


class Point(Shape):
    pass


class Circle(Shape):
    radius: float


class Rectangle(Shape):
    width: i16
    height: i16


class Drawing(Record):
    shapes: list[Shape]
    highlight: Optional[Circle]


class Tree(Record):
    value: u8
    children: list[Tree]


class Expr(Variant):
    pass


class Literal(Expr):
    value: i16


class Neg(Expr):
    inner: Expr


@pytest.fixture
def deep_recursion() -> Iterator[None]:
    # XXX: every nested record takes a few Python frames, the default limit is hit before the maximum depth of 500
    old_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(10_000)
    yield
    sys.setrecursionlimit(old_limit)


def make_gallery() -> Gallery:
    return Gallery(
        title='cats',
        size=Size.LARGE,
        thumbnail=Thumbnail(width=u32(16), height=u32(9)),
        tags=['cute', 'fluffy'],
        likes={'ana': u64(2), 'bob': u64(1)},
        rating=f32(4.5),
    )


def chain(depth: int) -> Tree:
    tree = Tree(value=u8(0), children=[])
    for i in range(1, depth):
        tree = Tree(value=u8(i % 256), children=[tree])
    return tree


@pytest.mark.parametrize('fmt', [BINCODE, BCS])
def test_compound_record_round_trip(fmt) -> None:
    gallery = make_gallery()
    assert deserialize(serialize(gallery, fmt=fmt), Gallery, fmt=fmt) == gallery


def test_compound_record_bcs_layout() -> None:
    gallery = make_gallery()
    assert gallery.bcs_serialize().hex() == (
        '04' '63617473'  # title
        '01'  # size
        '01' '10000000' '09000000'  # thumbnail
        '02' '0463757465' '06666c75666679'  # tags
        '02' '03616e61' '0200000000000000' '03626f62' '0100000000000000'  # likes
        '00009040'  # rating
    )


def test_optional_field_accepts_none() -> None:
    gallery = Gallery(title='', size=Size.SMALL, thumbnail=None, tags=[], likes={}, rating=f32(0.0))
    assert Gallery.bincode_deserialize(gallery.bincode_serialize()) == gallery
    assert gallery.bcs_serialize().hex() == '00' '00' '00' '00' '00' '00000000'


def test_field_values_are_deep_checked() -> None:
    with pytest.raises(ConstructionError, match='Gallery.tags'):
        Gallery(title='', size=Size.SMALL, thumbnail=None, tags=['a', 1], likes={}, rating=f32(0.0))
    with pytest.raises(ConstructionError, match='Thumbnail.width'):
        Thumbnail(width=u32(-1), height=u32(0))
    with pytest.raises(MissingFieldError):
        Gallery(title='', size=None, thumbnail=None, tags=[], likes={}, rating=f32(0.0))


def test_inexact_f32_field_is_rejected() -> None:
    with pytest.raises(ConstructionError, match='Gallery.rating'):
        Gallery(title='', size=Size.SMALL, thumbnail=None, tags=[], likes={}, rating=f32(0.1))


@pytest.mark.parametrize('fmt', [BINCODE, BCS])
def test_f32_field_round_trips_exactly(fmt) -> None:
    # the f32 nearest to 0.1, written out exactly
    rating = f32(0.100000001490116119384765625)
    gallery = Gallery(title='', size=Size.SMALL, thumbnail=None, tags=[], likes={}, rating=rating)
    decoded = deserialize(serialize(gallery, fmt=fmt), Gallery, fmt=fmt)
    assert decoded == gallery
    assert decoded.rating == gallery.rating


def test_records_with_lists_are_not_hashable() -> None:
    gallery = make_gallery()
    assert gallery == make_gallery()
    with pytest.raises(TypeError):
        hash(gallery)


def test_records_of_different_classes_are_not_equal() -> None:
    assert Point() != Circle(radius=0.0)
    assert Rectangle(width=i16(1), height=i16(2)) != Rectangle(width=i16(2), height=i16(1))


def test_variant_indexes() -> None:
    assert Shape.VARIANTS == (Point, Circle, Rectangle)
    assert [variant.VARIANT_INDEX for variant in Shape.VARIANTS] == [0, 1, 2]
    assert Circle.variant_root() is Shape


@pytest.mark.parametrize('shape,bincode_hex,bcs_hex', [
    (Point(), '00000000', '00'),
    (Circle(radius=1.0), '01000000000000000000f03f', '01000000000000f03f'),
    (Rectangle(width=i16(-1), height=i16(2)), '02000000ffff0200', '02ffff0200'),
])
def test_variant_layout(shape: Shape, bincode_hex: str, bcs_hex: str) -> None:
    assert shape.bincode_serialize().hex() == bincode_hex
    assert shape.bcs_serialize().hex() == bcs_hex
    assert deserialize(bytes.fromhex(bcs_hex), Shape, fmt=BCS) == shape
    assert deserialize(bytes.fromhex(bincode_hex), Shape, fmt=BINCODE) == shape


def test_variant_class_as_type() -> None:
    assert Circle.bcs_deserialize(bytes.fromhex('01000000000000f03f')) == Circle(radius=1.0)
    with pytest.raises(MalformedDataError, match='expected variant Circle, got Point'):
        Circle.bcs_deserialize(bytes.fromhex('00'))


def test_unknown_variant() -> None:
    with pytest.raises(UnknownVariantError):
        deserialize(bytes.fromhex('03'), Shape, fmt=BCS)


def test_enum_root_cannot_be_instantiated() -> None:
    with pytest.raises(ConstructionError):
        Shape()


def test_variant_shape_rules() -> None:
    with pytest.raises(InvalidShapeError):
        class Animal(Variant):
            name: str

    with pytest.raises(InvalidShapeError):
        class Square(Rectangle):
            pass


def test_record_containing_variants() -> None:
    drawing = Drawing(shapes=[Point(), Circle(radius=2.0)], highlight=Circle(radius=3.0))
    data = drawing.bcs_serialize()
    assert Drawing.bcs_deserialize(data) == drawing
    with pytest.raises(ConstructionError):
        Drawing(shapes=[], highlight=Point())  # type: ignore[arg-type]


def test_recursive_record() -> None:
    tree = Tree(value=u8(1), children=[Tree(value=u8(2), children=[]), Tree(value=u8(3), children=[])])
    assert tree.bcs_serialize().hex() == '01' '02' '0200' '0300'
    assert Tree.bcs_deserialize(tree.bcs_serialize()) == tree


def test_recursive_variant() -> None:
    expr = Neg(inner=Neg(inner=Literal(value=i16(7))))
    assert expr.bcs_serialize().hex() == '01' '01' '00' '0700'
    assert deserialize(expr.bcs_serialize(), Expr, fmt=BCS) == expr


@pytest.mark.parametrize('fmt', [BINCODE, BCS])
def test_depth_limit(fmt) -> None:
    settings = SerdeSettings(BINCODE_MAX_CONTAINER_DEPTH=10, BCS_MAX_CONTAINER_DEPTH=10)

    data = serialize(chain(10), fmt=fmt, settings=settings)
    assert deserialize(data, Tree, fmt=fmt, settings=settings) == chain(10)

    with pytest.raises(SerializationDepthError):
        serialize(chain(11), fmt=fmt, settings=settings)

    unlimited = SerdeSettings(BINCODE_MAX_CONTAINER_DEPTH=100, BCS_MAX_CONTAINER_DEPTH=100)
    data = serialize(chain(11), fmt=fmt, settings=unlimited)
    with pytest.raises(DeserializationDepthError):
        deserialize(data, Tree, fmt=fmt, settings=settings)


def test_variant_depth_counts_once() -> None:
    settings = SerdeSettings(BCS_MAX_CONTAINER_DEPTH=3)
    expr = Neg(inner=Neg(inner=Literal(value=i16(7))))
    data = serialize(expr, fmt=BCS, settings=settings)
    assert deserialize(data, Expr, fmt=BCS, settings=settings) == expr
    with pytest.raises(SerializationDepthError):
        serialize(Neg(inner=expr), fmt=BCS, settings=settings)


def test_default_depth_limit(deep_recursion: None) -> None:
    deep = chain(600)
    with pytest.raises(SerializationDepthError, match='500'):
        serialize(deep, fmt=BCS, settings=SerdeSettings())


def test_hostile_depth_on_read(deep_recursion: None) -> None:
    # 1000 nested trees, each one with a single child, only the last one is empty
    data = bytes.fromhex('0001') * 999 + bytes.fromhex('0000')
    with pytest.raises(DeserializationDepthError):
        deserialize(data, Tree, fmt=BCS, settings=SerdeSettings())


def test_recursion_limit_is_a_depth_error() -> None:
    old_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(300)
    try:
        with pytest.raises(SerializationDepthError, match='recursion limit'):
            serialize(chain(150), fmt=BCS, settings=SerdeSettings())
    finally:
        sys.setrecursionlimit(old_limit)
