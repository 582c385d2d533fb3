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
Records are immutable values with a fixed list of typed fields, the unit of (de)serialization.

A subclass of `Record` becomes a frozen dataclass, its annotations are the wire layout:

>>> class CatImage(Record):
...     href: str
>>> cat = CatImage(href='https://example.com/cat.jpg')
>>> cat.bincode_serialize().hex()
'1b0000000000000068747470733a2f2f6578616d706c652e636f6d2f6361742e6a7067'
>>> CatImage.bincode_deserialize(cat.bincode_serialize()) == cat
True

Every field is checked when the record is built, `None` is only accepted by optional fields:

>>> try:
...     CatImage(href=None)
... except TypeError as e:
...     print(*e.args)
CatImage.href cannot be None

A `Variant` is a closed set of alternatives: a direct subclass is the enum root, and each subclass of the root is one
of its variants, numbered in declaration order:

>>> class Shape(Variant):
...     pass
>>> class Point(Shape):
...     pass
>>> class Circle(Shape):
...     radius: float
>>> Circle.VARIANT_INDEX
1
>>> Circle(radius=1.0).bcs_serialize().hex()
'01000000000000f03f'
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from typing_extensions import Self, dataclass_transform

from shared_types.exception import ConstructionError, InvalidShapeError
from shared_types.serialization import IncompleteValueError, MalformedDataError

if TYPE_CHECKING:
    from shared_types.wire_types.record_wire_type import RecordWireType

R = TypeVar('R', bound='Record')


@dataclass_transform(frozen_default=True)
class Record:
    """ Base class for records, subclasses are turned into frozen dataclasses.

    Equality and hashing are field-wise, in declaration order, and two records of different classes are never equal.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        dataclasses.dataclass(frozen=True)(cls)

    def __post_init__(self) -> None:
        type(self).wire_type().check_fields(self)

    @classmethod
    def wire_type(cls) -> RecordWireType[Self]:
        """The wire type of this class, resolved from its annotations on first use."""
        from shared_types.wire_types import make_record_wire_type
        return make_record_wire_type(cls)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(field.name for field in dataclasses.fields(cls))  # type: ignore[arg-type]

    @classmethod
    def builder(cls) -> RecordBuilder[Self]:
        return RecordBuilder(cls, cls.field_names())

    def bincode_serialize(self) -> bytes:
        from shared_types.codec import serialize
        from shared_types.serialization.formats import BINCODE
        return serialize(self, fmt=BINCODE)

    @classmethod
    def bincode_deserialize(cls, data: bytes | None) -> Self:
        from shared_types.codec import deserialize
        from shared_types.serialization.formats import BINCODE
        return deserialize(data, cls, fmt=BINCODE)

    def bcs_serialize(self) -> bytes:
        from shared_types.codec import serialize
        from shared_types.serialization.formats import BCS
        return serialize(self, fmt=BCS)

    @classmethod
    def bcs_deserialize(cls, data: bytes | None) -> Self:
        from shared_types.codec import deserialize
        from shared_types.serialization.formats import BCS
        return deserialize(data, cls, fmt=BCS)


class Variant(Record):
    """ Base class for closed sets of alternatives.

    A direct subclass of `Variant` is an enum root: it can't declare fields and can't be instantiated. Each direct
    subclass of a root is a variant, it's a regular record whose position in `VARIANTS` is written before its fields.
    """

    # set on each enum root
    VARIANTS: ClassVar[tuple[type[Variant], ...]]
    # set on each variant
    VARIANT_INDEX: ClassVar[int]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if Variant in cls.__bases__:
            if dataclasses.fields(cls):  # type: ignore[arg-type]
                raise InvalidShapeError(f'enum root {cls.__name__} cannot declare fields')
            cls.VARIANTS = ()
            return
        root = cls.variant_root()
        if cls.__bases__ != (root,):
            raise InvalidShapeError(f'variant {cls.__name__} must directly subclass its enum root {root.__name__}')
        cls.VARIANT_INDEX = len(root.VARIANTS)
        root.VARIANTS = (*root.VARIANTS, cls)

    def __post_init__(self) -> None:
        if Variant in type(self).__bases__:
            raise ConstructionError(f'{type(self).__name__} is an enum root, instantiate one of its variants')
        super().__post_init__()

    @classmethod
    def variant_root(cls) -> type[Variant]:
        for base in cls.__mro__:
            if Variant in base.__bases__:
                return base
        raise TypeError('Variant itself has no root')


class RecordBuilder(Generic[R]):
    """ Staging area where fields are collected while a record is being read.

    It's the only place where a field may be unset. `build` refuses to produce a record unless every field was set.

    >>> class CatImage(Record):
    ...     href: str
    >>> builder = CatImage.builder()
    >>> try:
    ...     builder.build()
    ... except IncompleteValueError as e:
    ...     print(*e.args)
    CatImage is missing fields: href
    >>> builder.set_field('href', 'cat.jpg')
    >>> builder.build()
    CatImage(href='cat.jpg')
    """

    __slots__ = ('_record_class', '_field_names', '_values')

    def __init__(self, record_class: type[R], field_names: tuple[str, ...]) -> None:
        self._record_class = record_class
        self._field_names = field_names
        self._values: dict[str, Any] = {}

    def set_field(self, name: str, value: Any, /) -> None:
        if name not in self._field_names:
            raise AttributeError(f'{self._record_class.__name__} has no field {name!r}')
        self._values[name] = value

    def build(self) -> R:
        missing = [name for name in self._field_names if name not in self._values]
        if missing:
            raise IncompleteValueError(f'{self._record_class.__name__} is missing fields: {", ".join(missing)}')
        try:
            return self._record_class(**self._values)
        except ConstructionError as e:
            raise MalformedDataError(f'invalid {self._record_class.__name__}: {e}') from e
