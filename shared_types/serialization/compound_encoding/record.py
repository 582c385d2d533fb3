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

r"""
A record is a fixed sequence of named fields, written in declaration order with no framing and no field names.

The record itself is a container: the depth is increased before its first field and decreased after its last one, so
a record nested inside a record is two levels deep.

When reading, every decoded field is handed to a builder, which is finalized once all fields were read.

>>> from types import SimpleNamespace
>>> from shared_types.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from shared_types.serialization.encoding.bool import encode_bool, decode_bool
>>> se = Serializer.build_bytes_serializer()
>>> encode_record(se, SimpleNamespace(href='cat.jpg', cute=True), [('href', encode_utf8), ('cute', encode_bool)])
>>> bytes(se.finalize()).hex()
'076361742e6a706701'

>>> class DictBuilder:
...     def __init__(self):
...         self.fields = {}
...     def set_field(self, name, value):
...         self.fields[name] = value
...     def build(self):
...         return self.fields
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('076361742e6a706701'))
>>> decode_record(de, [('href', decode_utf8), ('cute', decode_bool)], DictBuilder())
{'href': 'cat.jpg', 'cute': True}
>>> de.finalize()

A maximum container depth of zero refuses any record:

>>> from shared_types.serialization import SerializationError
>>> se = Serializer.build_bytes_serializer(max_container_depth=0)
>>> try:
...     encode_record(se, SimpleNamespace(href='cat.jpg'), [('href', encode_utf8)])
... except SerializationError as e:
...     print(*e.args)
exceeded maximum container depth of 0
"""

from collections.abc import Iterable
from typing import Any, Protocol, TypeVar

from shared_types.serialization import Deserializer, Serializer

from . import Decoder, Encoder

R_co = TypeVar('R_co', covariant=True)
R = TypeVar('R')


class FieldBuilder(Protocol[R_co]):
    """Collects decoded fields by name and produces the finished value."""

    def set_field(self, name: str, value: Any, /) -> None:
        ...

    def build(self) -> R_co:
        ...


def encode_fields(serializer: Serializer, value: Any, fields: Iterable[tuple[str, Encoder[Any]]]) -> None:
    """Write the fields of `value` in order, without counting a container level."""
    for name, encoder in fields:
        encoder(serializer, getattr(value, name))


def _read_fields(
    deserializer: Deserializer,
    fields: Iterable[tuple[str, Decoder[Any]]],
    builder: FieldBuilder[Any],
) -> None:
    for name, decoder in fields:
        builder.set_field(name, decoder(deserializer))


def decode_fields(
    deserializer: Deserializer,
    fields: Iterable[tuple[str, Decoder[Any]]],
    builder: FieldBuilder[R],
) -> R:
    """Read fields in order into `builder`, without counting a container level."""
    _read_fields(deserializer, fields, builder)
    return builder.build()


def encode_record(serializer: Serializer, value: Any, fields: Iterable[tuple[str, Encoder[Any]]]) -> None:
    serializer.increase_container_depth()
    encode_fields(serializer, value, fields)
    serializer.decrease_container_depth()


def decode_record(
    deserializer: Deserializer,
    fields: Iterable[tuple[str, Decoder[Any]]],
    builder: FieldBuilder[R],
) -> R:
    deserializer.increase_container_depth()
    _read_fields(deserializer, fields, builder)
    deserializer.decrease_container_depth()
    return builder.build()
