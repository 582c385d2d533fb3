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
Top-level entry points: encode a value into bytes and decode bytes back into a value.

Each call builds its own serializer or deserializer, so concurrent calls never share state. The limits (maximum
container depth and input/output size) come from the global settings unless given explicitly.

>>> from shared_types.primitives import u32
>>> serialize([1, 2], list[u32], fmt=BINCODE).hex()
'02000000000000000100000002000000'
>>> deserialize(bytes.fromhex('02000000000000000100000002000000'), list[u32], fmt=BINCODE)
[1, 2]

Decoding requires the input to be present and to be consumed completely:

>>> try:
...     deserialize(None, list[u32], fmt=BINCODE)
... except NullInputError as e:
...     print(*e.args)
cannot deserialize null input
>>> try:
...     deserialize(bytes.fromhex('0000000000000000ff'), list[u32], fmt=BINCODE)
... except TrailingDataError as e:
...     print(*e.args)
trailing data: 1 bytes were not read
"""

from typing import Any, Optional, TypeVar, overload

from structlog import get_logger

from shared_types.conf.get_settings import get_global_settings
from shared_types.conf.settings import SerdeSettings
from shared_types.serialization import (
    DeserializationDepthError,
    DeserializationError,
    Deserializer,
    NullInputError,
    SerializationDepthError,
    SerializationError,
    Serializer,
    TrailingDataError,
)
from shared_types.serialization.adapters import InputTooLongError
from shared_types.serialization.formats import BCS, BINCODE, WireFormat
from shared_types.serialization.types import Buffer
from shared_types.wire_types import WireType, make_wire_type

logger = get_logger()

T = TypeVar('T')

# XXX: each container level takes several Python frames, so a high maximum depth may need a higher recursion limit
_RECURSION_LIMIT_MESSAGE = 'exceeded the interpreter recursion limit before the maximum container depth'

__all__ = [
    'BCS',
    'BINCODE',
    'deserialize',
    'serialize',
]


def _resolve_wire_type(type_: Any) -> WireType[Any]:
    if isinstance(type_, WireType):
        return type_
    return make_wire_type(type_)


@overload
def serialize(value: T, type_: type[T], /, *, fmt: WireFormat, settings: Optional[SerdeSettings] = None) -> bytes:
    ...


@overload
def serialize(value: Any, type_: None = None, /, *, fmt: WireFormat, settings: Optional[SerdeSettings] = None) -> bytes:
    ...


def serialize(value: Any, type_: Any = None, /, *, fmt: WireFormat, settings: Optional[SerdeSettings] = None) -> bytes:
    """ Encode `value` according to the annotation `type_` (or a `WireType`).

    When `type_` is not given the class of the value is used, which is what records need.

    Only resource-level failures are raised: `SerializationError` when a configured limit is exceeded. Values that
    don't match `type_` raise `TypeError` or `ValueError` before anything is returned.
    """
    if settings is None:
        settings = get_global_settings()
    wire_type = _resolve_wire_type(type(value) if type_ is None else type_)
    serializer = Serializer.build_bytes_serializer(fmt, max_container_depth=settings.max_container_depth(fmt))
    try:
        sink = serializer.with_optional_max_bytes(settings.MAX_OUTPUT_BYTES)
        wire_type.serialize(sink, value)
    except SerializationError as e:
        logger.debug('serialization failed', format=fmt.name, error=str(e))
        raise
    except RecursionError as e:
        logger.debug('serialization failed', format=fmt.name, error='recursion limit')
        raise SerializationDepthError(_RECURSION_LIMIT_MESSAGE) from e
    return bytes(serializer.finalize())


def deserialize(
    data: Optional[Buffer],
    type_: type[T],
    /,
    *,
    fmt: WireFormat,
    settings: Optional[SerdeSettings] = None,
) -> T:
    """ Decode a value of type `type_` (or a `WireType`) that must take exactly all of `data`.

    Every failure is a `DeserializationError`, no partial value is ever returned:

    - `NullInputError` when `data` is None, checked before anything is read;
    - `OutOfDataError` when the input ends before the value is complete;
    - `TrailingDataError` when bytes are left after the value;
    - `MalformedDataError` (and subclasses) when the bytes do not represent a valid value;
    - `DeserializationDepthError` when records/enums are nested deeper than the configured maximum.
    """
    if data is None:
        raise NullInputError('cannot deserialize null input')
    if settings is None:
        settings = get_global_settings()
    if settings.MAX_INPUT_BYTES is not None and len(data) > settings.MAX_INPUT_BYTES:
        raise InputTooLongError(f'input exceeds the maximum of {settings.MAX_INPUT_BYTES} bytes')
    wire_type = _resolve_wire_type(type_)
    deserializer = Deserializer.build_bytes_deserializer(
        data,
        fmt,
        max_container_depth=settings.max_container_depth(fmt),
    )
    try:
        value = wire_type.deserialize(deserializer)
        deserializer.finalize()
    except DeserializationError as e:
        logger.debug('deserialization failed', format=fmt.name, error=str(e), size=len(data))
        raise
    except RecursionError as e:
        logger.debug('deserialization failed', format=fmt.name, error='recursion limit', size=len(data))
        raise DeserializationDepthError(_RECURSION_LIMIT_MESSAGE) from e
    return value
