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

from shared_types.codec import deserialize, serialize
from shared_types.exception import ConstructionError, InvalidShapeError, MissingFieldError
from shared_types.record import Record, RecordBuilder, Variant
from shared_types.serialization import (
    DeserializationDepthError,
    DeserializationError,
    IncompleteValueError,
    MalformedDataError,
    NullInputError,
    OutOfDataError,
    SerdeError,
    SerializationDepthError,
    SerializationError,
    TrailingDataError,
)
from shared_types.serialization.formats import BCS, BINCODE, PLAIN
from shared_types.version import __version__

__all__ = [
    'BCS',
    'BINCODE',
    'PLAIN',
    'ConstructionError',
    'DeserializationDepthError',
    'DeserializationError',
    'IncompleteValueError',
    'InvalidShapeError',
    'MalformedDataError',
    'MissingFieldError',
    'NullInputError',
    'OutOfDataError',
    'Record',
    'RecordBuilder',
    'SerdeError',
    'SerializationDepthError',
    'SerializationError',
    'TrailingDataError',
    'Variant',
    'deserialize',
    'serialize',
    '__version__',
]
