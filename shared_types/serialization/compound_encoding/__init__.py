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
This module was made to hold compound encoding implementations.

Compound encoders are encoders that are generic in some way and will delegate the encoding of some portion to another
encoder. For example a `value: Optional[T]` encoder is prepared to encode the tag and delegate the rest to an encoder
that knows how to encode `T`.

Container depth is tracked here: records and variants are containers, each of them counts as one level while its
contents are being written or read. Sequences, maps, optionals and tuples do not count.
"""

from typing import Protocol, TypeVar

from shared_types.serialization.deserializer import Deserializer
from shared_types.serialization.serializer import Serializer

T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)


class Decoder(Protocol[T_co]):
    def __call__(self, deserializer: Deserializer, /) -> T_co:
        ...


class Encoder(Protocol[T_contra]):
    def __call__(self, serializer: Serializer, value: T_contra, /) -> None:
        ...
