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
Exceptions raised by the serialization system.

All of them derive from `SerdeError`. Writing failures are `SerializationError` and reading failures are
`DeserializationError`, the latter is also a `ValueError` so callers that only care about "bad input" can keep
catching `ValueError`.
"""


class SerdeError(Exception):
    """Base class for every error raised while serializing or deserializing."""


class SerializationError(SerdeError):
    """Writing to the output sink failed.

    A valid value never fails to serialize because of its content, this is only raised for resource-level failures,
    like exceeding a configured output size or container depth.
    """


class TooLongError(SerializationError):
    """A length is too big to be represented in the selected wire format."""


class DeserializationError(SerdeError, ValueError):
    """The input could not be parsed into the expected shape, no partial value is ever returned."""


class NullInputError(DeserializationError):
    """The input was `None` instead of a byte sequence."""


class OutOfDataError(DeserializationError):
    """A read requested more bytes than what is left in the input."""


class TrailingDataError(DeserializationError):
    """The top-level value was fully read but some input bytes were not consumed."""


class MalformedDataError(DeserializationError):
    """The bytes are there, but they don't represent a valid value for the expected primitive."""


class InvalidUtf8Error(MalformedDataError):
    """A text field does not contain valid UTF-8."""


class UnknownVariantError(MalformedDataError):
    """A variant index does not map to any variant of the expected enum."""


class NonCanonicalError(MalformedDataError):
    """The value is valid but not in the only encoding accepted by a canonical format."""


class IncompleteValueError(DeserializationError):
    """A record builder was finalized while some of its fields were never set."""


class ContainerDepthError(SerdeError):
    """Base class for exceeding the maximum container depth, see the side-specific subclasses."""


class SerializationDepthError(ContainerDepthError, SerializationError):
    """Exceeded the maximum container depth while writing."""


class DeserializationDepthError(ContainerDepthError, DeserializationError):
    """Exceeded the maximum container depth while reading."""
