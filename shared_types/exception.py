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
Errors raised when building values, as opposed to the ones raised while (de)serializing them, which live in
`shared_types.serialization.exceptions`.
"""


class ConstructionError(TypeError):
    """A record was constructed with a field value that does not fit the field's declared type."""


class MissingFieldError(ConstructionError):
    """A record was constructed with `None` for a field that cannot be absent."""


class InvalidShapeError(TypeError):
    """A class or annotation cannot be mapped to a wire layout."""
