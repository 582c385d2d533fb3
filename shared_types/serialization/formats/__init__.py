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
Wire formats supported by the serializers.

>>> get_wire_format('bcs') is BCS
True
>>> try:
...     get_wire_format('json')
... except ValueError as e:
...     print(*e.args)
unknown wire format: 'json'
"""

from shared_types.serialization.formats.base import PlainFormat, WireFormat
from shared_types.serialization.formats.bcs import BcsFormat
from shared_types.serialization.formats.bincode import BincodeFormat

PLAIN = PlainFormat()
BINCODE = BincodeFormat()
BCS = BcsFormat()

WIRE_FORMATS: dict[str, WireFormat] = {fmt.name: fmt for fmt in (PLAIN, BINCODE, BCS)}


def get_wire_format(name: str) -> WireFormat:
    """Look up a wire format by its name."""
    try:
        return WIRE_FORMATS[name]
    except KeyError:
        raise ValueError(f'unknown wire format: {name!r}') from None


__all__ = [
    'BCS',
    'BINCODE',
    'BcsFormat',
    'BincodeFormat',
    'PLAIN',
    'PlainFormat',
    'WIRE_FORMATS',
    'WireFormat',
    'get_wire_format',
]
