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

from typing import Optional

from pydantic import NonNegativeInt, PositiveInt

from shared_types.serialization.consts import DEFAULT_MAX_CONTAINER_DEPTH
from shared_types.serialization.formats import BCS, BINCODE, WireFormat
from shared_types.utils import pydantic


class SerdeSettings(pydantic.BaseModel):
    # Maximum container depth used by bincode serializers and deserializers
    BINCODE_MAX_CONTAINER_DEPTH: NonNegativeInt = DEFAULT_MAX_CONTAINER_DEPTH

    # Maximum container depth used by BCS serializers and deserializers
    BCS_MAX_CONTAINER_DEPTH: NonNegativeInt = DEFAULT_MAX_CONTAINER_DEPTH

    # Inputs larger than this are rejected before they are read, None for no limit
    MAX_INPUT_BYTES: Optional[PositiveInt] = None

    # Serialization fails as soon as the output would grow larger than this, None for no limit
    MAX_OUTPUT_BYTES: Optional[PositiveInt] = None

    def max_container_depth(self, wire_format: WireFormat) -> Optional[int]:
        """ The configured maximum depth for the given format, the plain format has no limit.
        """
        if wire_format.name == BINCODE.name:
            return self.BINCODE_MAX_CONTAINER_DEPTH
        if wire_format.name == BCS.name:
            return self.BCS_MAX_CONTAINER_DEPTH
        return None
