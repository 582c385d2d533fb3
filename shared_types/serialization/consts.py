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

# bincode writes lengths as an u64, but a length must also fit in a signed 64-bit integer on the other side
BINCODE_MAX_LENGTH: int = (1 << 63) - 1

# BCS writes lengths as an ULEB128-encoded u32, and restricts them further to 31 bits
BCS_MAX_LENGTH: int = (1 << 31) - 1

MAX_U32: int = (1 << 32) - 1

# used by both formats unless overridden by the settings
DEFAULT_MAX_CONTAINER_DEPTH: int = 500
