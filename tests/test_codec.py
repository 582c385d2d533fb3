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

from concurrent.futures import ThreadPoolExecutor

import pytest

from shared_types import BCS, BINCODE, PLAIN, NullInputError, Record, deserialize, serialize
from shared_types.primitives import u32
from shared_types.wire_types import make_wire_type


class Counter(Record):
    name: str
    count: u32


def test_type_defaults_to_the_value_class() -> None:
    counter = Counter(name='a', count=u32(2))
    assert serialize(counter, fmt=BCS) == serialize(counter, Counter, fmt=BCS)
    assert serialize(counter, fmt=BCS).hex() == '0161' '02000000'


def test_wire_type_instance_is_accepted() -> None:
    wire_type = make_wire_type(list[u32])
    data = serialize([7], wire_type, fmt=BINCODE)
    assert data.hex() == '0100000000000000' '07000000'
    assert deserialize(data, wire_type, fmt=BINCODE) == [7]


def test_plain_format() -> None:
    counter = Counter(name='a', count=u32(2))
    data = serialize(counter, fmt=PLAIN)
    assert data.hex() == '0161' '02000000'
    assert deserialize(data, Counter, fmt=PLAIN) == counter


def test_mismatched_value() -> None:
    with pytest.raises(TypeError):
        serialize('a', list[u32], fmt=BCS)
    with pytest.raises(ValueError):
        serialize([2**32], list[u32], fmt=BCS)


def test_null_input_is_checked_first() -> None:
    with pytest.raises(NullInputError):
        deserialize(None, make_wire_type(None), fmt=BCS)


def test_accepts_any_buffer() -> None:
    data = Counter(name='a', count=u32(2)).bcs_serialize()
    assert deserialize(bytearray(data), Counter, fmt=BCS) == deserialize(memoryview(data), Counter, fmt=BCS)


def test_concurrent_calls_do_not_share_state() -> None:
    counters = [Counter(name=str(i), count=u32(i)) for i in range(200)]

    def round_trip(counter: Counter) -> Counter:
        return Counter.bcs_deserialize(counter.bcs_serialize())

    with ThreadPoolExecutor(max_workers=8) as executor:
        assert list(executor.map(round_trip, counters)) == counters
