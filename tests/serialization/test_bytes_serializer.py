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

import unittest

from shared_types.serialization import Deserializer, OutOfDataError, Serializer, TrailingDataError
from shared_types.serialization.adapters import (
    InputTooLongError,
    MaxBytesDeserializer,
    MaxBytesSerializer,
    OutputTooLongError,
)
from shared_types.serialization.formats import BCS, BINCODE, PLAIN


class BytesSerializerTestCase(unittest.TestCase):
    def test_writes_are_joined_on_finalize(self) -> None:
        serializer = Serializer.build_bytes_serializer()
        serializer.write_byte(0x01)
        serializer.write_bytes(b'\x02\x03')
        serializer.write_struct((4,), '<H')
        self.assertEqual(serializer.cur_pos(), 5)
        self.assertEqual(bytes(serializer.finalize()), b'\x01\x02\x03\x04\x00')

    def test_write_byte_range(self) -> None:
        serializer = Serializer.build_bytes_serializer()
        with self.assertRaises(OverflowError):
            serializer.write_byte(256)

    def test_default_wire_format_is_plain(self) -> None:
        self.assertIs(Serializer.build_bytes_serializer().wire_format, PLAIN)
        self.assertIs(Serializer.build_bytes_serializer(BCS).wire_format, BCS)
        self.assertIs(Deserializer.build_bytes_deserializer(b'', BINCODE).wire_format, BINCODE)

    def test_max_bytes_serializer(self) -> None:
        serializer = Serializer.build_bytes_serializer(BINCODE)
        limited = serializer.with_max_bytes(4)
        self.assertIsInstance(limited, MaxBytesSerializer)
        self.assertIs(limited.wire_format, BINCODE)
        limited.write_bytes(b'abc')
        limited.write_byte(0x64)
        with self.assertRaises(OutputTooLongError):
            limited.write_byte(0x65)

    def test_optional_max_bytes(self) -> None:
        serializer = Serializer.build_bytes_serializer()
        self.assertIs(serializer.with_optional_max_bytes(None), serializer)
        self.assertIsInstance(serializer.with_optional_max_bytes(10), MaxBytesSerializer)


class BytesDeserializerTestCase(unittest.TestCase):
    def test_reads_and_peeks(self) -> None:
        deserializer = Deserializer.build_bytes_deserializer(b'\x01\x02\x03\x04\x00')
        self.assertEqual(deserializer.peek_byte(), 1)
        self.assertEqual(deserializer.read_byte(), 1)
        self.assertEqual(bytes(deserializer.peek_bytes(2)), b'\x02\x03')
        self.assertEqual(bytes(deserializer.read_bytes(2)), b'\x02\x03')
        self.assertEqual(deserializer.cur_pos(), 3)
        self.assertEqual(deserializer.read_struct('<H'), (4,))
        self.assertTrue(deserializer.is_empty())
        deserializer.finalize()

    def test_consumed_since(self) -> None:
        deserializer = Deserializer.build_bytes_deserializer(b'abcdef')
        deserializer.read_bytes(2)
        start = deserializer.cur_pos()
        deserializer.read_bytes(3)
        self.assertEqual(bytes(deserializer.consumed_since(start)), b'cde')

    def test_out_of_data(self) -> None:
        deserializer = Deserializer.build_bytes_deserializer(b'\x01')
        with self.assertRaises(OutOfDataError):
            deserializer.read_bytes(2)
        with self.assertRaises(OutOfDataError):
            deserializer.read_struct('<I')
        deserializer.read_byte()
        with self.assertRaises(OutOfDataError):
            deserializer.read_byte()

    def test_inexact_read(self) -> None:
        deserializer = Deserializer.build_bytes_deserializer(b'\x01\x02')
        self.assertEqual(bytes(deserializer.read_bytes(10, exact=False)), b'\x01\x02')
        deserializer.finalize()

    def test_read_all(self) -> None:
        deserializer = Deserializer.build_bytes_deserializer(b'\x01\x02\x03')
        deserializer.read_byte()
        self.assertEqual(bytes(deserializer.read_all()), b'\x02\x03')
        deserializer.finalize()

    def test_trailing_data(self) -> None:
        deserializer = Deserializer.build_bytes_deserializer(b'\x01\x02\x03')
        deserializer.read_byte()
        with self.assertRaises(TrailingDataError) as cm:
            deserializer.finalize()
        self.assertEqual(str(cm.exception), 'trailing data: 2 bytes were not read')

    def test_struct_errors_are_not_leaked(self) -> None:
        deserializer = Deserializer.build_bytes_deserializer(b'\x01\x02')
        with self.assertRaises(OutOfDataError):
            deserializer.read_struct('<d')
        self.assertEqual(deserializer.cur_pos(), 0)

    def test_max_bytes_deserializer(self) -> None:
        deserializer = Deserializer.build_bytes_deserializer(b'abcdef', BCS)
        limited = deserializer.with_max_bytes(3)
        self.assertIsInstance(limited, MaxBytesDeserializer)
        self.assertIs(limited.wire_format, BCS)
        self.assertEqual(bytes(limited.read_bytes(3)), b'abc')
        with self.assertRaises(InputTooLongError):
            limited.read_byte()
