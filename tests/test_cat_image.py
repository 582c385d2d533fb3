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

import dataclasses
import unittest

from shared_types import (
    BCS,
    BINCODE,
    ConstructionError,
    IncompleteValueError,
    MissingFieldError,
    NullInputError,
    OutOfDataError,
    Record,
    TrailingDataError,
    deserialize,
    serialize,
)

CAT_URL = 'https://example.com/cat.jpg'
CAT_URL_HEX = CAT_URL.encode('utf-8').hex()


class CatImage(Record):
    href: str


class CatImageTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.cat = CatImage(href=CAT_URL)

    def test_bincode_layout(self) -> None:
        data = self.cat.bincode_serialize()
        self.assertEqual(data.hex(), '1b00000000000000' + CAT_URL_HEX)
        self.assertEqual(len(data), 8 + len(CAT_URL))

    def test_bcs_layout(self) -> None:
        data = self.cat.bcs_serialize()
        self.assertEqual(data.hex(), '1b' + CAT_URL_HEX)

    def test_round_trip(self) -> None:
        self.assertEqual(CatImage.bincode_deserialize(self.cat.bincode_serialize()), self.cat)
        self.assertEqual(CatImage.bcs_deserialize(self.cat.bcs_serialize()), self.cat)
        self.assertEqual(deserialize(serialize(self.cat, fmt=BINCODE), CatImage, fmt=BINCODE), self.cat)

    def test_empty_text_round_trip(self) -> None:
        empty = CatImage(href='')
        self.assertEqual(empty.bincode_serialize(), bytes(8))
        self.assertEqual(empty.bcs_serialize(), b'\x00')
        self.assertEqual(CatImage.bincode_deserialize(bytes(8)), empty)
        self.assertEqual(CatImage.bcs_deserialize(b'\x00'), empty)

    def test_non_ascii_text_round_trip(self) -> None:
        cat = CatImage(href='https://example.com/gatão.jpg')
        self.assertEqual(CatImage.bcs_deserialize(cat.bcs_serialize()), cat)

    def test_trailing_byte(self) -> None:
        for data, deserialize_func in [
            (self.cat.bincode_serialize(), CatImage.bincode_deserialize),
            (self.cat.bcs_serialize(), CatImage.bcs_deserialize),
        ]:
            with self.assertRaises(TrailingDataError):
                deserialize_func(data + b'\x00')

    def test_truncated(self) -> None:
        for data, deserialize_func in [
            (self.cat.bincode_serialize(), CatImage.bincode_deserialize),
            (self.cat.bcs_serialize(), CatImage.bcs_deserialize),
        ]:
            with self.assertRaises(OutOfDataError):
                deserialize_func(data[:-1])
            with self.assertRaises(OutOfDataError):
                deserialize_func(b'')

    def test_null_input(self) -> None:
        with self.assertRaises(NullInputError):
            CatImage.bincode_deserialize(None)
        with self.assertRaises(NullInputError):
            CatImage.bcs_deserialize(None)

    def test_null_field(self) -> None:
        with self.assertRaises(MissingFieldError) as cm:
            CatImage(href=None)  # type: ignore[arg-type]
        self.assertEqual(str(cm.exception), 'CatImage.href cannot be None')

    def test_wrong_field_kind(self) -> None:
        with self.assertRaises(ConstructionError):
            CatImage(href=b'https://example.com/cat.jpg')  # type: ignore[arg-type]

    def test_missing_argument(self) -> None:
        with self.assertRaises(TypeError):
            CatImage()  # type: ignore[call-arg]

    def test_equality_and_hash(self) -> None:
        same = CatImage(href=CAT_URL)
        other = CatImage(href='https://example.com/dog.jpg')
        self.assertEqual(self.cat, same)
        self.assertEqual(hash(self.cat), hash(same))
        self.assertNotEqual(self.cat, other)
        self.assertEqual(len({self.cat, same, other}), 2)

    def test_frozen(self) -> None:
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.cat.href = 'https://example.com/dog.jpg'  # type: ignore[misc]

    def test_builder(self) -> None:
        builder = CatImage.builder()
        with self.assertRaises(IncompleteValueError):
            builder.build()
        with self.assertRaises(AttributeError):
            builder.set_field('src', CAT_URL)
        builder.set_field('href', CAT_URL)
        self.assertEqual(builder.build(), self.cat)

    def test_field_names(self) -> None:
        self.assertEqual(CatImage.field_names(), ('href',))

    def test_formats_do_not_mix(self) -> None:
        # the bincode length prefix is read by BCS as a length of 27 followed by zeros
        with self.assertRaises(TrailingDataError):
            deserialize(self.cat.bincode_serialize(), CatImage, fmt=BCS)
