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

from pathlib import Path

import pytest
from pydantic import ValidationError

from shared_types import BCS, BINCODE, PLAIN, Record, deserialize, serialize
from shared_types.conf import DEFAULT_SETTINGS_FILEPATH, UNITTESTS_SETTINGS_FILEPATH, get_settings
from shared_types.conf.get_settings import (
    CONFIG_YAML_ENV_VAR,
    get_global_settings,
    get_settings_source,
    load_yaml_settings,
)
from shared_types.conf.settings import SerdeSettings
from shared_types.serialization.adapters import InputTooLongError, OutputTooLongError
from shared_types.utils.dict import deep_merge
from shared_types.utils.yaml import dict_from_extended_yaml, dict_from_yaml


class Note(Record):
    text: str


def _write(path: Path, contents: str) -> str:
    path.write_text(contents)
    return str(path)


def test_default_settings() -> None:
    settings = load_yaml_settings(DEFAULT_SETTINGS_FILEPATH)
    assert settings == SerdeSettings()
    assert settings.max_container_depth(BINCODE) == 500
    assert settings.max_container_depth(BCS) == 500
    assert settings.max_container_depth(PLAIN) is None
    assert settings.MAX_INPUT_BYTES is None
    assert settings.MAX_OUTPUT_BYTES is None


def test_unittests_settings_extend_default() -> None:
    settings = load_yaml_settings(UNITTESTS_SETTINGS_FILEPATH)
    assert settings.BINCODE_MAX_CONTAINER_DEPTH == 64
    assert settings.BCS_MAX_CONTAINER_DEPTH == 64
    assert settings.MAX_INPUT_BYTES is None


def test_extends_bundled_default(tmp_path: Path) -> None:
    filepath = _write(tmp_path / 'small.yml', 'extends: default.yml\nMAX_INPUT_BYTES: 16\n')
    settings = load_yaml_settings(filepath)
    assert settings.MAX_INPUT_BYTES == 16
    assert settings.BCS_MAX_CONTAINER_DEPTH == 500


def test_extends_relative_file(tmp_path: Path) -> None:
    _write(tmp_path / 'base.yml', 'BCS_MAX_CONTAINER_DEPTH: 8\nBINCODE_MAX_CONTAINER_DEPTH: 8\n')
    filepath = _write(tmp_path / 'child.yml', 'extends: base.yml\nBCS_MAX_CONTAINER_DEPTH: 4\n')
    assert dict_from_extended_yaml(filepath=filepath) == dict(BCS_MAX_CONTAINER_DEPTH=4, BINCODE_MAX_CONTAINER_DEPTH=8)


def test_recursive_extends(tmp_path: Path) -> None:
    filepath = _write(tmp_path / 'loop.yml', 'extends: loop.yml\n')
    with pytest.raises(ValueError, match='recursive extensions'):
        dict_from_extended_yaml(filepath=filepath)


def test_invalid_yaml_files(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match='is not a file'):
        dict_from_yaml(filepath=tmp_path / 'missing.yml')
    assert dict_from_yaml(filepath=_write(tmp_path / 'empty.yml', '')) == {}
    with pytest.raises(ValueError, match='cannot be parsed as a dictionary'):
        dict_from_yaml(filepath=_write(tmp_path / 'number.yml', '42\n'))


@pytest.mark.parametrize('contents', [
    'UNKNOWN_KEY: 1\n',
    'BCS_MAX_CONTAINER_DEPTH: -1\n',
    'MAX_INPUT_BYTES: 0\n',
])
def test_invalid_settings(tmp_path: Path, contents: str) -> None:
    filepath = _write(tmp_path / 'invalid.yml', contents)
    with pytest.raises(ValidationError):
        load_yaml_settings(filepath)


def test_settings_are_frozen() -> None:
    settings = SerdeSettings()
    with pytest.raises(ValidationError):
        settings.MAX_INPUT_BYTES = 10  # type: ignore[misc]


def test_global_settings_singleton(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, UNITTESTS_SETTINGS_FILEPATH)
    settings = get_global_settings()
    assert get_global_settings() is settings
    assert get_settings_source() == UNITTESTS_SETTINGS_FILEPATH

    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, _write(tmp_path / 'other.yml', 'extends: default.yml\n'))
    with pytest.raises(Exception, match='loading config twice with a different file'):
        get_global_settings()


def test_settings_source_requires_loading(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    with pytest.raises(AssertionError):
        get_settings_source()


def test_max_input_bytes() -> None:
    settings = SerdeSettings(MAX_INPUT_BYTES=4)
    note = Note(text='meow')
    data = serialize(note, fmt=BCS)
    assert len(data) == 5
    with pytest.raises(InputTooLongError):
        deserialize(data, Note, fmt=BCS, settings=settings)
    assert deserialize(Note(text='mew').bcs_serialize(), Note, fmt=BCS, settings=settings) == Note(text='mew')


def test_max_output_bytes() -> None:
    settings = SerdeSettings(MAX_OUTPUT_BYTES=8)
    assert serialize(Note(text=''), fmt=BINCODE, settings=settings) == bytes(8)
    with pytest.raises(OutputTooLongError):
        serialize(Note(text='meow'), fmt=BINCODE, settings=settings)


def test_deep_merge() -> None:
    base = dict(a=1, b=dict(c=2, d=3))
    merged = deep_merge(base, dict(b=dict(d=4, e=5), f=6))
    assert merged == dict(a=1, b=dict(c=2, d=4, e=5), f=6)
    assert base == dict(a=1, b=dict(c=2, d=3))
