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

import io
import json
import sys

import pytest

from shared_types import Record, Variant
from shared_types.cli.main import CliManager, main
from shared_types.primitives import u16

CAT_URL = 'https://example.com/cat.jpg'


class CatImage(Record):
    href: str


class Command(Variant):
    pass


class Move(Command):
    dx: u16
    dy: u16


class Stop(Command):
    pass


def _shape(name: str) -> str:
    return f'{__name__}:{name}'


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, 'argv', ['shared-types', *args, '--disable-logs'])
    return CliManager().execute_from_command_line()


def test_help(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, 'argv', ['shared-types'])
    assert CliManager().execute_from_command_line() == 0
    output = capsys.readouterr().out
    assert 'Available subcommands:' in output
    for cmd in ('encode', 'decode', 'show_settings'):
        assert cmd in output


def test_unknown_command(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(monkeypatch, 'compress') == -1
    assert 'Unknown command: "compress"' in capsys.readouterr().out


def test_encode(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    value = json.dumps({'href': CAT_URL})
    assert _run(monkeypatch, 'encode', _shape('CatImage'), value, '--format', 'bcs') == 0
    assert capsys.readouterr().out.strip() == '1b' + CAT_URL.encode().hex()

    assert _run(monkeypatch, 'encode', _shape('CatImage'), value) == 0
    assert capsys.readouterr().out.strip() == '1b00000000000000' + CAT_URL.encode().hex()


def test_encode_from_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, 'stdin', io.StringIO('{"Move": {"dx": 1, "dy": 2}}'))
    assert _run(monkeypatch, 'encode', _shape('Command'), '--format', 'bcs') == 0
    assert capsys.readouterr().out.strip() == '0001000200'


def test_encode_invalid_value(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(monkeypatch, 'encode', _shape('CatImage'), '{"href": 1}') == 1
    assert 'invalid value' in capsys.readouterr().err
    assert _run(monkeypatch, 'encode', _shape('CatImage'), 'not json') == 1


def test_decode(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    data = CatImage(href=CAT_URL).bcs_serialize().hex()
    assert _run(monkeypatch, 'decode', _shape('CatImage'), data, '--format', 'bcs') == 0
    assert json.loads(capsys.readouterr().out) == {'href': CAT_URL}

    assert _run(monkeypatch, 'decode', _shape('Command'), '01000000', '--format', 'bincode') == 0
    assert json.loads(capsys.readouterr().out) == {'Stop': {}}


def test_decode_errors(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    data = CatImage(href=CAT_URL).bcs_serialize().hex()
    assert _run(monkeypatch, 'decode', _shape('CatImage'), data + '00', '--format', 'bcs') == 1
    assert 'TrailingDataError' in capsys.readouterr().err

    assert _run(monkeypatch, 'decode', _shape('CatImage'), data[:-2], '--format', 'bcs') == 1
    assert 'OutOfDataError' in capsys.readouterr().err

    assert _run(monkeypatch, 'decode', _shape('CatImage'), 'zz') == 1
    assert 'invalid hex input' in capsys.readouterr().err


def test_invalid_shape(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, 'decode', 'CatImage', '00')
    assert exc_info.value.code == 2
    assert 'expected module:name' in capsys.readouterr().err

    with pytest.raises(SystemExit):
        _run(monkeypatch, 'decode', _shape('Dog'), '00')
    assert 'has no attribute' in capsys.readouterr().err


def test_show_settings(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(monkeypatch, 'show_settings') == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith('source: ')
    assert json.loads(lines[1])['BCS_MAX_CONTAINER_DEPTH'] == 64


def test_main_exit_code(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, 'argv', ['shared-types', 'decode', _shape('CatImage'), '00', '--disable-logs'])
    with pytest.raises(SystemExit) as exc_info:
        main()
    assert exc_info.value.code == 1
