"""Tests for the wheel-picker command line."""

import json
import sys
from pathlib import Path

import pytest
from PIL import Image
from wheel_picker.__main__ import main


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from a repo root with no .env and no WHEEL_* overrides."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    for key in ('WHEEL_SIZE', 'WHEEL_CENTRE', 'WHEEL_SWEEP'):
        monkeypatch.setenv(key, '')
        monkeypatch.delenv(key)


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> None:
    monkeypatch.setattr(sys, 'argv', ['wheel-picker', *argv])
    main()


class TestRender:
    def test_writes_png(self, tmp_path: Path, monkeypatch, capsys) -> None:
        out = tmp_path / 'wheel.png'
        _run(monkeypatch, 'render', str(out), '--size', '32')
        img = Image.open(out)
        assert img.format == 'PNG'
        assert img.size == (32, 32)
        text = capsys.readouterr().out
        assert 'sweep=hsv' in text
        assert 'gaps=0' in text

    def test_json(self, tmp_path: Path, monkeypatch, capsys) -> None:
        out = tmp_path / 'wheel.png'
        _run(monkeypatch, 'render', str(out), '-s', '24', '-c', '#808080', '--sweep', 'cursor', '--json')
        obj = json.loads(capsys.readouterr().out)
        assert obj['size'] == 24
        assert obj['centre_hex'] == '#808080'
        assert obj['sweep'] == 'cursor'
        assert obj['image'] == str(out)

    def test_size_from_dotenv(self, tmp_path: Path, monkeypatch, capsys) -> None:
        (tmp_path / '.env').write_text('WHEEL_SIZE=20\n')
        out = tmp_path / 'wheel.png'
        _run(monkeypatch, 'render', str(out))
        assert Image.open(out).size == (20, 20)
        assert 'loaded' in capsys.readouterr().err

    def test_flag_beats_env(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv('WHEEL_SIZE', '20')
        out = tmp_path / 'wheel.png'
        _run(monkeypatch, 'render', str(out), '--size', '16')
        assert Image.open(out).size == (16, 16)

    def test_zero_size_exits(self, tmp_path: Path, monkeypatch, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, 'render', str(tmp_path / 'wheel.png'), '--size', '0')
        assert exc.value.code == 1
        assert 'must be positive' in capsys.readouterr().err

    def test_unknown_sweep_exits(self, tmp_path: Path, monkeypatch, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, 'render', str(tmp_path / 'wheel.png'), '--sweep', 'plasma')
        assert exc.value.code == 1
        assert 'unknown sweep' in capsys.readouterr().err


class TestPick:
    def test_centre(self, monkeypatch, capsys) -> None:
        _run(monkeypatch, 'pick', '16', '16', '--size', '32')
        assert capsys.readouterr().out.strip() == '#ffffff'

    def test_outside(self, monkeypatch, capsys) -> None:
        _run(monkeypatch, 'pick', '100', '100', '--size', '32')
        assert capsys.readouterr().out.strip() == '#000000'

    def test_nan_coordinate(self, monkeypatch, capsys) -> None:
        _run(monkeypatch, 'pick', 'nan', '5', '--size', '32')
        assert capsys.readouterr().out.strip() == '#000000'


class TestHelp:
    def test_lists_sweeps(self, monkeypatch, capsys) -> None:
        _run(monkeypatch, 'sweeps')
        out = capsys.readouterr().out
        assert 'cursor' in out
        assert 'hsv' in out

    def test_sweep_docs(self, monkeypatch, capsys) -> None:
        _run(monkeypatch, 'help', 'cursor')
        assert 'Tri-state hue cursor' in capsys.readouterr().out

    def test_unknown(self, monkeypatch) -> None:
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, 'help', 'plasma')
        assert exc.value.code == 1

    def test_no_command(self, monkeypatch) -> None:
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch)
        assert exc.value.code == 1
