"""Tests for the src.main command-line entry point."""

import json
from unittest.mock import MagicMock

import pytest

from config.settings import settings
from src import main
from src.main import run


class TestGenerate:
    def test_prints_count_ids(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["generate", "--count", "3", "--node-id", "9"]) == 0
        lines = capsys.readouterr().out.split()
        assert len(lines) == 3
        values = [int(x) for x in lines]
        assert values == sorted(values)
        assert len(set(values)) == 3
        assert all((v >> 12) & 0x3FF == 9 for v in values)

    def test_bad_node_id_exits_1(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["generate", "--node-id", "5000"]) == 1
        assert "node_id must be between 0 and 1023" in capsys.readouterr().err


class TestDecode:
    def test_outputs_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["decode", "4097", "8194"]) == 0
        rows = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        assert [(r["node_id"], r["sequence"]) for r in rows] == [(1, 1), (2, 2)]
        assert rows[0]["id_str"] == "4097"

    def test_invalid_id_exits_1(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["decode", "nope"]) == 1
        assert "not a decimal integer" in capsys.readouterr().err

    def test_overlong_id_exits_1(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["decode", "1" * 5000]) == 1
        assert "longer than 20 digits" in capsys.readouterr().err


class TestStrictFlag:
    @pytest.fixture
    def generator_cls(self, monkeypatch: pytest.MonkeyPatch) -> MagicMock:
        cls = MagicMock()
        cls.return_value.allocate.return_value = 1
        monkeypatch.setattr(main, "FlakeGenerator", cls)
        return cls

    def test_no_strict_overrides_settings(
        self, generator_cls: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(settings, "FLAKE_STRICT_MODE", True)
        assert run(["generate", "--no-strict"]) == 0
        assert generator_cls.call_args.args[1].strict_mode is False

    def test_default_follows_settings(
        self, generator_cls: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(settings, "FLAKE_STRICT_MODE", True)
        assert run(["generate"]) == 0
        assert generator_cls.call_args.args[1].strict_mode is True

    def test_strict_flag(self, generator_cls: MagicMock) -> None:
        assert run(["generate", "--strict"]) == 0
        assert generator_cls.call_args.args[1].strict_mode is True
