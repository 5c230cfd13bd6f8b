"""Tests for CLI interface."""

import json
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from src.resultkit.cli import get_number, main, run_demo
from src.resultkit.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestCLI:
    def test_demo_success_path(self, capsys: pytest.CaptureFixture[str]) -> None:
        run_demo(fail=False, default=100)
        data = json.loads(capsys.readouterr().out)
        assert data["number"] == {"ok": 10}
        assert data["bridged"] == {"ok": 10}
        assert data["chained"] == 20
        assert data["recovered"] == 10
        assert data["message"] == "hello world"

    def test_demo_failure_path(self, capsys: pytest.CaptureFixture[str]) -> None:
        run_demo(fail=True, default=7)
        data = json.loads(capsys.readouterr().out)
        assert data["number"] == {"err": "foo"}
        assert data["bridged"] == {"err": "ValueError: boom"}
        assert data["chained"] == 7
        assert data["recovered"] == 3

    def test_get_number(self) -> None:
        assert get_number().unwrap() == 10
        assert isinstance(get_number(fail=True).unwrap_err(), ValueError)

    def test_main_no_args(self) -> None:
        with pytest.raises(SystemExit) as exc:
            with patch("sys.argv", ["resultkit"]):
                main()
        assert exc.value.code == 1

    def test_main_invalid_log_level(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("RESULTKIT_LOG_LEVEL", "verbose")
        with pytest.raises(SystemExit) as exc:
            with patch("sys.argv", ["resultkit", "demo"]):
                main()
        assert exc.value.code == 1
        assert "invalid settings" in capsys.readouterr().out

    def test_main_demo(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("sys.argv", ["resultkit", "demo", "--fail", "--default", "5"]):
            main()
        data = json.loads(capsys.readouterr().out)
        assert data["chained"] == 5
