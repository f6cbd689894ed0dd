"""Tests for the command-line entry point."""

import io
import json
import sys

import pytest

from suit_io import console
from suit_io.main import main


def run_cli(monkeypatch, *argv, stdin=""):
    monkeypatch.setattr(sys, "argv", ["suit-io", *argv])
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin))
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.mark.cli
class TestCli:
    """suit-io demo / echo."""

    def test_no_command_prints_help(self, monkeypatch, capsys):
        assert run_cli(monkeypatch) == 1
        assert "demo" in capsys.readouterr().out

    def test_demo_interactive(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "demo") == 0
        out = capsys.readouterr().out
        assert f"{console.YELLOW}Output types{console.RESET}" in out
        assert f"{console.RED}\tERROR{console.RESET}" in out
        assert f"{console.CYAN}\t--> level 2{console.RESET}" in out
        assert f"{console.WHITE}\tback to level 1{console.RESET}" in out

    def test_demo_to_file(self, monkeypatch, capsys, workdir):
        target = workdir / "out" / "demo.log"
        assert run_cli(monkeypatch, "demo", "-o", str(target)) == 0
        assert capsys.readouterr().out == ""
        text = target.read_text(encoding="utf-8")
        assert "\x1b[" not in text
        assert "[Error]ERROR\n" in text
        assert "[List]Output types\n" in text
        assert "status: ok, errors: 0[" in text

    def test_echo(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "echo", "-d", "blank", stdin="one\n\ntwo\n") == 0
        out = console.strip_ansi(capsys.readouterr().out)
        assert out == ">one\n>blank\n>two\n>3 line(s) read\n"

    def test_echo_to_file(self, monkeypatch, workdir):
        target = workdir / "echo.log"
        assert run_cli(monkeypatch, "echo", "-o", str(target), stdin="hi\n") == 0
        lines = target.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert lines[0].endswith("[AllOk]hi")
        assert lines[1].endswith("[Info]1 line(s) read")

    def test_missing_config(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "demo", "-c", "nope.json") == 1
        assert "Error: Config file not found: nope.json" in capsys.readouterr().out

    def test_invalid_config(self, monkeypatch, capsys, workdir):
        (workdir / "config.json").write_text(json.dumps({"timestamp_timespec": "never"}))
        assert run_cli(monkeypatch, "demo") == 1
        out = capsys.readouterr().out
        assert f"{console.RED}Error: Invalid config file" in out

    def test_invalid_env_setting(self, monkeypatch, capsys):
        monkeypatch.setenv("SUIT_IO_TIMESTAMP_TIMESPEC", "never")
        assert run_cli(monkeypatch, "demo") == 1
        out = capsys.readouterr().out
        assert f"{console.RED}Error: Invalid configuration" in out
        assert "timestamp_timespec" in out

    def test_invalid_log_level(self, monkeypatch, capsys):
        monkeypatch.setenv("SUIT_IO_LOG_LEVEL", "LOUD")
        assert run_cli(monkeypatch, "echo", stdin="x\n") == 1
        assert "Error: Invalid configuration" in capsys.readouterr().out

    def test_config_palette_applies(self, monkeypatch, capsys, workdir):
        (workdir / "config.json").write_text(json.dumps({"colors": {"all_ok_color": "<ok>"}}))
        assert run_cli(monkeypatch, "echo", stdin="x\n") == 0
        assert f"<ok>x{console.RESET}" in capsys.readouterr().out
