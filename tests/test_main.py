import io
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from tictactoe.main import main

ROOT = Path(__file__).resolve().parents[1]


def test_main_plays_to_the_end(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{i}\n" for i in range(9))))
    assert main() == 0
    out = capsys.readouterr().out.rstrip("\n").splitlines()
    assert out[0] == " 0 | 1 | 2 "
    assert out[-1] in ("You win!", "Computer wins!", "It's a draw!")


def test_main_closed_stdin(monkeypatch, caplog):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with caplog.at_level(logging.ERROR):
        assert main() == 1
    assert "Failed to read input" in caplog.text


def test_main_output_failure_propagates(monkeypatch, caplog):
    def broken_game():
        raise BrokenPipeError("stdout gone")

    monkeypatch.setattr("tictactoe.main.run_game", broken_game)
    with pytest.raises(BrokenPipeError):
        main()
    assert "Failed to read input" not in caplog.text


def test_module_entry_point():
    r = subprocess.run(
        [sys.executable, "-m", "tictactoe"],
        input="0\n1\n2\n3\n4\n5\n6\n7\n8\n",
        capture_output=True,
        text=True,
        cwd=ROOT,
        env={**os.environ, "PYTHONPATH": str(ROOT / "src")},
    )
    assert r.returncode == 0
    assert r.stdout.rstrip().splitlines()[-1] in ("You win!", "Computer wins!", "It's a draw!")


def test_module_entry_point_eof():
    r = subprocess.run(
        [sys.executable, "-m", "tictactoe"],
        input="",
        capture_output=True,
        text=True,
        cwd=ROOT,
        env={**os.environ, "PYTHONPATH": str(ROOT / "src")},
    )
    assert r.returncode == 1
    assert "[ERROR] Failed to read input" in r.stderr
