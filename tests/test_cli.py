"""Tests for the command line interface."""

import io
import sys

import pytest

from nfasim.cli import FILE_ERROR_MESSAGE, main


@pytest.fixture
def token_file(tmp_path):
    path = tmp_path / "tokens.txt"
    path.write_text("000 # 12x3 #  # 2", encoding="utf-8")
    return path


class TestMain:
    def test_runs_tokens(self, token_file, capsys):
        assert main([str(token_file), "--no-table"]) == 0
        out = capsys.readouterr().out
        assert "Transition table:" not in out
        assert "Reading token: 000" in out
        assert "Reading token: 12x3" in out
        assert "Reading token: 2" in out
        assert "Automaton doesn't accept symbol: x" in out
        assert out.count("Final automaton state:") == 3

    def test_prints_table(self, token_file, capsys):
        assert main([str(token_file), "--preset", "five-state"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Transition table:\n+")
        assert "|       δ|" in out
        assert "Final automaton state: q1 (rejecting)" in out

    def test_prompts_for_path(self, token_file, capsys, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO(f"{token_file}\n"))
        assert main(["--no-table"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Please enter file path: ")
        assert "Reading token: 000" in out

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt"), "--no-table"]) == 1
        assert FILE_ERROR_MESSAGE in capsys.readouterr().out

    def test_blank_separator(self, token_file, capsys):
        assert main([str(token_file), "--separator", " "]) == 1
        assert "separator" in capsys.readouterr().err

    def test_custom_separator(self, tmp_path, capsys):
        path = tmp_path / "tokens.txt"
        path.write_text("000;111", encoding="utf-8")
        assert main([str(path), "--no-table", "--separator", ";"]) == 0
        assert capsys.readouterr().out.count("(accepting)") == 2

    def test_unknown_preset_exits(self, token_file):
        with pytest.raises(SystemExit):
            main([str(token_file), "--preset", "three-state"])
