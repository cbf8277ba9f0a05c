"""
Testes da linha de comando
"""

from io import StringIO

import pytest
import run
from interpreter import INVALID_INPUT_MESSAGE


class TestCommandLine:

    def test_runs_builtin_example(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", StringIO("42\n"))
        run.main([])
        assert capsys.readouterr().out == "enter a number:\n42\n"

    def test_runs_file(self, tmp_path, capsys, monkeypatch):
        source = tmp_path / "prog.oi"
        source.write_text('in << x; out >> "x =" >> x;')
        monkeypatch.setattr("sys.stdin", StringIO("nope\n"))
        run.main([str(source)])
        captured = capsys.readouterr()
        assert captured.out == "x =\n0\n"
        assert captured.err == INVALID_INPUT_MESSAGE + "\n"

    def test_tokens_flag(self, tmp_path, capsys):
        source = tmp_path / "prog.oi"
        source.write_text('out >> "hi";')
        run.main(["--tokens", str(source)])
        lines = capsys.readouterr().out.splitlines()
        assert [line.split("\t")[1] for line in lines] == ["OUT", "GREATER_THAN", "STRING_LITERAL", "END_STATEMENT"]

    def test_syntax_error_exits(self, tmp_path, capsys):
        source = tmp_path / "bad.oi"
        source.write_text('out >> "hi"; @')
        with pytest.raises(SystemExit) as exc:
            run.main([str(source)])
        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "LexError" in captured.err

    def test_missing_file_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit):
            run.main([str(tmp_path / "missing.oi")])
        assert "missing.oi" in capsys.readouterr().err
