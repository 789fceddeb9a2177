"""Tests for the wildscan command line."""

import io
from pathlib import Path

import pytest

from wildscan.cli import main

DATA = Path(__file__).resolve().parent.parent / "data"


def _cases(mode):
    return sorted(p.stem for p in (DATA / mode).glob("*.in"))


def _run(monkeypatch, argv, stdin):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    main(argv)


class TestFixtureJobs:
    """Every tests/data/<mode>/*.in must produce the matching .out."""

    @pytest.mark.parametrize("case", _cases("plain"))
    def test_plain(self, case, monkeypatch, capsys):
        job = (DATA / "plain" / f"{case}.in").read_text()
        _run(monkeypatch, ["plain"], job)
        expected = (DATA / "plain" / f"{case}.out").read_text()
        assert capsys.readouterr().out == expected

    @pytest.mark.parametrize("case", _cases("wildcard"))
    def test_wildcard(self, case, monkeypatch, capsys):
        job = (DATA / "wildcard" / f"{case}.in").read_text()
        _run(monkeypatch, ["wildcard"], job)
        expected = (DATA / "wildcard" / f"{case}.out").read_text()
        assert capsys.readouterr().out == expected


class TestCliOptions:
    """Flags and error handling."""

    def test_input_file(self, capsys):
        main(["plain", "--input", str(DATA / "plain" / "classic.in")])
        assert capsys.readouterr().out == "2 3\n4 2\n5 1\n5 4\n"

    def test_dump_goes_to_stderr(self, monkeypatch, capsys):
        _run(monkeypatch, ["wildcard", "--dump"], "abc\na!bc\n?\n!\n")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Total length of pattern: 3" in captured.err
        assert "State 0:" in captured.err

    def test_plain_dump(self, monkeypatch, capsys):
        _run(monkeypatch, ["plain", "--dump"], "ab\n1\nab\n")
        captured = capsys.readouterr()
        assert captured.out == "1 1\n"
        assert "Result #0 of length 2" in captured.err

    def test_malformed_pattern_exits_2(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, ["wildcard"], "abc\nab!\n?\n!\n")
        assert exc.value.code == 2
        assert "no operand" in capsys.readouterr().err

    def test_bad_job_exits_2(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, ["plain"], "abc\nmany\n")
        assert exc.value.code == 2
        assert capsys.readouterr().err.startswith("error:")

    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 0
        assert "wildscan" in capsys.readouterr().out
