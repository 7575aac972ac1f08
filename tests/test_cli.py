import pytest

from quizbuild.cli import build_parser, main, report
from quizbuild.errors import ShouldCompileError


def test_parser_without_subcommand():
    args = build_parser().parse_args([])
    assert args.command is None


def test_parser_serve_subcommand():
    args = build_parser().parse_args(["serve"])
    assert args.command == "serve"


def test_parser_rejects_unknown_subcommand():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(["bogus"])
    assert info.value.code == 2


def test_parser_rejects_help_subcommand():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(["help"])
    assert info.value.code == 2


def test_report_none_returns():
    assert report(None) is None


def test_report_error_exits(capsys):
    with pytest.raises(SystemExit) as info:
        report(ShouldCompileError())
    assert info.value.code == 1
    assert "ERROR: program failed to compile" in capsys.readouterr().err


def test_main_without_questions_directory_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 1
    assert "ERROR" in capsys.readouterr().err


def test_main_with_no_questions_writes_empty_script(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "questions").mkdir()
    (tmp_path / "docs").mkdir()
    result = main([])
    assert result is None
    assert "ERROR" not in capsys.readouterr().err
    text = (tmp_path / "docs" / "questions.js").read_text(encoding="utf-8")
    assert text == "var questions = {};\n"