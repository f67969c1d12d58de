from __future__ import annotations

import warnings
from pathlib import Path

from click.testing import CliRunner
from typer.testing import CliRunner as TyperRunner

from lox.cmd.main import app
from lox.main import EX_DATAERR, main


def _script(tmp_path: Path, text: str) -> str:
    path = tmp_path / "script.lox"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_run_script_lists_tokens(tmp_path: Path):
    result = CliRunner().invoke(main, [_script(tmp_path, 'print "hi";\n')])
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "Print print",
        'String "hi" hi',
        "Semicolon ;",
        "EndOfInput",
    ]


def test_run_script_with_errors(tmp_path: Path):
    result = CliRunner().invoke(main, [_script(tmp_path, "var a = @;\nvar b = #;\n")])
    assert result.exit_code == EX_DATAERR
    assert "[line 1] Error: unexpected character '@'" in result.output
    assert "[line 2] Error: unexpected character '#'" in result.output
    assert "EndOfInput" not in result.output


def test_run_script_to_output_file(tmp_path: Path):
    out = tmp_path / "tokens.txt"
    result = CliRunner().invoke(main, [_script(tmp_path, "1 + 2"), "-o", str(out)])
    assert result.exit_code == 0
    assert out.read_text().splitlines() == [
        "Number 1 1.0",
        "Plus +",
        "Number 2 2.0",
        "EndOfInput",
    ]


def test_missing_script(tmp_path: Path):
    result = CliRunner().invoke(main, [str(tmp_path / "missing.lox")])
    assert result.exit_code != 0


def test_prompt_scans_each_line():
    result = CliRunner().invoke(main, [], input="1 + 2\n@\nnil\n")
    assert result.exit_code == 0
    assert result.output.startswith("> ")
    assert "Number 1 1.0" in result.output
    assert "[line 1] Error: unexpected character '@'" in result.output
    assert "Nil nil" in result.output


def test_tokens_command():
    result = TyperRunner().invoke(app, ["x = 1.5"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].split() == ["line", "kind", "lexeme", "literal"]
    assert lines[1].split() == ["1", "Identifier", "x", "'x'"]
    assert lines[2].split() == ["1", "Equal", "="]
    assert lines[3].split() == ["1", "Number", "1.5", "1.5"]
    assert lines[4].split() == ["2", "EndOfInput"]


def test_tokens_command_with_errors():
    result = TyperRunner().invoke(app, ['"open'])
    assert result.exit_code == EX_DATAERR
    assert "[line 1] Error: unterminated string" in result.output


def test_prompt_keeps_output_file_to_tokens(tmp_path: Path):
    out = tmp_path / "tokens.txt"
    result = CliRunner().invoke(main, ["-o", str(out)], input="1\n")
    assert result.exit_code == 0
    assert "> " in result.output
    assert out.read_text().splitlines() == ["Number 1 1.0", "EndOfInput"]


def test_script_that_is_not_utf8(tmp_path: Path):
    path = tmp_path / "binary.lox"
    path.write_bytes(b"\xff\xfe1")
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "not valid UTF-8" in result.output


def test_prompt_reads_stdin_without_deprecation_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        result = CliRunner().invoke(main, [], input="nil\n")
    assert result.exit_code == 0
    assert "Nil nil" in result.output
