"""Tests for the EBPL command line interface."""

import io
import json

import pytest

from ebpl.cli import build_parser, main
from ebpl.cli.errors import CLIFileNotFoundError, format_cli_error


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every CLI test from an empty directory without config files."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("EBPL_LOG_LEVEL", raising=False)
    monkeypatch.delenv("EBPL_VERBOSE", raising=False)
    monkeypatch.delenv("EBPL_DEBUG", raising=False)


def test_compile_prints_output_trace(source_file, capsys):
    main(["compile", str(source_file)])

    assert capsys.readouterr().out == "15\n"


def test_compile_code_flag(source_file, capsys):
    main(["compile", str(source_file), "--code"])

    out = capsys.readouterr().out
    assert out.startswith("#!/usr/bin/env python3\n# Generated from EBPL\n")
    assert "print((a + b))" in out
    assert not out.rstrip().endswith("15")


def test_compile_code_and_run(source_file, capsys):
    main(["compile", str(source_file), "--code", "--run"])

    assert capsys.readouterr().out.rstrip().endswith("15")


def test_compile_tokens_flag(source_file, capsys):
    main(["compile", str(source_file), "--tokens"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "CREATE" + " " * 14 + " -> 'create' (line 1)"
    assert len(lines) == 16


def test_compile_json(source_file, capsys):
    main(["compile", str(source_file), "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["success"] is True
    assert payload["executionOutput"] == "15"


def test_compile_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('print "piped"\n'))

    main(["compile", "-"])

    assert capsys.readouterr().out == "piped\n"


def test_syntax_error_exits_with_one(tmp_path, capsys):
    bad = tmp_path / "bad.ebpl"
    bad.write_text("create variable x\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["compile", str(bad)])

    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "CLI_COMPILE_ERROR" in err
    assert "Expected WITH, got NEWLINE at line 1" in err


def test_syntax_error_json_still_prints_result(tmp_path, capsys):
    bad = tmp_path / "bad.ebpl"
    bad.write_text("print\n", encoding="utf-8")

    with pytest.raises(SystemExit):
        main(["compile", str(bad), "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["success"] is False
    assert payload["errors"] == [payload["error"]]


def test_missing_file_exits_with_two(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["compile", "does-not-exist.ebpl"])

    assert exc_info.value.code == 2
    assert "CLI_FILE_NOT_FOUND" in capsys.readouterr().err


def test_examples_listing(capsys):
    main(["examples"])

    out = capsys.readouterr().out
    assert "Basic Syntax:" in out
    assert "hello-world" in out
    assert "calculator" in out


def test_example_source(capsys):
    main(["examples", "hello-world"])

    assert capsys.readouterr().out == 'print "Hello, EBPL World!"\n'


def test_example_run(capsys):
    main(["examples", "basic-math", "--run"])

    assert capsys.readouterr().out == "15\n5\n50\n2\n"


def test_unknown_example_exits_with_two(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["examples", "nope"])

    assert exc_info.value.code == 2


def test_invalid_config_exits_with_two(tmp_path, source_file, capsys):
    (tmp_path / "ebpl.toml").write_text('[compiler]\nlog_level = "loud"\n', encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["compile", str(source_file)])

    assert exc_info.value.code == 2
    assert "CLI_CONFIG_ERROR" in capsys.readouterr().err


def test_non_object_rc_file_exits_with_two(tmp_path, source_file, capsys):
    (tmp_path / ".ebplrc").write_text("[]", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["compile", str(source_file)])

    assert exc_info.value.code == 2
    assert "Configuration must be a JSON object" in capsys.readouterr().err


def test_config_header_is_used(tmp_path, source_file, capsys):
    (tmp_path / "ebpl.toml").write_text(
        '[compiler]\nheader_lines = ["# from config"]\n', encoding="utf-8"
    )

    main(["compile", str(source_file), "--code"])

    assert capsys.readouterr().out.startswith("# from config\n")


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 2
    assert "usage: ebpl" in capsys.readouterr().out


def test_serve_defaults():
    args = build_parser().parse_args(["serve"])

    assert args.host == "127.0.0.1"
    assert args.port == 8000


def test_format_cli_error_with_hint():
    error = CLIFileNotFoundError("No such file: a.ebpl", hint="Check the path")

    assert format_cli_error(error) == (
        "Error [CLI_FILE_NOT_FOUND]: No such file: a.ebpl\nHint: Check the path"
    )
