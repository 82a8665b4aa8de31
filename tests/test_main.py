import pytest

from argkit.__main__ import main
from argkit.cli import EXIT_DEFINITION_ERROR, EXIT_OK, EXIT_PARSE_ERROR

DEFINITION = """\
description: Find duplicate files.
args:
  - name: verbose
    short: V
    kind: boolean
    help: verbose execution
  - name: json
    kind: boolean
  - name: path
    short: f
    required: true
    help: Directory to examine
"""


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr("argkit.__main__.setup_logging", lambda **kwargs: None)


@pytest.fixture
def definition(tmp_path):
    path = tmp_path / "dupes.yaml"
    path.write_text(DEFINITION, encoding="UTF-8")
    return str(path)


def test_main_without_definition_prints_usage(capsys):
    assert main(["argkit"]) == EXIT_DEFINITION_ERROR
    captured = capsys.readouterr()
    assert "Usage: argkit DEFINITION [ARGS...]" in captured.err
    assert captured.out == ""


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_main_help(flag, capsys):
    assert main(["/usr/local/bin/argkit", flag]) == EXIT_OK
    captured = capsys.readouterr()
    assert "Usage: argkit DEFINITION [ARGS...]" in captured.out


def test_main_renders_values(definition, capsys):
    assert main(["argkit", definition, "-V", "--path", "/tmp"]) == EXIT_OK
    output = capsys.readouterr().out
    assert "dupes" in output
    assert "-V, --verbose" in output
    assert "true" in output
    assert "'/tmp'" in output
    assert "absent" in output


def test_main_parse_error_exits(definition, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["argkit", definition, "--bogus"])
    assert exc_info.value.code == EXIT_PARSE_ERROR
    err = capsys.readouterr().err
    assert "Unrecognized argument '--bogus'" in err
    assert "Usage: dupes [options] --path <PATH>" in err


def test_main_forwards_help(definition, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["argkit", definition, "--help"])
    assert exc_info.value.code == EXIT_OK
    output = capsys.readouterr().out
    assert "Find duplicate files." in output
    assert "Print this help message" in output


def test_main_missing_definition(tmp_path, capsys):
    missing = str(tmp_path / "missing.yaml")
    assert main(["argkit", missing]) == EXIT_DEFINITION_ERROR
    assert "No such definition file" in capsys.readouterr().err


def test_main_conflicting_definition(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("args:\n  - name: help\n    kind: boolean\n", encoding="UTF-8")
    assert main(["argkit", str(path)]) == EXIT_DEFINITION_ERROR
    assert "reserved" in capsys.readouterr().err


def test_main_undecodable_definition(tmp_path, capsys):
    path = tmp_path / "binary.yaml"
    path.write_bytes(b"\xff\xfe\x00")
    assert main(["argkit", str(path)]) == EXIT_DEFINITION_ERROR
    assert "Could not read" in capsys.readouterr().err
