import json
from pathlib import Path

import pytest
import yaml

from filepath import cli


def test_cli_parse_text(capsys) -> None:
    cli.main(["parse", "/a/b/c/", "a", "", "//", "/ /"])
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["/a/b/c/", "a", "/", "/", "/ /"]


def test_cli_parse_json(capsys) -> None:
    cli.main(["--quiet", "parse", "/a", "--format", "json"])
    data = json.loads(capsys.readouterr().out)
    assert data == [
        {
            "input": "/a",
            "render": "/a",
            "names": ["", "a"],
            "structure": {"directory": "", "next": {"file": "a"}},
        }
    ]


def test_cli_parse_yaml(capsys) -> None:
    cli.main(["--quiet", "parse", "a/b/", "-f", "yaml"])
    data = yaml.safe_load(capsys.readouterr().out)
    assert data[0]["render"] == "a/b/"
    assert data[0]["names"] == ["a", "b"]
    assert data[0]["structure"] == {
        "directory": "a",
        "next": {"directory": "b", "next": None},
    }


def test_cli_render_document(tmp_path: Path, capsys) -> None:
    doc = tmp_path / "paths.yaml"
    doc.write_text(
        "paths:\n"
        "  - /usr/local/bin/\n"
        "  - directory: etc\n"
        "    next:\n"
        "      file: hosts\n"
    )
    cli.main(["--quiet", "render", str(doc)])
    assert capsys.readouterr().out.splitlines() == ["/usr/local/bin/", "etc/hosts"]


def test_cli_render_document_json(tmp_path: Path, capsys) -> None:
    doc = tmp_path / "paths.yaml"
    doc.write_text("paths: [notes.txt]\n")
    cli.main(["--quiet", "render", str(doc), "--format", "json"])
    data = json.loads(capsys.readouterr().out)
    assert data == [
        {"render": "notes.txt", "names": ["notes.txt"], "structure": {"file": "notes.txt"}}
    ]


def test_cli_render_missing_file(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--quiet", "render", str(tmp_path / "missing.yaml")])
    assert exc_info.value.code == 1
    assert "not found" in capsys.readouterr().out


def test_cli_render_invalid_document(tmp_path: Path, capsys) -> None:
    doc = tmp_path / "bad.yaml"
    doc.write_text("paths:\n  - folder: a\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--quiet", "render", str(doc)])
    assert exc_info.value.code == 1
    out = capsys.readouterr().out
    assert "Failed to load paths document" in out
    assert "ValidationError" in out


def test_cli_inspect(capsys) -> None:
    cli.main(["inspect", "/ /"])
    out = capsys.readouterr().out
    assert "Rendered: '/ /'" in out
    assert "Depth:    2" in out
    assert "Absolute: True" in out
    assert "directory" in out
    assert "' '" in out


def test_cli_no_args_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: filepath" in capsys.readouterr().out


def test_cli_unknown_format_rejected() -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["parse", "a", "--format", "xml"])
    assert exc_info.value.code == 2


def test_cli_render_json_at_default_log_level(tmp_path: Path, capsys) -> None:
    doc = tmp_path / "paths.yaml"
    doc.write_text("paths: [/etc/, a/b]\n")
    cli.main(["render", str(doc), "--format", "json"])
    data = json.loads(capsys.readouterr().out)
    assert [r["render"] for r in data] == ["/etc/", "a/b"]


def test_cli_render_logs_to_stderr_not_stdout(tmp_path: Path, capsys, caplog) -> None:
    doc = tmp_path / "paths.yaml"
    doc.write_text("paths: [a]\n")
    cli.main(["--log-level", "info", "render", str(doc)])
    assert capsys.readouterr().out == "a\n"
    assert any("Loading paths from" in r.getMessage() for r in caplog.records)


def test_cli_render_missing_file_is_logged(tmp_path: Path, caplog) -> None:
    missing = tmp_path / "missing.yaml"
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--quiet", "render", str(missing)])
    assert exc_info.value.code == 1
    assert any(
        r.levelname == "ERROR" and "not found" in r.getMessage()
        for r in caplog.records
    )


def test_cli_render_self_referencing_document(tmp_path: Path, capsys) -> None:
    doc = tmp_path / "cyclic.yaml"
    doc.write_text("paths: [&a {directory: x, next: *a}]\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--quiet", "render", str(doc)])
    assert exc_info.value.code == 1
    out = capsys.readouterr().out
    assert "Failed to load paths document" in out
    assert "ValueError" in out
