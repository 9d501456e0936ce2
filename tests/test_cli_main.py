"""Tests for CLI argument parsing and top-level CLI behavior."""

import json
import sys
from pathlib import Path

import pytest

import main as cli_main


def _run_main(monkeypatch: pytest.MonkeyPatch, args: list[str]) -> int:
    """Run CLI entrypoint with a mocked argv."""
    monkeypatch.setattr(sys, "argv", ["main.py", *args])
    return cli_main.main()


def test_missing_required_path_argument_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify argparse exits when --path is missing."""
    with pytest.raises(SystemExit) as exc_info:
        _run_main(monkeypatch, [])

    assert exc_info.value.code == 2


def test_invalid_path_returns_graceful_error(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
) -> None:
    """Verify invalid scan path returns exit code 1 with clear stderr message."""
    invalid_path = tmp_path / "not-found"

    exit_code = _run_main(monkeypatch, ["--path", str(invalid_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "path does not exist" in captured.err


def test_file_path_returns_graceful_error(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
) -> None:
    """Verify a file passed as --path is rejected with exit code 1."""
    file_path = tmp_path / "card.ui_patterns.yml"
    file_path.write_text("", encoding="utf-8")

    exit_code = _run_main(monkeypatch, ["--path", str(file_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "path is not a directory" in captured.err


def test_json_output_from_cli_is_parseable(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
) -> None:
    """Verify --format json prints valid JSON payload."""
    (tmp_path / "card.ui_patterns.yml").write_text("card: {}\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored\n", encoding="utf-8")

    exit_code = _run_main(monkeypatch, ["--path", str(tmp_path), "--format", "json"])
    captured = capsys.readouterr()
    payload = json.loads(captured.out)

    assert exit_code == 0
    assert payload["summary"]["discovered_files"] == 1
    assert "duration_ms" in payload["summary"]
    assert payload["files"][0]["filename"] == "card.ui_patterns.yml"
    assert payload["files"][0]["name"] == "card.ui_patterns"


def test_extension_and_ignore_dir_options(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
) -> None:
    """Verify repeated --extension and --ignore-dir options shape the scan."""
    for relative in ["a.yml", "b.yaml", "c.txt", "vendor/d.yml", "tests/e.yml"]:
        file_path = tmp_path / relative
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text("", encoding="utf-8")

    exit_code = _run_main(
        monkeypatch,
        [
            "--path",
            str(tmp_path),
            "--format",
            "json",
            "--extension",
            ".yml",
            "--extension",
            ".yaml",
            "--ignore-dir",
            "vendor",
        ],
    )
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert sorted(item["filename"] for item in payload["files"]) == ["a.yml", "b.yaml"]


def test_output_file_is_written(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
) -> None:
    """Verify --output writes the rendered result to disk."""
    scan_root = tmp_path / "site"
    scan_root.mkdir()
    (scan_root / "card.ui_patterns.yml").write_text("", encoding="utf-8")
    output_path = tmp_path / "result.json"

    exit_code = _run_main(
        monkeypatch,
        ["--path", str(scan_root), "--format", "json", "--output", str(output_path)],
    )
    capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["summary"]["discovered_files"] == 1
