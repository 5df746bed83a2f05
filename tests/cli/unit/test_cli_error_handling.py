"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from collection_migrator.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["plan"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--session" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["plan", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_domain_error_is_printed_without_traceback(tmp_path: Path, capsys) -> None:
    exit_code = main(["plan", "--session", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Edit session file not found" in captured.err
    assert "Traceback" not in captured.err


def test_open_session_requires_exactly_one_source(tmp_path: Path, capsys) -> None:
    exit_code = main(["session", "open", "--output", str(tmp_path / "session.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "exactly one of --descriptor or --new" in captured.err


def test_out_of_range_field_index_is_reported(tmp_path: Path, capsys) -> None:
    session_path = tmp_path / "session.yaml"
    assert main(["session", "open", "--new", "posts", "--output", str(session_path)]) == 0
    capsys.readouterr()

    exit_code = main(["field", "rename", "--session", str(session_path), "5", "title"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "No field entry at index 5" in captured.err
