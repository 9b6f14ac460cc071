"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from expectation_matchers.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["check", "200"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--allowed" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["check", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_allowed_file_is_reported_without_traceback(tmp_path: Path, capsys) -> None:
    exit_code = main(["check", "--allowed", str(tmp_path / "missing.yaml"), "1"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Allowed-values file not found" in captured.err
    assert "Traceback" not in captured.err


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    existing = tmp_path / "allowed.yaml"
    existing.write_text("sets: {}\n", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(existing)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
