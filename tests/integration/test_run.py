"""Integration tests: countdown run bootstraps, counts down and logs one report."""

from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path

import pytest

from countdown.cli import main
from countdown.config import CONFIG_DIR_NAME, CONFIG_FILENAME, ENV_LOG_LEVEL
from countdown.report import UNSUPPORTED_TIMEZONE_WARNING


def _log_text(config_home: Path) -> str:
    return (config_home / CONFIG_DIR_NAME / "countdown.log").read_text(encoding="utf-8")


def _finished_at(out: str) -> datetime:
    line = next(l for l in out.splitlines() if l.startswith("Finished at "))
    return datetime.fromisoformat(line[len("Finished at "):])


def test_run_utc_logs_success(config_home: Path, workdir: Path, capsys) -> None:
    main(["run", "0", "--indicator", "NUMERIC_MODE", "--timezone", "UTC", "--no-color"])

    out = capsys.readouterr().out
    assert _finished_at(out).utcoffset() == timedelta(0)
    assert UNSUPPORTED_TIMEZONE_WARNING.strip() not in out
    assert (config_home / CONFIG_DIR_NAME / CONFIG_FILENAME).is_file()
    log = _log_text(config_home)
    assert "[INFO][countdown.report] - Executed successfully." in log
    assert "[INDICATOR] = NUMERIC" in log
    assert "[TIMEZONE]  = UTC" in log
    assert "[ERROR]" not in log


def test_run_unsupported_settings_warns_and_logs_error(config_home: Path, workdir: Path, capsys) -> None:
    main(["run", "0", "--indicator", "xyz", "--timezone", "mars", "--no-color"])

    out = capsys.readouterr().out
    assert out.count(UNSUPPORTED_TIMEZONE_WARNING.strip()) == 1
    local_offset = datetime.now().astimezone().utcoffset()
    assert _finished_at(out).utcoffset() == local_offset
    log = _log_text(config_home)
    assert "[ERROR][countdown.report] - Execution failed." in log
    assert "[INDICATOR] = UNSUPPORTED INDICATOR - [numeric]" in log
    assert "[TIMEZONE]  = UNSUPPORTED TIMEZONE - [local]" in log
    assert "[INFO][countdown.report]" not in log


def test_run_no_log_still_records_failed_report(config_home: Path, workdir: Path, capsys) -> None:
    main(["run", "0", "--no-log", "--no-color"])
    log = _log_text(config_home)
    assert "Execution failed." in log
    assert "Creating application's configuration directory." not in log


def test_run_log_level_from_env(
    config_home: Path, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    monkeypatch.setenv(ENV_LOG_LEVEL, "ERROR")
    main(["run", "0", "--timezone", "utc", "--no-color"])
    main(["run", "0", "--timezone", "utc", "--no-color", "--no-log"])
    log = _log_text(config_home)
    assert "Execution failed." in log
    assert "Executed successfully." not in log
    assert "Creating application's configuration directory." not in log


def test_run_invalid_frequency_exits(config_home: Path, workdir: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["run", "5", "--frequency", "0"])
    assert exc.value.code == 1
    assert "Error: Frequency must be positive" in capsys.readouterr().err
    assert not (config_home / CONFIG_DIR_NAME).exists()


def test_run_stays_in_working_directory(config_home: Path, workdir: Path, capsys) -> None:
    main(["run", "0", "--no-color"])
    assert Path.cwd() == workdir.resolve()


def test_run_with_unwritable_log_still_finishes(config_home: Path, workdir: Path, capsys) -> None:
    """A plain file in place of the config directory: no log, but the run completes."""
    (config_home / CONFIG_DIR_NAME).write_text("x", encoding="utf-8")

    main(["run", "0", "--timezone", "utc", "--no-color"])

    out = capsys.readouterr().out
    assert _finished_at(out).utcoffset() == timedelta(0)
    assert (config_home / CONFIG_DIR_NAME).read_text(encoding="utf-8") == "x"
    assert Path.cwd() == workdir.resolve()


@pytest.mark.parametrize("duration", ["inf", "nan"])
def test_run_non_finite_duration_exits(config_home: Path, workdir: Path, capsys, duration: str) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["run", duration])
    assert exc.value.code == 1
    assert "Error: Duration and frequency must be finite" in capsys.readouterr().err
