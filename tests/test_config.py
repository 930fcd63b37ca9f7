# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from studyzen.config import Settings

_VARS = (
    "STUDYZEN_APP_NAME",
    "STUDYZEN_LOG_LEVEL",
    "STUDYZEN_CONSOLE_COLOR",
    "STUDYZEN_DATA_DIR",
    "STUDYZEN_STATE_PATH",
)


def test_defaults(monkeypatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.app_name == "StudyZen"
    assert s.log_level == "INFO"
    assert s.console_color is True
    assert s.data_dir == Path(".local/studyzen")
    assert s.state_path == Path(".local/studyzen") / "studyzen_data.json"


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("STUDYZEN_APP_NAME", "Planner")
    monkeypatch.setenv("STUDYZEN_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("STUDYZEN_CONSOLE_COLOR", "off")
    monkeypatch.setenv("STUDYZEN_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("STUDYZEN_STATE_PATH", raising=False)

    s = Settings.from_env()
    assert s.app_name == "Planner"
    assert s.log_level == "DEBUG"
    assert s.console_color is False
    # state file follows the data dir unless set explicitly
    assert s.state_path == tmp_path / "studyzen_data.json"

    monkeypatch.setenv("STUDYZEN_STATE_PATH", str(tmp_path / "elsewhere.json"))
    assert Settings.from_env().state_path == tmp_path / "elsewhere.json"
