# tests/test_state_file.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import pytest

from studyzen.core.errors import LoadError, PersistError
from studyzen.tasks.state_file import SessionStateFile
from studyzen.tasks.task_models import SessionState, Task
from studyzen.tasks.task_store import TaskStore


def _task_json(deadline: str) -> str:
    return (
        '{"points": 0, "streak": 0, "tasks": [{"id": "1", "title": "Algebra HW", '
        '"subject": "Math", "type": "study", "priority": "high", "difficulty": "easy", '
        f'"completed": false, "time_spent": 0, "deadline": {deadline}}}]}}'
    )


def _reachable_state() -> SessionState:
    store = TaskStore()
    a = store.create_task("Algebra HW", "Math", "assignment", "high", "hard", 1_700_000_000.25)
    store.create_task("Read ch. 3", "Biology", "study", "low", "easy")
    c = store.create_task("Midterm", "Physics", "exam", "medium", "medium")
    store.toggle_completion(a.id)
    store.toggle_completion(c.id)
    store.toggle_completion(c.id)
    return store.snapshot()


def test_missing_file_loads_empty_state(session_file: SessionStateFile, caplog) -> None:
    with caplog.at_level(logging.INFO):
        state = session_file.load()

    assert state == SessionState(tasks=[], points=0, streak=0)
    assert not any(r.levelno >= logging.WARNING for r in caplog.records)


def test_round_trip(session_file: SessionStateFile) -> None:
    state = _reachable_state()
    session_file.save(state)

    loaded = session_file.load()
    assert loaded == state
    assert loaded.points == 50
    assert loaded.streak == 2


def test_save_overwrites_whole_state(session_file: SessionStateFile) -> None:
    session_file.save(_reachable_state())
    session_file.save(SessionState(points=5, streak=1))

    assert session_file.load() == SessionState(tasks=[], points=5, streak=1)


def test_save_leaves_no_tmp_file_and_creates_dirs(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "dir" / "studyzen_data.json"
    gw = SessionStateFile(target)
    gw.save(_reachable_state())

    assert target.exists()
    assert sorted(p.name for p in target.parent.iterdir()) == ["studyzen_data.json"]
    data = json.loads(target.read_text("utf-8"))
    assert data["version"] == 1
    assert len(data["tasks"]) == 3


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        "[]",
        '{"tasks": [], "points": "ten", "streak": 0}',
        '{"tasks": {}, "points": 0, "streak": 0}',
        '{"tasks": [42], "points": 0, "streak": 0}',
        '{"tasks": [{"id": "1", "title": "x"}], "points": 0, "streak": 0}',
        pytest.param("[" * 100_000 + "]" * 100_000, id="deeply-nested"),
        pytest.param(_task_json(deadline="1" + "0" * 400), id="deadline-overflow"),
    ],
)
def test_corrupt_file_degrades_to_empty(
    session_file: SessionStateFile, caplog, content: str
) -> None:
    session_file.path.write_text(content, "utf-8")

    with pytest.raises(LoadError):
        session_file.load_strict()

    with caplog.at_level(logging.WARNING):
        state = session_file.load()

    assert state == SessionState()
    assert any("starting fresh" in r.getMessage() for r in caplog.records)


def test_unexpected_decode_error_degrades_to_empty(
    session_file: SessionStateFile, monkeypatch, caplog
) -> None:
    session_file.save(SessionState(points=5, streak=1))

    def boom(_data):
        raise RuntimeError("decoder bug")

    monkeypatch.setattr("studyzen.tasks.state_file.state_from_dict", boom)
    with caplog.at_level(logging.ERROR):
        state = session_file.load()

    assert state == SessionState()
    assert any("starting fresh" in r.getMessage() for r in caplog.records)


def test_load_keeps_invariant_violations_verbatim(session_file: SessionStateFile) -> None:
    dup = {
        "id": "1",
        "title": "",
        "subject": "Math",
        "type": "lecture",
        "deadline": 0,
        "priority": "urgent",
        "difficulty": "medium",
        "completed": True,
        "time_spent": 0,
    }
    session_file.path.write_text(
        json.dumps({"tasks": [dup, dup], "points": -3, "streak": 7}), "utf-8"
    )

    state = session_file.load()
    assert state.points == -3
    assert [t.id for t in state.tasks] == ["1", "1"]
    assert state.tasks[0] == Task(
        id="1",
        title="",
        subject="Math",
        type="lecture",
        deadline=0.0,
        priority="urgent",
        difficulty="medium",
        completed=True,
    )


def test_save_failure_raises_persist_error(tmp_path: Path) -> None:
    # A directory where the file should be makes os.replace fail.
    target = tmp_path / "studyzen_data.json"
    target.mkdir()
    (target / "keep").write_text("x", "utf-8")

    with pytest.raises(PersistError):
        SessionStateFile(target).save(SessionState())
    assert not (tmp_path / "studyzen_data.json.tmp").exists()


@pytest.mark.skipif(os.name != "posix", reason="POSIX permissions")
def test_saved_file_is_private(session_file: SessionStateFile) -> None:
    session_file.save(SessionState())
    assert session_file.path.stat().st_mode & 0o777 == 0o600
