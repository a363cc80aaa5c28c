"""
Command line shell tests.

Each call to main() is a fresh process as far as the gradebook is
concerned: state only carries over through the data directory.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from gradebook.app_shell.cli import main


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def run(tmp_path: Path, data_dir: Path):
    rules = tmp_path / "rules.yaml"
    rules.write_text("logging:\n  level: WARNING\n")

    def _run(*args: str) -> int:
        return main(["--rules", str(rules), "--data-dir", str(data_dir), *args])

    return _run


def _stored(data_dir: Path, key: str = "students") -> list[dict]:
    return json.loads((data_dir / f"{key}.json").read_text())


class TestStudentCommands:
    def test_add_and_list(self, run, capsys: pytest.CaptureFixture[str]) -> None:
        assert run("add", "Ana", "Math", "6.5") == 0
        assert run("list") == 0

        out = capsys.readouterr().out
        assert "Ana - Math - 6.5 (Outstanding)" in out
        assert "Students (1):" in out

    def test_list_empty(self, run, capsys: pytest.CaptureFixture[str]) -> None:
        assert run("list") == 0
        assert "No students registered" in capsys.readouterr().out

    def test_add_invalid(self, run, data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run("add", "A", "", "9") == 1

        out = capsys.readouterr().out
        assert "name: Name must be at least 2 characters" in out
        assert "subject: Subject is required" in out
        assert "score: Score must be between 1.0 and 7.0" in out
        assert not (data_dir / "students.json").exists()

    def test_edit(self, run, data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        run("add", "Leo", "Art", "3.0")
        leo_id = _stored(data_dir)[0]["id"]

        assert run("edit", str(leo_id), "Leo", "Art", "5.0") == 0

        stored = _stored(data_dir)
        assert len(stored) == 1
        assert stored[0]["id"] == leo_id
        assert stored[0]["category"] == "Needs improvement"
        assert "Updated" in capsys.readouterr().out

    def test_edit_invalid_keeps_record(self, run, data_dir: Path) -> None:
        run("add", "Leo", "Art", "3.0")
        leo_id = _stored(data_dir)[0]["id"]

        assert run("edit", str(leo_id), "Leo", "Art", "eight") == 1
        assert _stored(data_dir)[0]["score"] == 3.0

    def test_edit_unknown_id(self, run) -> None:
        assert run("edit", "42", "Leo", "Art", "5.0") == 1

    def test_delete_with_yes(self, run, data_dir: Path) -> None:
        run("add", "Ana", "Math", "6.5")
        ana_id = _stored(data_dir)[0]["id"]

        assert run("delete", str(ana_id), "--yes") == 0
        assert _stored(data_dir) == []

    def test_delete_declined(
        self,
        run,
        data_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        run("add", "Ana", "Math", "6.5")
        ana_id = _stored(data_dir)[0]["id"]
        monkeypatch.setattr("builtins.input", lambda prompt: "n")

        assert run("delete", str(ana_id)) == 0
        assert len(_stored(data_dir)) == 1
        assert "Nothing deleted." in capsys.readouterr().out

    def test_delete_confirmed_on_prompt(
        self, run, data_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        run("add", "Ana", "Math", "6.5")
        ana_id = _stored(data_dir)[0]["id"]
        monkeypatch.setattr("builtins.input", lambda prompt: "y")

        assert run("delete", str(ana_id)) == 0
        assert _stored(data_dir) == []

    def test_delete_unknown_id(self, run) -> None:
        assert run("delete", "42", "--yes") == 1

    def test_stats(self, run, capsys: pytest.CaptureFixture[str]) -> None:
        run("add", "Ana", "Math", "6.5")
        run("add", "Leo", "Art", "3.0")
        capsys.readouterr()

        assert run("stats") == 0

        assert capsys.readouterr().out.splitlines() == [
            "Total students: 2",
            "Overall average: 4.75",
            "Deficient: 1 (50.0%)",
            "Outstanding: 1 (50.0%)",
        ]

    def test_stats_empty(self, run, capsys: pytest.CaptureFixture[str]) -> None:
        assert run("stats") == 0
        assert "No statistics yet" in capsys.readouterr().out


class TestItemCommands:
    def test_item_lifecycle(self, run, data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run("items", "add", "milk") == 0
        item_id = _stored(data_dir, "items")[0]["id"]

        assert run("items", "edit", str(item_id), "oat milk") == 0
        assert run("items", "list") == 0
        assert f"[{item_id}] oat milk" in capsys.readouterr().out

        assert run("items", "delete", str(item_id), "--yes") == 0
        assert _stored(data_dir, "items") == []

    def test_blank_item(self, run, capsys: pytest.CaptureFixture[str]) -> None:
        assert run("items", "add", "   ") == 1
        assert "value: Value is required" in capsys.readouterr().out

    def test_items_and_students_are_separate(self, run, data_dir: Path) -> None:
        run("items", "add", "milk")
        run("add", "Ana", "Math", "6.5")

        assert len(_stored(data_dir, "items")) == 1
        assert len(_stored(data_dir)) == 1


class TestConfiguration:
    def test_invalid_rules_file(self, tmp_path: Path, data_dir: Path) -> None:
        bad = tmp_path / "bad.yaml"
        bad.write_text("bogus: 1\n")

        assert main(["--rules", str(bad), "--data-dir", str(data_dir), "list"]) == 1

    def test_missing_rules_file(self, tmp_path: Path, data_dir: Path) -> None:
        missing = tmp_path / "missing.yaml"
        assert main(["--rules", str(missing), "--data-dir", str(data_dir), "list"]) == 1

    def test_rules_cannot_admit_unclassifiable_scores(
        self, tmp_path: Path, data_dir: Path
    ) -> None:
        wide = tmp_path / "wide.yaml"
        wide.write_text("validation:\n  score_max: 10.0\n")

        argv = ["--rules", str(wide), "--data-dir", str(data_dir), "add", "Ana", "Math", "9"]
        assert main(argv) == 1
        assert not (data_dir / "students.json").exists()
