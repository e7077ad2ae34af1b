from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from projinit.errors import VCSError
from projinit.vcs import DEFAULT_COMMIT_MESSAGE, GitRepository

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def test_missing_executable_raises_vcs_error(tmp_path: Path):
    repo = GitRepository(tmp_path, executable="definitely-not-a-git-binary")
    with pytest.raises(VCSError) as excinfo:
        repo.initialize()
    assert "not found" in str(excinfo.value)
    assert excinfo.value.command == ("definitely-not-a-git-binary", "init")


def test_failed_command_carries_stderr(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    def fake_run(command, **kwargs):
        raise subprocess.CalledProcessError(
            128, command, output="", stderr="Author identity unknown\n"
        )

    monkeypatch.setattr("projinit.vcs.subprocess.run", fake_run)
    with pytest.raises(VCSError) as excinfo:
        GitRepository(tmp_path).run("commit", "-m", "msg")

    error = excinfo.value
    assert error.stderr == "Author identity unknown"
    assert error.command == ("git", "commit", "-m", "msg")
    assert "exit status 128" in str(error)
    assert "Author identity unknown" in str(error)


def _fake_git(calls: list[list[str]], outputs: dict[str, str]):
    def fake_run(command, **kwargs):
        calls.append(list(command))
        stdout = outputs.get(command[1], "")
        return subprocess.CompletedProcess(command, 0, stdout=stdout, stderr="")

    return fake_run


def test_initialize_runs_commands_in_order(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    calls: list[list[str]] = []
    outputs = {"status": "A  README.md\n", "rev-parse": "abc123\n"}
    monkeypatch.setattr("projinit.vcs.subprocess.run", _fake_git(calls, outputs))

    commit = GitRepository(tmp_path).initialize("First")

    assert commit == "abc123"
    assert calls == [
        ["git", "init"],
        ["git", "add", "."],
        ["git", "status", "--porcelain"],
        ["git", "commit", "-m", "First"],
        ["git", "rev-parse", "HEAD"],
    ]


def test_initialize_skips_commit_when_tree_is_clean(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    calls: list[list[str]] = []
    outputs = {"status": "", "rev-parse": "abc123\n"}
    monkeypatch.setattr("projinit.vcs.subprocess.run", _fake_git(calls, outputs))

    assert GitRepository(tmp_path).initialize() == "abc123"
    assert ["git", "commit", "-m", DEFAULT_COMMIT_MESSAGE] not in calls


def test_failure_reported_on_stdout_is_kept(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    def fake_run(command, **kwargs):
        raise subprocess.CalledProcessError(
            1, command, output="nothing to commit, working tree clean\n", stderr=""
        )

    monkeypatch.setattr("projinit.vcs.subprocess.run", fake_run)
    with pytest.raises(VCSError) as excinfo:
        GitRepository(tmp_path).run("commit", "-m", "msg")

    assert "nothing to commit, working tree clean" in str(excinfo.value)
    assert excinfo.value.stdout == "nothing to commit, working tree clean"
    assert excinfo.value.stderr == ""


@requires_git
def test_initialize_creates_single_commit(tmp_path: Path, git_env: None):
    (tmp_path / "README.md").write_text("# demo\n", encoding="utf-8")
    repo = GitRepository(tmp_path)

    commit = repo.initialize()

    assert commit == repo.run("rev-parse", "HEAD")
    assert repo.run("rev-list", "--count", "HEAD") == "1"
    assert repo.run("log", "-1", "--format=%s") == DEFAULT_COMMIT_MESSAGE
    assert repo.run("status", "--porcelain") == ""


@requires_git
def test_initialize_twice_keeps_single_commit(tmp_path: Path, git_env: None):
    (tmp_path / "README.md").write_text("# demo\n", encoding="utf-8")
    repo = GitRepository(tmp_path)

    first = repo.initialize()
    (tmp_path / "README.md").write_text("# demo\n", encoding="utf-8")
    second = repo.initialize()

    assert second == first
    assert repo.run("rev-list", "--count", "HEAD") == "1"
