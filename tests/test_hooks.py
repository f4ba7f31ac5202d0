"""Tests for repository lookup and hook file helpers."""
import os
import stat
from pathlib import Path

import pytest

from bartle.errors import NotInRepositoryError
from bartle.hooks import (
    HOOK_MARKER,
    check_existing,
    find_repo,
    hook_path,
    hook_script,
    read_hook,
    repo_root,
    write_hook,
)


def test_find_repo_from_subdirectory(temp_git_repo):
    nested = Path(temp_git_repo) / "src" / "pkg"
    nested.mkdir(parents=True)

    repo = find_repo(nested)
    assert repo_root(repo).resolve() == Path(temp_git_repo).resolve()


def test_find_repo_outside_repository(tmp_path):
    with pytest.raises(NotInRepositoryError, match="not inside a git repository"):
        find_repo(tmp_path)


def test_hook_path(temp_git_repo):
    repo = find_repo(temp_git_repo)
    assert hook_path(repo).resolve() == (Path(temp_git_repo) / ".git" / "hooks" / "commit-msg").resolve()


def test_hook_script_contents():
    script = hook_script("/usr/local/bin/bartle")
    assert script.startswith("#!/bin/sh\n")
    assert HOOK_MARKER in script
    assert 'exec /usr/local/bin/bartle lint --hook "$1"' in script


def test_check_existing(tmp_path):
    path = tmp_path / "commit-msg"
    assert check_existing(path) == (False, False)
    assert read_hook(path) is None

    path.write_text("#!/bin/sh\nexit 0\n")
    assert check_existing(path) == (True, False)

    path.write_text(hook_script())
    assert check_existing(path) == (True, True)


@pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
def test_write_hook_is_executable(tmp_path):
    path = tmp_path / "hooks" / "commit-msg"
    write_hook(path, hook_script())

    assert path.read_text() == hook_script()
    assert path.stat().st_mode & stat.S_IXUSR
    assert not (tmp_path / "hooks" / "commit-msg.tmp").exists()
