"""Repository lookup and commit-msg hook file helpers."""
import os
from pathlib import Path
from typing import Optional, Tuple, Union

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

from .errors import HookError, NotInRepositoryError

# Lets us detect whether a hook file was written by bartle.
HOOK_MARKER = "# BARTLE-HOOK v1"

HOOK_NAME = "commit-msg"

HOOK_TEMPLATE = """#!/bin/sh
set -e

# Bartle commit-msg hook
{marker}

# Pass the path to the commit message file to bartle for linting.
# If lint fails, exit non-zero to block the commit.
exec {command} lint --hook "$1"
"""


def find_repo(path: Union[str, Path] = ".") -> Repo:
    """Open the git repository containing ``path``.

    Raises:
        NotInRepositoryError: If ``path`` is not inside a git repository
    """
    try:
        return Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise NotInRepositoryError(path) from e


def repo_root(repo: Repo) -> Path:
    if repo.working_tree_dir is None:
        raise NotInRepositoryError(repo.git_dir)
    return Path(repo.working_tree_dir)


def hook_path(repo: Repo) -> Path:
    """Path of the commit-msg hook for ``repo``."""
    return Path(repo.git_dir) / "hooks" / HOOK_NAME


def hook_script(command: str = "bartle") -> str:
    return HOOK_TEMPLATE.format(marker=HOOK_MARKER, command=command)


def read_hook(path: Path) -> Optional[str]:
    """Return the hook contents, or None if there is no hook."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return None
    except OSError as e:
        raise HookError(f"Cannot read hook {path}: {e}") from e


def check_existing(path: Path) -> Tuple[bool, bool]:
    """Report ``(exists, is_ours)`` for a hook path."""
    contents = read_hook(path)
    if contents is None:
        return False, False
    return True, HOOK_MARKER in contents


def write_hook(path: Path, contents: str) -> None:
    """Write a hook atomically and make it executable."""
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(contents, encoding="utf-8")
        os.chmod(tmp_path, 0o755)
        os.replace(tmp_path, path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise HookError(f"Cannot write hook {path}: {e}") from e
