import os
import typing as ty
from pathlib import Path

DEFAULT_MARKERS: ty.Tuple[str, ...] = (".git", "_darcs", ".hg", ".bzr", ".svn")


def present_markers(directory: Path, markers: ty.Sequence[str] = DEFAULT_MARKERS) -> ty.Tuple[str, ...]:
    # os.path.exists reports any OSError (permissions, a file in place of a directory) as absent.
    return tuple(m for m in markers if os.path.exists(os.path.join(directory, m)))


def is_project_root(directory: Path, markers: ty.Sequence[str] = DEFAULT_MARKERS) -> bool:
    """True if any of the marker names exists directly inside the directory.

    Only existence matters; a plain file named `.git` counts (as it does for git worktrees
    and submodules).
    """
    return any(os.path.exists(os.path.join(directory, m)) for m in markers)
