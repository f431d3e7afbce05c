"""Print the root directory of the version-controlled project containing a directory."""

import argparse
import os
import sys
import typing as ty
from pathlib import Path

from thds.core.log import getLogger

from . import __version__, devices
from .errors import ProjectRootError, ProjectRootNotFound
from .project_root import Mode, OnBoundary, WalkPolicy, find_project_root

logger = getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    configured = WalkPolicy.from_config()
    parser = argparse.ArgumentParser(prog="project-root", description=__doc__)
    if devices.HAS_DEVICES:
        parser.add_argument(
            "--span-file-systems",
            "-s",
            action="store_true",
            default=None,
            help="Allow the search to traverse filesystems (otherwise, stops at FS boundary)",
        )
    parser.add_argument(
        "--workdir",
        "-w",
        type=Path,
        default=None,
        help="Start the search in the given directory (defaults to the cwd)",
    )
    parser.add_argument(
        "--mode",
        "-m",
        choices=[m.value for m in Mode],
        default=configured.mode.value,
        help="Report the closest or the farthest project root among the ancestors.",
    )
    parser.add_argument(
        "--on-boundary",
        choices=[b.value for b in OnBoundary],
        default=configured.on_boundary.value,
        help="At a filesystem boundary, return the best root found so far, or always fail.",
    )
    parser.add_argument(
        "--stat-failure-is-boundary",
        action="store_true",
        default=None,
        help="Treat an ancestor that cannot be stat'ed as a filesystem boundary instead of an error.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _starting_directory(workdir: ty.Optional[Path]) -> Path:
    try:
        return Path(workdir or os.getcwd()).resolve(strict=True)
    except OSError as oserr:
        raise ProjectRootError(f"could not canonicalize {workdir or 'the cwd'}: {oserr}") from oserr


def main(argv: ty.Optional[ty.Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    span_file_systems = getattr(args, "span_file_systems", None) if devices.HAS_DEVICES else True

    try:
        start = _starting_directory(args.workdir)
        root = find_project_root(
            start,
            span_file_systems,
            args.mode,
            on_boundary=args.on_boundary,
            stat_failure_is_boundary=args.stat_failure_is_boundary,
        )
        if root is None:
            raise ProjectRootNotFound(start)
    except ProjectRootError as err:
        logger.debug("Project root search failed", exc_info=True)
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print(root)
    return 0


def main_exit() -> None:
    sys.exit(main())
