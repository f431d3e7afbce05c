"""Lazy enumeration of a directory's ancestors, optionally fenced to one filesystem.

Enumeration and the filesystem fence are separate generators, so that a walk can use
either one alone or compose them.
"""
import typing as ty
from pathlib import Path

from thds.core.log import getLogger

from .devices import DeviceClassifier, device_of
from .errors import BoundaryCrossedError, StatError

logger = getLogger(__name__)


def ancestors(start: Path) -> ty.Iterator[Path]:
    """Yields start, then its parent, and so on up to and including the filesystem root.

    No filesystem access happens here; this is path arithmetic only.
    """
    path = Path(start)
    yield path
    while path.parent != path:
        path = path.parent
        yield path


def same_filesystem(
    start: Path,
    paths: ty.Optional[ty.Iterable[Path]] = None,
    *,
    device_of: DeviceClassifier = device_of,
    stat_failure_is_boundary: bool = False,
) -> ty.Iterator[Path]:
    """Passes through paths (by default, the ancestors of start) for as long as they live
    on the same device as start.

    The device of start is read immediately, so a StatError for start comes from this
    call rather than from the first `next`. The returned iterator raises
    BoundaryCrossedError at the first path on another device. A path that cannot be
    stat'ed raises StatError, or counts as a boundary if stat_failure_is_boundary.
    """
    start = Path(start)
    start_device = device_of(start)

    def _fenced() -> ty.Iterator[Path]:
        for path in ancestors(start) if paths is None else paths:
            try:
                device = device_of(path)
            except StatError as stat_err:
                if not stat_failure_is_boundary:
                    raise
                logger.debug("Treating unreadable ancestor as a filesystem boundary", path=path)
                raise BoundaryCrossedError(start, path) from stat_err

            if device != start_device:
                logger.debug("Crossed a filesystem boundary", path=path)
                raise BoundaryCrossedError(start, path)
            yield path

    return _fenced()
