"""Find the version-controlled project that a directory belongs to.

    find_project_root(Path("/home/me/src/repo/pkg/module"))  # -> Path("/home/me/src/repo")

The walk visits the starting directory and then each of its parents. In CLOSEST mode
the first directory holding a marker (.git, .hg, ...) wins. In FARTHEST mode the walk
keeps going, and the outermost such directory wins, which is what you want from inside
a submodule or a vendored checkout.

Unless span_file_systems is set, the walk stays on the device of the starting
directory. What happens at the edge is the OnBoundary policy: CANDIDATE returns the
best directory found so far (failing only if there is none), FAIL always fails.
"""
import enum
import typing as ty
from pathlib import Path

import attrs
from thds.core import config
from thds.core.log import getLogger, logger_context

from . import devices
from .ancestors import ancestors, same_filesystem
from .errors import BoundaryCrossedError, ProjectRootNotFound
from .markers import DEFAULT_MARKERS, is_project_root, present_markers

logger = getLogger(__name__)


class Mode(enum.Enum):
    CLOSEST = "closest"
    FARTHEST = "farthest"


class OnBoundary(enum.Enum):
    CANDIDATE = "candidate"
    FAIL = "fail"


def _parse_enum(enum_type: ty.Type[enum.Enum]):
    def parse(value: ty.Any):
        return value if isinstance(value, enum_type) else enum_type(str(value).strip().lower())

    return parse


def tobool(value: ty.Any) -> bool:
    """Accepts the usual spellings of a boolean in env vars and config files."""
    if isinstance(value, bool):
        return value
    s = str(value).strip().lower()
    if s in ("1", "true", "yes", "on"):
        return True
    if s in ("", "0", "false", "no", "off"):
        return False
    raise ValueError(f"Cannot interpret {value!r} as a boolean")


MODE = config.item("thds.vcsroot.project_root.mode", Mode.CLOSEST, parse=_parse_enum(Mode))
SPAN_FILE_SYSTEMS = config.item(
    "thds.vcsroot.project_root.span_file_systems", False, parse=tobool
)
ON_BOUNDARY = config.item(
    "thds.vcsroot.project_root.on_boundary", OnBoundary.CANDIDATE, parse=_parse_enum(OnBoundary)
)
STAT_FAILURE_IS_BOUNDARY = config.item(
    "thds.vcsroot.project_root.stat_failure_is_boundary", False, parse=tobool
)


@attrs.frozen
class WalkPolicy:
    span_file_systems: bool = attrs.field(default=False, converter=tobool)
    mode: Mode = attrs.field(default=Mode.CLOSEST, converter=_parse_enum(Mode))
    on_boundary: OnBoundary = attrs.field(
        default=OnBoundary.CANDIDATE, converter=_parse_enum(OnBoundary)
    )
    stat_failure_is_boundary: bool = attrs.field(default=False, converter=tobool)
    markers: ty.Tuple[str, ...] = attrs.field(default=DEFAULT_MARKERS, converter=tuple)

    @property
    def checks_boundaries(self) -> bool:
        return not self.span_file_systems and devices.HAS_DEVICES

    @classmethod
    def from_config(
        cls,
        span_file_systems: ty.Union[bool, str, None] = None,
        mode: ty.Union[Mode, str, None] = None,
        *,
        on_boundary: ty.Union[OnBoundary, str, None] = None,
        stat_failure_is_boundary: ty.Union[bool, str, None] = None,
        markers: ty.Sequence[str] = DEFAULT_MARKERS,
    ) -> "WalkPolicy":
        """Anything left as None comes from the active configuration."""
        return cls(
            span_file_systems=SPAN_FILE_SYSTEMS() if span_file_systems is None else span_file_systems,
            mode=MODE() if mode is None else mode,
            on_boundary=ON_BOUNDARY() if on_boundary is None else on_boundary,
            stat_failure_is_boundary=(
                STAT_FAILURE_IS_BOUNDARY() if stat_failure_is_boundary is None else stat_failure_is_boundary
            ),
            markers=markers,
        )


def walk(
    start: Path,
    policy: WalkPolicy = WalkPolicy(),
    device_of: devices.DeviceClassifier = devices.device_of,
) -> ty.Optional[Path]:
    """Returns the project root for start under the given policy, or None if no ancestor
    holds a marker.

    Raises StatError if the device of start (or, without stat_failure_is_boundary, of
    any ancestor) cannot be read, and BoundaryCrossedError if the walk leaves the
    starting filesystem and the policy does not allow returning a candidate.
    """
    start = Path(start)
    if policy.checks_boundaries:
        paths = same_filesystem(
            start,
            device_of=device_of,
            stat_failure_is_boundary=policy.stat_failure_is_boundary,
        )
    else:
        paths = ancestors(start)

    candidate: ty.Optional[Path] = None
    try:
        for path in paths:
            if not is_project_root(path, policy.markers):
                continue
            logger.debug("Found markers", path=path, markers=present_markers(path, policy.markers))
            if policy.mode == Mode.CLOSEST:
                return path
            candidate = path
    except BoundaryCrossedError as boundary_err:
        if candidate is None or policy.on_boundary == OnBoundary.FAIL:
            raise
        logger.debug(
            "Stopping at filesystem boundary with a candidate", boundary=boundary_err.boundary
        )

    return candidate


def find_project_root(
    start: ty.Union[str, Path],
    span_file_systems: ty.Union[bool, str, None] = None,
    mode: ty.Union[Mode, str, None] = None,
    *,
    markers: ty.Sequence[str] = DEFAULT_MARKERS,
    on_boundary: ty.Union[OnBoundary, str, None] = None,
    stat_failure_is_boundary: ty.Union[bool, str, None] = None,
    device_of: devices.DeviceClassifier = devices.device_of,
) -> ty.Optional[Path]:
    """Walks up from start, which must already be absolute and canonical.

    Returns None when no ancestor is a project root; the caller decides whether that
    is an error.
    """
    policy = WalkPolicy.from_config(
        span_file_systems,
        mode,
        on_boundary=on_boundary,
        stat_failure_is_boundary=stat_failure_is_boundary,
        markers=markers,
    )
    with logger_context(start=start):
        root = walk(Path(start), policy, device_of=device_of)
        if root is None:
            logger.debug("No project root found", mode=policy.mode.value)
        else:
            logger.debug("Found project root", root=root, mode=policy.mode.value)
    return root


def require_project_root(start: ty.Union[str, Path], *args, **kwargs) -> Path:
    """Like find_project_root, but raises ProjectRootNotFound instead of returning None."""
    root = find_project_root(start, *args, **kwargs)
    if root is None:
        raise ProjectRootNotFound(start)
    return root
