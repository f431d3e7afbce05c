"""Find the root of the version-controlled project containing a directory."""
from importlib.metadata import PackageNotFoundError, version

from . import ancestors, devices, errors, markers, project_root  # noqa: F401
from .errors import (  # noqa: F401
    BoundaryCrossedError,
    ProjectRootError,
    ProjectRootNotFound,
    StatError,
)
from .markers import DEFAULT_MARKERS, is_project_root  # noqa: F401
from .project_root import (  # noqa: F401
    Mode,
    OnBoundary,
    WalkPolicy,
    find_project_root,
    require_project_root,
)

try:
    __version__ = version("thds.vcsroot")
except PackageNotFoundError:  # running from a source checkout
    __version__ = ""
