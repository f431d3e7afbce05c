import typing as ty
from pathlib import Path


class ProjectRootError(Exception):
    pass


class StatError(ProjectRootError, OSError):
    """Filesystem metadata for a path could not be read."""

    def __init__(self, path: ty.Union[str, Path], reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"could not stat {self.path}" + (f": {reason}" if reason else ""))

    def __reduce__(self):
        return type(self), (self.path, self.reason)


class BoundaryCrossedError(ProjectRootError):
    """The walk reached a directory on a different device than the one it started on."""

    def __init__(self, start: ty.Union[str, Path], boundary: ty.Union[str, Path]):
        self.start = Path(start)
        self.boundary = Path(boundary)
        super().__init__(
            f"traversed filesystems without finding project root (started at {self.start},"
            f" stopped at {self.boundary})"
        )

    def __reduce__(self):
        return type(self), (self.start, self.boundary)


class ProjectRootNotFound(ProjectRootError, FileNotFoundError):
    def __init__(self, start: ty.Union[str, Path]):
        self.start = Path(start)
        super().__init__(f"found no project root in ancestors of {self.start}")

    def __reduce__(self):
        return type(self), (self.start,)
