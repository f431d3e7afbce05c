"""Which storage device a directory lives on.

Only POSIX gives us a device number worth comparing. Elsewhere every path reports the
same sentinel, so a boundary is never seen and the walk spans filesystems.
"""
import os
import typing as ty
from pathlib import Path

from typing_extensions import Protocol

from .errors import StatError

HAS_DEVICES = os.name == "posix"
NO_DEVICE = 0


class DeviceClassifier(Protocol):
    def __call__(self, __path: Path) -> ty.Hashable:
        ...  # pragma: nocover


def device_of(path: ty.Union[str, os.PathLike]) -> ty.Hashable:
    if not HAS_DEVICES:
        return NO_DEVICE
    try:
        return os.stat(path).st_dev
    except OSError as oserr:
        raise StatError(os.fspath(path), oserr.strerror or str(oserr)) from oserr


def same_device(a: Path, b: Path, device_of: DeviceClassifier = device_of) -> bool:
    return device_of(a) == device_of(b)
