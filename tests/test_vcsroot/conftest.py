import typing as ty
from pathlib import Path

import pytest

from thds.vcsroot import devices


@pytest.fixture
def root(tmp_path: Path) -> Path:
    # some platforms hand out a symlinked tmp_path; the walker expects canonical paths.
    return tmp_path.resolve()


@pytest.fixture
def make_tree(root: Path) -> ty.Callable[..., Path]:
    """Creates the given relative directories under root. Names ending in '/' are
    directories, anything else is an empty file.
    """

    def _make_tree(*entries: str) -> Path:
        for entry in entries:
            path = root / entry
            if entry.endswith("/"):
                path.mkdir(parents=True, exist_ok=True)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.touch()
        return root

    return _make_tree


@pytest.fixture
def fake_devices(monkeypatch) -> ty.Callable[..., devices.DeviceClassifier]:
    """Builds a device classifier in which every given mount point starts a new device,
    nested in whatever device contains it. Never touches the filesystem.
    """
    monkeypatch.setattr(devices, "HAS_DEVICES", True)

    def _fake_devices(*mounts: Path) -> devices.DeviceClassifier:
        def device_of(path: Path) -> int:
            return sum(1 for mount in mounts if path == mount or mount in path.parents)

        return device_of

    return _fake_devices


@pytest.fixture
def with_devices(monkeypatch):
    monkeypatch.setattr(devices, "HAS_DEVICES", True)
