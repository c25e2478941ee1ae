"""Shared pytest fixtures for detection tests.

Use these fixtures to build detectors against a fake os-release file and a
fake executable lookup without touching the host system.

Example
-------
def test_detects_apt(make_detector):
    detector = make_detector(distro_id="ubuntu")
    assert detector.detect().name == "apt"
"""

from __future__ import annotations

import typing as typ

import pytest

from pkgcmd.detection import Detector
from pkgcmd.metrics import AtomicCounters
from tests.helpers.distro import FakeWhich, write_os_release

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


@pytest.fixture(name="counters")
def fixture_counters() -> AtomicCounters:
    """Provide a fresh counter sink for a single test.

    Returns
    -------
    AtomicCounters
        Counters starting at zero.
    """
    return AtomicCounters()


@pytest.fixture(name="make_detector")
def fixture_make_detector(
    tmp_path: Path,
    counters: AtomicCounters,
) -> cabc.Callable[..., Detector]:
    """Return a factory building detectors over fake host state.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory holding the fake os-release file.
    counters : AtomicCounters
        Sink shared with the test so it can inspect detection counters.

    Returns
    -------
    Callable[..., Detector]
        Factory accepting ``distro_id`` (``None`` writes no ``ID=`` line),
        ``missing_file`` and ``binaries`` keyword arguments.
    """

    def factory(
        *,
        distro_id: str | None = None,
        missing_file: bool = False,
        binaries: cabc.Iterable[str] = (),
    ) -> Detector:
        if missing_file:
            os_release = tmp_path / "absent-os-release"
        else:
            os_release = write_os_release(tmp_path, distro_id)
        return Detector(
            os_release=os_release,
            which=FakeWhich(binaries),
            metrics=counters,
        )

    return factory

