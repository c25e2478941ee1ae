"""Distribution detection with a per-detector memoised result.

Detection reads the ``ID=`` line of the os-release file and maps it to a
package manager family. When the file is missing, unreadable, lacks an
``ID=`` line, or names an unknown distribution, the executable search path is
probed for package manager binaries in fixed priority order.

The resolved manager is cached on the :class:`Detector` instance that found
it. Failures are never cached, so a later call retries the whole algorithm.

Example
-------
detector = Detector()
manager = detector.detect()
print(manager.install("htop"))
"""

from __future__ import annotations

import logging
import os
import shutil
import threading
import typing as typ
from pathlib import Path

from pkgcmd.errors import NoManagerDetectedError, PkgCmdError
from pkgcmd.family import PROBE_ORDER, Family, family_for_distro
from pkgcmd.managers import create_manager
from pkgcmd.metrics import AtomicCounters, Counter, MetricsSink, NullMetrics

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from pkgcmd.managers import PackageManager

WhichFunc: typ.TypeAlias = "cabc.Callable[[str], str | None]"

logger = logging.getLogger(__name__)

_ENV_VAR = "PKGCMD_OS_RELEASE"
_ID_PREFIX = "ID="
DEFAULT_OS_RELEASE = Path("/etc/os-release")


def resolve_os_release_path() -> Path:
    """Return the os-release path, honouring ``PKGCMD_OS_RELEASE``.

    Returns
    -------
    Path
        The path named by the environment variable, or ``/etc/os-release``
        when the variable is unset or blank.
    """
    raw = os.environ.get(_ENV_VAR, "").strip()
    if not raw:
        return DEFAULT_OS_RELEASE
    return Path(raw)


def parse_distro_id(lines: cabc.Iterable[str]) -> str | None:
    """Return the unquoted value of the first ``ID=`` line, if any."""
    for line in lines:
        if line.startswith(_ID_PREFIX):
            value = line.rstrip("\r\n").removeprefix(_ID_PREFIX)
            return value.strip('"')
    return None


def _read_distro_id(path: Path, metrics: MetricsSink) -> str | None:
    try:
        with path.open(encoding="utf-8") as handle:
            metrics.increment(Counter.OS_RELEASE_READS)
            return parse_distro_id(handle)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("pkgcmd.os_release.unreadable path=%s error=%s", path, exc)
        return None


def read_distro_id(path: str | Path = DEFAULT_OS_RELEASE) -> str | None:
    """Read the distribution ID from an os-release file.

    Parameters
    ----------
    path:
        Location of the os-release file.

    Returns
    -------
    str | None
        The ``ID`` value, or ``None`` when the file cannot be read or has no
        ``ID=`` line. Read failures are treated as an absent file.
    """
    return _read_distro_id(Path(path), NullMetrics())


def probe_binaries(which: WhichFunc = shutil.which) -> Family | None:
    """Return the first family whose executable is found on ``PATH``.

    Families are probed in :data:`pkgcmd.family.PROBE_ORDER`, so ``apt``
    wins over ``pacman`` when both are installed.
    """
    for family in PROBE_ORDER:
        if which(family.value) is not None:
            return family
    return None


class Detector:
    """Resolve and memoise the package manager for this host.

    Parameters
    ----------
    os_release:
        Path to the os-release file. Defaults to
        :func:`resolve_os_release_path`.
    which:
        Executable lookup used by the binary probe. Defaults to
        :func:`shutil.which`.
    metrics:
        Sink receiving detection counters. Defaults to a fresh
        :class:`~pkgcmd.metrics.AtomicCounters`.

    Notes
    -----
    After the first success ``detect()`` returns the cached manager without
    taking a lock. The initial detection runs under a lock so concurrent
    first callers trigger it at most once.
    """

    __slots__ = ("_cached", "_lock", "_metrics", "_os_release", "_which")

    def __init__(
        self,
        *,
        os_release: str | Path | None = None,
        which: WhichFunc = shutil.which,
        metrics: MetricsSink | None = None,
    ) -> None:
        self._os_release = (
            Path(os_release) if os_release is not None else resolve_os_release_path()
        )
        self._which = which
        self._metrics: MetricsSink = metrics if metrics is not None else AtomicCounters()
        self._lock = threading.Lock()
        self._cached: PackageManager | None = None

    @property
    def os_release(self) -> Path:
        """Return the os-release path consulted by this detector."""
        return self._os_release

    @property
    def metrics(self) -> MetricsSink:
        """Return the metrics sink receiving detection counters."""
        return self._metrics

    @property
    def cached(self) -> PackageManager | None:
        """Return the memoised manager, or None before the first success."""
        return self._cached

    def detect(self) -> PackageManager:
        """Return the package manager for this host.

        Returns
        -------
        PackageManager
            The cached manager when available, otherwise the result of a
            fresh detection.

        Raises
        ------
        NoManagerDetectedError
            If neither os-release nor the binary probe yields a family.
        """
        self._metrics.increment(Counter.DETECT_CALLS)
        cached = self._cached
        if cached is not None:
            return cached

        with self._lock:
            if self._cached is None:
                try:
                    self._cached = self._detect_uncached()
                except PkgCmdError:
                    self._metrics.increment(Counter.DETECT_ERRORS)
                    raise
            return self._cached

    def clear_cache(self) -> None:
        """Forget the memoised manager so the next call detects again.

        Intended for test isolation; do not call it while other threads are
        detecting.
        """
        with self._lock:
            self._cached = None

    def _detect_uncached(self) -> PackageManager:
        family = self._family_from_os_release()
        if family is None:
            family = self._family_from_path()
        if family is None:
            logger.warning(
                "pkgcmd.detect.failed os_release=%s probed=%s",
                self._os_release,
                ",".join(PROBE_ORDER),
            )
            msg = "unable to detect package manager"
            raise NoManagerDetectedError(msg)

        self._metrics.increment(Counter.MANAGER_CREATIONS)
        manager = create_manager(family)
        logger.info("pkgcmd.detect family=%s", manager.name)
        return manager

    def _family_from_os_release(self) -> Family | None:
        distro_id = _read_distro_id(self._os_release, self._metrics)
        family = family_for_distro(distro_id)
        logger.debug(
            "pkgcmd.detect source=os-release distro=%s family=%s",
            distro_id,
            family,
        )
        return family

    def _family_from_path(self) -> Family | None:
        self._metrics.increment(Counter.BINARY_FALLBACKS)
        family = probe_binaries(self._which)
        logger.debug("pkgcmd.detect source=path family=%s", family)
        return family


__all__ = [
    "DEFAULT_OS_RELEASE",
    "Detector",
    "parse_distro_id",
    "probe_binaries",
    "read_distro_id",
    "resolve_os_release_path",
]
