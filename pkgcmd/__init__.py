"""pkgcmd package.

Synthesises package manager command lines for the host distribution. A
:class:`Detector` resolves the package manager family, and the resulting
:class:`PackageManager` renders validated update, upgrade, install, remove,
and query commands without ever executing them.

Example:
>>> from pkgcmd import create_manager
>>> create_manager("apk").remove("vim")
'sudo apk del vim'

"""

from __future__ import annotations

from pkgcmd.detection import (
    DEFAULT_OS_RELEASE,
    Detector,
    probe_binaries,
    read_distro_id,
    resolve_os_release_path,
)
from pkgcmd.errors import (
    EmptyFamilyNameError,
    EmptyListError,
    EmptyNameError,
    InvalidCharacterError,
    NoManagerDetectedError,
    NoPackagesError,
    PkgCmdError,
    UnsupportedFamilyError,
    ValidationError,
)
from pkgcmd.family import DISTRO_FAMILIES, Family, family_for_distro
from pkgcmd.managers import (
    PRIVILEGE_PREFIX,
    PackageManager,
    VersionQuery,
    create_manager,
    supported_families,
)
from pkgcmd.metrics import (
    AtomicCounters,
    Counter,
    MetricsSink,
    MetricsSnapshot,
    NullMetrics,
)
from pkgcmd.validation import (
    PackageName,
    is_valid_package_name,
    validate_package_name,
    validate_package_names,
)

PACKAGE_NAME = "pkgcmd"

__all__ = [
    "DEFAULT_OS_RELEASE",
    "DISTRO_FAMILIES",
    "PACKAGE_NAME",
    "PRIVILEGE_PREFIX",
    "AtomicCounters",
    "Counter",
    "Detector",
    "EmptyFamilyNameError",
    "EmptyListError",
    "EmptyNameError",
    "Family",
    "InvalidCharacterError",
    "MetricsSink",
    "MetricsSnapshot",
    "NoManagerDetectedError",
    "NoPackagesError",
    "NullMetrics",
    "PackageManager",
    "PackageName",
    "PkgCmdError",
    "UnsupportedFamilyError",
    "ValidationError",
    "VersionQuery",
    "create_manager",
    "family_for_distro",
    "is_valid_package_name",
    "probe_binaries",
    "read_distro_id",
    "resolve_os_release_path",
    "supported_families",
    "validate_package_name",
    "validate_package_names",
]
