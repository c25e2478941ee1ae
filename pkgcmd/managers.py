"""Command synthesis for each package manager family.

A :class:`PackageManager` is tagged with exactly one :class:`Family` and
renders command lines from that family's fixed vocabulary. Instances carry no
other state, so a single manager can be shared freely between threads.

Commands are returned as text and never executed here.

Example
-------
>>> apt = create_manager("apt")
>>> apt.install("htop", "curl")
'sudo apt install -y htop curl'
"""

from __future__ import annotations

import dataclasses as dc
import types
import typing as typ

from pkgcmd.errors import EmptyFamilyNameError, NoPackagesError, UnsupportedFamilyError
from pkgcmd.family import PROBE_ORDER, Family
from pkgcmd.validation import validate_package_name, validate_package_names

PRIVILEGE_PREFIX = "sudo"


class VersionQuery(typ.NamedTuple):
    """Pair of command lines reporting installed and available versions.

    The two commands consult different sources (local package database and
    repository metadata) and can disagree while the local index is stale.
    """

    installed: str
    available: str


@dc.dataclass(frozen=True, slots=True)
class _CommandTable:
    """Vocabulary of one package manager CLI.

    Privileged entries omit the privilege prefix; query entries are
    ``str.format`` templates over ``pkg``.
    """

    update: str
    upgrade: str
    install: str
    remove: str
    is_installed: str
    installed_version: str
    available_version: str


_COMMANDS: types.MappingProxyType[Family, _CommandTable] = types.MappingProxyType(
    {
        Family.APT: _CommandTable(
            update="apt update",
            upgrade="apt upgrade -y",
            install="apt install -y",
            remove="apt remove -y",
            is_installed="dpkg -s {pkg} | grep Version",
            installed_version="dpkg-query -W -f='${{Version}}' {pkg}",
            available_version=(
                "apt-cache policy {pkg} | grep Candidate | awk '{{print $2}}'"
            ),
        ),
        Family.APK: _CommandTable(
            update="apk update",
            upgrade="apk upgrade",
            install="apk add",
            remove="apk del",
            is_installed="apk info -e {pkg}",
            installed_version="apk info -v {pkg} | cut -d'-' -f2-",
            available_version="apk search -v {pkg} | grep {pkg} | cut -d'-' -f2-",
        ),
        Family.DNF: _CommandTable(
            update="dnf check-update",
            upgrade="dnf upgrade -y",
            install="dnf install -y",
            remove="dnf remove -y",
            is_installed="dnf list installed {pkg}",
            installed_version="dnf info {pkg} | grep Version",
            available_version=(
                "dnf --showduplicates list {pkg} | grep -v Installed"
                " | awk '{{print $2}}'"
            ),
        ),
        Family.YUM: _CommandTable(
            update="yum check-update",
            upgrade="yum upgrade -y",
            install="yum install -y",
            remove="yum remove -y",
            is_installed="yum list installed {pkg}",
            installed_version="yum info {pkg} | grep Version",
            available_version=(
                "yum --showduplicates list {pkg} | grep -v Installed"
                " | awk '{{print $2}}'"
            ),
        ),
        Family.PACMAN: _CommandTable(
            update="pacman -Sy",
            upgrade="pacman -Su --noconfirm",
            install="pacman -S --noconfirm",
            remove="pacman -Rns --noconfirm",
            is_installed="pacman -Qi {pkg}",
            installed_version="pacman -Qi {pkg} | grep Version | awk '{{print $3}}'",
            available_version="pacman -Si {pkg} | grep Version | awk '{{print $3}}'",
        ),
        Family.ZYPPER: _CommandTable(
            update="zypper refresh",
            upgrade="zypper update -y",
            install="zypper install -y",
            remove="zypper remove -y",
            is_installed="zypper se --installed-only {pkg}",
            installed_version=(
                "zypper info {pkg} | grep Version | head -1 | awk '{{print $3}}'"
            ),
            available_version=(
                "zypper info {pkg} | grep Version | tail -1 | awk '{{print $3}}'"
            ),
        ),
        Family.EMERGE: _CommandTable(
            update="emerge --sync",
            upgrade="emerge -uDN @world",
            install="emerge",
            remove="emerge -C",
            is_installed="equery list {pkg}",
            installed_version="equery list {pkg} | awk '{{print $2}}'",
            available_version=r"emerge -p {pkg} | grep '\[ebuild' | awk '{{print $4}}'",
        ),
    },
)


def _privileged(*parts: str) -> str:
    return " ".join((PRIVILEGE_PREFIX, *parts))


@dc.dataclass(frozen=True, slots=True)
class PackageManager:
    """Command builder for a single package manager family.

    Attributes
    ----------
    family:
        The family whose CLI vocabulary this manager renders.

    """

    family: Family

    def __post_init__(self) -> None:
        """Reject tags that are not Family members."""
        if not isinstance(self.family, Family):
            msg = f"PackageManager expects Family, got {type(self.family).__name__}"
            raise TypeError(msg)

    @property
    def _table(self) -> _CommandTable:
        return _COMMANDS[self.family]

    @property
    def name(self) -> str:
        """Return the lowercase family identifier, e.g. ``"apt"``."""
        return self.family.value

    def update(self) -> str:
        """Return the command that refreshes the package index."""
        return _privileged(self._table.update)

    def upgrade(self) -> str:
        """Return the non-interactive full system upgrade command."""
        return _privileged(self._table.upgrade)

    def install(self, *packages: str) -> str:
        """Return the command installing ``packages``.

        Raises
        ------
        NoPackagesError
            If no package is given.
        ValidationError
            If any package name fails validation.
        """
        if not packages:
            msg = "no package specified for install"
            raise NoPackagesError(msg)
        names = validate_package_names(packages)
        return _privileged(self._table.install, *names)

    def remove(self, *packages: str) -> str:
        """Return the command removing ``packages``.

        Raises
        ------
        NoPackagesError
            If no package is given.
        ValidationError
            If any package name fails validation.
        """
        if not packages:
            msg = "no package specified for removal"
            raise NoPackagesError(msg)
        names = validate_package_names(packages)
        return _privileged(self._table.remove, *names)

    def is_installed(self, package: str) -> str:
        """Return the query command reporting whether ``package`` is installed."""
        name = validate_package_name(package)
        return self._table.is_installed.format(pkg=name)

    def version_check(self, package: str) -> VersionQuery:
        """Return commands printing the installed and latest available versions."""
        name = validate_package_name(package)
        table = self._table
        return VersionQuery(
            installed=table.installed_version.format(pkg=name),
            available=table.available_version.format(pkg=name),
        )


_MANAGERS: types.MappingProxyType[Family, PackageManager] = types.MappingProxyType(
    {family: PackageManager(family) for family in Family},
)


def create_manager(family: str | Family) -> PackageManager:
    """Return the manager for ``family``.

    Parameters
    ----------
    family:
        One of ``apt``, ``apk``, ``dnf``, ``yum``, ``pacman``, ``zypper``,
        or ``emerge``. Matching is exact and case-sensitive.

    Returns
    -------
    PackageManager
        The shared, immutable manager for the family.

    Raises
    ------
    EmptyFamilyNameError
        If ``family`` is empty.
    UnsupportedFamilyError
        If ``family`` is not a known literal.
    """
    if family == "":
        raise EmptyFamilyNameError
    try:
        resolved = Family(family)
    except ValueError:
        raise UnsupportedFamilyError(str(family)) from None
    return _MANAGERS[resolved]


def supported_families() -> tuple[Family, ...]:
    """Return the supported families in binary-probe priority order."""
    return PROBE_ORDER


__all__ = [
    "PRIVILEGE_PREFIX",
    "PackageManager",
    "VersionQuery",
    "create_manager",
    "supported_families",
]
