"""Package manager families and the distribution lookup table."""

from __future__ import annotations

import enum
import types


class Family(enum.StrEnum):
    """Identifiers for the supported package manager families.

    Members are declared in binary-probe priority order: when several
    package manager executables are present, the earliest member wins.

    Members
    -------
    APT
        Debian and Ubuntu.
    APK
        Alpine Linux.
    DNF
        Fedora.
    YUM
        CentOS and RHEL.
    PACMAN
        Arch Linux.
    ZYPPER
        SLES and openSUSE.
    EMERGE
        Gentoo.
    """

    APT = "apt"
    APK = "apk"
    DNF = "dnf"
    YUM = "yum"
    PACMAN = "pacman"
    ZYPPER = "zypper"
    EMERGE = "emerge"


PROBE_ORDER: tuple[Family, ...] = tuple(Family)

DISTRO_FAMILIES: types.MappingProxyType[str, Family] = types.MappingProxyType(
    {
        "ubuntu": Family.APT,
        "debian": Family.APT,
        "alpine": Family.APK,
        "centos": Family.YUM,
        "rhel": Family.YUM,
        "fedora": Family.DNF,
        "arch": Family.PACMAN,
        "sles": Family.ZYPPER,
        "opensuse": Family.ZYPPER,
        "gentoo": Family.EMERGE,
    },
)


def family_for_distro(distro_id: str | None) -> Family | None:
    """Return the family for an os-release ``ID`` value, or None if unknown."""
    if not distro_id:
        return None
    return DISTRO_FAMILIES.get(distro_id)


__all__ = ["DISTRO_FAMILIES", "PROBE_ORDER", "Family", "family_for_distro"]
