"""Exception hierarchy shared by validation, dispatch, and detection."""

from __future__ import annotations


class PkgCmdError(Exception):
    """Base class for every error raised by pkgcmd."""


class ValidationError(PkgCmdError, ValueError):
    """Raised when package names cannot be embedded safely in a command."""


class EmptyListError(ValidationError):
    """Raised when validation receives no package names at all."""


class EmptyNameError(ValidationError):
    """Raised when a package name is empty or consists only of whitespace."""


class InvalidCharacterError(ValidationError):
    """Raised when a package name contains a character outside the allow-list.

    Attributes
    ----------
    package_name:
        The rejected name, exactly as supplied by the caller.

    """

    def __init__(self, package_name: str) -> None:
        self.package_name = package_name
        msg = f"package name {package_name!r} contains invalid characters"
        super().__init__(msg)


class NoPackagesError(PkgCmdError, ValueError):
    """Raised when install or remove is called without any package."""


class UnsupportedFamilyError(PkgCmdError, LookupError):
    """Raised when a family name does not map to a known package manager.

    Attributes
    ----------
    family:
        The family name that could not be resolved.

    """

    def __init__(self, family: str, message: str | None = None) -> None:
        self.family = family
        msg = message or f"unsupported package manager family: {family!r}"
        super().__init__(msg)


class EmptyFamilyNameError(UnsupportedFamilyError):
    """Raised when the factory is asked for a manager with an empty name."""

    def __init__(self) -> None:
        super().__init__("", "package manager family name cannot be empty")


class NoManagerDetectedError(PkgCmdError, RuntimeError):
    """Raised when neither os-release nor PATH yields a supported family."""


__all__ = [
    "EmptyFamilyNameError",
    "EmptyListError",
    "EmptyNameError",
    "InvalidCharacterError",
    "NoManagerDetectedError",
    "NoPackagesError",
    "PkgCmdError",
    "UnsupportedFamilyError",
    "ValidationError",
]
