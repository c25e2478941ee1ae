"""Allow-list validation for package names embedded in shell commands.

Command strings produced by :mod:`pkgcmd.managers` interpolate package names
without quoting, so every name must pass this guard first. Only ASCII
letters, digits, and ``. - _ + =`` are accepted; ``=`` keeps version pins such
as ``nginx=1.24.0`` usable.

Example
-------
>>> validate_package_names(["g++", "lib.pkg-name"])
('g++', 'lib.pkg-name')
"""

from __future__ import annotations

import re
import typing as typ

from pkgcmd.errors import EmptyListError, EmptyNameError, InvalidCharacterError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

PackageName = typ.NewType("PackageName", str)

ALLOWED_PUNCTUATION = ".-_+="
_PACKAGE_NAME_PATTERN = re.compile(r"[A-Za-z0-9._+=-]+")


def _require_string(value: object) -> str:
    if isinstance(value, str):
        return value
    msg = f"package name expects str, got {type(value).__name__}"
    raise TypeError(msg)


def validate_package_name(name: str) -> PackageName:
    """Validate a single package name.

    Parameters
    ----------
    name:
        Candidate package name.

    Returns
    -------
    PackageName
        The unchanged name, typed as validated.

    Raises
    ------
    EmptyNameError
        If the name is empty or only whitespace.
    InvalidCharacterError
        If the name contains any character outside the allow-list.
    TypeError
        If ``name`` is not a string.
    """
    value = _require_string(name)
    if not value.strip():
        msg = "package name cannot be empty"
        raise EmptyNameError(msg)
    if _PACKAGE_NAME_PATTERN.fullmatch(value) is None:
        raise InvalidCharacterError(value)
    return PackageName(value)


def validate_package_names(names: cabc.Iterable[str]) -> tuple[PackageName, ...]:
    """Validate package names in order, failing on the first offence.

    Parameters
    ----------
    names:
        Candidate package names.

    Returns
    -------
    tuple[PackageName, ...]
        The validated names in their original order.

    Raises
    ------
    EmptyListError
        If ``names`` is empty.
    EmptyNameError
        If any name is empty or only whitespace.
    InvalidCharacterError
        If any name contains a character outside the allow-list.
    """
    candidates = tuple(names)
    if not candidates:
        msg = "no package names provided"
        raise EmptyListError(msg)
    return tuple(validate_package_name(name) for name in candidates)


def is_valid_package_name(name: str) -> bool:
    """Return True when ``name`` would pass :func:`validate_package_name`."""
    return (
        isinstance(name, str)
        and bool(name.strip())
        and _PACKAGE_NAME_PATTERN.fullmatch(name) is not None
    )


__all__ = [
    "ALLOWED_PUNCTUATION",
    "PackageName",
    "is_valid_package_name",
    "validate_package_name",
    "validate_package_names",
]
