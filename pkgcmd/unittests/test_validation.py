"""Unit tests for package name validation."""

from __future__ import annotations

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pkgcmd.errors import (
    EmptyListError,
    EmptyNameError,
    InvalidCharacterError,
    ValidationError,
)
from pkgcmd.validation import (
    ALLOWED_PUNCTUATION,
    is_valid_package_name,
    validate_package_name,
    validate_package_names,
)

_ALLOWED_ALPHABET = string.ascii_letters + string.digits + ALLOWED_PUNCTUATION
_FORBIDDEN_CHARACTERS = list(";|&$`()<>*?[]{}'\"\\/ \n\r\t\x00")

allowed_names = st.text(alphabet=_ALLOWED_ALPHABET, min_size=1, max_size=40)


@pytest.mark.parametrize(
    "name",
    ["htop", "g++", "lib.pkg-name", "nginx=1.24.0", "python3_dev", "A9"],
)
def test_accepts_legitimate_specifiers(name: str) -> None:
    """Common package names and version pins pass unchanged."""
    assert validate_package_name(name) == name
    assert is_valid_package_name(name) is True


def test_validate_package_names_preserves_order() -> None:
    """Validated names come back in the order they were supplied."""
    assert validate_package_names(["vim", "curl", "git"]) == ("vim", "curl", "git")


def test_accepts_any_iterable() -> None:
    """Generators are consumed like any other sequence."""
    names = (name for name in ("a", "b"))
    assert validate_package_names(names) == ("a", "b")


def test_empty_sequence_is_rejected() -> None:
    """An empty list is an error distinct from an empty name."""
    with pytest.raises(EmptyListError, match="no package names provided"):
        validate_package_names([])


@pytest.mark.parametrize("name", ["", " ", "   ", "\t", "\n"])
def test_blank_names_are_rejected(name: str) -> None:
    """Empty and whitespace-only names raise EmptyNameError."""
    with pytest.raises(EmptyNameError, match="cannot be empty"):
        validate_package_name(name)
    assert is_valid_package_name(name) is False


@pytest.mark.parametrize(
    "name",
    [
        "htop; rm -rf /",
        "vim && curl evil.sh",
        "pkg|tee",
        "$(whoami)",
        "`id`",
        "name>out",
        "glob*",
        "nano\nrm",
        " htop",
        "café",
        "pkg/../etc",
    ],
)
def test_injection_attempts_are_rejected(name: str) -> None:
    """Shell metacharacters, whitespace, and non-ASCII are refused."""
    with pytest.raises(InvalidCharacterError) as excinfo:
        validate_package_name(name)
    assert excinfo.value.package_name == name
    assert repr(name) in str(excinfo.value)


def test_first_offence_wins() -> None:
    """Validation stops at the first bad name in the sequence."""
    with pytest.raises(InvalidCharacterError) as excinfo:
        validate_package_names(["ok", "bad;one", ""])
    assert excinfo.value.package_name == "bad;one"


def test_errors_share_a_validation_base() -> None:
    """Every validation failure is catchable as ValidationError and ValueError."""
    for exc_type in (EmptyListError, EmptyNameError, InvalidCharacterError):
        assert issubclass(exc_type, ValidationError)
        assert issubclass(exc_type, ValueError)


def test_non_string_names_raise_type_error() -> None:
    """Non-string values are a programming error, not a validation failure."""
    with pytest.raises(TypeError, match="expects str"):
        validate_package_name(42)  # type: ignore[arg-type]
    assert is_valid_package_name(None) is False  # type: ignore[arg-type]


@given(name=allowed_names)
def test_allow_listed_strings_always_pass(name: str) -> None:
    """Any non-empty string over the allow-list validates."""
    assert validate_package_name(name) == name


@given(
    prefix=allowed_names,
    forbidden=st.sampled_from(_FORBIDDEN_CHARACTERS),
    suffix=st.text(alphabet=_ALLOWED_ALPHABET, max_size=10),
)
def test_any_forbidden_character_is_rejected(
    prefix: str,
    forbidden: str,
    suffix: str,
) -> None:
    """A single forbidden character anywhere rejects the whole name."""
    name = f"{prefix}{forbidden}{suffix}"
    with pytest.raises(InvalidCharacterError) as excinfo:
        validate_package_name(name)
    assert excinfo.value.package_name == name
