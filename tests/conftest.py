"""Pytest configuration for the behavioural test suite.

Pytest does not collect Gherkin ``.feature`` files by default. The
behavioural tests live in Python modules that *reference* these feature files
through pytest-bdd, so selecting a ``.feature`` file on the command line would
otherwise collect nothing. This collector turns such a selection into a
lightweight check that the file is a readable Gherkin feature.
"""

from __future__ import annotations

import typing as typ

import pytest

if typ.TYPE_CHECKING:
    from pathlib import Path


class FeatureFile(pytest.File):
    """Collect a ``.feature`` file as a single validation item."""

    def collect(self) -> list[pytest.Item]:
        """Return the item checking the feature file."""
        return [FeatureFileItem.from_parent(self, name=self.path.name)]


class FeatureFileItem(pytest.Item):
    """Check that a selected feature file declares a Gherkin feature."""

    def runtest(self) -> None:
        """Fail when the file lacks a ``Feature:`` header."""
        content = self.path.read_text(encoding="utf-8")
        if "Feature:" not in content:
            msg = f"{self.path} does not declare a Gherkin feature."
            raise AssertionError(msg)


def pytest_collect_file(
    file_path: Path,
    parent: pytest.Collector,
) -> FeatureFile | None:
    """Collect ``.feature`` files selected on the command line."""
    if file_path.suffix != ".feature":
        return None
    return FeatureFile.from_parent(parent, path=file_path)
