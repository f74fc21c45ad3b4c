from __future__ import annotations

import re
from pathlib import Path

from stepflow import __version__

ROOT = Path(__file__).resolve().parents[1]


def _read_project_version() -> str:
    text = (ROOT / "pyproject.toml").read_text(encoding="utf-8")
    match = re.search(r"^version\s*=\s*\"([^\"]+)\"", text, re.MULTILINE)
    assert match is not None, "version not found in pyproject.toml"
    return match.group(1)


def test_changelog_mentions_current_version() -> None:
    version = _read_project_version()
    text = (ROOT / "CHANGELOG.md").read_text(encoding="utf-8")
    pattern = rf"^## \[{re.escape(version)}\]"
    assert re.search(pattern, text, re.MULTILINE), "CHANGELOG entry missing for current version"


def test_package_version_matches_pyproject() -> None:
    assert __version__ == _read_project_version()
