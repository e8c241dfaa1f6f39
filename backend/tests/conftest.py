"""
Shared test fixtures and configuration.

Environment variables are set BEFORE any licensedb imports so the settings
singleton never picks up a developer's local configuration.
"""

import os
import sys
from pathlib import Path

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

os.environ["LICENSEDB_GIT_EXECUTABLE"] = "git"
os.environ["LICENSEDB_GIT_CLONE_DEPTH"] = "1"

import pytest  # noqa: E402

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def licenses_dir() -> Path:
    """Directory with the sample ScanCode licenses shipped with the tests."""
    return DATA_DIR / "licenses"


@pytest.fixture
def minimal_document():
    """Smallest valid license document: only the required fields."""
    return (
        "key: example\n"
        "short_name: Example\n"
        "name: Example License\n"
        "category: Permissive\n"
        "owner: Example Org\n"
    )


@pytest.fixture
def write_license(tmp_path):
    """Factory writing '<key>.yml' (and optionally '<key>.LICENSE') into tmp_path."""

    def _write(key: str, document: str, text=None) -> Path:
        yaml_path = tmp_path / f"{key}.yml"
        yaml_path.write_text(document, encoding="utf-8")
        if text is not None:
            (tmp_path / f"{key}.LICENSE").write_text(text, encoding="utf-8")
        return yaml_path

    return _write
