"""Tests for the error taxonomy."""

from pathlib import Path

import pytest

from licensedb.core.exceptions import (
    DirectoryUnreadable,
    InvalidEnumLabel,
    LicenseDBError,
    MalformedDocument,
    MissingMetadataField,
    RecordInvalid,
    RemoteFetchFailed,
    TypeMismatch,
    UnknownField,
)


class TestHierarchy:
    @pytest.mark.parametrize("kind", [MissingMetadataField, UnknownField, TypeMismatch, InvalidEnumLabel])
    def test_sub_kinds_are_malformed_documents(self, kind):
        assert issubclass(kind, MalformedDocument)

    @pytest.mark.parametrize(
        "kind", [MalformedDocument, RecordInvalid, DirectoryUnreadable, RemoteFetchFailed]
    )
    def test_all_are_license_db_errors(self, kind):
        assert issubclass(kind, LicenseDBError)


class TestMalformedDocument:
    def test_without_path(self):
        error = MalformedDocument("Invalid YAML")
        assert error.path is None
        assert str(error) == "Invalid YAML"

    def test_with_path(self):
        error = UnknownField("Extra inputs are not permitted", path="docs/mit.yml", field="foo")
        assert error.path == Path("docs/mit.yml")
        assert error.field == "foo"
        assert str(error) == f"{Path('docs/mit.yml')}: Extra inputs are not permitted"


class TestContextCarryingErrors:
    def test_record_invalid(self):
        cause = MalformedDocument("bad", path="docs/mit.yml")
        error = RecordInvalid("docs/mit.yml", cause)
        assert error.path == Path("docs/mit.yml")
        assert error.cause is cause

    def test_directory_unreadable(self):
        cause = FileNotFoundError(2, "No such file or directory")
        error = DirectoryUnreadable("/tmp/missing", cause)
        assert error.path == Path("/tmp/missing")
        assert "/tmp/missing" in str(error)

    def test_remote_fetch_failed(self):
        error = RemoteFetchFailed("https://example.com/db.git", "fatal: not found")
        assert error.url == "https://example.com/db.git"
        assert "https://example.com/db.git" in str(error)
        assert "fatal: not found" in str(error)
