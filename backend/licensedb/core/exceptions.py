"""
Exceptions

Error taxonomy for decoding license records and importing license databases.
Every error keeps the file path or repository URL it originated from.
"""

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class LicenseDBError(Exception):
    """Base exception for all license database failures."""


class MalformedDocument(LicenseDBError):
    """A metadata document violates the YAML syntax or the license schema."""

    def __init__(
        self,
        message: str,
        path: Optional[PathLike] = None,
        field: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None
        self.field = field
        self.cause = cause

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class MissingMetadataField(MalformedDocument):
    """A required field is absent from the document."""


class UnknownField(MalformedDocument):
    """The document contains a field that is not part of the schema."""


class TypeMismatch(MalformedDocument):
    """A field value cannot be coerced to the declared type."""


class InvalidEnumLabel(MalformedDocument):
    """The category is not one of the fixed labels."""


class RecordInvalid(LicenseDBError):
    """A license file inside an imported directory could not be read or decoded."""

    def __init__(self, path: PathLike, cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Invalid license record {self.path}: {cause}")


class DirectoryUnreadable(LicenseDBError):
    """The import root cannot be listed."""

    def __init__(self, path: PathLike, cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Cannot list license directory {self.path}: {cause}")


class RemoteFetchFailed(LicenseDBError):
    """Cloning the remote license repository failed."""

    def __init__(self, url: str, cause: Union[BaseException, str]):
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to fetch license repository {url}: {cause}")
