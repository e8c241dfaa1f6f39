"""
licensedb

Typed access to the ScanCode license database: decode and encode license
records and import whole license directories or git repositories.
"""

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
from licensedb.models.license import Category, LicenseRecord
from licensedb.services.codec import decode_record, encode_record
from licensedb.services.importer import from_scancode_database, import_directory, import_remote

__version__ = "0.1.0"

__all__ = [
    "Category",
    "LicenseRecord",
    "decode_record",
    "encode_record",
    "import_directory",
    "import_remote",
    "from_scancode_database",
    "LicenseDBError",
    "MalformedDocument",
    "MissingMetadataField",
    "UnknownField",
    "TypeMismatch",
    "InvalidEnumLabel",
    "RecordInvalid",
    "DirectoryUnreadable",
    "RemoteFetchFailed",
]
