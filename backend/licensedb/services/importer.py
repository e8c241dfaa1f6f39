"""
License Database Importer

Walks a ScanCode style license directory, where every license is stored as
"<key>.yml" metadata next to an optional "<key>.LICENSE" text file, and
collects the decoded records.
"""

import logging
from pathlib import Path
from typing import List, Optional

from licensedb.core.config import settings
from licensedb.core.exceptions import DirectoryUnreadable, MalformedDocument, PathLike, RecordInvalid
from licensedb.models.license import LicenseRecord
from licensedb.services.codec import decode_record
from licensedb.services.git import temporary_clone

logger = logging.getLogger(__name__)


def read_license_text(text_path: Path) -> str:
    """Read a companion license text. Missing or unreadable files give an empty text."""
    try:
        return text_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"No license text at {text_path}: {e}")
        return ""


def load_license_file(yaml_path: PathLike, companion_extension: Optional[str] = None) -> LicenseRecord:
    """
    Load one license from its metadata file and companion text file.

    The text file must sit in the same directory with the same name and
    the companion extension (".LICENSE" by default).

    Raises:
        RecordInvalid: The metadata file cannot be read or decoded
    """
    yaml_path = Path(yaml_path)
    companion_extension = companion_extension or settings.COMPANION_EXTENSION

    try:
        raw_text = yaml_path.read_text(encoding="utf-8")
        record = decode_record(raw_text, path=yaml_path)
    except (OSError, UnicodeDecodeError, MalformedDocument) as e:
        raise RecordInvalid(yaml_path, e) from e

    text = read_license_text(yaml_path.with_suffix(companion_extension))
    return record.with_text(text)


def import_directory(
    directory_path: PathLike,
    companion_extension: Optional[str] = None,
    metadata_extension: Optional[str] = None,
    index_file_name: Optional[str] = None,
) -> List[LicenseRecord]:
    """
    Import every license of a directory.

    Entries are visited in directory-listing order, which is not sorted.
    The first invalid metadata file aborts the whole import.

    Args:
        directory_path: Directory holding the license files (not searched recursively)
        companion_extension: Extension of the license text files
        metadata_extension: Extension of the metadata files
        index_file_name: Manifest file to skip

    Returns:
        List of license records

    Raises:
        DirectoryUnreadable: The directory cannot be listed
        RecordInvalid: A metadata file cannot be read or decoded
    """
    directory = Path(directory_path)
    companion_extension = companion_extension or settings.COMPANION_EXTENSION
    metadata_extension = metadata_extension or settings.METADATA_EXTENSION
    index_file_name = index_file_name or settings.INDEX_FILE_NAME

    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise DirectoryUnreadable(directory, e) from e

    logger.info(f"Importing licenses from {directory} ({len(entries)} entries)")

    licenses: List[LicenseRecord] = []
    for entry in entries:
        # The database contains an index that doesn't describe a license
        if entry.name == index_file_name:
            continue
        if entry.suffix != metadata_extension:
            continue

        logger.debug(f"Loading {entry.name}")
        licenses.append(load_license_file(entry, companion_extension))

    logger.info(f"Imported {len(licenses)} licenses from {directory}")
    return licenses


def import_remote(
    url: str,
    path_in_repo: PathLike,
    companion_extension: Optional[str] = None,
) -> List[LicenseRecord]:
    """
    Import all licenses of a git hosted license database.

    Args:
        url: Repository URL
        path_in_repo: Directory of the license files, relative to the repository root
        companion_extension: Extension of the license text files

    Raises:
        RemoteFetchFailed: The repository could not be cloned
        DirectoryUnreadable: path_in_repo cannot be listed in the clone
        RecordInvalid: A metadata file cannot be read or decoded
    """
    with temporary_clone(url) as checkout:
        return import_directory(checkout / path_in_repo, companion_extension=companion_extension)


def from_scancode_database() -> List[LicenseRecord]:
    """Import all licenses from the ScanCode LicenseDB (https://github.com/nexB/scancode-licensedb)."""
    return import_remote(settings.SCANCODE_LICENSEDB_URL, settings.SCANCODE_LICENSEDB_PATH)
