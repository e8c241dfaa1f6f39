#!/usr/bin/env python3
"""
Import a ScanCode license database and summarise it.

Reads either a local license directory or a git repository, logs how many
licenses were found per category and optionally prints one record as YAML.

Usage:
    python scripts/import_licensedb.py [--directory DIR] [--url URL] [--path SUBPATH] [--key KEY]
"""

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from licensedb.core.config import settings
from licensedb.core.exceptions import LicenseDBError
from licensedb.services.codec import encode_record
from licensedb.services.importer import import_directory, import_remote

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import a ScanCode license database")
    parser.add_argument("--directory", type=Path, help="Local license directory (skips cloning)")
    parser.add_argument("--url", default=settings.SCANCODE_LICENSEDB_URL, help="Repository to clone")
    parser.add_argument("--path", default=settings.SCANCODE_LICENSEDB_PATH, help="License folder inside the repository")
    parser.add_argument("--key", help="Print the re-encoded metadata of this license")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        if args.directory:
            licenses = import_directory(args.directory)
        else:
            licenses = import_remote(args.url, args.path)
    except LicenseDBError as e:
        logger.error(f"Import failed: {e}")
        return 1

    logger.info(f"Found {len(licenses)} licenses")
    categories = Counter(record.category.value for record in licenses)
    for category, count in categories.most_common():
        logger.info(f"  {category}: {count}")

    if args.key:
        matches = [record for record in licenses if record.key == args.key]
        if not matches:
            logger.error(f"No license with key '{args.key}'")
            return 1
        print(encode_record(matches[0]), end="")

    return 0


if __name__ == "__main__":
    sys.exit(main())
