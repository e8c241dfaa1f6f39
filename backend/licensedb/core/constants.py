"""
Shared Constants

Fixed names and locations of the ScanCode license database layout.
"""

# Upstream ScanCode LicenseDB repository and the folder holding the licenses
SCANCODE_LICENSEDB_URL = "https://github.com/nexB/scancode-licensedb.git"
SCANCODE_LICENSEDB_PATH = "docs"

# The database ships "<key>.yml" metadata next to "<key>.LICENSE" text
METADATA_EXTENSION = ".yml"
COMPANION_EXTENSION = ".LICENSE"

# Manifest listing all licenses, not a license itself
INDEX_FILE_NAME = "index.yml"

# Stored values of the yes/no flag fields
FLAG_TRUE = "yes"
FLAG_FALSE = "no"
