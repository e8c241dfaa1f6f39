"""
License Models

Data model for a single entry of the ScanCode license database.
"""

from enum import Enum
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

from licensedb.core.constants import FLAG_FALSE, FLAG_TRUE


class Category(str, Enum):
    """License categories used by ScanCode. Values are the exact labels found in the documents."""

    COPYLEFT = "Copyleft"
    COPYLEFT_LIMITED = "Copyleft Limited"
    PATENT_LICENSE = "Patent License"
    PERMISSIVE = "Permissive"
    PUBLIC_DOMAIN = "Public Domain"
    COMMERCIAL = "Commercial"
    PROPRIETARY_FREE = "Proprietary Free"
    FREE_RESTRICTED = "Free Restricted"
    SOURCE_AVAILABLE = "Source-available"
    UNSTATED_LICENSE = "Unstated License"


def bool_from_yes(value: Any) -> bool:
    """
    Decode a stored yes/no flag.

    Only the string "yes" is true. Any other string ("no", "", "true", "1")
    and an empty value are false. The document loader yields strings only,
    so a native bool can only come from Python code building a record and
    is passed through unchanged.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if not isinstance(value, str):
        raise ValueError(f"expected a yes/no string, got {type(value).__name__}")
    return value == FLAG_TRUE


def yes_from_bool(value: bool) -> str:
    """Encode a flag: True is "yes", False is "no"."""
    return FLAG_TRUE if value else FLAG_FALSE


YesNoFlag = Annotated[
    bool,
    BeforeValidator(bool_from_yes),
    PlainSerializer(yes_from_bool, return_type=str),
]


class LicenseRecord(BaseModel):
    """
    One license: its metadata document plus the full license text.

    The schema is closed, unknown keys are rejected on validation. Field
    order is the order used when encoding. `text` comes from the companion
    file and is never part of the metadata document.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Mandatory unique key: lower case ASCII characters, digits, underscore and dots
    key: str
    # Commonly used short name, often abbreviated
    short_name: str
    name: str
    category: Category
    owner: str

    homepage_url: Optional[str] = None
    notes: Optional[str] = None
    is_deprecated: YesNoFlag = False
    # SPDX key for SPDX licenses
    spdx_license_key: Optional[str] = None
    text_urls: List[str] = Field(default_factory=list)
    osi_url: Optional[str] = None
    osi_license_key: Optional[str] = None
    faq_url: Optional[str] = None
    other_urls: List[str] = Field(default_factory=list)
    is_exception: YesNoFlag = False
    other_spdx_license_keys: List[str] = Field(default_factory=list)

    # Detected strings to ignore when scanning for copyrights and the like
    ignorable_copyrights: List[str] = Field(default_factory=list)
    ignorable_holders: List[str] = Field(default_factory=list)
    ignorable_authors: List[str] = Field(default_factory=list)
    ignorable_urls: List[str] = Field(default_factory=list)
    ignorable_emails: List[str] = Field(default_factory=list)

    minimum_coverage: Optional[int] = None
    standard_notice: Optional[str] = None
    language: Optional[str] = None

    text: str = Field(default="", exclude=True, description="Full license text from the companion file")

    def with_text(self, text: str) -> "LicenseRecord":
        """Return a copy of this record carrying the given license text."""
        return self.model_copy(update={"text": text})


# Keys allowed in a metadata document, in encoding order
DOCUMENT_FIELDS = tuple(name for name, info in LicenseRecord.model_fields.items() if not info.exclude)
