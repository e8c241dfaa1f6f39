"""
License Record Codec

Decodes ScanCode license metadata documents (YAML) into LicenseRecord
models and encodes records back. No I/O happens here.

The loader only resolves nulls: every other plain scalar stays the string
written in the document and the model converts it to the field's type.
"yes"/"no" flags, "1.0" short names and "2007-06-29" notes therefore reach
the model as written. The dumper knows the YAML 1.2 booleans true/false
only, so "yes" is written unquoted while numbers stored as text are quoted.
"""

import re
from typing import Any, Dict, Optional, Type

import yaml
from pydantic import ValidationError

from licensedb.core.exceptions import (
    InvalidEnumLabel,
    MalformedDocument,
    MissingMetadataField,
    PathLike,
    TypeMismatch,
    UnknownField,
)
from licensedb.models.license import DOCUMENT_FIELDS, LicenseRecord


YAML_BOOL_TAG = "tag:yaml.org,2002:bool"
YAML_NULL_TAG = "tag:yaml.org,2002:null"
YAML_STR_TAG = "tag:yaml.org,2002:str"
YAML12_BOOL_PATTERN = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")


def _keep_implicit_resolvers(cls, *tags: str):
    cls.yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag in tags]
        for first, resolvers in cls.yaml_implicit_resolvers.items()
    }


def _only_nulls(cls):
    """Resolve nothing but null, all other plain scalars load as strings."""
    _keep_implicit_resolvers(cls, YAML_NULL_TAG)
    return cls


def _use_yaml12_booleans(cls):
    """Replace the YAML 1.1 boolean resolver (yes/no/on/off) of a dumper class."""
    tags = {tag for resolvers in cls.yaml_implicit_resolvers.values() for tag, _ in resolvers}
    _keep_implicit_resolvers(cls, *(tags - {YAML_BOOL_TAG}))
    cls.add_implicit_resolver(YAML_BOOL_TAG, YAML12_BOOL_PATTERN, list("tTfF"))
    return cls


@_only_nulls
class LicenseLoader(yaml.SafeLoader):
    """Safe loader that keeps scalars as the text written in the document."""


@_use_yaml12_booleans
class LicenseDumper(yaml.SafeDumper):
    """Safe dumper writing yes/no unquoted and multi-line text as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if "\n" in data:
        return dumper.represent_scalar(YAML_STR_TAG, data, style="|")
    return dumper.represent_str(data)


LicenseDumper.add_representer(str, _represent_str)


# Model fields that are filled from elsewhere and must not appear in a document
DERIVED_FIELDS = frozenset(LicenseRecord.model_fields) - frozenset(DOCUMENT_FIELDS)

# pydantic error type -> MalformedDocument sub-kind
_ERROR_KINDS: Dict[str, Type[MalformedDocument]] = {
    "missing": MissingMetadataField,
    "extra_forbidden": UnknownField,
    "enum": InvalidEnumLabel,
}

# Schema violations are reported before value errors, whatever order pydantic uses
_ERROR_PRIORITY = {"extra_forbidden": 0, "missing": 1, "enum": 2}


def load_document(raw_text: str) -> Any:
    """Parse YAML text with the license loader. Useful to compare documents by content."""
    return yaml.load(raw_text, Loader=LicenseLoader)


def _classify_validation_error(error: ValidationError, path: Optional[PathLike]) -> MalformedDocument:
    """Turn the most significant pydantic error into the matching MalformedDocument sub-kind."""
    errors = sorted(error.errors(), key=lambda e: _ERROR_PRIORITY.get(e["type"], len(_ERROR_PRIORITY)))
    first = errors[0]
    loc = first.get("loc") or ()
    field = str(loc[0]) if loc else None
    location = ".".join(str(part) for part in loc)
    kind = _ERROR_KINDS.get(first["type"], TypeMismatch)
    message = f"{first['msg']} (field '{location}')" if location else first["msg"]
    if error.error_count() > 1:
        message += f" and {error.error_count() - 1} more error(s)"
    return kind(message, path=path, field=field, cause=error)


def decode_record(raw_text: str, path: Optional[PathLike] = None) -> LicenseRecord:
    """
    Decode one license metadata document.

    Args:
        raw_text: YAML text of the document
        path: Where the text came from, attached to any error

    Returns:
        LicenseRecord with an empty `text`

    Raises:
        MalformedDocument: Invalid YAML or a document that is not a mapping
        UnknownField: A key outside the schema
        MissingMetadataField: A required key is absent
        TypeMismatch: A value of the wrong type
        InvalidEnumLabel: Unknown category label
    """
    try:
        document = load_document(raw_text)
    except yaml.YAMLError as e:
        raise MalformedDocument(f"Invalid YAML: {e}", path=path, cause=e) from e

    if not isinstance(document, dict):
        raise MalformedDocument(
            f"Expected a mapping of license fields, got {type(document).__name__}",
            path=path,
        )

    for name in document:
        if name in DERIVED_FIELDS:
            raise UnknownField(f"Field '{name}' is not allowed in a license document", path=path, field=name)

    try:
        return LicenseRecord.model_validate(document)
    except ValidationError as e:
        raise _classify_validation_error(e, path) from e


def encode_record(record: LicenseRecord) -> str:
    """
    Encode a record as a YAML metadata document.

    Fields holding their default (None, empty list, False) are left out and
    `text` is never written, so decode_record(encode_record(r)) == r for any
    decoded record.
    """
    data = record.model_dump(mode="json", exclude_defaults=True)
    return yaml.dump(
        data,
        Dumper=LicenseDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
