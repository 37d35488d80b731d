"""
Data models for resx translation resources
"""

from .locale import (
    Locale,
    PRIMARY_LOCALE,
    SECONDARY_LOCALES,
    RESX_EXTENSION,
    resource_file_name,
    parse_resource_file_name,
    validate_group_name,
)
from .translation_record import TranslationRecord, ResourceEntry
from .filters import FieldFilter, TranslationFilter, SearchType
from .resource_group import ResourceGroup
from .write_results import LocaleWriteResult, WriteOutcome

__all__ = [
    # Locale & naming
    "Locale",
    "PRIMARY_LOCALE",
    "SECONDARY_LOCALES",
    "RESX_EXTENSION",
    "resource_file_name",
    "parse_resource_file_name",
    "validate_group_name",

    # Records
    "TranslationRecord",
    "ResourceEntry",

    # Filters
    "FieldFilter",
    "TranslationFilter",
    "SearchType",

    # Discovery
    "ResourceGroup",

    # Write results
    "LocaleWriteResult",
    "WriteOutcome",
]
