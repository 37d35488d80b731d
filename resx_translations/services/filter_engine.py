"""
Filter Engine - Decide whether a translation record matches a filter

Rules:
- Fields whose filter value is blank are ignored
- Every remaining field must match (logical AND)
- Case-insensitive comparison uses str.casefold(), independent of the
  process locale
"""

from typing import Iterable, List

from resx_translations.models.filters import FieldFilter, SearchType, TranslationFilter
from resx_translations.models.locale import Locale
from resx_translations.models.translation_record import TranslationRecord


def field_matches(field_value: str, field_filter: FieldFilter) -> bool:
    """Compare one record field with one field filter"""
    if not field_filter.is_active:
        return True

    needle = field_filter.value
    haystack = field_value or ""
    if not field_filter.case_sensitive:
        needle = needle.casefold()
        haystack = haystack.casefold()

    search_type = field_filter.search_type
    if search_type == SearchType.CONTAINS:
        return needle in haystack
    if search_type == SearchType.BEGINS_WITH:
        return haystack.startswith(needle)
    if search_type == SearchType.ENDS_WITH:
        return haystack.endswith(needle)
    if search_type == SearchType.EQUALS:
        return haystack == needle
    raise ValueError(f"Unknown search type: {search_type}")


def record_fields(record: TranslationRecord) -> dict:
    """Field name -> value, using the same names as TranslationFilter"""
    return {
        "key": record.key,
        "group": record.group,
        **{loc.value: record.text(loc) for loc in Locale},
    }


class FilterEngine:
    """
    Applies TranslationFilters to records.

    Global settings of the filter are resolved before matching.
    """

    def matches(self, record: TranslationRecord, translation_filter: TranslationFilter) -> bool:
        resolved = translation_filter.resolved()
        values = record_fields(record)
        return all(
            field_matches(values[name], field_filter)
            for name, field_filter in resolved.field_filters().items()
        )

    def apply(
        self,
        records: Iterable[TranslationRecord],
        translation_filter: TranslationFilter
    ) -> List[TranslationRecord]:
        """Records matching the filter, in input order"""
        resolved = translation_filter.resolved()
        return [r for r in records if self.matches(r, resolved)]
