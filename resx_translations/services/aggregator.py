"""
Translation Aggregator - Merge the locale files of a group into records

The primary locale drives the merge: every key of the primary file gives one
record, secondary locales only fill in text. Keys that exist only in a
secondary file produce no record; `orphaned_entries` reports them instead.
"""

import logging
from typing import Dict, Iterable, List, Optional

from resx_translations.models.locale import Locale, PRIMARY_LOCALE, SECONDARY_LOCALES
from resx_translations.models.resource_group import ResourceGroup
from resx_translations.models.translation_record import ResourceEntry, TranslationRecord
from resx_translations.resx.codec import ResxCodec

logger = logging.getLogger(__name__)


def record_sort_key(record: TranslationRecord):
    """Ordinal (code point) ordering by group, then key"""
    return (record.group, record.key)


class TranslationAggregator:
    """Builds TranslationRecords from discovered resource groups"""

    def __init__(self, codec: Optional[ResxCodec] = None):
        self.codec = codec or ResxCodec()

    def read_group(self, group: ResourceGroup) -> Dict[Locale, Dict[str, str]]:
        """Entries of every locale file of the group (empty for missing files)"""
        return {
            locale: self.codec.read(group.files_by_locale[locale])
            if locale in group.files_by_locale else {}
            for locale in Locale
        }

    def merge(self, group: ResourceGroup) -> List[TranslationRecord]:
        """
        Merge one group into records.

        Args:
            group: Discovered resource group

        Returns:
            Records sorted by key; empty when the group has no primary file
        """
        if not group.has_primary:
            logger.debug(f"Group '{group.name}' has no {PRIMARY_LOCALE.value} file, skipped")
            return []

        maps = self.read_group(group)
        source_path = str(group.primary_file)

        records = [
            TranslationRecord(
                key=key,
                group=group.name,
                text_by_locale={
                    PRIMARY_LOCALE: primary_text,
                    **{loc: maps[loc].get(key, "") for loc in SECONDARY_LOCALES},
                },
                source_path=source_path,
            )
            for key, primary_text in maps[PRIMARY_LOCALE].items()
        ]
        return sorted(records, key=record_sort_key)

    def merge_all(self, groups: Iterable[ResourceGroup]) -> List[TranslationRecord]:
        """Merge several groups into one list sorted by group, then key"""
        records: List[TranslationRecord] = []
        for group in groups:
            records.extend(self.merge(group))
        return sorted(records, key=record_sort_key)

    def orphaned_entries(self, group: ResourceGroup) -> List[ResourceEntry]:
        """Secondary-locale entries whose key is missing from the primary file"""
        maps = self.read_group(group)
        primary_keys = maps[PRIMARY_LOCALE]

        orphans = [
            ResourceEntry(group=group.name, locale=locale, key=key, value=value)
            for locale in SECONDARY_LOCALES
            for key, value in maps[locale].items()
            if key not in primary_keys
        ]
        return sorted(orphans, key=lambda e: (e.group, e.key, e.locale.value))
