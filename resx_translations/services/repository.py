"""
Translation Repository - Search and edit translations stored in .resx files

Read flow:
    discover groups → read locale files → merge records → filter → sort

Write flow:
    discover groups → locate (or place) locale file → load-or-create → mutate → save

Multi-locale writes are not transactional. Each locale is written on its own
and reported in the WriteOutcome; a failure in one locale does not undo the
locales already written.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional

from resx_translations.errors import ResxError
from resx_translations.models.filters import TranslationFilter
from resx_translations.models.locale import Locale, PRIMARY_LOCALE, validate_group_name
from resx_translations.models.resource_group import ResourceGroup
from resx_translations.models.translation_record import ResourceEntry, TranslationRecord
from resx_translations.models.write_results import LocaleWriteResult, WriteOutcome
from resx_translations.resx.codec import ResxCodec
from resx_translations.resx.scanner import ResourceDirectoryScanner
from resx_translations.services.aggregator import TranslationAggregator
from resx_translations.services.filter_engine import FilterEngine
from resx_translations.services.placeholder import PlaceholderGenerator
from resx_translations.utils.config import RepositoryConfig
from resx_translations.utils.observability import set_span_attribute, trace_operation

logger = logging.getLogger(__name__)


class TranslationRepository:
    """
    Facade over the resource files of one base directory.

    Example:
        repo = TranslationRepository(RepositoryConfig(base_path="Resources"))
        repo.create_translation(TranslationRecord.build("OK", "Menu", fr="D'accord"))
        repo.search_translations(TranslationFilter.simple(key="OK"))
    """

    def __init__(
        self,
        config: Optional[RepositoryConfig] = None,
        codec: Optional[ResxCodec] = None,
        scanner: Optional[ResourceDirectoryScanner] = None,
        aggregator: Optional[TranslationAggregator] = None,
        filter_engine: Optional[FilterEngine] = None,
        placeholders: Optional[PlaceholderGenerator] = None,
    ):
        self.config = config or RepositoryConfig()
        self.codec = codec or ResxCodec(encoding=self.config.encoding)
        self.scanner = scanner or ResourceDirectoryScanner()
        self.aggregator = aggregator or TranslationAggregator(self.codec)
        self.filter_engine = filter_engine or FilterEngine()
        self.placeholders = placeholders or PlaceholderGenerator(self.config.placeholder_template)

    @property
    def base_path(self) -> Path:
        return self.config.resolve_base_path()

    # =========================================================================
    # Read operations
    # =========================================================================

    def discover_groups(self, base_path: Optional[Path] = None) -> List[ResourceGroup]:
        return self.scanner.discover_groups(base_path or self.base_path)

    def list_all_translations(self) -> List[TranslationRecord]:
        """Every record of every group, sorted by group then key"""
        with trace_operation("list_all") as span:
            records = self.aggregator.merge_all(self.discover_groups())
            set_span_attribute(span, "resx.record_count", len(records))
            return records

    def search_translations(self, translation_filter: TranslationFilter) -> List[TranslationRecord]:
        """
        Records matching the filter, sorted by group then key.

        An empty filter returns no records rather than the whole corpus.
        """
        with trace_operation("search") as span:
            if translation_filter.is_empty():
                set_span_attribute(span, "resx.empty_filter", True)
                return []

            records = self.aggregator.merge_all(self.discover_groups())
            matched = self.filter_engine.apply(records, translation_filter)
            set_span_attribute(span, "resx.record_count", len(records))
            set_span_attribute(span, "resx.match_count", len(matched))
            return matched

    def list_available_groups(self) -> List[str]:
        """Names of the discovered groups, sorted"""
        with trace_operation("list_groups") as span:
            names = sorted({group.name for group in self.discover_groups()})
            set_span_attribute(span, "resx.group_count", len(names))
            return names

    def list_orphaned_entries(self) -> List[ResourceEntry]:
        """Secondary-locale entries whose key is missing from the primary file"""
        with trace_operation("list_orphans") as span:
            orphans: List[ResourceEntry] = []
            for group in self.discover_groups():
                orphans.extend(self.aggregator.orphaned_entries(group))
            set_span_attribute(span, "resx.orphan_count", len(orphans))
            return orphans

    # =========================================================================
    # Write operations
    # =========================================================================

    def create_translation(
        self,
        record: TranslationRecord,
        auto_generate: bool = False
    ) -> WriteOutcome:
        """
        Add a new key to the group's locale files.

        Only locales with text are written. An existing key in a locale file
        makes that locale fail with DuplicateKeyError; its value is kept.

        Args:
            record: Key, group and texts to store
            auto_generate: Fill blank secondary texts with placeholders first

        Raises:
            ValueError: blank key, invalid group name or blank primary text
        """
        self._validate(record, require_primary=True)
        if auto_generate:
            record = self.placeholders.fill_missing(record)

        return self._write_locales(
            "create", record,
            lambda path, text: self._insert(path, record.key, text)
        )

    def update_translation(self, record: TranslationRecord) -> WriteOutcome:
        """
        Overwrite the texts of a key, adding it where it is missing.

        Locales with blank text are left untouched.

        Raises:
            ValueError: blank key or invalid group name
        """
        self._validate(record, require_primary=False)
        return self._write_locales(
            "update", record,
            lambda path, text: self.codec.upsert_entry(path, record.key, text)
        )

    def delete_translation(self, key: str, group: str) -> WriteOutcome:
        """
        Remove a key from every locale file of the group.

        Missing files and missing keys count as successful removals.
        """
        if not key or not key.strip():
            raise ValueError("Translation key must not be blank")
        validate_group_name(group)

        with trace_operation("delete", {"resx.group": group, "resx.key": key}) as span:
            base_path = self.base_path
            target = self._group_or_new(group, base_path)
            outcome = WriteOutcome(operation="delete", key=key, group=group)
            for locale in Locale:
                path = target.file_for(locale, base_path)
                outcome.results.append(
                    self._attempt(locale, path, lambda: self.codec.remove_entry(path, key))
                )
            self._report(span, outcome)
            return outcome

    def generate_placeholder_translation(self, key: str, source_text: str, group: str) -> TranslationRecord:
        """Record with placeholder texts for the secondary locales; not saved"""
        return self.placeholders.generate(key, source_text, group)

    # =========================================================================
    # Internals
    # =========================================================================

    @staticmethod
    def _validate(record: TranslationRecord, require_primary: bool) -> None:
        if not record.key or not record.key.strip():
            raise ValueError("Translation key must not be blank")
        validate_group_name(record.group)
        if require_primary and not record.primary_text.strip():
            raise ValueError(
                f"Text for the primary locale '{PRIMARY_LOCALE.value}' is required"
            )

    def _insert(self, path: Path, key: str, text: str) -> bool:
        self.codec.write_entry(path, key, text)
        return True

    def _group_or_new(self, name: str, base_path: Path) -> ResourceGroup:
        for group in self.discover_groups(base_path):
            if group.name == name:
                return group
        return ResourceGroup(name=name)

    def _write_locales(
        self,
        operation: str,
        record: TranslationRecord,
        write: Callable[[Path, str], bool]
    ) -> WriteOutcome:
        attributes = {"resx.group": record.group, "resx.key": record.key}
        with trace_operation(operation, attributes) as span:
            base_path = self.base_path
            target = self._group_or_new(record.group, base_path)
            outcome = WriteOutcome(operation=operation, key=record.key, group=record.group)

            for locale in Locale:
                text = record.text(locale)
                if not text.strip():
                    continue
                path = target.file_for(locale, base_path)
                outcome.results.append(
                    self._attempt(locale, path, lambda: write(path, text))
                )

            self._report(span, outcome)
            return outcome

    @staticmethod
    def _attempt(locale: Locale, path: Path, action: Callable[[], bool]) -> LocaleWriteResult:
        try:
            changed = action()
        except ResxError as e:
            logger.error(f"[{locale.value}] {e}")
            return LocaleWriteResult(
                locale=locale,
                path=str(path),
                success=False,
                error_type=type(e).__name__,
                error=str(e),
            )
        return LocaleWriteResult(locale=locale, path=str(path), success=True, changed=bool(changed))

    @staticmethod
    def _report(span, outcome: WriteOutcome) -> None:
        set_span_attribute(span, "resx.succeeded", outcome.succeeded)
        set_span_attribute(span, "resx.failed_locales", ",".join(l.value for l in outcome.failed_locales))

        if outcome.succeeded:
            logger.info(
                f"{outcome.operation} '{outcome.key}' in '{outcome.group}': "
                f"changed {[l.value for l in outcome.changed_locales]}"
            )
        else:
            logger.warning(
                f"{outcome.operation} '{outcome.key}' in '{outcome.group}' failed for "
                f"{[l.value for l in outcome.failed_locales]}"
            )
