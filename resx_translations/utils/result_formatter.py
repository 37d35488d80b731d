"""
Result Formatter - Convert repository results into JSON-serializable dicts

Used by the CLI; reusable by any front end that renders results.
"""

from typing import Any, Dict, Iterable, List

from resx_translations.models.locale import Locale
from resx_translations.models.translation_record import ResourceEntry, TranslationRecord
from resx_translations.models.write_results import WriteOutcome


def format_record(record: TranslationRecord) -> Dict[str, Any]:
    """One record as a flat dict: key, group, one column per locale, path"""
    output = {
        "key": record.key,
        "group": record.group,
    }
    for locale in Locale:
        output[locale.value] = record.text(locale)
    output["source_path"] = record.source_path
    return output


def format_records(records: Iterable[TranslationRecord]) -> List[Dict[str, Any]]:
    return [format_record(r) for r in records]


def format_entries(entries: Iterable[ResourceEntry]) -> List[Dict[str, Any]]:
    return [
        {
            "group": e.group,
            "locale": e.locale.value,
            "key": e.key,
            "value": e.value,
        }
        for e in entries
    ]


def format_write_outcome(outcome: WriteOutcome) -> Dict[str, Any]:
    """
    Write outcome with a per-locale breakdown.

    Layout:
        - summary: operation, key, group, succeeded
        - locales: one entry per attempted locale file
    """
    return {
        "operation": outcome.operation,
        "key": outcome.key,
        "group": outcome.group,
        "succeeded": outcome.succeeded,
        "failed_locales": [l.value for l in outcome.failed_locales],
        "locales": [
            {
                "locale": r.locale.value,
                "path": r.path,
                "success": r.success,
                "changed": r.changed,
                "error_type": r.error_type,
                "error": r.error,
            }
            for r in outcome.results
        ],
    }
