"""
Services - Merge, filter and edit translation records

- TranslationAggregator: per-locale files → multilingual records
- FilterEngine: per-field search filters
- PlaceholderGenerator: tagged stand-ins for missing translations
- TranslationRepository: facade used by the UI and the CLI
"""

from resx_translations.services.aggregator import TranslationAggregator
from resx_translations.services.filter_engine import FilterEngine, field_matches
from resx_translations.services.placeholder import PlaceholderGenerator
from resx_translations.services.repository import TranslationRepository

__all__ = [
    "TranslationAggregator",
    "FilterEngine",
    "field_matches",
    "PlaceholderGenerator",
    "TranslationRepository",
]
