"""
Resx Translations

Search and edit multilingual .resx resource files:
- Groups `<group>.<locale>.resx` files (fr primary, en, pt) found under a base directory
- Merges them into one record per key, driven by the French file
- Per-field search filters (contains / begins with / ends with / equals)
- Create, update and delete entries with per-locale results
"""

__version__ = "0.1.0"

# Re-export key components for convenience
from .errors import (
    ResxError,
    MalformedFileError,
    DuplicateKeyError,
    ResourceIOError,
)
from .models import (
    Locale,
    PRIMARY_LOCALE,
    TranslationRecord,
    ResourceEntry,
    FieldFilter,
    TranslationFilter,
    SearchType,
    ResourceGroup,
    LocaleWriteResult,
    WriteOutcome,
)
from .resx import ResxCodec, ResourceDirectoryScanner
from .services import (
    TranslationAggregator,
    FilterEngine,
    PlaceholderGenerator,
    TranslationRepository,
)
from .utils import RepositoryConfig, load_repository_config

__all__ = [
    # Version
    "__version__",
    # Errors
    "ResxError",
    "MalformedFileError",
    "DuplicateKeyError",
    "ResourceIOError",
    # Models
    "Locale",
    "PRIMARY_LOCALE",
    "TranslationRecord",
    "ResourceEntry",
    "FieldFilter",
    "TranslationFilter",
    "SearchType",
    "ResourceGroup",
    "LocaleWriteResult",
    "WriteOutcome",
    # Resource files
    "ResxCodec",
    "ResourceDirectoryScanner",
    # Services
    "TranslationAggregator",
    "FilterEngine",
    "PlaceholderGenerator",
    "TranslationRepository",
    # Config
    "RepositoryConfig",
    "load_repository_config",
]
