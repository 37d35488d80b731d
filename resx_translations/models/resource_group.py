"""
Resource Group - Locale files sharing one base name
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from .locale import Locale, PRIMARY_LOCALE, resource_file_name


@dataclass
class ResourceGroup:
    """A group name and the locale files discovered for it"""
    name: str
    files_by_locale: Dict[Locale, Path] = field(default_factory=dict)

    @property
    def has_primary(self) -> bool:
        return PRIMARY_LOCALE in self.files_by_locale

    @property
    def primary_file(self) -> Optional[Path]:
        return self.files_by_locale.get(PRIMARY_LOCALE)

    @property
    def directory(self) -> Optional[Path]:
        """Directory new locale files of this group go to"""
        if self.primary_file is not None:
            return self.primary_file.parent
        for locale in Locale:
            if locale in self.files_by_locale:
                return self.files_by_locale[locale].parent
        return None

    def file_for(self, locale: Locale, default_dir: Path) -> Path:
        """Existing file for a locale, or where it would be created"""
        existing = self.files_by_locale.get(locale)
        if existing is not None:
            return existing
        directory = self.directory or default_dir
        return directory / resource_file_name(self.name, locale)
