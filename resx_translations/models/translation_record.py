"""
Translation Record - Merged multilingual view of one resource key
"""

from pydantic import BaseModel, Field
from typing import Dict, Optional

from .locale import Locale, PRIMARY_LOCALE


class ResourceEntry(BaseModel):
    """A single key/value pair stored in one locale file"""

    group: str = Field(..., description="Resource group (file base name)")
    locale: Locale = Field(..., description="Locale of the file holding the entry")
    key: str = Field(..., description="Resource key (data@name)")
    value: str = Field(default="", description="Resource text (data/value)")

    class Config:
        frozen = True


class TranslationRecord(BaseModel):
    """
    One key of a resource group, with its text in every supported locale.

    Records are rebuilt on every read and never persisted as such; edits go
    back to the locale files as individual entries. A locale without text is
    represented by an empty string, so use `text()` or the locale properties
    rather than key presence to detect untranslated entries.
    """

    key: str = Field(..., description="Resource key (e.g., Menu_Save)")
    group: str = Field(..., description="Resource group (e.g., Menu)")
    text_by_locale: Dict[Locale, str] = Field(
        default_factory=dict,
        description="Text per locale; missing translations are empty strings"
    )
    source_path: Optional[str] = Field(
        default=None,
        description="Path of the primary locale file the record was read from"
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "key": "Menu_Save",
                "group": "Menu",
                "text_by_locale": {
                    "fr": "Enregistrer",
                    "en": "Save",
                    "pt": ""
                },
                "source_path": "Resources/Menu.fr.resx"
            }
        }

    def text(self, locale: Locale) -> str:
        """Text for a locale, empty string when untranslated"""
        return self.text_by_locale.get(Locale(locale), "")

    @property
    def fr(self) -> str:
        return self.text(Locale.FR)

    @property
    def en(self) -> str:
        return self.text(Locale.EN)

    @property
    def pt(self) -> str:
        return self.text(Locale.PT)

    @property
    def primary_text(self) -> str:
        return self.text(PRIMARY_LOCALE)

    def untranslated_locales(self) -> list:
        """Locales whose text is empty"""
        return [loc for loc in Locale if not self.text(loc)]

    @classmethod
    def build(
        cls,
        key: str,
        group: str,
        fr: str = "",
        en: str = "",
        pt: str = "",
        source_path: Optional[str] = None
    ) -> "TranslationRecord":
        """Convenience constructor taking one argument per locale"""
        return cls(
            key=key,
            group=group,
            text_by_locale={Locale.FR: fr, Locale.EN: en, Locale.PT: pt},
            source_path=source_path
        )
